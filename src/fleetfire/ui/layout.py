from typing import List, Optional, Tuple

from fleetfire.components.location import Location
from fleetfire.constants import (
    BOARD_COUNT, BOARD_GAP_TILES, BOTTOM_MARGIN,
    BOARD_MAX_WIDTH_PCT, BOARD_MAX_HEIGHT_PCT, MIN_TILE_SIZE,
)


def compute_board_geometry(window_width: int, window_height: int, size: int) -> Tuple[int, List[Tuple[float, float]]]:
    """Return (tile_size, [(left, bottom) per board]) for boards laid out side by side.

    Shared by RenderSystem and InputSystem so clicks map onto what is drawn.
    """
    columns = BOARD_COUNT * size + (BOARD_COUNT - 1) * BOARD_GAP_TILES
    max_w = window_width * BOARD_MAX_WIDTH_PCT
    max_h = (window_height - BOTTOM_MARGIN) * BOARD_MAX_HEIGHT_PCT
    tile_size = int(min(max_w / columns, max_h / size))
    if tile_size < MIN_TILE_SIZE:
        tile_size = MIN_TILE_SIZE
    total_width = columns * tile_size
    start_x = (window_width - total_width) / 2
    start_y = BOTTOM_MARGIN
    stride = (size + BOARD_GAP_TILES) * tile_size
    origins = [(start_x + board_number * stride, start_y) for board_number in range(BOARD_COUNT)]
    return tile_size, origins


def locate_cell(x: float, y: float, window_width: int, window_height: int, size: int) -> Optional[Location]:
    """Map a window point to the cell under it, or None between/outside the boards."""
    tile_size, origins = compute_board_geometry(window_width, window_height, size)
    board_span = size * tile_size
    for board_number, (left, bottom) in enumerate(origins):
        if x < left or x >= left + board_span:
            continue
        if y < bottom or y >= bottom + board_span:
            return None
        column = int((x - left) // tile_size)
        row = int((y - bottom) // tile_size)
        if 0 <= row < size and 0 <= column < size:
            return Location(row=row, column=column, board_number=board_number)
    return None
