BOARD_SIZE = 8
BOARD_COUNT = 2
# Independent per-cell chance that a ship segment sits on the cell.
SHIP_PROBABILITY = 0.2

WINDOW_WIDTH = 960
WINDOW_HEIGHT = 540
WINDOW_TITLE = "Fleetfire"

BOTTOM_MARGIN = 20
# Both boards together may not exceed these fractions of the window.
BOARD_MAX_WIDTH_PCT = 0.90
BOARD_MAX_HEIGHT_PCT = 0.85
# Horizontal gap between board 0 and board 1, in tiles.
BOARD_GAP_TILES = 1
MIN_TILE_SIZE = 20
CELL_PADDING = 2

# Fill colours keyed by the visual cell state names.
CELL_STATE_COLORS = {
    'unknown': (40, 60, 90),
    'miss': (110, 130, 150),
    'hit': (200, 55, 45),
}
CELL_OUTLINE_COLOR = (230, 230, 230)
CELL_TEXT_COLOR = (255, 255, 255)
