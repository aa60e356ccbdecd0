from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from fleetfire.components.location import Location
from fleetfire.ui.layout import compute_board_geometry


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped rendering data shared across renderer subcomponents."""

    window_width: int
    window_height: int
    size: int
    tile_size: int
    board_origins: List[Tuple[float, float]]
    cell_states: Dict[Location, str]

    @property
    def board_span(self) -> float:
        return self.size * self.tile_size

    def cell_rect(self, location: Location) -> Tuple[float, float, float, float]:
        """(left, right, bottom, top) of the cell's tile."""
        left, bottom = self.board_origins[location.board_number]
        cell_left = left + location.column * self.tile_size
        cell_bottom = bottom + location.row * self.tile_size
        return cell_left, cell_left + self.tile_size, cell_bottom, cell_bottom + self.tile_size


def build_render_context(
    window_width: int,
    window_height: int,
    size: int,
    cell_states: Dict[Location, str],
) -> RenderContext:
    """Populate a RenderContext for the current frame."""
    tile_size, origins = compute_board_geometry(window_width, window_height, size)
    return RenderContext(
        window_width=window_width,
        window_height=window_height,
        size=size,
        tile_size=tile_size,
        board_origins=origins,
        cell_states=dict(cell_states),
    )
