import logging
from typing import Any, Dict, Optional, Union

from fleetfire.components.cell import UNKNOWN_STATE
from fleetfire.components.firing_result import FiringResult
from fleetfire.components.location import Location
from fleetfire.constants import BOARD_COUNT, BOARD_SIZE, CELL_PADDING
from fleetfire.errors import OutOfBounds
from fleetfire.events.observers import FiredAt
from fleetfire.rendering.board_renderer import BoardRenderer
from fleetfire.rendering.context import build_render_context
from fleetfire.ui.layout import locate_cell

logger = logging.getLogger(__name__)


class RenderSystem:
    """View side of the game: one visual state per cell, drawn with arcade.

    Visual state only changes through ``render_cell_state``, which the game
    reaches via a ``fired_at`` observer.
    """

    def __init__(self, window, size: int = BOARD_SIZE):
        self.window = window
        self.size = size
        self._cell_states: Dict[Location, str] = {
            Location(row=r, column=c, board_number=b): UNKNOWN_STATE
            for b in range(BOARD_COUNT)
            for r in range(size)
            for c in range(size)
        }
        self._last_cell_layout: Dict[Location, Dict[str, Any]] = {}
        self._board_renderer = BoardRenderer(self, padding=CELL_PADDING)

    def on_fired_at(self, payload: FiredAt):
        self.render_cell_state(payload.location, payload.firing_result)

    def render_cell_state(self, location: Location, state: Union[FiringResult, str, None]):
        if state is None:
            return
        if location not in self._cell_states:
            raise OutOfBounds(location, self.size, BOARD_COUNT)
        try:
            name = FiringResult(state).value
        except ValueError:
            raise ValueError(f"{state!r} is not a visual cell state") from None
        self._cell_states[location] = name
        logger.debug("Cell %s now shows %s", location, name)

    def cell_state(self, location: Location) -> str:
        try:
            return self._cell_states[location]
        except KeyError:
            raise OutOfBounds(location, self.size, BOARD_COUNT) from None

    def get_cell_at_point(self, x: float, y: float) -> Optional[Location]:
        # Hit-test against what was last drawn; before the first frame use the layout.
        if not self._last_cell_layout:
            return locate_cell(x, y, self.window.width, self.window.height, self.size)
        for location, entry in self._last_cell_layout.items():
            left, right, bottom, top = entry["rect"]
            if left <= x < right and bottom <= y < top:
                return location
        return None

    def get_cell_layout(self, location: Location) -> Optional[Dict[str, Any]]:
        return self._last_cell_layout.get(location)

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        # Without an active window only the layout cache is rebuilt.
        headless = False
        try:
            arcade.get_window()
        except RuntimeError:
            headless = True
        ctx = build_render_context(self.window.width, self.window.height, self.size, self._cell_states)
        self._last_cell_layout = {}
        for board_number in range(BOARD_COUNT):
            self._board_renderer.render(arcade, ctx, board_number, headless)
