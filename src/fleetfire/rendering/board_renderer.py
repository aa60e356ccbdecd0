from __future__ import annotations

from typing import TYPE_CHECKING

from fleetfire.components.cell import UNKNOWN_STATE
from fleetfire.components.location import Location
from fleetfire.constants import CELL_OUTLINE_COLOR, CELL_STATE_COLORS, CELL_TEXT_COLOR

if TYPE_CHECKING:
    from fleetfire.rendering.context import RenderContext
    from fleetfire.systems.render import RenderSystem


class BoardRenderer:
    def __init__(self, render_system: RenderSystem, padding: int = 2):
        self._rs = render_system
        self._padding = padding

    def render(self, arcade, ctx: RenderContext, board_number: int, headless: bool) -> None:
        rs = self._rs
        inset = min(self._padding, ctx.tile_size / 4)
        font_size = max(int(ctx.tile_size * 0.22), 6)
        for row in range(ctx.size):
            for column in range(ctx.size):
                location = Location(row=row, column=column, board_number=board_number)
                state = ctx.cell_states.get(location, UNKNOWN_STATE)
                left, right, bottom, top = ctx.cell_rect(location)
                rs._last_cell_layout[location] = {
                    "rect": (left, right, bottom, top),
                    "state": state,
                }
                if headless:
                    continue
                color = CELL_STATE_COLORS.get(state, CELL_STATE_COLORS[UNKNOWN_STATE])
                arcade.draw_lrbt_rectangle_filled(left + inset, right - inset, bottom + inset, top - inset, color)
                arcade.draw_lrbt_rectangle_outline(left, right, bottom, top, CELL_OUTLINE_COLOR, 1)
                # Unfired cells stay blank; fired ones show their outcome.
                if state != UNKNOWN_STATE:
                    arcade.draw_text(
                        state,
                        (left + right) / 2,
                        (bottom + top) / 2,
                        CELL_TEXT_COLOR,
                        font_size,
                        anchor_x="center",
                        anchor_y="center",
                    )
