from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fleetfire.components.location import Location


class OutOfBounds(IndexError):
    """Raised when a location names a row, column or board that does not exist."""

    def __init__(self, location: Location, size: int, board_count: int = 2):
        self.location = location
        self.size = size
        self.board_count = board_count
        super().__init__(
            f"{location} is outside a {size}x{size} grid on boards 0..{board_count - 1}"
        )
