from dataclasses import dataclass
from typing import Optional

from fleetfire.components.firing_result import FiringResult

UNKNOWN_STATE = "unknown"


@dataclass(slots=True)
class Cell:
    """Occupancy and fired flag for one grid position.

    ``occupied`` is drawn once when the board is built. ``fired`` only ever moves
    from False to True.
    """
    occupied: bool
    fired: bool = False

    def fire(self) -> Optional[FiringResult]:
        if self.fired:
            return None
        self.fired = True
        return FiringResult.HIT if self.occupied else FiringResult.MISS

    @property
    def state(self) -> str:
        if not self.fired:
            return UNKNOWN_STATE
        return FiringResult.HIT.value if self.occupied else FiringResult.MISS.value
