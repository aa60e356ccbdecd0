import logging
import random
from typing import Dict, Iterator, Optional, Tuple

from esper import World

from fleetfire.components.board import Board
from fleetfire.components.board_position import BoardPosition
from fleetfire.components.cell import Cell
from fleetfire.components.firing_result import FiringResult
from fleetfire.components.location import Location
from fleetfire.constants import BOARD_COUNT, BOARD_SIZE, SHIP_PROBABILITY
from fleetfire.errors import OutOfBounds

logger = logging.getLogger(__name__)


class BoardSystem:
    """One player's grid: a Board entity plus size x size Cell entities.

    Ships are scattered by an independent draw per cell, so there is no notion
    of ship shape or fleet count.
    """

    def __init__(
        self,
        world: World,
        board_number: int,
        size: int = BOARD_SIZE,
        *,
        rng: Optional[random.Random] = None,
        ship_probability: float = SHIP_PROBABILITY,
    ):
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise ValueError(f"Board size must be a positive integer, got {size!r}")
        if not 0.0 <= ship_probability <= 1.0:
            raise ValueError(f"ship_probability must be within [0, 1], got {ship_probability!r}")
        self.world = world
        self.board_number = board_number
        self.size = size
        self._rng = rng or random.Random()
        self.board_entity = self.world.create_entity(Board(board_number=board_number, size=size))
        self._cells: Dict[Tuple[int, int], int] = {}
        self._init_board(ship_probability)

    def _init_board(self, ship_probability: float):
        for r in range(self.size):
            for c in range(self.size):
                occupied = self._rng.random() < ship_probability
                ent = self.world.create_entity(
                    BoardPosition(board_number=self.board_number, row=r, column=c),
                    Cell(occupied=occupied),
                )
                self._cells[(r, c)] = ent
        logger.debug(
            "Board %d built: %dx%d, %d occupied cells",
            self.board_number, self.size, self.size, self.occupied_count,
        )

    def fire_at(self, location: Location) -> Optional[FiringResult]:
        if location.board_number != self.board_number:
            raise OutOfBounds(location, self.size, BOARD_COUNT)
        cell = self._cell_for(location)
        firing_result = cell.fire()
        if firing_result is None:
            logger.debug("Repeat fire at %s ignored", location)
        else:
            logger.debug("Fire at %s -> %s", location, firing_result.value)
        return firing_result

    def cell_at(self, row: int, column: int) -> Cell:
        return self._cell_for(Location(row=row, column=column, board_number=self.board_number))

    def cells(self) -> Iterator[Tuple[BoardPosition, Cell]]:
        """Yield (position, cell) pairs in row-major order."""
        for r in range(self.size):
            for c in range(self.size):
                ent = self._cells[(r, c)]
                yield (
                    self.world.component_for_entity(ent, BoardPosition),
                    self.world.component_for_entity(ent, Cell),
                )

    @property
    def cell_count(self) -> int:
        return len(self._cells)

    @property
    def occupied_count(self) -> int:
        return sum(1 for _, cell in self.cells() if cell.occupied)

    def _cell_for(self, location: Location) -> Cell:
        key = (location.row, location.column)
        if any(isinstance(v, bool) or not isinstance(v, int) for v in key):
            raise OutOfBounds(location, self.size, BOARD_COUNT)
        ent = self._cells.get(key)
        if ent is None:
            raise OutOfBounds(location, self.size, BOARD_COUNT)
        return self.world.component_for_entity(ent, Cell)
