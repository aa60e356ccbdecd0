import logging
from typing import Optional, Sequence, Union

from esper import World

from fleetfire.components.firing_result import FiringResult
from fleetfire.components.game_state import GameState
from fleetfire.components.location import Location
from fleetfire.constants import BOARD_COUNT
from fleetfire.errors import OutOfBounds
from fleetfire.events.observers import FiredAt, GameEvent, Observer, ObserverRegistry
from fleetfire.systems.board import BoardSystem

logger = logging.getLogger(__name__)


class GameSystem:
    """Routes fires to one of the two boards and publishes their outcomes.

    Flow:
      - ``fire_at`` picks the board named by ``location.board_number``.
      - A hit or miss is published as ``GameEvent.FIRED_AT`` to every observer,
        in registration order, before ``fire_at`` returns.
      - A repeat fire yields None and publishes nothing.
    """

    def __init__(self, world: World, boards: Sequence[BoardSystem], *, observers: Optional[ObserverRegistry] = None):
        self.world = world
        boards = list(boards)
        if len(boards) != BOARD_COUNT:
            raise ValueError(f"A game needs exactly {BOARD_COUNT} boards, got {len(boards)}")
        for index, board in enumerate(boards):
            if board.board_number != index:
                raise ValueError(f"Board at index {index} is numbered {board.board_number}")
            if board.world is not world:
                raise ValueError(f"Board {index} belongs to a different world")
        if len({board.size for board in boards}) != 1:
            raise ValueError("Both boards must have the same size")
        self._boards = boards
        self._observers = observers or ObserverRegistry()
        self.state_entity = self.world.create_entity(GameState())

    @property
    def boards(self) -> tuple[BoardSystem, ...]:
        return tuple(self._boards)

    @property
    def size(self) -> int:
        return self._boards[0].size

    @property
    def turn(self) -> int:
        return self.world.component_for_entity(self.state_entity, GameState).turn

    def board(self, board_number: int) -> BoardSystem:
        return self._boards[board_number]

    def fire_at(self, location: Location) -> Optional[FiringResult]:
        # TODO: once the product owner decides the turn rules, reject fires from
        # the player whose turn it is not.
        board_number = location.board_number
        if isinstance(board_number, bool) or not isinstance(board_number, int) \
                or board_number not in range(len(self._boards)):
            raise OutOfBounds(location, self.size, len(self._boards))
        firing_result = self._boards[board_number].fire_at(location)
        if firing_result is not None:
            self._observers.notify(GameEvent.FIRED_AT, FiredAt(location=location, firing_result=firing_result))
        return firing_result

    def add_observer(self, event: Union[GameEvent, str], observer: Observer) -> None:
        self._observers.add(event, observer)
        logger.debug("Observer %r added for %s", observer, GameEvent(event).value)
