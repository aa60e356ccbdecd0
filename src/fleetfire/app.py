"""Application context: one object holding everything a running game needs."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional

from esper import World

from fleetfire.constants import BOARD_COUNT, BOARD_SIZE, SHIP_PROBABILITY
from fleetfire.events.bus import EventBus
from fleetfire.systems.board import BoardSystem
from fleetfire.systems.controller import GameController
from fleetfire.systems.game import GameSystem

logger = logging.getLogger(__name__)


@dataclass
class GameContext:
    """Event bus, esper world, model and controller of one game.

    Every system of the game holds this context's ``world``, so two contexts
    never see each other's entities.
    """
    event_bus: EventBus
    world: World
    game: GameSystem
    controller: GameController

    def close(self) -> None:
        self.world.clear_database()


def create_game(
    event_bus: Optional[EventBus] = None,
    *,
    size: int = BOARD_SIZE,
    rng: Optional[random.Random] = None,
    ship_probability: float = SHIP_PROBABILITY,
) -> GameContext:
    event_bus = event_bus or EventBus()
    rng = rng or random.Random()
    world = World()

    boards = [
        BoardSystem(world, board_number, size, rng=rng, ship_probability=ship_probability)
        for board_number in range(BOARD_COUNT)
    ]
    game = GameSystem(world, boards)
    controller = GameController(event_bus, game)
    logger.info(
        "Game created: %d boards of %dx%d, ship probability %.2f",
        len(boards), size, size, ship_probability,
    )
    return GameContext(event_bus=event_bus, world=world, game=game, controller=controller)
