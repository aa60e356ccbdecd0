from __future__ import annotations

from esper import World

from fleetfire.systems.board import BoardSystem
from fleetfire.systems.game import GameSystem


class DummyWindow:
    def __init__(self, width=960, height=540):
        self.width = width
        self.height = height
        self.render_system = None


def make_game(size: int = 8, ship_probability: float = 0.2, rng=None, world: World | None = None) -> GameSystem:
    """Two boards of one size. Probability 1.0 fills every cell, 0.0 leaves them empty."""
    world = world or World()
    boards = [
        BoardSystem(world, 0, size, rng=rng, ship_probability=ship_probability),
        BoardSystem(world, 1, size, rng=rng, ship_probability=ship_probability),
    ]
    return GameSystem(world, boards)
