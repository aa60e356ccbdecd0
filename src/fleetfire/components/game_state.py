"""Game state resource shared by the game systems."""
from dataclasses import dataclass


@dataclass
class GameState:
    """Singleton component holding the turn indicator.

    Player 0 fires first, at board 1. Nothing advances or checks ``turn`` yet.
    """
    turn: int = 0
