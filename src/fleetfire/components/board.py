from dataclasses import dataclass

@dataclass(slots=True)
class Board:
    board_number: int
    size: int
