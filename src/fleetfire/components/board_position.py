from dataclasses import dataclass

@dataclass(frozen=True, slots=True)
class BoardPosition:
    board_number: int
    row: int
    column: int
