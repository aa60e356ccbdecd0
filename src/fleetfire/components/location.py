from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Location:
    """Identifies one cell across both boards."""

    row: int
    column: int
    board_number: int
