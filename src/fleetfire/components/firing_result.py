from enum import Enum


class FiringResult(str, Enum):
    """Outcome of firing at a fresh cell. An already fired cell yields None instead."""
    HIT = "hit"
    MISS = "miss"
