"""Typed publish/subscribe channel from the game model to its observers."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Union

from fleetfire.components.firing_result import FiringResult
from fleetfire.components.location import Location


class GameEvent(str, Enum):
    FIRED_AT = "fired_at"


@dataclass(frozen=True, slots=True)
class FiredAt:
    location: Location
    firing_result: FiringResult


Observer = Callable[[Any], None]


class ObserverRegistry:
    """Ordered listener lists per game event kind.

    Listeners run synchronously in the order they were added. There is no
    removal.
    """

    def __init__(self) -> None:
        self._observers: Dict[GameEvent, List[Observer]] = {}

    def add(self, event: Union[GameEvent, str], observer: Observer) -> None:
        kind = GameEvent(event)
        if not callable(observer):
            raise TypeError(f"observer for {kind.value!r} must be callable")
        self._observers.setdefault(kind, []).append(observer)

    def notify(self, event: GameEvent, payload: Any) -> None:
        # Copy so an observer registering another one does not extend this round.
        for observer in list(self._observers.get(event, ())):
            observer(payload)

    def count(self, event: Union[GameEvent, str]) -> int:
        return len(self._observers.get(GameEvent(event), ()))
