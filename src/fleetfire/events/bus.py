from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects.

    Carries UI-side traffic (mouse presses, cell clicks). Delivery order between
    receivers of one event is not guaranteed; game outcomes go through
    ``ObserverRegistry`` instead.
    """
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems that are not stored anywhere still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"  # payload: x, y, button, modifiers
EVENT_CELL_CLICK = "cell_click"    # payload: location=Location
