from fleetfire.constants import BOARD_SIZE
from fleetfire.events.bus import EventBus, EVENT_MOUSE_PRESS, EVENT_CELL_CLICK
from fleetfire.ui.layout import locate_cell

LEFT_BUTTON = 1  # arcade.MOUSE_BUTTON_LEFT


class InputSystem:
    def __init__(self, event_bus: EventBus, window, size: int = BOARD_SIZE):
        self.event_bus = event_bus
        self.window = window
        self.size = size
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        # Only the left button fires; other buttons are left for future use.
        if button != LEFT_BUTTON:
            return
        render_system = getattr(self.window, 'render_system', None)
        if render_system is not None:
            location = render_system.get_cell_at_point(x, y)
        else:
            location = locate_cell(x, y, self.window.width, self.window.height, self.size)
        if location is None:
            return
        self.event_bus.emit(EVENT_CELL_CLICK, location=location)
