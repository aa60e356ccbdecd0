"""Entry point for the Fleetfire two-board prototype.

Builds the game context, then the arcade window with its input and render systems.
"""
import logging

from arcade import Window, run, color

from fleetfire.app import GameContext, create_game
from fleetfire.constants import WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE
from fleetfire.events.bus import EVENT_MOUSE_PRESS
from fleetfire.events.observers import GameEvent
from fleetfire.systems.input import InputSystem
from fleetfire.systems.render import RenderSystem


class FleetfireWindow(Window):
    def __init__(self, context: GameContext):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        self.context = context
        self.event_bus = context.event_bus
        size = context.game.size
        self.render_system = RenderSystem(self, size)
        self.input_system = InputSystem(self.event_bus, self, size)
        context.game.add_observer(GameEvent.FIRED_AT, self.render_system.on_fired_at)
        self.background_color = color.BLACK

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button, modifiers=modifiers)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    context = create_game()
    FleetfireWindow(context)
    run()
    context.close()

if __name__ == "__main__":
    main()
