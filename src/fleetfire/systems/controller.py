import logging

from fleetfire.components.location import Location
from fleetfire.errors import OutOfBounds
from fleetfire.events.bus import EventBus, EVENT_CELL_CLICK
from fleetfire.systems.game import GameSystem

logger = logging.getLogger(__name__)


class GameController:
    """Forwards cell clicks from the view to the game model unchanged."""

    def __init__(self, event_bus: EventBus, game: GameSystem):
        self.event_bus = event_bus
        self.game = game
        self.event_bus.subscribe(EVENT_CELL_CLICK, self.on_cell_click)

    def on_cell_click(self, sender, **kwargs):
        location = kwargs.get('location')
        if location is None:
            return
        self.handle_cell_click(location)

    def handle_cell_click(self, location: Location):
        try:
            return self.game.fire_at(location)
        except OutOfBounds:
            logger.warning("Rejected click outside the boards: %s", location)
            raise
