from typing import Dict, Iterable

from merge2048.components.direction import Direction
from merge2048.constants import DEFAULT_KEY_BINDINGS, QUIT_KEYS
from merge2048.events.bus import EventBus, EVENT_KEY_PRESS, EVENT_MOVE_REQUEST, EVENT_QUIT_REQUEST


class InputSystem:
    """Translates raw key presses into move and quit requests."""

    def __init__(
        self,
        event_bus: EventBus,
        bindings: Dict[int, Direction | str] | None = None,
        quit_keys: Iterable[int] = QUIT_KEYS,
    ):
        self.event_bus = event_bus
        source = DEFAULT_KEY_BINDINGS if bindings is None else bindings
        # Parse eagerly so a bad binding fails at startup instead of mid-game.
        self.bindings: Dict[int, Direction] = {int(symbol): Direction.parse(d) for symbol, d in source.items()}
        self.quit_keys = frozenset(int(symbol) for symbol in quit_keys)
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_key_press(self, sender, **kwargs):
        symbol = kwargs.get('symbol')
        if symbol is None:
            return
        try:
            symbol = int(symbol)
        except (TypeError, ValueError):
            return
        if symbol in self.quit_keys:
            self.event_bus.emit(EVENT_QUIT_REQUEST)
            return
        direction = self.bindings.get(symbol)
        if direction is None:
            return
        self.event_bus.emit(EVENT_MOVE_REQUEST, direction=direction)
