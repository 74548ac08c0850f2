from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM
# ============================================================================
EVENT_QUIT_REQUEST = "quit_request"  # payload: None


# ============================================================================
# INPUT
# ============================================================================
EVENT_KEY_PRESS = "key_press"        # payload: symbol=int, modifiers=int
EVENT_MOVE_REQUEST = "move_request"  # payload: direction=Direction|str


# ============================================================================
# BOARD MECHANICS
# ============================================================================
EVENT_TILES_SLID = "tiles_slid"          # payload: direction=Direction, moves=[(src, dst),...], merges=[index,...]
EVENT_TILES_MERGED = "tiles_merged"      # payload: positions=[(r,c),...], values=[int,...]
EVENT_TILE_SPAWNED = "tile_spawned"      # payload: row=int, col=int, value=int
EVENT_SCORE_CHANGED = "score_changed"    # payload: score=int, delta=int
EVENT_BOARD_CHANGED = "board_changed"    # payload: direction=Direction, changed=bool
EVENT_MOVE_REJECTED = "move_rejected"    # payload: direction=Direction|None, reason=str


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"  # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_GAME_OVER = "game_over"                  # payload: score=int, max_tile=int
