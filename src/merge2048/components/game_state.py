"""Game state resource describing whether the board still accepts moves."""
from dataclasses import dataclass
from enum import Enum, auto


class GameMode(Enum):
    """High-level game modes that gate move input."""
    PLAYING = auto()
    FINISHED = auto()


@dataclass
class GameState:
    """Singleton component storing the currently active game mode."""
    mode: GameMode = GameMode.PLAYING
