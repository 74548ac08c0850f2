from __future__ import annotations

from enum import Enum, auto


class Direction(Enum):
    """Directions a move command can slide the board in."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()

    @classmethod
    def parse(cls, value: Direction | str) -> Direction:
        """Accept a Direction member or its case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise ValueError(f"Invalid direction: {value!r}. Must be one of 'up', 'down', 'left', 'right'")
