from __future__ import annotations

import random
from typing import Sequence

from merge2048.components.board import Board
from merge2048.events.bus import EventBus
from merge2048.systems.board import BoardSystem
from merge2048.world import create_world


class ScriptedRandom(random.Random):
    """Random source that replays fixed choices for spawn tests.

    ``picks`` feed ``randrange`` (the empty-cell slot) and ``rolls`` feed
    ``random`` (the 2-vs-4 roll); both cycle once exhausted.
    """

    def __init__(self, picks: Sequence[int] = (0,), rolls: Sequence[float] = (0.0,)):
        super().__init__(0)
        self._picks = list(picks)
        self._rolls = list(rolls)
        self._pick_i = 0
        self._roll_i = 0

    def randrange(self, start, stop=None, step=1):
        pick = self._picks[self._pick_i % len(self._picks)]
        self._pick_i += 1
        return pick

    def random(self):
        roll = self._rolls[self._roll_i % len(self._rolls)]
        self._roll_i += 1
        return roll


def make_board_system(
    cells: Sequence[int] | None = None,
    grid_size: int = 4,
    *,
    rng: random.Random | None = None,
    score: int = 0,
) -> tuple[BoardSystem, EventBus]:
    """Create a BoardSystem with no start tiles, optionally preloaded with ``cells``."""
    bus = EventBus()
    world = create_world(bus, rng=rng or ScriptedRandom())
    system = BoardSystem(world, bus, grid_size, 0)
    if cells is not None:
        board = system.board
        preset = Board(grid_size=grid_size, cells=list(cells), score=score)
        board.cells = preset.cells
        board.score = preset.score
    return system, bus
