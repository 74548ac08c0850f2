from __future__ import annotations

import random

from esper import World

from merge2048.components.board import Board, BoardSnapshot
from merge2048.components.direction import Direction
from merge2048.components.game_state import GameMode
from merge2048.constants import GRID_SIZE, SPAWN_FOUR_PROBABILITY, START_TILES_COUNT
from merge2048.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_GAME_OVER,
    EVENT_MOVE_REJECTED,
    EVENT_MOVE_REQUEST,
    EVENT_SCORE_CHANGED,
    EVENT_TILE_SPAWNED,
    EVENT_TILES_MERGED,
    EVENT_TILES_SLID,
)
from merge2048.systems.board_ops import add_tile, is_finished, slide_tiles, snapshot
from merge2048.utils.game_state import get_game_state, set_game_mode


class BoardSystem:
    """Owns the board entity and applies move commands to it.

    Moves arrive either as direct ``move()`` calls or as EVENT_MOVE_REQUEST on
    the bus. Each applied move is followed by one spawn when anything changed,
    then a terminal check that flips the game into FINISHED mode.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        grid_size: int = GRID_SIZE,
        start_tiles_count: int = START_TILES_COUNT,
        *,
        rng: random.Random | None = None,
        four_probability: float = SPAWN_FOUR_PROBABILITY,
    ):
        if start_tiles_count < 0:
            raise ValueError(f"start_tiles_count must not be negative, got {start_tiles_count}")
        if not 0.0 <= four_probability <= 1.0:
            raise ValueError(f"four_probability must be within [0, 1], got {four_probability}")
        self.world = world
        self.event_bus = event_bus
        candidate_rng = rng or getattr(world, "random", None)
        self._rng: random.Random = candidate_rng or random.Random()
        self.four_probability = four_probability
        # Board validates grid_size before any entity is created.
        board = Board(grid_size=grid_size)
        self.board_entity = self.world.create_entity(board)
        self.event_bus.subscribe(EVENT_MOVE_REQUEST, self.on_move_request)
        self._init_board(start_tiles_count)

    def _init_board(self, start_tiles_count: int) -> None:
        board = self.board
        for _ in range(start_tiles_count):
            add_tile(board, self._rng, self.four_probability)
        # The opening board is shown without a spawn highlight.
        board.last_spawned = None

    @property
    def board(self) -> Board:
        return self.world.component_for_entity(self.board_entity, Board)

    def on_move_request(self, sender, **kwargs):
        direction = kwargs.get('direction')
        if direction is None:
            return
        try:
            parsed = Direction.parse(direction)
        except ValueError:
            return
        state = get_game_state(self.world)
        if state is not None and state.mode == GameMode.FINISHED:
            self.event_bus.emit(EVENT_MOVE_REJECTED, direction=parsed, reason='finished')
            return
        self.move(parsed)

    def move(self, direction: Direction | str) -> bool:
        """Slide and merge every tile in ``direction``; spawn one tile if anything changed."""
        direction = Direction.parse(direction)
        board = self.board
        result = slide_tiles(board, direction)
        if not result.changed:
            self.event_bus.emit(EVENT_MOVE_REJECTED, direction=direction, reason='no_change')
            return False

        self.event_bus.emit(
            EVENT_TILES_SLID,
            direction=direction,
            moves=list(result.moves),
            merges=list(result.merges),
        )
        if result.merges:
            self.event_bus.emit(
                EVENT_TILES_MERGED,
                positions=[board.index_to_coords(index) for index in result.merges],
                values=[board.cells[index] for index in result.merges],
            )
        if result.score_delta:
            self.event_bus.emit(EVENT_SCORE_CHANGED, score=board.score, delta=result.score_delta)

        spawned = add_tile(board, self._rng, self.four_probability)
        if spawned is not None:
            row, col = board.index_to_coords(spawned)
            self.event_bus.emit(EVENT_TILE_SPAWNED, row=row, col=col, value=board.cells[spawned])
        self.event_bus.emit(EVENT_BOARD_CHANGED, direction=direction, changed=True)

        if is_finished(board):
            state = get_game_state(self.world)
            if state is None or state.mode != GameMode.FINISHED:
                set_game_mode(self.world, self.event_bus, GameMode.FINISHED)
                self.event_bus.emit(EVENT_GAME_OVER, score=board.score, max_tile=board.max_tile())
        return True

    def is_finished(self) -> bool:
        return is_finished(self.board)

    def snapshot(self) -> BoardSnapshot:
        return snapshot(self.board)
