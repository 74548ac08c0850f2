from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from merge2048.components.board import Board, BoardSnapshot
from merge2048.components.direction import Direction
from merge2048.constants import SPAWN_FOUR_PROBABILITY

TileMove = Tuple[int, int]


@dataclass(slots=True)
class SlideResult:
    """Outcome of one directional sweep, before any spawn."""
    direction: Direction
    changed: bool = False
    moves: List[TileMove] = field(default_factory=list)
    merges: List[int] = field(default_factory=list)
    score_delta: int = 0


def get_adjacent_index(board: Board, index: int, direction: Direction) -> Optional[int]:
    """Return the neighbouring cell index in ``direction`` or None at the edge."""
    row, col = board.index_to_coords(index)
    last = board.grid_size - 1
    if direction is Direction.UP:
        return None if row == 0 else board.coords_to_index(row - 1, col)
    if direction is Direction.DOWN:
        return None if row == last else board.coords_to_index(row + 1, col)
    if direction is Direction.LEFT:
        return None if col == 0 else board.coords_to_index(row, col - 1)
    if direction is Direction.RIGHT:
        return None if col == last else board.coords_to_index(row, col + 1)
    raise ValueError(f"Unsupported direction: {direction!r}")


def try_move(
    board: Board,
    index: int,
    direction: Direction,
    merge_lock: List[bool],
    result: SlideResult | None = None,
) -> bool:
    """Slide the tile at ``index`` as far as it goes, merging at most once.

    The tile keeps stepping into empty neighbours until it hits the edge, a
    different value, or a cell that already absorbed a merge this move. An
    equal neighbour absorbs it: the neighbour doubles, gets locked, and the
    doubled value is added to the score. A merged tile stops there.
    """
    origin = index
    changed = False
    while True:
        neighbor = get_adjacent_index(board, index, direction)
        if neighbor is None:
            break
        value = board.cells[index]
        if value == 0 or merge_lock[neighbor]:
            break
        target = board.cells[neighbor]
        if target == 0:
            board.cells[neighbor] = value
            board.cells[index] = 0
            index = neighbor
            changed = True
            continue
        if target == value:
            merged = value * 2
            board.cells[neighbor] = merged
            board.cells[index] = 0
            merge_lock[neighbor] = True
            board.score += merged
            index = neighbor
            changed = True
            if result is not None:
                result.merges.append(neighbor)
                result.score_delta += merged
        break
    if changed and result is not None:
        result.moves.append((origin, index))
    return changed


def traversal_order(board: Board, direction: Direction) -> List[int]:
    """Order in which cells are swept so cells nearest the destination edge settle first."""
    n = board.grid_size
    if direction is Direction.UP:
        return list(range(n * n))
    if direction is Direction.DOWN:
        return list(reversed(range(n * n)))
    if direction is Direction.LEFT:
        cols: Sequence[int] = range(n)
    elif direction is Direction.RIGHT:
        cols = range(n - 1, -1, -1)
    else:
        raise ValueError(f"Unsupported direction: {direction!r}")
    return [board.coords_to_index(row, col) for col in cols for row in range(n)]


def slide_tiles(board: Board, direction: Direction) -> SlideResult:
    """Apply one move to every tile of the board, without spawning."""
    result = SlideResult(direction=direction)
    merge_lock = [False] * len(board.cells)
    for index in traversal_order(board, direction):
        if try_move(board, index, direction, merge_lock, result):
            result.changed = True
    return result


def add_tile(
    board: Board,
    rng: random.Random,
    four_probability: float = SPAWN_FOUR_PROBABILITY,
) -> Optional[int]:
    """Place a 2 (or, with ``four_probability``, a 4) on a random empty cell.

    Returns the chosen index, or None when the board is full.
    """
    empty = board.empty_cells()
    if not empty:
        return None
    index = empty[rng.randrange(len(empty))]
    board.cells[index] = 2 if rng.random() < 1.0 - four_probability else 4
    board.last_spawned = index
    return index


def is_finished(board: Board) -> bool:
    """True when no cell is empty and no two adjacent cells hold equal values."""
    cells = board.cells
    for index, value in enumerate(cells):
        if value == 0:
            return False
        for direction in (Direction.RIGHT, Direction.DOWN):
            neighbor = get_adjacent_index(board, index, direction)
            if neighbor is not None and cells[neighbor] == value:
                return False
    return True


def snapshot(board: Board) -> BoardSnapshot:
    last = board.index_to_coords(board.last_spawned) if board.last_spawned is not None else None
    return BoardSnapshot(
        grid_size=board.grid_size,
        cells=tuple(board.cells),
        score=board.score,
        last_spawned=last,
        finished=is_finished(board),
    )
