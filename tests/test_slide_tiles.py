from merge2048.components.board import Board
from merge2048.components.direction import Direction
from merge2048.systems.board_ops import slide_tiles, traversal_order


def slide(cells, direction, grid_size=4):
    board = Board(grid_size=grid_size, cells=list(cells))
    result = slide_tiles(board, direction)
    return board, result


def test_two_by_two_merge_right():
    board, result = slide([2, 2, 0, 0], Direction.RIGHT, grid_size=2)
    assert board.cells == [0, 4, 0, 0]
    assert board.score == 4
    assert result.changed
    assert result.merges == [1]
    assert result.score_delta == 4


def test_two_by_two_merge_down():
    board, result = slide([2, 0, 2, 0], Direction.DOWN, grid_size=2)
    assert board.cells == [0, 0, 4, 0]
    assert board.score == 4
    assert result.changed


def test_four_equal_tiles_make_two_merges():
    board, result = slide([2, 2, 2, 2] + [0] * 12, Direction.LEFT)
    assert board.cells[:4] == [4, 4, 0, 0]
    assert board.score == 8
    assert result.merges == [0, 1]
    assert result.moves == [(1, 0), (2, 1), (3, 1)]


def test_three_equal_tiles_merge_toward_the_edge():
    board, _ = slide([2, 2, 2, 0] + [0] * 12, Direction.LEFT)
    assert board.cells[:4] == [4, 2, 0, 0]
    board, _ = slide([2, 2, 2, 0] + [0] * 12, Direction.RIGHT)
    assert board.cells[:4] == [0, 0, 2, 4]


def test_merged_tile_does_not_merge_again_in_same_move():
    board, result = slide([4, 4, 8, 0] + [0] * 12, Direction.LEFT)
    assert board.cells[:4] == [8, 8, 0, 0]
    assert board.score == 8
    assert result.merges == [0]


def test_merge_lock_is_scoped_to_one_move():
    board, _ = slide([4, 4, 8, 0] + [0] * 12, Direction.LEFT)
    result = slide_tiles(board, Direction.LEFT)
    assert board.cells[:4] == [16, 0, 0, 0]
    assert board.score == 8 + 16
    assert result.merges == [0]


def test_tile_slides_all_the_way_to_the_wall():
    board, result = slide([0, 0, 0, 2] + [0] * 12, Direction.LEFT)
    assert board.cells[:4] == [2, 0, 0, 0]
    assert result.moves == [(3, 0)]
    assert board.score == 0
    assert result.merges == []


def test_column_moves_up_and_down():
    column = [2, 0, 2, 4]
    cells = [0] * 16
    for row, value in enumerate(column):
        cells[row * 4] = value
    board, _ = slide(cells, Direction.UP)
    assert [board.cells[row * 4] for row in range(4)] == [4, 4, 0, 0]
    assert board.score == 4
    board, _ = slide(cells, Direction.DOWN)
    assert [board.cells[row * 4] for row in range(4)] == [0, 0, 4, 4]
    assert board.score == 4


def test_blocked_row_at_the_wall_does_not_move():
    cells = [2, 4, 8, 16] + [0] * 12
    board, result = slide(cells, Direction.LEFT)
    assert board.cells == cells
    assert not result.changed
    assert result.moves == []
    assert board.score == 0


def test_full_board_without_pairs_never_changes():
    cells = [2, 4, 4, 2]
    for direction in Direction:
        board, result = slide(cells, direction, grid_size=2)
        assert board.cells == cells
        assert not result.changed


def test_changed_flag_survives_later_no_ops():
    # The tile at index 2 moves; the last swept tile (index 3) is blocked.
    board, result = slide([0, 2, 4, 8], Direction.UP, grid_size=2)
    assert result.changed
    assert board.cells == [4, 2, 0, 8]


def test_changed_flag_set_by_last_swept_tile():
    cells = [0] * 16
    cells[15] = 2
    board, result = slide(cells, Direction.LEFT)
    assert result.changed
    assert board.cells[12] == 2


def test_traversal_orders():
    board = Board(grid_size=2)
    assert traversal_order(board, Direction.UP) == [0, 1, 2, 3]
    assert traversal_order(board, Direction.DOWN) == [3, 2, 1, 0]
    assert traversal_order(board, Direction.LEFT) == [0, 2, 1, 3]
    assert traversal_order(board, Direction.RIGHT) == [1, 3, 0, 2]
