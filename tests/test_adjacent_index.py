from merge2048.components.board import Board
from merge2048.components.direction import Direction
from merge2048.systems.board_ops import get_adjacent_index


def test_interior_cell_has_all_neighbours():
    board = Board(grid_size=3)
    center = 4
    assert get_adjacent_index(board, center, Direction.UP) == 1
    assert get_adjacent_index(board, center, Direction.DOWN) == 7
    assert get_adjacent_index(board, center, Direction.LEFT) == 3
    assert get_adjacent_index(board, center, Direction.RIGHT) == 5


def test_edges_have_no_neighbour():
    board = Board(grid_size=3)
    for col in range(3):
        assert get_adjacent_index(board, board.coords_to_index(0, col), Direction.UP) is None
        assert get_adjacent_index(board, board.coords_to_index(2, col), Direction.DOWN) is None
    for row in range(3):
        assert get_adjacent_index(board, board.coords_to_index(row, 0), Direction.LEFT) is None
        assert get_adjacent_index(board, board.coords_to_index(row, 2), Direction.RIGHT) is None


def test_row_ends_do_not_wrap():
    board = Board(grid_size=4)
    # Index 3 ends row 0 and index 4 starts row 1; they are not horizontal neighbours.
    assert get_adjacent_index(board, 3, Direction.RIGHT) is None
    assert get_adjacent_index(board, 4, Direction.LEFT) is None


def test_single_cell_grid_has_no_neighbours():
    board = Board(grid_size=1)
    for direction in Direction:
        assert get_adjacent_index(board, 0, direction) is None
