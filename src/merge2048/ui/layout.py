from merge2048.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    HEADER_HEIGHT,
    MIN_TILE_SIZE,
)


def compute_board_geometry(window_width: int, window_height: int, grid_size: int):
    """Return (tile_size, start_x, start_y) for a square board of ``grid_size`` tiles.

    The board is centred horizontally and sits on the bottom margin; the header
    strip above it is kept free for the score line.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN - HEADER_HEIGHT) * BOARD_MAX_HEIGHT_PCT
    tile_size = int(min(max_board_w, max_board_h) / grid_size)
    if tile_size < MIN_TILE_SIZE:
        tile_size = MIN_TILE_SIZE  # safety minimum
    total_width = grid_size * tile_size
    start_x = (window_width - total_width) / 2
    start_y = BOTTOM_MARGIN
    return tile_size, start_x, start_y
