GRID_SIZE = 4
START_TILES_COUNT = 2
# Chance that a spawned tile is a 4 instead of a 2.
SPAWN_FOUR_PROBABILITY = 0.1

WINDOW_WIDTH = 600
WINDOW_HEIGHT = 700
WINDOW_TITLE = "2048"
MIN_TILE_SIZE = 20
TILE_PADDING = 8
BOTTOM_MARGIN = 20
# Space above the board reserved for the score header.
HEADER_HEIGHT = 80

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.90
BOARD_MAX_HEIGHT_PCT = 0.90

BACKGROUND_COLOR = (187, 173, 160)
EMPTY_TILE_COLOR = (205, 193, 180)
SPAWN_HIGHLIGHT_COLOR = (246, 94, 59)
MERGE_HIGHLIGHT_COLOR = (237, 194, 46)
DARK_TEXT_COLOR = (119, 110, 101)
LIGHT_TEXT_COLOR = (249, 246, 242)
# Values above the largest key reuse its color.
TILE_COLORS = {
    2: (238, 228, 218),
    4: (237, 224, 200),
    8: (242, 177, 121),
    16: (245, 149, 99),
    32: (246, 124, 95),
    64: (246, 94, 59),
    128: (237, 207, 114),
    256: (237, 204, 97),
    512: (237, 200, 80),
    1024: (237, 197, 63),
    2048: (237, 194, 46),
}

# Arcade key symbols, kept numeric so the engine never imports arcade.
KEY_UP = 65362
KEY_DOWN = 65364
KEY_LEFT = 65361
KEY_RIGHT = 65363
KEY_W = 119
KEY_A = 97
KEY_S = 115
KEY_D = 100
KEY_Q = 113
KEY_ESCAPE = 65307

DEFAULT_KEY_BINDINGS = {
    KEY_UP: "up",
    KEY_W: "up",
    KEY_DOWN: "down",
    KEY_S: "down",
    KEY_LEFT: "left",
    KEY_A: "left",
    KEY_RIGHT: "right",
    KEY_D: "right",
}
QUIT_KEYS = (KEY_Q, KEY_ESCAPE)
