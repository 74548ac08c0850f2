from esper import World

from merge2048.events.bus import EventBus, EVENT_TILES_SLID, EVENT_TILES_MERGED
from merge2048.rendering.board_renderer import BoardRenderer
from merge2048.systems.board import BoardSystem
from merge2048.constants import DARK_TEXT_COLOR, HEADER_HEIGHT, TILE_PADDING
from merge2048.ui.layout import compute_board_geometry


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window, board_system: BoardSystem):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.board_system = board_system
        self.event_bus.subscribe(EVENT_TILES_SLID, self.on_tiles_slid)
        self.event_bus.subscribe(EVENT_TILES_MERGED, self.on_tiles_merged)
        self.last_merged: list[tuple[int, int]] = []
        self._last_tile_layout: dict[tuple[int, int], tuple[float, float, float, float]] = {}
        self._board_renderer = BoardRenderer(self, padding=TILE_PADDING)

    def on_tiles_slid(self, sender, **kwargs):
        # Merge highlights only last for the move that produced them.
        self.last_merged = []

    def on_tiles_merged(self, sender, **kwargs):
        self.last_merged = list(kwargs.get('positions') or [])

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        # Headless safeguard: if no active Arcade window (unit tests), skip draw calls but still build layout cache.
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        snapshot = self.board_system.snapshot()
        tile_size, board_left, board_bottom = compute_board_geometry(
            self.window.width, self.window.height, snapshot.grid_size
        )
        self._board_renderer.render(
            arcade, snapshot, tile_size, board_left, board_bottom, headless,
            merged=set(self.last_merged),
        )
        if headless:
            return
        header_y = self.window.height - HEADER_HEIGHT / 2
        arcade.draw_text(f"Score: {snapshot.score}", board_left, header_y, DARK_TEXT_COLOR, 24,
                         anchor_y="center", bold=True)
        if snapshot.finished:
            arcade.draw_text("Game over - press Q to quit", self.window.width / 2, header_y - 30,
                             DARK_TEXT_COLOR, 14, anchor_x="center", anchor_y="center")

    def get_tile_at_point(self, x: float, y: float):
        for pos, (left, right, bottom, top) in self._last_tile_layout.items():
            if left <= x <= right and bottom <= y <= top:
                return pos
        return None
