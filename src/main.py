"""Entry point for the 2048 sliding-tile puzzle.

Sets up ECS world, event bus, systems, and Arcade window.
"""
from arcade import Window, run, set_background_color

from merge2048.world import create_world
from merge2048.constants import GRID_SIZE, START_TILES_COUNT, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from merge2048.events.bus import EventBus, EVENT_KEY_PRESS, EVENT_QUIT_REQUEST
from merge2048.systems.board import BoardSystem
from merge2048.systems.input import InputSystem
from merge2048.systems.render import RenderSystem


class Merge2048Window(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus)
        self.board_system = BoardSystem(self.world, self.event_bus, GRID_SIZE, START_TILES_COUNT)
        self.input_system = InputSystem(self.event_bus)
        self.render_system = RenderSystem(self.world, self.event_bus, self, self.board_system)
        self.event_bus.subscribe(EVENT_QUIT_REQUEST, self.on_quit_request)
        set_background_color((250, 248, 239))

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)

    def on_quit_request(self, sender, **kwargs):
        self.close()


def main():
    window = Merge2048Window()
    run()


if __name__ == "__main__":
    main()
