import sys, os
import random
ROOT = os.path.dirname(__file__)
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)
from merge2048.events.bus import (EventBus, EVENT_MOVE_REQUEST, EVENT_TILES_SLID, EVENT_TILES_MERGED,
                                  EVENT_SCORE_CHANGED, EVENT_TILE_SPAWNED, EVENT_MOVE_REJECTED,
                                  EVENT_GAME_MODE_CHANGED, EVENT_GAME_OVER)
from merge2048.world import create_world
from merge2048.systems.board import BoardSystem
from merge2048.rendering.text_renderer import render_board

seed = int(sys.argv[1]) if len(sys.argv) > 1 else 2048
script = sys.argv[2] if len(sys.argv) > 2 else 'lurdlurdddllrruu'
keys = {'u': 'up', 'd': 'down', 'l': 'left', 'r': 'right'}

bus = EventBus()
world = create_world(bus, rng=random.Random(seed))
board = BoardSystem(world, bus)

for ev in [EVENT_TILES_SLID, EVENT_TILES_MERGED, EVENT_SCORE_CHANGED, EVENT_TILE_SPAWNED,
           EVENT_MOVE_REJECTED, EVENT_GAME_MODE_CHANGED, EVENT_GAME_OVER]:
    bus.subscribe(ev, lambda s, _ev=ev, **k: print(f'  [{_ev}]', k))

print(render_board(board.snapshot()))
for step in script:
    direction = keys.get(step)
    if direction is None:
        continue
    print(f'\n> {direction}')
    bus.emit(EVENT_MOVE_REQUEST, direction=direction)
    print(render_board(board.snapshot()))
