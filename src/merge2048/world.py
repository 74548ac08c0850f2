import random

from esper import World
from .events.bus import EventBus
from merge2048.components.game_state import GameState, GameMode


def create_world(
    event_bus: EventBus,
    initial_mode: GameMode = GameMode.PLAYING,
    *,
    rng: random.Random | None = None,
) -> World:
    """Create the ECS world with its game state resource and shared random source.

    The board itself is created by ``BoardSystem`` so callers choose its size.
    """
    world = World()
    setattr(world, "random", rng or random.Random())

    # Register the global game state resource.
    state_entity = world.create_entity()
    world.add_component(state_entity, GameState(mode=initial_mode))
    return world
