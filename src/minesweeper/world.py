from __future__ import annotations

import random

from esper import World

from minesweeper.components.game_state import GameMode, GameState
from minesweeper.events.bus import EventBus


def create_world(
    event_bus: EventBus,
    initial_mode: GameMode = GameMode.PLAYING,
    *,
    rng: random.Random | None = None,
) -> World:
    """Create the world with its GameState singleton.

    The board entity itself is created by ``BoardSystem``. Systems that need
    randomness fall back to ``world.random`` when not given their own rng.
    """
    world = World()
    setattr(world, "random", rng)
    world.create_entity(GameState(mode=initial_mode))
    return world
