"""Game state resource describing the active session mode."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple


class GameMode(Enum):
    """High-level session modes; only PLAYING accepts board commands."""
    PLAYING = auto()
    WON = auto()
    LOST = auto()
    QUIT = auto()


@dataclass
class GameState:
    """Singleton component storing the current mode and the mine that ended the game."""
    mode: GameMode = GameMode.PLAYING
    trigger_cell: Optional[Tuple[int, int]] = None
