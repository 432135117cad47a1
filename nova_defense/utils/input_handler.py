"""
Input handler for Nova Defense.

Maps player input to the small set of actions the game understands.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class GameAction(Enum):
    """Actions the player can trigger."""
    FIRE = auto()
    START = auto()
    QUIT = auto()
    NONE = auto()


@dataclass
class InputEvent:
    """Abstract input event consumed by the game loop."""
    action: GameAction
    target_x: float = 0
    target_y: float = 0
