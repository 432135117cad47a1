"""
Nova Defense - Missile-Command-style arcade game
Intercept incoming rockets to protect six cities and three batteries.
"""

__version__ = "1.0.0"

from .game import Game, GameState
from .config import *  # noqa: F401,F403

__all__ = ["Game", "GameState"]
