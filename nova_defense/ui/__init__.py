"""User interface components."""

from .text import ScoreDisplay

__all__ = [
    "ScoreDisplay",
]
