"""Utility functions and helpers."""

from .functions import (
    IdSequence,
    distance,
    lerp,
    lerp_point,
    within_tolerance,
)
from .input_handler import InputEvent, GameAction
from .scheduler import FrameScheduler

__all__ = [
    "IdSequence",
    "distance",
    "lerp",
    "lerp_point",
    "within_tolerance",
    "InputEvent",
    "GameAction",
    "FrameScheduler",
]
