"""
Shared utility functions for Nova Defense.

Provides interpolation, distance and tolerance helpers used across
models, plus the id sequence that names transient entities.
"""

from __future__ import annotations

import itertools
import math
from typing import Iterator


# ── Geometry ───────────────────────────────────────────────────────────────


def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation from *start* to *end* at parameter *t*."""
    return start + (end - start) * t


def lerp_point(
    sx: float, sy: float, tx: float, ty: float, t: float
) -> tuple[float, float]:
    """Interpolate both axes independently."""
    return (lerp(sx, tx, t), lerp(sy, ty, t))


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(x2 - x1, y2 - y1)


def within_tolerance(a: float, b: float, tolerance: float) -> bool:
    """Return True if *a* and *b* differ by strictly less than *tolerance*."""
    return abs(a - b) < tolerance


# ── Identity ───────────────────────────────────────────────────────────────


class IdSequence:
    """Monotonically increasing integer ids for rockets, missiles and
    explosions.  Restarted whenever the game is reset."""

    def __init__(self, start: int = 1) -> None:
        self._start = start
        self._counter: Iterator[int] = itertools.count(start)

    def next(self) -> int:
        return next(self._counter)

    def reset(self) -> None:
        self._counter = itertools.count(self._start)
