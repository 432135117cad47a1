"""
Frame scheduler for Nova Defense.

Stands in for the host's animation-frame primitive: at most one callback
is pending at a time, the host runs it once per rendered frame, and a
callback that wants another frame must request it again.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

FrameCallback = Callable[[], None]


@dataclass
class FrameScheduler:
    """Single-slot frame request queue."""

    frames_run: int = 0
    _pending: Optional[FrameCallback] = field(
        default=None, repr=False, compare=False
    )

    @property
    def is_scheduled(self) -> bool:
        return self._pending is not None

    def request(self, callback: FrameCallback) -> None:
        """Schedule *callback* for the next frame, replacing any pending one."""
        self._pending = callback

    def cancel(self) -> None:
        """Drop the pending callback.  Safe to call repeatedly."""
        self._pending = None

    def run_frame(self) -> bool:
        """Run the pending callback, if any.  Returns True if one ran."""
        callback = self._pending
        if callback is None:
            return False
        self._pending = None
        self.frames_run += 1
        callback()
        return True
