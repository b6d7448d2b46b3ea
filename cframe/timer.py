"""Frame timer measured in whole milliseconds."""

from __future__ import annotations

import time
from typing import Callable, Optional

_UINT32 = 0xFFFFFFFF
_EPOCH = time.monotonic()


def _default_clock() -> int:
    return int((time.monotonic() - _EPOCH) * 1000.0)


class Timer:
    """Tracks frame ticks in milliseconds.

    ``clock`` returns the milliseconds since program start; tick arithmetic
    wraps at 32 bits.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        self._clock = clock or _default_clock
        self._prev_ticks = 0
        self._current_ticks = 0

    def _ticks(self) -> int:
        return int(self._clock()) & _UINT32

    def start(self) -> None:
        """Reset both tick marks to now."""
        self._prev_ticks = self._ticks()
        self._current_ticks = self._ticks()

    def update_frame_ticks(self) -> None:
        """Move to the next frame."""
        self._prev_ticks = self._current_ticks
        self._current_ticks = self._ticks()

    def delta_time(self) -> float:
        """Seconds between the last two frames."""
        return ((self._current_ticks - self._prev_ticks) & _UINT32) / 1000.0

    def sleep_time(self, fps: int) -> int:
        """Milliseconds to sleep for a frame rate of ``fps``, never more than one frame."""
        ms_per_frame = 1000 // fps
        if ms_per_frame == 0:
            return 0
        sleep = (ms_per_frame - self._ticks()) & _UINT32
        if sleep > ms_per_frame:
            return ms_per_frame
        return sleep

    def current_ticks(self) -> float:
        """Time of the current frame in seconds."""
        return self._current_ticks / 1000.0