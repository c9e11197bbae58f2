"""Non-blocking millisecond timer."""

import time

_MASK = 0xFFFFFFFF


def _millis():
    return int(time.monotonic() * 1000)


class IoTTimer:
    """Reports when a set number of milliseconds has passed.

    ``clock`` returns the current time in milliseconds; the elapsed time is
    computed in 32-bit unsigned arithmetic, so a clock wrap is harmless.
    """

    def __init__(self, clock=None):
        self._clock = clock or _millis
        self._start = 0
        self._target = 0

    def start_timer(self, msec):
        self._start = self._clock() & _MASK
        self._target = msec & _MASK

    def is_timer_ready(self):
        elapsed = ((self._clock() & _MASK) - self._start) & _MASK
        return elapsed >= self._target