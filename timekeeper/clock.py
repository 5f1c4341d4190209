"""Defines the clock used by timers and events."""

import time
from typing import Callable

# A clock is any function returning monotonic seconds. Only the difference
# between two readings is meaningful.
Clock = Callable[[], float]


def now() -> float:
    """Get the current monotonic time in seconds."""
    return time.monotonic()
