"""Defines the Timer class."""

from typing import List  # pylint: disable=unused-import

from .clock import Clock, now


class Timer:
    """
    Timer measures the seconds between a start() and a later stop().

    The elapsed time reported by time_passed() is only meaningful once stop()
    has been called after the most recent start(). Querying it at any other
    point returns whatever the stale timestamps produce (possibly a negative
    number); this is not treated as an error.

    Timers are not thread-safe.
    """

    # The clock is kept in a single element list so it isn't bound as a
    # method when read back through self.
    _clock: 'List[Clock]'
    _start_time: float
    _end_time: float

    def __init__(self, clock: Clock = now) -> None:
        """
        Create a Timer that has neither been started nor stopped.

        Parameters:
            clock: Function returning the current monotonic time in seconds

        """
        self._clock = [clock]
        self._start_time = 0.0
        self._end_time = 0.0

    def start(self) -> None:
        """Record the current time as the start time."""
        self._start_time = self._clock[0]()

    def stop(self) -> None:
        """Record the current time as the end time."""
        self._end_time = self._clock[0]()

    def time_passed(self) -> float:
        """Get the seconds between the last start() and stop()."""
        return self._end_time - self._start_time

    def now(self) -> float:
        """Read this timer's clock."""
        return self._clock[0]()

    @property
    def start_time(self) -> float:
        """Get the time recorded by the last start()."""
        return self._start_time

    @property
    def end_time(self) -> float:
        """Get the time recorded by the last stop()."""
        return self._end_time
