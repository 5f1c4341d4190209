"""Defines the TimedEvent class."""

import logging

from .clock import Clock, now
from .timer import Timer

LOGGER = logging.getLogger(__name__)


class TimedEvent:
    """
    TimedEvent is something that becomes due a fixed time after it starts.

    The event is started when it is created. Once wait_time seconds have
    passed, it is due and should be handled. An external driver is expected to
    poll the event and call handle():

        if event.handle():
            # do stuff

    A non-repeating event can be handled exactly once. After that it stays
    handled forever. A repeating event is never handled; instead, each
    successful handle() restarts its timer so that it becomes due again
    wait_time seconds later. The restart is measured from the moment of
    handling, not from when the event became due, so lateness is not carried
    into the next cycle. If the event is polled less often than wait_time, it
    simply fires fewer times.

    Nothing here is thread-safe. Concurrent handle() calls on one instance
    must be serialized by the caller.
    """

    _timer: Timer
    _handled: bool
    _repeated: bool
    _wait_time: float

    def __init__(self, repeated: bool, wait_time: float,
                 clock: Clock = now) -> None:
        """
        Create and start a TimedEvent.

        Parameters:
            repeated: Whether the event re-arms each time it is handled
            wait_time: Seconds to wait before the event is due
            clock: Function returning the current monotonic time in seconds

        """
        self._handled = False
        self._repeated = repeated
        self._wait_time = wait_time
        self._timer = Timer(clock)
        self._timer.start()

    @property
    def repeated(self) -> bool:
        """Get whether this event repeats."""
        return self._repeated

    @property
    def wait_time(self) -> float:
        """Get the seconds between (re)start and the event being due."""
        return self._wait_time

    def lateness(self) -> float:
        """
        Get the number of seconds since the event became due.

        The result is negative while the event is not yet due.
        """
        return (self._timer.now() - self._timer.start_time) - self._wait_time

    def is_due(self) -> bool:
        """Determine whether the wait time has elapsed."""
        return self.lateness() >= 0

    def is_handled(self) -> bool:
        """Determine whether this (non-repeating) event was handled."""
        return self._handled

    def should_handle(self) -> bool:
        """Determine whether the event is due and not yet handled."""
        return not self._handled and self.is_due()

    def handle(self) -> bool:
        """
        Handle the event if it should be handled.

        Returns:
            True if the event was due and has now been handled (or re-armed,
            for a repeating event). False if there was nothing to do.

        """
        if not self.should_handle():
            return False
        LOGGER.debug("handle: %s", self)
        if self._repeated:
            self._timer.start()
            LOGGER.debug("rearm: %s", self)
        else:
            self._handled = True
        return True

    def __str__(self) -> str:
        """Return string representation of a TimedEvent."""
        kind = "repeated" if self._repeated else "once"
        return f"{type(self).__name__}({kind}, wait={self._wait_time})"
