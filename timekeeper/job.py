"""Defines the JobEvent class."""

import logging
from typing import Callable, List  # pylint: disable=unused-import

from .clock import Clock, now
from .timed import TimedEvent

LOGGER = logging.getLogger(__name__)

Job = Callable[[], None]


class JobEvent(TimedEvent):
    """A TimedEvent that runs a job each time it is handled."""

    # The job is embedded in a single element list so mypy accepts assignment
    # to it and it is never treated as a method receiving self.
    _job: 'List[Job]'

    def __init__(self, job: Job, repeated: bool, wait_time: float,
                 clock: Clock = now) -> None:
        """
        Create and start a JobEvent.

        Parameters:
            job: A function to call each time the event is handled
            repeated: Whether the event re-arms each time it is handled
            wait_time: Seconds to wait before the event is due
            clock: Function returning the current monotonic time in seconds

        """
        self._job = [job]
        super().__init__(repeated=repeated, wait_time=wait_time, clock=clock)

    @property
    def job(self) -> Job:
        """Get the job run when this event is handled."""
        return self._job[0]

    @job.setter
    def job(self, job: Job) -> None:
        """Replace the job run when this event is handled."""
        self._job = [job]

    def handle(self) -> bool:
        """
        Handle the event, running the job if it was due.

        The job runs synchronously, after the event's state has been updated.
        Any exception raised by the job propagates to the caller; the event
        remains handled (or re-armed) regardless.

        Returns:
            True if the event was handled and the job was run.

        """
        if not super().handle():
            return False
        LOGGER.debug("execute: %s", self)
        self._job[0]()
        return True
