"""Defines the PriorityEvent class."""

from .clock import Clock, now
from .job import Job, JobEvent


class PriorityEvent(JobEvent):
    """
    A JobEvent with an integer priority for ordering among other events.

    Priority says nothing about timing. A high-priority event that is not yet
    due is not more urgent than a low-priority one that is; the comparison
    answers "which should be preferred when both are ready". A scheduler that
    mixes priority with due-ness has to combine the two itself.

    Comparison is strict: events with equal priority do not have priority over
    each other, and no tie-break is supplied. A collection that needs a total
    order (e.g., a heap) must add its own secondary key, such as insertion
    order.

    Equality and hashing are left as identity so that events can be held by
    reference in external collections while their priority changes.
    """

    _priority: int

    def __init__(self,  # pylint: disable=too-many-arguments
                 job: Job, priority: int, repeated: bool, wait_time: float,
                 clock: Clock = now) -> None:
        """
        Create and start a PriorityEvent.

        Parameters:
            job: A function to call each time the event is handled
            priority: Larger values are preferred over smaller ones
            repeated: Whether the event re-arms each time it is handled
            wait_time: Seconds to wait before the event is due
            clock: Function returning the current monotonic time in seconds

        """
        self._priority = priority
        super().__init__(job=job, repeated=repeated, wait_time=wait_time,
                         clock=clock)

    @property
    def priority(self) -> int:
        """Get the priority of this event."""
        return self._priority

    @priority.setter
    def priority(self, priority: int) -> None:
        """Set the priority of this event."""
        self._priority = priority

    def has_priority(self, other: 'PriorityEvent') -> bool:
        """Determine whether this event has priority over another event."""
        return self._priority > other.priority

    def __gt__(self, other: object) -> bool:
        """Greater."""
        if not isinstance(other, PriorityEvent):
            return NotImplemented
        return self.has_priority(other)

    def __lt__(self, other: object) -> bool:
        """Less."""
        if not isinstance(other, PriorityEvent):
            return NotImplemented
        return other.has_priority(self)

    def __str__(self) -> str:
        """Return string representation of a PriorityEvent."""
        return f"{super().__str__()} priority={self._priority}"
