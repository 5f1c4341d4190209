"""
Polled timed events.

A TimedEvent becomes due a fixed number of seconds after it starts and may
repeat. JobEvent adds a function that runs whenever the event is handled, and
PriorityEvent adds an integer priority so events can be ordered against each
other.

These are polling primitives. Nothing here sleeps, runs a loop or keeps a
queue: an external driver repeatedly asks each event whether it should be
handled and calls handle() when it should. How punctual an event is depends
entirely on how often it is polled.
"""

from .clock import Clock, now
from .job import Job, JobEvent
from .priority import PriorityEvent
from .timed import TimedEvent
from .timer import Timer
