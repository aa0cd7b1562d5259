"""A discrete-event scheduler for simulations.

The scheduler keeps a simulated clock (`current_time`, a float), a
time-ordered queue of pending `Event` objects, and an append-only log of
executed events with their results. The run loop is synchronous: each event's
action runs to completion, and may schedule further events on the same
scheduler while it runs.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from .conditions import LogFilter, StopCondition, log_all, stop_at_max_time
from .event import Action, Event
from .event_queue import EventQueue

_logger = logging.getLogger(__name__)

LogEntry = Tuple[Event, Optional[str]]


class Scheduler:
    """Discrete-event scheduler over a floating point clock.

    Methods:
    - `schedule(event)`: queue a pre-built event at its own `time`.
    - `timeout(delay, action, context)`: queue a new event `delay` after now.
    - `step(log_filter)`: execute the next event and advance time.
    - `run(stop, log_filter)`: execute events until `stop` or the queue empties.
    - `run_until_max_time(max_time)`: run, leaving events at or after `max_time` queued.
    """

    def __init__(self, start_time: float = 0.0):
        if not isinstance(start_time, (int, float)):
            raise TypeError("start_time must be a number")
        self.current_time: float = float(start_time)
        self.event_queue: EventQueue = EventQueue()
        self.event_log: List[LogEntry] = []
        self._running: bool = False

    @property
    def now(self) -> float:
        return self.current_time

    @property
    def running(self) -> bool:
        """True while a `run` call is executing events."""
        return self._running

    def schedule(self, event: Event) -> Event:
        """Insert `event` into the queue at `event.time`.

        Times earlier than `current_time` are accepted; such an event is simply
        the next to run and moves the clock backwards when it does.
        """
        if event.time < self.current_time:
            _logger.debug("scheduling event at %s before current time %s", event.time, self.current_time)
        self.event_queue.push(event)
        return event

    def timeout(self, delay: float, action: Optional[Action] = None, context: Optional[Dict[str, str]] = None) -> Event:
        """Schedule a new event `delay` time units after `current_time`."""
        event = Event(self.current_time + delay, action, context)
        return self.schedule(event)

    def step(self, log_filter: Optional[LogFilter] = None) -> Optional[LogEntry]:
        """Execute the earliest pending event.

        Returns the executed event and its result, or None when the queue is
        empty. When `log_filter` accepts the pair, an action-free duplicate of
        the event is appended to `event_log`.
        """
        event = self.event_queue.pop()
        if event is None:
            return None
        if log_filter is None:
            log_filter = log_all

        self.current_time = event.time
        _logger.debug("executing event at %s (active=%s)", event.time, event.active)
        result = event.run(self)
        if log_filter(event, result):
            self.event_log.append((event.duplicate(), result))
        return event, result

    def run(self, stop: StopCondition, log_filter: Optional[LogFilter] = None) -> List[LogEntry]:
        """Run events until `stop(self)` is true or the queue is empty.

        Returns the whole accumulated log, including entries from earlier runs.
        Exceptions raised by actions propagate to the caller.
        """
        self._running = True
        executed = 0
        try:
            while not stop(self):
                if self.step(log_filter) is None:
                    break
                executed += 1
        finally:
            self._running = False
        _logger.debug("run finished at %s after %d event(s); %d pending", self.current_time, executed, len(self.event_queue))
        return list(self.event_log)

    def run_until_max_time(self, max_time: float) -> List[LogEntry]:
        """Run every event scheduled strictly before `max_time`."""
        return self.run(stop_at_max_time(max_time))

    def peek_events(self, limit: Optional[int] = None) -> List[Event]:
        """Look ahead at pending events in execution order without removing them."""
        result = []
        for event in self.event_queue:
            if limit is not None and len(result) >= limit:
                break
            result.append(event)
        return result
