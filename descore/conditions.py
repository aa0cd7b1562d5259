"""Stop conditions and log filters for `Scheduler.run`.

A stop condition is a callable taking the scheduler and returning True when
the run loop should halt. A log filter takes an executed event and its
result and returns True when the pair should be recorded.
"""
from __future__ import annotations

from typing import Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .event import Event
    from .scheduler import Scheduler


StopCondition = Callable[["Scheduler"], bool]
LogFilter = Callable[["Event", Optional[str]], bool]


def stop_at_max_time(max_time: float) -> StopCondition:
    """Build a stop condition that halts before reaching `max_time`.

    The condition is true once the clock has reached `max_time`, when nothing
    is queued, or when the next queued event is at or after `max_time`.
    """
    def _stop(scheduler: "Scheduler") -> bool:
        if scheduler.current_time >= max_time:
            return True
        upcoming = scheduler.event_queue.peek()
        return upcoming is None or upcoming.time >= max_time

    return _stop


def stop_never(scheduler: "Scheduler") -> bool:
    """Never stop; the loop ends only when the queue is empty."""
    return False


def stop_any(*conditions: StopCondition) -> StopCondition:
    def _stop(scheduler: "Scheduler") -> bool:
        return any(cond(scheduler) for cond in conditions)

    return _stop


def log_all(event: "Event", result: Optional[str]) -> bool:
    return True


def log_active_only(event: "Event", result: Optional[str]) -> bool:
    return event.active


def log_results_only(event: "Event", result: Optional[str]) -> bool:
    return result is not None
