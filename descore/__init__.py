"""descore package entry point"""
import logging

from .event import Event, noop_action
from .event_queue import EventQueue
from .scheduler import Scheduler
from .conditions import (
    stop_at_max_time,
    stop_never,
    stop_any,
    log_all,
    log_active_only,
    log_results_only,
)
from .scenario import Scenario, EventSpec

__all__ = [
    "Event",
    "EventQueue",
    "Scheduler",
    "Scenario",
    "EventSpec",
    "noop_action",
    "stop_at_max_time",
    "stop_never",
    "stop_any",
    "log_all",
    "log_active_only",
    "log_results_only",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
