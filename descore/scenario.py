"""Load simulation scenarios from YAML and seed a scheduler with them.

A scenario file looks like::

    name: car
    max_time: 15
    events:
      - time: 0
        result: parked
        repeat: 7
        context:
          vehicle: car-1
      - delay: 5
        result: inspection
        active: false

Each entry needs exactly one of `time` (absolute) or `delay` (relative to the
scheduler's clock when the scenario is populated). The generated action
returns `result` and, when `repeat` is given, schedules the same entry again
`repeat` time units later.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .conditions import LogFilter, stop_at_max_time, stop_never
from .event import Action, Event
from .scheduler import LogEntry, Scheduler

_logger = logging.getLogger(__name__)

_EVENT_KEYS = {"time", "delay", "result", "repeat", "active", "context"}


def _number(value: Any, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{key}' must be a number, got {value!r}")
    return float(value)


@dataclass
class EventSpec:
    """One scheduled entry of a scenario."""

    time: Optional[float] = None
    delay: Optional[float] = None
    result: Optional[str] = None
    repeat: Optional[float] = None
    active: bool = True
    context: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, entry: Dict[str, Any]) -> "EventSpec":
        if not isinstance(entry, dict):
            raise ValueError(f"event entry must be a mapping, got {entry!r}")
        unknown = set(entry) - _EVENT_KEYS
        if unknown:
            raise ValueError(f"unknown event keys: {', '.join(sorted(unknown))}")
        if ("time" in entry) == ("delay" in entry):
            raise ValueError("event entry needs exactly one of 'time' or 'delay'")

        time = _number(entry["time"], "time") if "time" in entry else None
        delay = _number(entry["delay"], "delay") if "delay" in entry else None

        repeat = None
        if entry.get("repeat") is not None:
            repeat = _number(entry["repeat"], "repeat")
            if repeat <= 0:
                raise ValueError("'repeat' must be > 0")

        active = entry.get("active", True)
        if not isinstance(active, bool):
            raise ValueError("'active' must be true or false")

        context = entry.get("context", {}) or {}
        if not isinstance(context, dict):
            raise ValueError("'context' must be a mapping")

        result = entry.get("result")
        return cls(
            time=time,
            delay=delay,
            result=None if result is None else str(result),
            repeat=repeat,
            active=active,
            context={str(k): str(v) for k, v in context.items()},
        )

    def build_action(self) -> Action:
        """Return an action that yields `result` and reschedules itself if repeating."""
        def _action(scheduler: Scheduler) -> Optional[str]:
            if self.repeat is not None:
                scheduler.timeout(self.repeat, _action, dict(self.context))
            return self.result

        return _action

    def to_event(self, scheduler: Scheduler) -> Event:
        time = self.time if self.time is not None else scheduler.current_time + self.delay
        return Event(time, self.build_action(), dict(self.context), active=self.active)


@dataclass
class Scenario:
    name: str = "scenario"
    max_time: Optional[float] = None
    events: List[EventSpec] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Scenario":
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise TypeError("scenario must be a mapping at the top level")

        max_time = data.get("max_time")
        if max_time is not None:
            max_time = _number(max_time, "max_time")

        entries = data.get("events", []) or []
        if not isinstance(entries, list):
            raise ValueError("'events' must be a list")

        return cls(
            name=str(data.get("name") or "scenario"),
            max_time=max_time,
            events=[EventSpec.from_dict(entry) for entry in entries],
        )

    @classmethod
    def from_yaml(cls, filepath: Union[str, Path]) -> "Scenario":
        """Load a scenario from a YAML file.

        Raises:
            FileNotFoundError: If `filepath` does not exist.
            ValueError: If an event entry is malformed.
        """
        p = Path(filepath)
        if not p.is_file():
            raise FileNotFoundError(f"Scenario YAML path not found: {filepath}")
        with open(p, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
        scenario = cls.from_dict(data)
        _logger.debug("loaded scenario %r with %d event(s) from %s", scenario.name, len(scenario.events), p)
        return scenario

    def populate(self, scheduler: Scheduler) -> List[Event]:
        """Schedule every entry on `scheduler` and return the created events."""
        return [scheduler.schedule(spec.to_event(scheduler)) for spec in self.events]

    def run(self, scheduler: Optional[Scheduler] = None, log_filter: Optional[LogFilter] = None) -> List[LogEntry]:
        """Populate `scheduler` (a fresh one by default) and run it.

        Runs until `max_time` when set, otherwise until the queue is empty.

        Raises:
            ValueError: If an entry repeats and `max_time` is not set.
        """
        if self.max_time is None and any(spec.repeat is not None for spec in self.events):
            raise ValueError("scenario with repeating events needs 'max_time'")
        if scheduler is None:
            scheduler = Scheduler()
        self.populate(scheduler)
        stop = stop_at_max_time(self.max_time) if self.max_time is not None else stop_never
        return scheduler.run(stop, log_filter)
