"""Car simulation: a car alternately parks and drives.

Two renditions of the same model built on `descore.Scheduler`:

- function style: `car`, `park` and `drive` schedule each other through
  `Scheduler.timeout`, and each returns its state name as the event result.
- object style: `Car` keeps its scheduler and durations and records the
  states it visits in `history`.

With the default durations (park 5, drive 2), running until t=15 visits
park@0, drive@5, park@7, drive@12, park@14.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from descore.event import Event
from descore.scheduler import Scheduler

_logger = logging.getLogger(__name__)

MAX_TIME = 15.0
PARK_DURATION = 5.0
DRIVE_DURATION = 2.0


def park(scheduler: Scheduler) -> Optional[str]:
    _logger.info("Start parking at %s", scheduler.current_time)
    scheduler.timeout(PARK_DURATION, drive, {"state": "drive"})
    return "park"


def drive(scheduler: Scheduler) -> Optional[str]:
    _logger.info("Start driving at %s", scheduler.current_time)
    scheduler.timeout(DRIVE_DURATION, park, {"state": "park"})
    return "drive"


def car(scheduler: Scheduler) -> Event:
    """Start the car by scheduling an immediate park."""
    return scheduler.timeout(0.0, park, {"state": "park"})


class Car:
    """Object-style car that charges while parked.

    Usage example:
        scheduler = Scheduler()
        car = Car(scheduler)
        scheduler.run_until_max_time(15)
        car.history  # [(0.0, "charge"), (5.0, "drive"), ...]
    """

    def __init__(self, scheduler: Scheduler, charge_duration: float = PARK_DURATION, trip_duration: float = DRIVE_DURATION, name: str = "car"):
        self.scheduler = scheduler
        self.charge_duration = charge_duration
        self.trip_duration = trip_duration
        self.name = name
        self.history: List[Tuple[float, str]] = []
        self.start()

    def _record(self, state: str) -> str:
        self.history.append((self.scheduler.current_time, state))
        _logger.info("%s: %s at %s", self.name, state, self.scheduler.current_time)
        return state

    def start(self) -> Event:
        return self.scheduler.timeout(0.0, lambda _s: self.charge(), {"car": self.name})

    def charge(self) -> str:
        self.scheduler.timeout(self.charge_duration, lambda _s: self.drive(), {"car": self.name})
        return self._record("charge")

    def drive(self) -> str:
        self.scheduler.timeout(self.trip_duration, lambda _s: self.charge(), {"car": self.name})
        return self._record("drive")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    scheduler = Scheduler()
    car(scheduler)
    for event, result in scheduler.run_until_max_time(MAX_TIME):
        print(f"t={event.time:g}: {result}")


if __name__ == "__main__":
    main()
