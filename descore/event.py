"""Event object stored in the scheduler queue.

An Event carries a scheduled `time`, an `action` callable that receives the
running `Scheduler` (so it can schedule further events), a string-to-string
`context` for caller metadata, and an `active` flag. Events compare by
`time` only.
"""
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .scheduler import Scheduler


Action = Callable[["Scheduler"], Optional[str]]


def noop_action(scheduler: "Scheduler") -> Optional[str]:
    """Action used when none is supplied and for duplicated events."""
    return None


@dataclass(eq=False)
class Event:
    time: float
    action: Optional[Action] = field(default=None, repr=False)
    context: Dict[str, str] = field(default_factory=dict)
    active: bool = True

    def __post_init__(self) -> None:
        if self.action is None:
            self.action = noop_action
        if self.context is None:
            self.context = {}

    def run(self, scheduler: "Scheduler") -> Optional[str]:
        """Execute the action against `scheduler` if the event is active.

        Inactive events return None without calling the action.
        """
        if not self.active:
            return None
        return self.action(scheduler)

    def activate(self) -> None:
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def duplicate(self) -> "Event":
        """Return a copy with the same time, active flag and context.

        The action is not carried over: the copy runs `noop_action`, so a
        logged event never holds live behavior.
        """
        return Event(
            time=self.time,
            action=noop_action,
            context=copy.deepcopy(self.context),
            active=self.active,
        )

    def __copy__(self) -> "Event":
        return self.duplicate()

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Event":
        return self.duplicate()

    # Ordering is by time only; the queue adds its own tie-breaker.
    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.time == other.time

    def __lt__(self, other: "Event") -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.time < other.time

    def __le__(self, other: "Event") -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.time <= other.time

    def __gt__(self, other: "Event") -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.time > other.time

    def __ge__(self, other: "Event") -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.time >= other.time

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:  # pragma: no cover - trivial
        parts = [f"time={self.time!r}", f"active={self.active!r}"]
        if self.context:
            parts.append(f"context={self.context!r}")
        return f"Event({', '.join(parts)})"
