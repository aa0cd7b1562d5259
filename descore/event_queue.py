"""Min-time-first priority queue of pending events."""
from __future__ import annotations

from heapq import heappush, heappop
from typing import Iterator, List, Optional, Tuple

from .event import Event


class EventQueue:
    """Binary heap keyed on `(event.time, insertion counter)`.

    The counter keeps events that share a time in insertion order.
    """

    def __init__(self):
        self._queue: List[Tuple[float, int, Event]] = []
        self._counter: int = 0

    def push(self, event: Event) -> None:
        heappush(self._queue, (event.time, self._counter, event))
        self._counter += 1

    def pop(self) -> Optional[Event]:
        if not self._queue:
            return None
        return heappop(self._queue)[2]

    def peek(self) -> Optional[Event]:
        return self._queue[0][2] if self._queue else None

    def clear(self) -> None:
        self._queue.clear()

    def __len__(self) -> int:
        return len(self._queue)

    def __bool__(self) -> bool:
        return bool(self._queue)

    def __iter__(self) -> Iterator[Event]:
        """Iterate pending events in execution order without removing them."""
        for _time, _idx, event in sorted(self._queue, key=lambda item: (item[0], item[1])):
            yield event
