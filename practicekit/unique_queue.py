"""A first-in first-out queue that refuses values it already holds, and a SQL text builder."""

from __future__ import annotations

import io
from collections import deque
from dataclasses import dataclass, field
from typing import TextIO


class UniqueQueue:
    """A queue of strings in which no value appears twice at once."""

    def __init__(self) -> None:
        self._items: deque[str] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def add(self, value: str) -> None:
        """Append ``value`` unless the queue already holds it."""
        if value not in self._items:
            self._items.append(value)

    def get(self) -> str:
        """Remove and return the oldest value, or '' when the queue is empty."""
        return self._items.popleft() if self._items else ""

    def drain_into(self, parts: TextIO) -> None:
        """Write every value to ``parts`` in order, then ';', emptying the queue."""
        while self._items:
            parts.write(self._items.popleft())
        parts.write(";")


@dataclass
class SqlBuilder:
    """Collects queued fragments into a single statement."""

    queue: UniqueQueue = field(default_factory=UniqueQueue)
    sql: io.StringIO = field(default_factory=io.StringIO)

    def build_sql(self) -> str:
        """Drain the queue into the statement and return the statement so far."""
        self.queue.drain_into(self.sql)
        return self.sql.getvalue()