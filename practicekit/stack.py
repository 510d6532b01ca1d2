"""Two stacks: one of callables, and one that cycles through its items."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

_NIL = "<nil>"


def _describe(func: Callable[..., Any] | None) -> str:
    if func is None:
        return _NIL
    return getattr(func, "__qualname__", None) or repr(func)


class FuncStack:
    """A stack of callables whose first entry is its base and is never popped."""

    def __init__(self) -> None:
        self._funcs: list[Callable[..., Any]] = []

    def __len__(self) -> int:
        return len(self._funcs)

    def push(self, func: Callable[..., Any]) -> None:
        """Put ``func`` on top of the stack."""
        if not callable(func):
            raise TypeError(f"expected a callable, got {func!r}")
        self._funcs.append(func)

    def pop(self) -> Callable[..., Any]:
        """Remove and return the top callable; the base cannot be removed."""
        if len(self._funcs) < 2:
            raise IndexError("pop would remove the base of the stack")
        return self._funcs.pop()

    def listing(self) -> str:
        """Describe every entry with its neighbours, bottom first."""
        funcs: list[Callable[..., Any] | None] = list(self._funcs) or [None]
        lines = []
        for position, func in enumerate(funcs):
            prev = funcs[position - 1] if position > 0 else None
            nxt = funcs[position + 1] if position + 1 < len(funcs) else None
            lines.append(
                f"Prev: {_describe(prev)}, Actual: {_describe(func)}, Next: {_describe(nxt)}"
            )
        return " \n".join(lines)


@dataclass
class _Entry:
    data: Any = None
    consumed: bool = False

    def __str__(self) -> str:
        data = _NIL if self.data is None else self.data
        return f"{data} {'true' if self.consumed else 'false'}"


class ConsumingStack:
    """A stack whose items are marked consumed instead of removed.

    Popping returns the topmost unconsumed item and marks it consumed,
    while the item above it becomes available again, so repeated pops
    cycle through the stack.
    """

    def __init__(self) -> None:
        self._entries: list[_Entry] = [_Entry()]

    def push(self, data: Any) -> None:
        """Put ``data`` on top; the first push fills the empty base."""
        if self._entries[0].data is None:
            self._entries[0].data = data
        else:
            self._entries.append(_Entry(data))

    def _top_available(self) -> int:
        position = 0
        while position + 1 < len(self._entries) and not self._entries[position + 1].consumed:
            position += 1
        return position

    def pop(self) -> Any:
        """Consume and return the topmost available item (None when empty)."""
        position = self._top_available()
        self._entries[position].consumed = True
        if position + 1 < len(self._entries):
            self._entries[position + 1].consumed = False
        return self._entries[position].data

    def listing(self) -> str:
        """Describe the available entries with their neighbours, bottom first."""
        last = self._top_available()
        lines = []
        for position in range(last + 1):
            entry = self._entries[position]
            prev = str(self._entries[position - 1]) if position > 0 else _NIL
            nxt = (
                str(self._entries[position + 1])
                if position + 1 < len(self._entries)
                else _NIL
            )
            data = _NIL if entry.data is None else entry.data
            lines.append(f"Prev: {prev}, Actual: {data}, Next: {nxt}")
        return " \n".join(lines)