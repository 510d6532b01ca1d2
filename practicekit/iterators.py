"""Three ways of filtering a sequence: a stepping iterator, a generator and a list."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class SliceIterator(Generic[T]):
    """A cursor over ``values``.

    :meth:`advance` moves the cursor before reporting whether it is still in
    range, so a loop driven by it starts at the second element.
    """

    values: Sequence[T]
    index: int = 0

    def advance(self) -> bool:
        """Step to the next element; return whether one is there."""
        self.index += 1
        return self.index < len(self.values)

    def filter_current(self, predicate: Callable[[T], bool]) -> T | None:
        """Return the current element if it satisfies ``predicate``, else None."""
        value = self.values[self.index]
        return value if predicate(value) else None


def filter_yield(values: Iterable[T], predicate: Callable[[T], bool]) -> Iterator[T]:
    """Lazily yield the elements of ``values`` that satisfy ``predicate``."""
    for value in values:
        if predicate(value):
            yield value


def filter_slice(values: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """Return a list of the elements of ``values`` that satisfy ``predicate``."""
    return [value for value in values if predicate(value)]