"""Binary, linear and two-worker linear searches over sorted integer lists."""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Return the index of ``target`` in ascending ``values``, or None.

    Each step compares only the middle of the current window; the search
    gives up once the window's middle sits at offset 1, so it may miss
    values that lie beside the final probe.
    """
    lo, hi = 0, len(values)
    if hi == 0:
        return None
    while True:
        size = hi - lo
        mid = size // 2
        index = lo + mid
        if values[index] == target:
            return index
        if mid <= 1:
            return None
        if target > values[index]:
            lo = index
        else:
            hi = index


def linear_search(values: Sequence[int], target: int) -> int | None:
    """Return the index of the first element equal to ``target``, or None."""
    return next((i for i, value in enumerate(values) if value == target), None)


def _scan(values: Sequence[int], target: int, offset: int) -> int | None:
    found = linear_search(values, target)
    return None if found is None else found + offset


def concurrent_linear_search(values: Sequence[int], target: int) -> int | None:
    """Search both halves of ``values`` in parallel; return the first match found."""
    mid = len(values) // 2
    with ThreadPoolExecutor(max_workers=2) as pool:
        futures = [
            pool.submit(_scan, values[:mid], target, 0),
            pool.submit(_scan, values[mid:], target, mid),
        ]
        for future in as_completed(futures):
            result = future.result()
            if result is not None:
                return result
    return None