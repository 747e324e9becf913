"""Slicing combinators

take    - first n elements
skip    - everything after the first n elements
chunk   - consecutive non-overlapping groups of size n (last one may be short)
window  - sliding groups of exactly n, step 1

Counts are checked when the operator is built, like arity checks.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable


def _check_count(n: int, *, what: str, low: int) -> int:
    if n < low:
        raise ValueError(f"{what}: got {n}, expected >= {low}")
    return n


def take[A](n: int, /) -> Callable[[Iterable[A]], list[A]]:
    """First n elements (all of them if there are fewer). Stops consuming after n."""
    _check_count(n, what="take count", low=0)

    def taken(items: Iterable[A], /) -> list[A]:
        return list(itertools.islice(items, n))

    return taken


def skip[A](n: int, /) -> Callable[[Iterable[A]], list[A]]:
    """Elements after the first n (empty if there are fewer)."""
    _check_count(n, what="skip count", low=0)

    def skipped(items: Iterable[A], /) -> list[A]:
        return list(itertools.islice(items, n, None))

    return skipped


def chunk[A](size: int, /) -> Callable[[Iterable[A]], list[list[A]]]:
    """
    Split into groups of size, in order. The last group holds the remainder.

    Example:
        chunk(2)([1, 2, 3, 4, 5])  # [[1, 2], [3, 4], [5]]
    """
    _check_count(size, what="chunk size", low=1)

    def chunked(items: Iterable[A], /) -> list[list[A]]:
        it = iter(items)
        groups: list[list[A]] = []
        while group := list(itertools.islice(it, size)):
            groups.append(group)
        return groups

    return chunked


def window[A](size: int, /) -> Callable[[Iterable[A]], list[list[A]]]:
    """
    Every run of size consecutive elements, step 1.

    Fewer than size elements gives no windows at all.

    Example:
        window(2)([1, 2, 3])  # [[1, 2], [2, 3]]
    """
    _check_count(size, what="window size", low=1)

    def windowed(items: Iterable[A], /) -> list[list[A]]:
        values = list(items)
        return [values[i : i + size] for i in range(len(values) - size + 1)]

    return windowed


__all__ = ("take", "skip", "chunk", "window")
