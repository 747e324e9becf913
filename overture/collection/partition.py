"""Partition combinators

Split a sequence in two by a predicate."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .._types import Predicate

def partition[A](predicate: Predicate[A], /) -> Callable[[Iterable[A]], tuple[list[A], list[A]]]:
    """
    (matching, rest), relative order preserved in both.

    Example:
        evens, odds = partition(lambda n: n % 2 == 0)([1, 2, 3, 4])
        # [2, 4], [1, 3]
    """

    def partitioned(items: Iterable[A], /) -> tuple[list[A], list[A]]:
        matching: list[A] = []
        rest: list[A] = []
        for item in items:
            (matching if predicate(item) else rest).append(item)
        return matching, rest

    return partitioned

__all__ = ("partition",)
