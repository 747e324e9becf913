"""Fold combinators

Left fold as a standalone operator."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .._types import Reducer

def reduce[A, T](fn: Reducer[A, T], initial: A, /) -> Callable[[Iterable[T]], A]:
    """
    Fold left to right starting from initial.

    Example:
        total = reduce(operator.add, 0)
        total([1, 2, 3])  # 6
        total([])         # 0
    """

    def reduced(items: Iterable[T], /) -> A:
        acc = initial
        for item in items:
            acc = fn(acc, item)
        return acc

    return reduced

__all__ = ("reduce",)
