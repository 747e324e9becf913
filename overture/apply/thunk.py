"""
Thunk combinators
=================

zurry   - run a zero-argument function now
unzurry - defer an already computed value behind a zero-argument function
lazy    - run a thunk at most once, on first call
"""

from __future__ import annotations

import threading

from .._types import Thunk


def zurry[T](thunk: Thunk[T], /) -> T:
    """Invoke thunk immediately and return its result."""
    return thunk()


def unzurry[T](value: T, /) -> Thunk[T]:
    """
    Wrap value in a thunk that returns it when invoked.

    Nothing happens at wrap time; zurry(unzurry(v)) is v.
    """

    def thunk() -> T:
        return value

    return thunk


def lazy[T](thunk: Thunk[T], /) -> Thunk[T]:
    """
    Memoize a thunk: the first call runs it, later calls return the cached value.

    Safe to call from several threads: the first run happens under a lock,
    so thunk runs exactly once even when the first calls race.
    If thunk raises, nothing is cached and the next call retries.
    """
    lock = threading.Lock()
    cell: list[T] = []

    def cached() -> T:
        if not cell:
            with lock:
                # NOTE: повторная проверка под локом, другой поток мог успеть первым
                if not cell:
                    cell.append(thunk())
        return cell[0]

    return cached


__all__ = ("zurry", "unzurry", "lazy")
