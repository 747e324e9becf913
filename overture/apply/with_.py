"""With combinator

Function application written in reading order."""

from __future__ import annotations

import typing
from collections.abc import Callable


class Applied[A](typing.Protocol):
    """A value waiting for the function to apply to it; keeps fn's return type."""

    def __call__[B](self, fn: Callable[[A], B], /) -> B: ...


def with_[A](value: A, /) -> Applied[A]:
    """
    with_(value)(f) == f(value).

    Trailing `_` because `with` is a keyword.

    Example:
        with_(" Ada ")(pipe(str.strip, str.upper))  # "ADA"
    """

    def apply[B](fn: Callable[[A], B], /) -> B:
        return fn(value)

    return apply

__all__ = ("Applied", "with_")
