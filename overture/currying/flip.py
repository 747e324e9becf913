"""Flip combinator

Swap the first two argument positions of a function."""

from __future__ import annotations

import typing
from collections.abc import Callable

def flip(
    fn: Callable[..., typing.Any],
    *,
    curried: bool = False,
) -> Callable[..., typing.Any]:
    """
    Swap the first two argument positions; later positions are untouched.

    Direct functions (default):
        flip(f)(b, a, *rest) == f(a, b, *rest)
        flip(f)(b)(a, *rest) == f(a, b, *rest)   # b first, rest later

    Curried chains (curried=True):
        flip(f, curried=True)(b)(a) == f(a)(b)

    Nothing runs until the original first argument is supplied.
    """
    if curried:

        def flipped_curried(b: typing.Any, /) -> Callable[[typing.Any], typing.Any]:
            def with_first(a: typing.Any, /) -> typing.Any:
                return fn(a)(b)

            return with_first

        return flipped_curried

    def flipped(b: typing.Any, /, *args: typing.Any) -> typing.Any:
        if args:
            a, *rest = args
            return fn(a, b, *rest)

        def with_first(a: typing.Any, /, *rest: typing.Any) -> typing.Any:
            return fn(a, b, *rest)

        return with_first

    return flipped

__all__ = ("flip",)
