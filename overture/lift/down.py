"""
Опускание Result / Option в значение.
"""

from __future__ import annotations

from kungfu import Error, Nothing, Ok, Option, Result, Some


def to_optional[T, E](result: Result[T, E], /) -> Option[T]:
    """Convert Result to Option, dropping the error."""
    match result:
        case Ok(v):
            return Some(v)
        case Error(_):
            return Nothing()


def or_else[T, E](value: Result[T, E] | Option[T], default: T) -> T:
    """
    Contained value of an Ok / Some, or default.

    **When to use:** At the end of a pipeline, when a fallback value is
    preferable to handling the failure case.
    """
    match value:
        case Nothing() | Error(_):
            return default
        case _:
            return value.unwrap()


__all__ = ("to_optional", "or_else")
