"""Concat combinators

Composition of any number of endo-functions (A -> A).
No arity ceiling: the stages are homogeneous, so there is nothing to
check at build time besides the count itself."""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, Ok, Result

from .._types import Endo

def concat[A](*fns: Endo[A]) -> Endo[A]:
    """
    Forward composition of endo-functions. No functions = identity.

    Example:
        normalize = concat(str.strip, str.lower)
        normalize("  Hello ")  # "hello"
    """

    def concatenated(value: A, /) -> A:
        for fn in fns:
            value = fn(value)
        return value

    return concatenated

def concat_throwing[A, E](*fns: Callable[[A], Result[A, E]]) -> Callable[[A], Result[A, E]]:
    """Forward composition of fallible endo-functions. No functions = Ok."""

    def concatenated(value: A, /) -> Result[A, E]:
        for fn in fns:
            match fn(value):
                case Ok(v):
                    value = v
                case Error(e):
                    return Error(e)
        return Ok(value)

    return concatenated

__all__ = ("concat", "concat_throwing")
