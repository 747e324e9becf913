"""
Zip combinators
===============

Комбинаторы для zip с extract + wrap паттерном.

Inputs are already computed, so every input is inspected in argument order
and the first failure decides the outcome: no aggregation of failures.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, Ok, Result

from ..arity import check_arity, spread
from ..composition.pipe import pipe


def zipM[M, T, E, Raw](
    *values: Raw,
    extract: Callable[[Raw], Result[T, E]],
    wrap_ok: Callable[[tuple[T, ...]], M],
    wrap_err: Callable[[E], M],
) -> M:
    """
    Generic zip combinator.

    Combine 2..10 raw values into one: wrap_ok(tuple) if every value
    extracts to Ok, otherwise wrap_err applied to the first Error payload.
    """
    check_arity(len(values), what="zip inputs", low=2)

    collected: list[T] = []
    for raw in values:
        match extract(raw):
            case Ok(v):
                collected.append(v)
            case Error(e):
                return wrap_err(e)

    return wrap_ok(tuple(collected))


def zip_withM[M, T, E, Raw, R](
    fn: Callable[..., R],
    *values: Raw,
    extract: Callable[[Raw], Result[T, E]],
    wrap_ok: Callable[[R], M],
    wrap_err: Callable[[E], M],
) -> M:
    """
    Generic zip_with combinator.

    zipM followed by fn(*values); fn is never called when any input failed.
    """
    return zipM(
        *values,
        extract=extract,
        wrap_ok=pipe(spread(fn), wrap_ok),
        wrap_err=wrap_err,
    )


__all__ = ("zipM", "zip_withM")
