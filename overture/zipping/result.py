"""
Zip for Result
==============

Combine 2..10 Result values: Ok(...) only if every input succeeded.
Otherwise the first Error in argument order is returned unchanged and the
rest are discarded (first failure wins, failures are not aggregated).
All inputs share one error type.

Also here: sequence, and point-free map / flat_map / map_error for pipe.

    from overture import result as R

    R.zip(Ok(1), Ok("a"))                 # Ok((1, "a"))
    R.zip(Error("e1"), Error("e2"))       # Error("e1")

    parse_age = pipe(R.map(str.strip), R.flat_map(parse_int), R.map_error(str))
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from kungfu import Error, Ok, Result

from .._helpers import extract_result
from .base import zipM, zip_withM


# ============================================================================
# Variadic
# ============================================================================


def zip[E](*results: Result[typing.Any, E]) -> Result[tuple[typing.Any, ...], E]:
    """Ok(tuple) if all 2..10 inputs succeeded, else the first Error."""
    return zipM(*results, extract=extract_result, wrap_ok=Ok, wrap_err=Error)


def zip_with[R, E](fn: Callable[..., R], *results: Result[typing.Any, E]) -> Result[R, E]:
    """Ok(fn(*values)) if all 2..10 inputs succeeded, else the first Error."""
    return zip_withM(fn, *results, extract=extract_result, wrap_ok=Ok, wrap_err=Error)


def sequence[T, E](results: Iterable[Result[T, E]], /) -> Result[list[T], E]:
    """
    Flip structure: [Result[T, E]] -> Result[[T], E].

    Any number of inputs (no arity ceiling); first Error wins. Inputs after
    the first Error are not consumed.
    """
    values: list[T] = []
    for r in results:
        match r:
            case Ok(v):
                values.append(v)
            case Error(e):
                return Error(e)
    return Ok(values)


# ============================================================================
# Point-free operators
# ============================================================================


def map[A, B, E](fn: Callable[[A], B], /) -> Callable[[Result[A, E]], Result[B, E]]:
    """Lift a plain function to Result -> Result; Error passes through untouched."""

    def mapped(result: Result[A, E], /) -> Result[B, E]:
        match result:
            case Ok(v):
                return Ok(fn(v))
            case Error(e):
                return Error(e)

    return mapped


def flat_map[A, B, E](
    fn: Callable[[A], Result[B, E]], /
) -> Callable[[Result[A, E]], Result[B, E]]:
    """Feed the Ok value to a Result-returning fn; Error passes through and fn never runs."""

    def flat_mapped(result: Result[A, E], /) -> Result[B, E]:
        match result:
            case Ok(v):
                return fn(v)
            case Error(e):
                return Error(e)

    return flat_mapped


def map_error[A, E, F](fn: Callable[[E], F], /) -> Callable[[Result[A, E]], Result[A, F]]:
    """Transform the Error payload; Ok passes through untouched."""

    def error_mapped(result: Result[A, E], /) -> Result[A, F]:
        match result:
            case Ok(v):
                return Ok(v)
            case Error(e):
                return Error(fn(e))

    return error_mapped


# ============================================================================
# Fixed arity: tuples
# ============================================================================


def zip2[A, B, Err](a: Result[A, Err], b: Result[B, Err], /) -> Result[tuple[A, B], Err]:
    return zip(a, b)


def zip3[A, B, C, Err](
    a: Result[A, Err], b: Result[B, Err], c: Result[C, Err], /
) -> Result[tuple[A, B, C], Err]:
    return zip(a, b, c)


def zip4[A, B, C, D, Err](
    a: Result[A, Err], b: Result[B, Err], c: Result[C, Err], d: Result[D, Err], /
) -> Result[tuple[A, B, C, D], Err]:
    return zip(a, b, c, d)


def zip5[A, B, C, D, E, Err](
    a: Result[A, Err],
    b: Result[B, Err],
    c: Result[C, Err],
    d: Result[D, Err],
    e: Result[E, Err],
    /,
) -> Result[tuple[A, B, C, D, E], Err]:
    return zip(a, b, c, d, e)


def zip6[A, B, C, D, E, F, Err](
    a: Result[A, Err],
    b: Result[B, Err],
    c: Result[C, Err],
    d: Result[D, Err],
    e: Result[E, Err],
    f: Result[F, Err],
    /,
) -> Result[tuple[A, B, C, D, E, F], Err]:
    return zip(a, b, c, d, e, f)


def zip7[A, B, C, D, E, F, G, Err](
    a: Result[A, Err],
    b: Result[B, Err],
    c: Result[C, Err],
    d: Result[D, Err],
    e: Result[E, Err],
    f: Result[F, Err],
    g: Result[G, Err],
    /,
) -> Result[tuple[A, B, C, D, E, F, G], Err]:
    return zip(a, b, c, d, e, f, g)


def zip8[A, B, C, D, E, F, G, H, Err](
    a: Result[A, Err],
    b: Result[B, Err],
    c: Result[C, Err],
    d: Result[D, Err],
    e: Result[E, Err],
    f: Result[F, Err],
    g: Result[G, Err],
    h: Result[H, Err],
    /,
) -> Result[tuple[A, B, C, D, E, F, G, H], Err]:
    return zip(a, b, c, d, e, f, g, h)


def zip9[A, B, C, D, E, F, G, H, I, Err](
    a: Result[A, Err],
    b: Result[B, Err],
    c: Result[C, Err],
    d: Result[D, Err],
    e: Result[E, Err],
    f: Result[F, Err],
    g: Result[G, Err],
    h: Result[H, Err],
    i: Result[I, Err],
    /,
) -> Result[tuple[A, B, C, D, E, F, G, H, I], Err]:
    return zip(a, b, c, d, e, f, g, h, i)


def zip10[A, B, C, D, E, F, G, H, I, J, Err](
    a: Result[A, Err],
    b: Result[B, Err],
    c: Result[C, Err],
    d: Result[D, Err],
    e: Result[E, Err],
    f: Result[F, Err],
    g: Result[G, Err],
    h: Result[H, Err],
    i: Result[I, Err],
    j: Result[J, Err],
    /,
) -> Result[tuple[A, B, C, D, E, F, G, H, I, J], Err]:
    return zip(a, b, c, d, e, f, g, h, i, j)


# ============================================================================
# Fixed arity: combining function
# ============================================================================


def zip2_with[A, B, R, Err](
    fn: Callable[[A, B], R], a: Result[A, Err], b: Result[B, Err], /
) -> Result[R, Err]:
    return zip_with(fn, a, b)


def zip3_with[A, B, C, R, Err](
    fn: Callable[[A, B, C], R], a: Result[A, Err], b: Result[B, Err], c: Result[C, Err], /
) -> Result[R, Err]:
    return zip_with(fn, a, b, c)


def zip4_with[A, B, C, D, R, Err](
    fn: Callable[[A, B, C, D], R],
    a: Result[A, Err],
    b: Result[B, Err],
    c: Result[C, Err],
    d: Result[D, Err],
    /,
) -> Result[R, Err]:
    return zip_with(fn, a, b, c, d)


def zip5_with[A, B, C, D, E, R, Err](
    fn: Callable[[A, B, C, D, E], R],
    a: Result[A, Err],
    b: Result[B, Err],
    c: Result[C, Err],
    d: Result[D, Err],
    e: Result[E, Err],
    /,
) -> Result[R, Err]:
    return zip_with(fn, a, b, c, d, e)


def zip6_with[A, B, C, D, E, F, R, Err](
    fn: Callable[[A, B, C, D, E, F], R],
    a: Result[A, Err],
    b: Result[B, Err],
    c: Result[C, Err],
    d: Result[D, Err],
    e: Result[E, Err],
    f: Result[F, Err],
    /,
) -> Result[R, Err]:
    return zip_with(fn, a, b, c, d, e, f)


def zip7_with[A, B, C, D, E, F, G, R, Err](
    fn: Callable[[A, B, C, D, E, F, G], R],
    a: Result[A, Err],
    b: Result[B, Err],
    c: Result[C, Err],
    d: Result[D, Err],
    e: Result[E, Err],
    f: Result[F, Err],
    g: Result[G, Err],
    /,
) -> Result[R, Err]:
    return zip_with(fn, a, b, c, d, e, f, g)


def zip8_with[A, B, C, D, E, F, G, H, R, Err](
    fn: Callable[[A, B, C, D, E, F, G, H], R],
    a: Result[A, Err],
    b: Result[B, Err],
    c: Result[C, Err],
    d: Result[D, Err],
    e: Result[E, Err],
    f: Result[F, Err],
    g: Result[G, Err],
    h: Result[H, Err],
    /,
) -> Result[R, Err]:
    return zip_with(fn, a, b, c, d, e, f, g, h)


def zip9_with[A, B, C, D, E, F, G, H, I, R, Err](
    fn: Callable[[A, B, C, D, E, F, G, H, I], R],
    a: Result[A, Err],
    b: Result[B, Err],
    c: Result[C, Err],
    d: Result[D, Err],
    e: Result[E, Err],
    f: Result[F, Err],
    g: Result[G, Err],
    h: Result[H, Err],
    i: Result[I, Err],
    /,
) -> Result[R, Err]:
    return zip_with(fn, a, b, c, d, e, f, g, h, i)


def zip10_with[A, B, C, D, E, F, G, H, I, J, R, Err](
    fn: Callable[[A, B, C, D, E, F, G, H, I, J], R],
    a: Result[A, Err],
    b: Result[B, Err],
    c: Result[C, Err],
    d: Result[D, Err],
    e: Result[E, Err],
    f: Result[F, Err],
    g: Result[G, Err],
    h: Result[H, Err],
    i: Result[I, Err],
    j: Result[J, Err],
    /,
) -> Result[R, Err]:
    return zip_with(fn, a, b, c, d, e, f, g, h, i, j)


__all__ = (
    "zip",
    "zip_with",
    "sequence",
    "map",
    "flat_map",
    "map_error",
    "zip2",
    "zip3",
    "zip4",
    "zip5",
    "zip6",
    "zip7",
    "zip8",
    "zip9",
    "zip10",
    "zip2_with",
    "zip3_with",
    "zip4_with",
    "zip5_with",
    "zip6_with",
    "zip7_with",
    "zip8_with",
    "zip9_with",
    "zip10_with",
)
