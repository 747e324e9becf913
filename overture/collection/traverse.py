"""Traverse combinators

Element-wise sequence transforms as standalone operators:
the function comes first, the sequence last, so they slot into pipe.

    from overture import pipe, map, filter

    evens_squared = pipe(filter(lambda n: n % 2 == 0), map(lambda n: n * n))
    evens_squared([1, 2, 3, 4])  # [4, 16]

Fallible variants take Result-returning functions and return a Result of
the list, so they slot into pipe_throwing:

    parse_all = map_throwing(parse_int)
    parse_all(["1", "2"])    # Ok([1, 2])
    parse_all(["1", "x"])    # Error(...) for "x"; later items are not parsed
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from kungfu import Error, Nothing, Ok, Option, Result

from .._helpers import extract_result
from .._types import Predicate

# ============================================================================
# Total
# ============================================================================


def map[A, B](fn: Callable[[A], B], /) -> Callable[[Iterable[A]], list[B]]:
    """Same length and order, each element replaced by fn(element)."""

    def mapped(items: Iterable[A], /) -> list[B]:
        return [fn(item) for item in items]

    return mapped

def filter[A](predicate: Predicate[A], /) -> Callable[[Iterable[A]], list[A]]:
    """Keep elements for which predicate holds, relative order preserved."""

    def filtered(items: Iterable[A], /) -> list[A]:
        return [item for item in items if predicate(item)]

    return filtered

def flat_map[A, B](fn: Callable[[A], Iterable[B]], /) -> Callable[[Iterable[A]], list[B]]:
    """Map then concatenate, in order. Forward composition for list-returning steps."""

    def flat_mapped(items: Iterable[A], /) -> list[B]:
        return [out for item in items for out in fn(item)]

    return flat_mapped

def compact_map[A, B](fn: Callable[[A], B], /) -> Callable[[Iterable[Option[A]]], list[B]]:
    """Drop Nothing() elements, map fn over the present ones."""

    def compacted(items: Iterable[Option[A]], /) -> list[B]:
        return [fn(item.unwrap()) for item in items if not isinstance(item, Nothing)]

    return compacted

# ============================================================================
# Generic fallible traverse (extract + wrap pattern)
# ============================================================================


def traverseM[A, T, E, Raw, B](
    handler: Callable[[A], Raw],
    /,
    *,
    extract: Callable[[Raw], Result[T, E]],
    emit: Callable[[A, T], Iterable[B]],
) -> Callable[[Iterable[A]], Result[list[B], E]]:
    """
    Generic fallible traverse. Sequential, left to right.

    Each handler output is projected with extract: Ok(v) contributes
    emit(item, v) to the output list, Error(e) stops the traversal and
    is returned. Items after the first Error are not consumed.
    """

    def traversed(items: Iterable[A], /) -> Result[list[B], E]:
        out: list[B] = []
        for item in items:
            match extract(handler(item)):
                case Ok(v):
                    out.extend(emit(item, v))
                case Error(e):
                    return Error(e)
        return Ok(out)

    return traversed

# ============================================================================
# Fallible (Result)
# ============================================================================


def map_throwing[A, B, E](
    fn: Callable[[A], Result[B, E]], /
) -> Callable[[Iterable[A]], Result[list[B], E]]:
    """map for a Result-returning fn: Ok(list) or the first Error."""

    def emit(_: A, value: B) -> tuple[B]:
        return (value,)

    return traverseM(fn, extract=extract_result, emit=emit)

def filter_throwing[A, E](
    predicate: Callable[[A], Result[bool, E]], /
) -> Callable[[Iterable[A]], Result[list[A], E]]:
    """filter for a Result-returning predicate: Ok(kept) or the first Error."""

    def emit(item: A, keep: bool) -> tuple[A, ...]:
        return (item,) if keep else ()

    return traverseM(predicate, extract=extract_result, emit=emit)

def flat_map_throwing[A, B, E](
    fn: Callable[[A], Result[Iterable[B], E]], /
) -> Callable[[Iterable[A]], Result[list[B], E]]:
    """flat_map for a Result-returning fn: Ok(concatenated) or the first Error."""

    def emit(_: A, values: Iterable[B]) -> Iterable[B]:
        return values

    return traverseM(fn, extract=extract_result, emit=emit)

def compact_map_throwing[A, B, E](
    fn: Callable[[A], Result[B, E]], /
) -> Callable[[Iterable[Option[A]]], Result[list[B], E]]:
    """compact_map for a Result-returning fn: Nothing() is skipped, first Error wins."""

    def present(item: Option[A]) -> Result[typing.Any, E]:
        if isinstance(item, Nothing):
            return Ok(())
        match fn(item.unwrap()):
            case Ok(value):
                return Ok((value,))
            case Error(e):
                return Error(e)

    def emit(_: Option[A], values: tuple[B, ...]) -> tuple[B, ...]:
        return values

    return traverseM(present, extract=extract_result, emit=emit)

__all__ = (
    # Total
    "map",
    "filter",
    "flat_map",
    "compact_map",
    # Generic
    "traverseM",
    # Fallible
    "map_throwing",
    "filter_throwing",
    "flat_map_throwing",
    "compact_map_throwing",
)
