"""
Zip for Option
==============

Combine 2..10 Option values: Some(...) only if every input is Some,
otherwise Nothing(). Combining functions never see a partial set of
arguments.

    from overture import option as O

    O.zip(Some(1), Some("a"))                      # Some((1, "a"))
    O.zip_with(lambda a, b: a + b, Some(1), Nothing())   # Nothing()
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Nothing, Option

from .._helpers import extract_option, wrap_nothing, wrap_some
from .base import zipM, zip_withM


# ============================================================================
# Variadic
# ============================================================================


def zip(*options: Option[typing.Any]) -> Option[tuple[typing.Any, ...]]:
    """Tuple of contained values if all 2..10 inputs are present, else Nothing()."""
    return zipM(*options, extract=extract_option, wrap_ok=wrap_some, wrap_err=wrap_nothing)


def zip_with[R](fn: Callable[..., R], *options: Option[typing.Any]) -> Option[R]:
    """Some(fn(*values)) if all 2..10 inputs are present, else Nothing()."""
    return zip_withM(
        fn,
        *options,
        extract=extract_option,
        wrap_ok=wrap_some,
        wrap_err=wrap_nothing,
    )


def map[A, B](fn: Callable[[A], B], /) -> Callable[[Option[A]], Option[B]]:
    """Lift a plain function to Option -> Option, for use inside pipe."""

    def mapped(option: Option[A], /) -> Option[B]:
        match option:
            case Nothing():
                return Nothing()
            case _:
                return wrap_some(fn(option.unwrap()))

    return mapped


# ============================================================================
# Fixed arity: tuples
# ============================================================================


def zip2[A, B](a: Option[A], b: Option[B], /) -> Option[tuple[A, B]]:
    return zip(a, b)


def zip3[A, B, C](a: Option[A], b: Option[B], c: Option[C], /) -> Option[tuple[A, B, C]]:
    return zip(a, b, c)


def zip4[A, B, C, D](
    a: Option[A], b: Option[B], c: Option[C], d: Option[D], /
) -> Option[tuple[A, B, C, D]]:
    return zip(a, b, c, d)


def zip5[A, B, C, D, E](
    a: Option[A], b: Option[B], c: Option[C], d: Option[D], e: Option[E], /
) -> Option[tuple[A, B, C, D, E]]:
    return zip(a, b, c, d, e)


def zip6[A, B, C, D, E, F](
    a: Option[A], b: Option[B], c: Option[C], d: Option[D], e: Option[E], f: Option[F], /
) -> Option[tuple[A, B, C, D, E, F]]:
    return zip(a, b, c, d, e, f)


def zip7[A, B, C, D, E, F, G](
    a: Option[A],
    b: Option[B],
    c: Option[C],
    d: Option[D],
    e: Option[E],
    f: Option[F],
    g: Option[G],
    /,
) -> Option[tuple[A, B, C, D, E, F, G]]:
    return zip(a, b, c, d, e, f, g)


def zip8[A, B, C, D, E, F, G, H](
    a: Option[A],
    b: Option[B],
    c: Option[C],
    d: Option[D],
    e: Option[E],
    f: Option[F],
    g: Option[G],
    h: Option[H],
    /,
) -> Option[tuple[A, B, C, D, E, F, G, H]]:
    return zip(a, b, c, d, e, f, g, h)


def zip9[A, B, C, D, E, F, G, H, I](
    a: Option[A],
    b: Option[B],
    c: Option[C],
    d: Option[D],
    e: Option[E],
    f: Option[F],
    g: Option[G],
    h: Option[H],
    i: Option[I],
    /,
) -> Option[tuple[A, B, C, D, E, F, G, H, I]]:
    return zip(a, b, c, d, e, f, g, h, i)


def zip10[A, B, C, D, E, F, G, H, I, J](
    a: Option[A],
    b: Option[B],
    c: Option[C],
    d: Option[D],
    e: Option[E],
    f: Option[F],
    g: Option[G],
    h: Option[H],
    i: Option[I],
    j: Option[J],
    /,
) -> Option[tuple[A, B, C, D, E, F, G, H, I, J]]:
    return zip(a, b, c, d, e, f, g, h, i, j)


# ============================================================================
# Fixed arity: combining function
# ============================================================================


def zip2_with[A, B, R](
    fn: Callable[[A, B], R], a: Option[A], b: Option[B], /
) -> Option[R]:
    return zip_with(fn, a, b)


def zip3_with[A, B, C, R](
    fn: Callable[[A, B, C], R], a: Option[A], b: Option[B], c: Option[C], /
) -> Option[R]:
    return zip_with(fn, a, b, c)


def zip4_with[A, B, C, D, R](
    fn: Callable[[A, B, C, D], R],
    a: Option[A],
    b: Option[B],
    c: Option[C],
    d: Option[D],
    /,
) -> Option[R]:
    return zip_with(fn, a, b, c, d)


def zip5_with[A, B, C, D, E, R](
    fn: Callable[[A, B, C, D, E], R],
    a: Option[A],
    b: Option[B],
    c: Option[C],
    d: Option[D],
    e: Option[E],
    /,
) -> Option[R]:
    return zip_with(fn, a, b, c, d, e)


def zip6_with[A, B, C, D, E, F, R](
    fn: Callable[[A, B, C, D, E, F], R],
    a: Option[A],
    b: Option[B],
    c: Option[C],
    d: Option[D],
    e: Option[E],
    f: Option[F],
    /,
) -> Option[R]:
    return zip_with(fn, a, b, c, d, e, f)


def zip7_with[A, B, C, D, E, F, G, R](
    fn: Callable[[A, B, C, D, E, F, G], R],
    a: Option[A],
    b: Option[B],
    c: Option[C],
    d: Option[D],
    e: Option[E],
    f: Option[F],
    g: Option[G],
    /,
) -> Option[R]:
    return zip_with(fn, a, b, c, d, e, f, g)


def zip8_with[A, B, C, D, E, F, G, H, R](
    fn: Callable[[A, B, C, D, E, F, G, H], R],
    a: Option[A],
    b: Option[B],
    c: Option[C],
    d: Option[D],
    e: Option[E],
    f: Option[F],
    g: Option[G],
    h: Option[H],
    /,
) -> Option[R]:
    return zip_with(fn, a, b, c, d, e, f, g, h)


def zip9_with[A, B, C, D, E, F, G, H, I, R](
    fn: Callable[[A, B, C, D, E, F, G, H, I], R],
    a: Option[A],
    b: Option[B],
    c: Option[C],
    d: Option[D],
    e: Option[E],
    f: Option[F],
    g: Option[G],
    h: Option[H],
    i: Option[I],
    /,
) -> Option[R]:
    return zip_with(fn, a, b, c, d, e, f, g, h, i)


def zip10_with[A, B, C, D, E, F, G, H, I, J, R](
    fn: Callable[[A, B, C, D, E, F, G, H, I, J], R],
    a: Option[A],
    b: Option[B],
    c: Option[C],
    d: Option[D],
    e: Option[E],
    f: Option[F],
    g: Option[G],
    h: Option[H],
    i: Option[I],
    j: Option[J],
    /,
) -> Option[R]:
    return zip_with(fn, a, b, c, d, e, f, g, h, i, j)


__all__ = (
    "zip",
    "zip_with",
    "map",
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
