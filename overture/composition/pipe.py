"""
Pipe combinators
================

Left-to-right composition with extract + wrap паттерном.

pipe            - total stages, plain values flow through
pipe_throwing   - stages return Result, first Error wins
chain           - stages return Option, first Nothing() wins
pipeM           - generic short-circuit pipe over any container
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Error, Ok, Option, Result

from .._helpers import extract_option, extract_result
from .._types import Fallible, Partial
from ..arity import check_arity


# ============================================================================
# Generic combinator (extract + wrap pattern)
# ============================================================================


def pipeM[A, Raw](
    *fns: Callable[[typing.Any], Raw],
    extract: Callable[[Raw], Result[typing.Any, typing.Any]],
) -> Callable[[A], Raw]:
    """
    Generic short-circuit pipe.

    Each stage's raw output is projected with extract: Ok(v) feeds v to the
    next stage, Error stops the pipe and the raw output is returned as is.
    """
    check_arity(len(fns), what="pipe stages")
    if len(fns) == 1:
        return fns[0]

    first, *rest = fns

    def piped(value: A, /) -> Raw:
        raw = first(value)
        for fn in rest:
            match extract(raw):
                case Ok(v):
                    raw = fn(v)
                case Error(_):
                    return raw
        return raw

    return piped


# ============================================================================
# Total stages
# ============================================================================


def pipe[A](*fns: Callable[[typing.Any], typing.Any]) -> Callable[[A], typing.Any]:
    """
    Forward composition: pipe(f, g, h)(x) == h(g(f(x))).

    1..10 stages. A single stage is returned unchanged.
    """
    check_arity(len(fns), what="pipe stages")
    if len(fns) == 1:
        return fns[0]

    def piped(value: A, /) -> typing.Any:
        for fn in fns:
            value = fn(value)
        return value

    return piped


def pipe2[A, B, C](f1: Callable[[A], B], f2: Callable[[B], C], /) -> Callable[[A], C]:
    return pipe(f1, f2)


def pipe3[A, B, C, D](
    f1: Callable[[A], B],
    f2: Callable[[B], C],
    f3: Callable[[C], D],
    /,
) -> Callable[[A], D]:
    return pipe(f1, f2, f3)


def pipe4[A, B, C, D, E](
    f1: Callable[[A], B],
    f2: Callable[[B], C],
    f3: Callable[[C], D],
    f4: Callable[[D], E],
    /,
) -> Callable[[A], E]:
    return pipe(f1, f2, f3, f4)


def pipe5[A, B, C, D, E, F](
    f1: Callable[[A], B],
    f2: Callable[[B], C],
    f3: Callable[[C], D],
    f4: Callable[[D], E],
    f5: Callable[[E], F],
    /,
) -> Callable[[A], F]:
    return pipe(f1, f2, f3, f4, f5)


def pipe6[A, B, C, D, E, F, G](
    f1: Callable[[A], B],
    f2: Callable[[B], C],
    f3: Callable[[C], D],
    f4: Callable[[D], E],
    f5: Callable[[E], F],
    f6: Callable[[F], G],
    /,
) -> Callable[[A], G]:
    return pipe(f1, f2, f3, f4, f5, f6)


def pipe7[A, B, C, D, E, F, G, H](
    f1: Callable[[A], B],
    f2: Callable[[B], C],
    f3: Callable[[C], D],
    f4: Callable[[D], E],
    f5: Callable[[E], F],
    f6: Callable[[F], G],
    f7: Callable[[G], H],
    /,
) -> Callable[[A], H]:
    return pipe(f1, f2, f3, f4, f5, f6, f7)


def pipe8[A, B, C, D, E, F, G, H, I](
    f1: Callable[[A], B],
    f2: Callable[[B], C],
    f3: Callable[[C], D],
    f4: Callable[[D], E],
    f5: Callable[[E], F],
    f6: Callable[[F], G],
    f7: Callable[[G], H],
    f8: Callable[[H], I],
    /,
) -> Callable[[A], I]:
    return pipe(f1, f2, f3, f4, f5, f6, f7, f8)


def pipe9[A, B, C, D, E, F, G, H, I, J](
    f1: Callable[[A], B],
    f2: Callable[[B], C],
    f3: Callable[[C], D],
    f4: Callable[[D], E],
    f5: Callable[[E], F],
    f6: Callable[[F], G],
    f7: Callable[[G], H],
    f8: Callable[[H], I],
    f9: Callable[[I], J],
    /,
) -> Callable[[A], J]:
    return pipe(f1, f2, f3, f4, f5, f6, f7, f8, f9)


def pipe10[A, B, C, D, E, F, G, H, I, J, K](
    f1: Callable[[A], B],
    f2: Callable[[B], C],
    f3: Callable[[C], D],
    f4: Callable[[D], E],
    f5: Callable[[E], F],
    f6: Callable[[F], G],
    f7: Callable[[G], H],
    f8: Callable[[H], I],
    f9: Callable[[I], J],
    f10: Callable[[J], K],
    /,
) -> Callable[[A], K]:
    return pipe(f1, f2, f3, f4, f5, f6, f7, f8, f9, f10)


# ============================================================================
# Fallible stages (Result)
# ============================================================================


def pipe_throwing[A, E](
    *fns: Fallible[typing.Any, typing.Any, E],
) -> Callable[[A], Result[typing.Any, E]]:
    """
    Forward composition of Result-returning stages.

    Stages run left to right; the first Error is returned unchanged and no
    later stage runs.
    """
    return pipeM(*fns, extract=extract_result)


def pipe2_throwing[A, B, C, E](
    f1: Callable[[A], Result[B, E]],
    f2: Callable[[B], Result[C, E]],
    /,
) -> Callable[[A], Result[C, E]]:
    return pipe_throwing(f1, f2)


def pipe3_throwing[A, B, C, D, E](
    f1: Callable[[A], Result[B, E]],
    f2: Callable[[B], Result[C, E]],
    f3: Callable[[C], Result[D, E]],
    /,
) -> Callable[[A], Result[D, E]]:
    return pipe_throwing(f1, f2, f3)


def pipe4_throwing[A, B, C, D, F, E](
    f1: Callable[[A], Result[B, E]],
    f2: Callable[[B], Result[C, E]],
    f3: Callable[[C], Result[D, E]],
    f4: Callable[[D], Result[F, E]],
    /,
) -> Callable[[A], Result[F, E]]:
    return pipe_throwing(f1, f2, f3, f4)


def pipe5_throwing[A, B, C, D, F, G, E](
    f1: Callable[[A], Result[B, E]],
    f2: Callable[[B], Result[C, E]],
    f3: Callable[[C], Result[D, E]],
    f4: Callable[[D], Result[F, E]],
    f5: Callable[[F], Result[G, E]],
    /,
) -> Callable[[A], Result[G, E]]:
    return pipe_throwing(f1, f2, f3, f4, f5)


def pipe6_throwing[A, B, C, D, F, G, H, E](
    f1: Callable[[A], Result[B, E]],
    f2: Callable[[B], Result[C, E]],
    f3: Callable[[C], Result[D, E]],
    f4: Callable[[D], Result[F, E]],
    f5: Callable[[F], Result[G, E]],
    f6: Callable[[G], Result[H, E]],
    /,
) -> Callable[[A], Result[H, E]]:
    return pipe_throwing(f1, f2, f3, f4, f5, f6)


def pipe7_throwing[A, B, C, D, F, G, H, I, E](
    f1: Callable[[A], Result[B, E]],
    f2: Callable[[B], Result[C, E]],
    f3: Callable[[C], Result[D, E]],
    f4: Callable[[D], Result[F, E]],
    f5: Callable[[F], Result[G, E]],
    f6: Callable[[G], Result[H, E]],
    f7: Callable[[H], Result[I, E]],
    /,
) -> Callable[[A], Result[I, E]]:
    return pipe_throwing(f1, f2, f3, f4, f5, f6, f7)


def pipe8_throwing[A, B, C, D, F, G, H, I, J, E](
    f1: Callable[[A], Result[B, E]],
    f2: Callable[[B], Result[C, E]],
    f3: Callable[[C], Result[D, E]],
    f4: Callable[[D], Result[F, E]],
    f5: Callable[[F], Result[G, E]],
    f6: Callable[[G], Result[H, E]],
    f7: Callable[[H], Result[I, E]],
    f8: Callable[[I], Result[J, E]],
    /,
) -> Callable[[A], Result[J, E]]:
    return pipe_throwing(f1, f2, f3, f4, f5, f6, f7, f8)


def pipe9_throwing[A, B, C, D, F, G, H, I, J, K, E](
    f1: Callable[[A], Result[B, E]],
    f2: Callable[[B], Result[C, E]],
    f3: Callable[[C], Result[D, E]],
    f4: Callable[[D], Result[F, E]],
    f5: Callable[[F], Result[G, E]],
    f6: Callable[[G], Result[H, E]],
    f7: Callable[[H], Result[I, E]],
    f8: Callable[[I], Result[J, E]],
    f9: Callable[[J], Result[K, E]],
    /,
) -> Callable[[A], Result[K, E]]:
    return pipe_throwing(f1, f2, f3, f4, f5, f6, f7, f8, f9)


def pipe10_throwing[A, B, C, D, F, G, H, I, J, K, L, E](
    f1: Callable[[A], Result[B, E]],
    f2: Callable[[B], Result[C, E]],
    f3: Callable[[C], Result[D, E]],
    f4: Callable[[D], Result[F, E]],
    f5: Callable[[F], Result[G, E]],
    f6: Callable[[G], Result[H, E]],
    f7: Callable[[H], Result[I, E]],
    f8: Callable[[I], Result[J, E]],
    f9: Callable[[J], Result[K, E]],
    f10: Callable[[K], Result[L, E]],
    /,
) -> Callable[[A], Result[L, E]]:
    return pipe_throwing(f1, f2, f3, f4, f5, f6, f7, f8, f9, f10)


# ============================================================================
# Optional stages (Option)
# ============================================================================


def chain[A](*fns: Partial[typing.Any, typing.Any]) -> Callable[[A], Option[typing.Any]]:
    """
    Forward composition of Option-returning stages.

    The first Nothing() stops the chain and is returned.
    """
    return pipeM(*fns, extract=extract_option)


__all__ = (
    "pipeM",
    # Total
    "pipe",
    "pipe2",
    "pipe3",
    "pipe4",
    "pipe5",
    "pipe6",
    "pipe7",
    "pipe8",
    "pipe9",
    "pipe10",
    # Result
    "pipe_throwing",
    "pipe2_throwing",
    "pipe3_throwing",
    "pipe4_throwing",
    "pipe5_throwing",
    "pipe6_throwing",
    "pipe7_throwing",
    "pipe8_throwing",
    "pipe9_throwing",
    "pipe10_throwing",
    # Option
    "chain",
)
