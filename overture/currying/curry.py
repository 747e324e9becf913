"""
Curry combinators
=================

Convert between an N-ary function and its curried form: a right-nested
chain of N unary functions. uncurry is the exact inverse.

    add3 = lambda a, b, c: a + b + c
    curry(add3)(1)(2)(3)                  # 6
    uncurry(curry(add3), 3)(1, 2, 3)      # 6
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from ..arity import (
    Curried2,
    Curried3,
    Curried4,
    Curried5,
    Curried6,
    Curried7,
    Curried8,
    Curried9,
    Curried10,
    Fn2,
    Fn3,
    Fn4,
    Fn5,
    Fn6,
    Fn7,
    Fn8,
    Fn9,
    Fn10,
    arity_of,
    curry_n,
    uncurry_n,
)


# ============================================================================
# Curry
# ============================================================================


def curry[R](
    fn: Callable[..., R],
    arity: int | None = None,
) -> Callable[[typing.Any], typing.Any]:
    """
    Curried form of fn.

    Arity is read from fn's signature when not given (required positional
    parameters only). Pass it explicitly for *args callables, builtins
    without a signature, or to curry fewer parameters than fn declares.

    Nothing runs until the last argument is supplied.
    """
    return curry_n(fn, arity_of(fn) if arity is None else arity)


def curry2[A, B, R](fn: Fn2[A, B, R], /) -> Curried2[A, B, R]:
    return curry_n(fn, 2)


def curry3[A, B, C, R](fn: Fn3[A, B, C, R], /) -> Curried3[A, B, C, R]:
    return curry_n(fn, 3)


def curry4[A, B, C, D, R](fn: Fn4[A, B, C, D, R], /) -> Curried4[A, B, C, D, R]:
    return curry_n(fn, 4)


def curry5[A, B, C, D, E, R](fn: Fn5[A, B, C, D, E, R], /) -> Curried5[A, B, C, D, E, R]:
    return curry_n(fn, 5)


def curry6[A, B, C, D, E, F, R](
    fn: Fn6[A, B, C, D, E, F, R], /
) -> Curried6[A, B, C, D, E, F, R]:
    return curry_n(fn, 6)


def curry7[A, B, C, D, E, F, G, R](
    fn: Fn7[A, B, C, D, E, F, G, R], /
) -> Curried7[A, B, C, D, E, F, G, R]:
    return curry_n(fn, 7)


def curry8[A, B, C, D, E, F, G, H, R](
    fn: Fn8[A, B, C, D, E, F, G, H, R], /
) -> Curried8[A, B, C, D, E, F, G, H, R]:
    return curry_n(fn, 8)


def curry9[A, B, C, D, E, F, G, H, I, R](
    fn: Fn9[A, B, C, D, E, F, G, H, I, R], /
) -> Curried9[A, B, C, D, E, F, G, H, I, R]:
    return curry_n(fn, 9)


def curry10[A, B, C, D, E, F, G, H, I, J, R](
    fn: Fn10[A, B, C, D, E, F, G, H, I, J, R], /
) -> Curried10[A, B, C, D, E, F, G, H, I, J, R]:
    return curry_n(fn, 10)


# ============================================================================
# Uncurry
# ============================================================================


def uncurry(fn: Callable[[typing.Any], typing.Any], arity: int) -> Callable[..., typing.Any]:
    """
    Collapse a curried chain into one function of `arity` arguments.

    A curried chain carries no signature to infer from, so arity is required.
    """
    return uncurry_n(fn, arity)


def uncurry2[A, B, R](fn: Curried2[A, B, R], /) -> Fn2[A, B, R]:
    return uncurry_n(fn, 2)


def uncurry3[A, B, C, R](fn: Curried3[A, B, C, R], /) -> Fn3[A, B, C, R]:
    return uncurry_n(fn, 3)


def uncurry4[A, B, C, D, R](fn: Curried4[A, B, C, D, R], /) -> Fn4[A, B, C, D, R]:
    return uncurry_n(fn, 4)


def uncurry5[A, B, C, D, E, R](fn: Curried5[A, B, C, D, E, R], /) -> Fn5[A, B, C, D, E, R]:
    return uncurry_n(fn, 5)


def uncurry6[A, B, C, D, E, F, R](
    fn: Curried6[A, B, C, D, E, F, R], /
) -> Fn6[A, B, C, D, E, F, R]:
    return uncurry_n(fn, 6)


def uncurry7[A, B, C, D, E, F, G, R](
    fn: Curried7[A, B, C, D, E, F, G, R], /
) -> Fn7[A, B, C, D, E, F, G, R]:
    return uncurry_n(fn, 7)


def uncurry8[A, B, C, D, E, F, G, H, R](
    fn: Curried8[A, B, C, D, E, F, G, H, R], /
) -> Fn8[A, B, C, D, E, F, G, H, R]:
    return uncurry_n(fn, 8)


def uncurry9[A, B, C, D, E, F, G, H, I, R](
    fn: Curried9[A, B, C, D, E, F, G, H, I, R], /
) -> Fn9[A, B, C, D, E, F, G, H, I, R]:
    return uncurry_n(fn, 9)


def uncurry10[A, B, C, D, E, F, G, H, I, J, R](
    fn: Curried10[A, B, C, D, E, F, G, H, I, J, R], /
) -> Fn10[A, B, C, D, E, F, G, H, I, J, R]:
    return uncurry_n(fn, 10)


__all__ = (
    "curry",
    "curry2",
    "curry3",
    "curry4",
    "curry5",
    "curry6",
    "curry7",
    "curry8",
    "curry9",
    "curry10",
    "uncurry",
    "uncurry2",
    "uncurry3",
    "uncurry4",
    "uncurry5",
    "uncurry6",
    "uncurry7",
    "uncurry8",
    "uncurry9",
    "uncurry10",
)
