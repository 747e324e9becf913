"""
Arity support
=============

Uniform shape "function of N positional arguments" for N = 1..MAX_ARITY.

Every numbered family (pipe3, curry7, zip10_with, ...) is a thin typed entry
point over one variadic definition; the helpers here are what those
definitions share: arity inference, build-time arity checks, and conversion
to and from the curried (right-nested unary) form.
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable

from ._errors import ArityError

MAX_ARITY: typing.Final = 10

# ============================================================================
# Function shapes
# ============================================================================

type Fn1[A, R] = Callable[[A], R]
type Fn2[A, B, R] = Callable[[A, B], R]
type Fn3[A, B, C, R] = Callable[[A, B, C], R]
type Fn4[A, B, C, D, R] = Callable[[A, B, C, D], R]
type Fn5[A, B, C, D, E, R] = Callable[[A, B, C, D, E], R]
type Fn6[A, B, C, D, E, F, R] = Callable[[A, B, C, D, E, F], R]
type Fn7[A, B, C, D, E, F, G, R] = Callable[[A, B, C, D, E, F, G], R]
type Fn8[A, B, C, D, E, F, G, H, R] = Callable[[A, B, C, D, E, F, G, H], R]
type Fn9[A, B, C, D, E, F, G, H, I, R] = Callable[[A, B, C, D, E, F, G, H, I], R]
type Fn10[A, B, C, D, E, F, G, H, I, J, R] = Callable[[A, B, C, D, E, F, G, H, I, J], R]

# Curried = right-nested chain of unary functions
type Curried2[A, B, R] = Callable[[A], Callable[[B], R]]
type Curried3[A, B, C, R] = Callable[[A], Curried2[B, C, R]]
type Curried4[A, B, C, D, R] = Callable[[A], Curried3[B, C, D, R]]
type Curried5[A, B, C, D, E, R] = Callable[[A], Curried4[B, C, D, E, R]]
type Curried6[A, B, C, D, E, F, R] = Callable[[A], Curried5[B, C, D, E, F, R]]
type Curried7[A, B, C, D, E, F, G, R] = Callable[[A], Curried6[B, C, D, E, F, G, R]]
type Curried8[A, B, C, D, E, F, G, H, R] = Callable[[A], Curried7[B, C, D, E, F, G, H, R]]
type Curried9[A, B, C, D, E, F, G, H, I, R] = Callable[[A], Curried8[B, C, D, E, F, G, H, I, R]]
type Curried10[A, B, C, D, E, F, G, H, I, J, R] = Callable[
    [A], Curried9[B, C, D, E, F, G, H, I, J, R]
]

# ============================================================================
# Checks
# ============================================================================

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def check_arity(n: int, *, what: str, low: int = 1, high: int = MAX_ARITY) -> int:
    """
    Reject an arity outside [low, high]. Returns n for inline use.

    Called when a combinator is built, never when it runs.
    """
    if not low <= n <= high:
        raise ArityError(what, n, f"{low}..{high}")
    return n


def arity_of(fn: Callable[..., typing.Any]) -> int:
    """
    Count required positional parameters of fn.

    Parameters with defaults and keyword-only parameters are not counted.
    Variadic callables have no fixed arity and are rejected.
    """
    name = getattr(fn, "__qualname__", repr(fn))
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError) as exc:
        raise ArityError(f"arity of {name}", None, "an introspectable signature") from exc

    count = 0
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            raise ArityError(f"arity of {name}", None, "no *args (pass arity explicitly)")
        if param.kind in _POSITIONAL and param.default is inspect.Parameter.empty:
            count += 1
    return count


# ============================================================================
# Adapters
# ============================================================================


def curry_n[R](fn: Callable[..., R], n: int) -> Callable[[typing.Any], typing.Any]:
    """
    Curried chain of exactly n unary steps over fn.

    Supplied arguments are captured in an immutable tuple; every step returns
    a fresh closure, so a partial application can be reused or branched.
    fn runs only when the n-th argument arrives.
    """
    check_arity(n, what="curry arity")

    def step(collected: tuple[typing.Any, ...]) -> Callable[[typing.Any], typing.Any]:
        def curried(arg: typing.Any, /) -> typing.Any:
            supplied = (*collected, arg)
            if len(supplied) == n:
                return fn(*supplied)
            return step(supplied)

        return curried

    return step(())


def uncurry_n(fn: Callable[[typing.Any], typing.Any], n: int) -> Callable[..., typing.Any]:
    """Collapse a curried chain of n unary steps into one n-ary callable."""
    check_arity(n, what="uncurry arity")

    def uncurried(*args: typing.Any) -> typing.Any:
        if len(args) != n:
            raise ArityError("uncurried call", len(args), str(n))
        result: typing.Any = fn
        for arg in args:
            result = result(arg)
        return result

    return uncurried


def spread[R](fn: Callable[..., R]) -> Callable[[tuple[typing.Any, ...]], R]:
    """Adapt an N-ary callable to take its N arguments as one tuple."""

    def spread_fn(values: tuple[typing.Any, ...], /) -> R:
        return fn(*values)

    return spread_fn


__all__ = (
    "MAX_ARITY",
    # Shapes
    "Fn1",
    "Fn2",
    "Fn3",
    "Fn4",
    "Fn5",
    "Fn6",
    "Fn7",
    "Fn8",
    "Fn9",
    "Fn10",
    "Curried2",
    "Curried3",
    "Curried4",
    "Curried5",
    "Curried6",
    "Curried7",
    "Curried8",
    "Curried9",
    "Curried10",
    # Checks
    "arity_of",
    "check_arity",
    # Adapters
    "curry_n",
    "uncurry_n",
    "spread",
)
