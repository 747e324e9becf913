"""Compose combinators

Backward (right-to-left) composition: compose(f, g)(x) == f(g(x)).
Thin mirror of the pipe family."""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Result

from .pipe import pipe, pipe_throwing

def compose[A](*fns: Callable[[typing.Any], typing.Any]) -> Callable[[A], typing.Any]:
    """Backward composition of 1..10 stages. The last stage runs first."""
    return pipe(*reversed(fns))

def compose_throwing[A, E](
    *fns: Callable[[typing.Any], Result[typing.Any, E]],
) -> Callable[[A], Result[typing.Any, E]]:
    """Backward composition of Result-returning stages, first Error wins."""
    return pipe_throwing(*reversed(fns))

__all__ = ("compose", "compose_throwing")
