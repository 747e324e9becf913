"""Side effects combinators

Effects execute for observation only (logging, metrics, debugging)
and don't change the value flowing through a pipe."""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, Ok, Result

def tap[T](effect: Callable[[T], None], /) -> Callable[[T], T]:
    """Run effect on the value, pass it through unchanged."""

    def tapped(value: T, /) -> T:
        effect(value)
        return value

    return tapped

def tap_ok[T, E](effect: Callable[[T], None], /) -> Callable[[Result[T, E]], Result[T, E]]:
    """Run effect on the Ok value, pass the Result through unchanged."""

    def tapped(result: Result[T, E], /) -> Result[T, E]:
        match result:
            case Ok(value):
                effect(value)
            case Error(_):
                pass
        return result

    return tapped

def tap_err[T, E](effect: Callable[[E], None], /) -> Callable[[Result[T, E]], Result[T, E]]:
    """Run effect on the Error payload, pass the Result through unchanged."""

    def tapped(result: Result[T, E], /) -> Result[T, E]:
        match result:
            case Error(err):
                effect(err)
            case Ok(_):
                pass
        return result

    return tapped

__all__ = ("tap", "tap_ok", "tap_err")
