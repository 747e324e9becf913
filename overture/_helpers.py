"""Internal helpers for overture.

Common functions used across multiple combinator modules.
These are not part of the public API but can be used for plugging custom
containers into the generic (*M) combinators."""

from __future__ import annotations

import typing

from kungfu import Error, Nothing, Ok, Option, Result, Some

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

# Extract functions (Raw -> Result[T, E])
def extract_result[T, E](r: Result[T, E]) -> Result[T, E]:
    """
    Extract Result from Result.

    Raw type of fallible stages IS Result[T, E], so extract is identity.
    """
    return r

def extract_option[T](option: Option[T]) -> Result[T, None]:
    """
    Extract Result from Option.

    Nothing() becomes Error(None): absence carries no payload.
    """
    match option:
        case Nothing():
            return Error(None)
        case _:
            return Ok(option.unwrap())

# Wrap functions (value -> Raw)
def wrap_nothing(_: object) -> Option[typing.Any]:
    """Absence wrapper for Option combinators: the failure payload is dropped."""
    return Nothing()

def wrap_some[T](value: T) -> Option[T]:
    """Presence wrapper for Option combinators."""
    return Some(value)

__all__ = (
    # Identity
    "identity",
    # Extract functions
    "extract_result",
    "extract_option",
    # Wrap functions
    "wrap_nothing",
    "wrap_some",
)
