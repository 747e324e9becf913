"""
Core type definitions for overture.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Option, Result

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Thunk = zero-argument function deferring production of a value
type Thunk[T] = Callable[[], T]

# Reducer = left-fold step: accumulator and element to new accumulator
type Reducer[Acc, T] = Callable[[Acc, T], Acc]

# Endo = function from a type to itself (concat works on these)
type Endo[T] = Callable[[T], T]

# ============================================================================
# Stage shortcuts
# ============================================================================

# Fallible stage: unary function returning Result
type Fallible[A, B, E] = Callable[[A], Result[B, E]]

# Optional stage: unary function returning Option
type Partial[A, B] = Callable[[A], Option[B]]

__all__ = (
    "Predicate",
    "Thunk",
    "Reducer",
    "Endo",
    "Fallible",
    "Partial",
)
