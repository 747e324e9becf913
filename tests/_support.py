"""Assertion helpers for kungfu containers."""

from __future__ import annotations

import typing

import pytest
from kungfu import Error, Nothing, Ok, Option, Result


def ok_value[T](result: Result[T, typing.Any]) -> T:
    match result:
        case Ok(v):
            return v
        case _:
            pytest.fail(f"expected Ok, got {result!r}")


def err_value[E](result: Result[typing.Any, E]) -> E:
    match result:
        case Error(e):
            return e
        case _:
            pytest.fail(f"expected Error, got {result!r}")


def some_value[T](option: Option[T]) -> T:
    if isinstance(option, Nothing):
        pytest.fail("expected Some, got Nothing()")
    return option.unwrap()


def is_nothing(option: Option[typing.Any]) -> bool:
    return isinstance(option, Nothing)
