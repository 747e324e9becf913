from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

import pytest


@dataclass(slots=True)
class Counter:
    """Records how many times tracked functions ran."""

    calls: int = 0

    def track[**P, R](self, fn: Callable[P, R]) -> Callable[P, R]:
        def tracked(*args: P.args, **kwargs: P.kwargs) -> R:
            self.calls += 1
            return fn(*args, **kwargs)

        return tracked


@pytest.fixture
def counter() -> Counter:
    return Counter()


@pytest.fixture
def forbidden() -> Callable[..., typing.NoReturn]:
    """A function that fails the test if it is ever called."""

    def never_call(*args: object, **kwargs: object) -> typing.NoReturn:
        pytest.fail(f"unexpected call with {args!r} {kwargs!r}")

    return never_call
