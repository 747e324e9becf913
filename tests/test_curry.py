"""Tests for curry, uncurry and flip."""

from __future__ import annotations

import pytest

from overture import (
    ArityError,
    curry,
    curry2,
    curry3,
    curry10,
    flip,
    pipe,
    uncurry,
    uncurry2,
    uncurry3,
    uncurry10,
)


def greet(greeting: str, name: str) -> str:
    return f"{greeting}, {name}!"


def volume(w: int, h: int, d: int) -> int:
    return w * h * d


def ten(a, b, c, d, e, f, g, h, i, j):
    return [a, b, c, d, e, f, g, h, i, j]


class TestCurry:
    """curry(f)(a1)...(aN) == f(a1, ..., aN)."""

    def test_curry_infers_arity(self):
        assert curry(greet)("Hello")("Ada") == greet("Hello", "Ada")
        assert curry(volume)(2)(3)(4) == 24

    def test_explicit_arity_for_varargs(self):
        join = lambda *parts: "-".join(parts)
        assert curry(join, 3)("a")("b")("c") == "a-b-c"
        with pytest.raises(ArityError):
            curry(join)

    def test_fixed_arity_members(self):
        assert curry2(greet)("Hi")("Bob") == "Hi, Bob!"
        assert curry3(volume)(1)(2)(3) == 6
        step = curry10(ten)
        for n in range(9):
            step = step(n)
        assert step(9) == list(range(10))

    def test_nothing_runs_before_last_argument(self, counter):
        tracked = counter.track(volume)
        waiting = curry(tracked, 3)(2)(3)
        assert counter.calls == 0
        assert waiting(5) == 30
        assert counter.calls == 1

    def test_curried_functions_compose_with_pipe(self):
        add = curry(lambda a, b: a + b)
        mul = curry(lambda a, b: a * b)
        assert pipe(add(1), mul(3))(4) == 15


class TestUncurry:
    """uncurry(curry(f)) is f."""

    @pytest.mark.parametrize("args", [(1, 2, 3), (0, 5, 9), (-1, 4, 2)])
    def test_round_trip(self, args):
        assert uncurry(curry(volume), 3)(*args) == volume(*args)

    def test_fixed_arity_members(self):
        assert uncurry2(lambda a: lambda b: a - b)(10, 4) == 6
        assert uncurry3(curry3(volume))(2, 2, 2) == 8
        assert uncurry10(curry10(ten))(*range(10)) == list(range(10))

    def test_wrong_argument_count(self):
        with pytest.raises(ArityError):
            uncurry(curry(volume), 3)(1, 2)


class TestFlip:
    """flip swaps the first two argument positions."""

    def test_flip_law(self):
        assert flip(greet)("Ada")("Hello") == greet("Hello", "Ada")

    def test_direct_call(self):
        assert flip(greet)("Ada", "Hello") == "Hello, Ada!"

    def test_only_first_two_swapped(self):
        triple = lambda a, b, c: (a, b, c)
        assert flip(triple)("b", "a", "c") == ("a", "b", "c")
        assert flip(triple)("b")("a", "c") == ("a", "b", "c")

    def test_flip_curried_chain(self):
        curried = curry(greet)
        assert flip(curried, curried=True)("Ada")("Hello") == "Hello, Ada!"

    def test_flip_curried_leaves_later_positions(self):
        curried = curry(lambda a, b, c: (a, b, c))
        assert flip(curried, curried=True)(2)(1)(3) == (1, 2, 3)

    def test_flip_is_lazy(self, counter):
        tracked = counter.track(greet)
        waiting = flip(tracked)("Ada")
        assert counter.calls == 0
        assert waiting("Hey") == "Hey, Ada!"
