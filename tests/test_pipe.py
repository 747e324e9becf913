"""Tests for pipe, pipe_throwing, chain, compose and concat."""

from __future__ import annotations

import pytest
from kungfu import Error, Nothing, Ok, Some

from _support import err_value, is_nothing, ok_value, some_value
from overture import (
    ArityError,
    chain,
    compose,
    compose_throwing,
    concat,
    concat_throwing,
    pipe,
    pipe2,
    pipe3,
    pipe10,
    pipe2_throwing,
    pipe3_throwing,
    pipe_throwing,
)


def inc(x: int) -> int:
    return x + 1


def double(x: int) -> int:
    return x * 2


def parse(text: str):
    return Ok(int(text)) if text.isdigit() else Error(f"not a number: {text!r}")


def positive(n: int):
    return Ok(n) if n > 0 else Error("not positive")


class TestPipe:
    """Left-to-right composition of total functions."""

    @pytest.mark.parametrize("x", [-3, 0, 7])
    def test_pipe_applies_left_to_right(self, x):
        assert pipe(inc, double, str)(x) == str(double(inc(x)))

    def test_single_stage_is_identity_composition(self):
        assert pipe(inc) is inc

    def test_ten_stages(self):
        assert pipe(*[inc] * 10)(0) == 10
        assert pipe10(inc, inc, inc, inc, inc, inc, inc, inc, inc, double)(0) == 18

    def test_fixed_arity_members(self):
        assert pipe2(inc, double)(1) == 4
        assert pipe3(str.strip, str.upper, len)("  ab ") == 2

    def test_stage_count_checked_at_build_time(self):
        with pytest.raises(ArityError):
            pipe()
        with pytest.raises(ArityError):
            pipe(*[inc] * 11)

    def test_composed_pipes_are_reusable(self):
        piped = pipe(inc, double)
        assert [piped(n) for n in range(3)] == [2, 4, 6]


class TestPipeThrowing:
    """Result-returning stages, first Error wins."""

    def test_all_stages_succeed(self):
        assert ok_value(pipe_throwing(parse, positive)("42")) == 42

    def test_first_failure_stops_pipe(self, counter):
        later = counter.track(positive)
        result = pipe_throwing(parse, later)("abc")
        assert err_value(result) == "not a number: 'abc'"
        assert counter.calls == 0

    def test_failure_in_middle_stage(self, counter):
        last = counter.track(lambda n: Ok(n * 10))
        result = pipe3_throwing(parse, positive, last)("0")
        assert err_value(result) == "not positive"
        assert counter.calls == 0

    def test_fixed_arity_member(self):
        assert ok_value(pipe2_throwing(parse, positive)("5")) == 5

    def test_single_stage(self):
        assert pipe_throwing(parse) is parse

    def test_stage_count_checked(self):
        with pytest.raises(ArityError):
            pipe_throwing()


class TestChain:
    """Option-returning stages, first Nothing() wins."""

    def test_present_all_the_way(self):
        halve = lambda n: Some(n // 2) if n % 2 == 0 else Nothing()
        assert some_value(chain(halve, halve)(8)) == 2

    def test_absent_stops_chain(self, counter):
        halve = lambda n: Some(n // 2) if n % 2 == 0 else Nothing()
        assert is_nothing(chain(halve, counter.track(halve))(3))
        assert counter.calls == 0


class TestCompose:
    """Right-to-left composition."""

    def test_compose_applies_right_to_left(self):
        assert compose(inc, double)(5) == 11

    def test_compose_throwing(self):
        assert ok_value(compose_throwing(positive, parse)("3")) == 3
        assert err_value(compose_throwing(positive, parse)("x")) == "not a number: 'x'"


class TestConcat:
    """Endo-function composition without an arity ceiling."""

    def test_no_functions_is_identity(self):
        assert concat()("same") == "same"
        assert ok_value(concat_throwing()(1)) == 1

    def test_many_functions(self):
        assert concat(*[inc] * 25)(0) == 25

    def test_concat_throwing_short_circuits(self, counter):
        guard = lambda n: Ok(n) if n < 3 else Error(n)
        tracked = counter.track(guard)
        result = concat_throwing(lambda n: Ok(n + 5), guard, tracked)(0)
        assert err_value(result) == 5
        assert counter.calls == 0
