"""Tests for zipping Result values."""

from __future__ import annotations

import pytest
from kungfu import Error, Ok

from _support import err_value, ok_value
from overture import ArityError, pipe, result as R, zipM
from overture._helpers import extract_result


class TestZip:
    """Ok(tuple) or the first Error in argument order."""

    def test_all_ok(self):
        assert ok_value(R.zip(Ok(1), Ok("a"), Ok(2.5))) == (1, "a", 2.5)

    def test_first_failure_wins(self):
        assert err_value(R.zip(Error("e1"), Error("e2"))) == "e1"
        assert err_value(R.zip(Ok(1), Error("e2"), Error("e3"))) == "e2"

    def test_fixed_arity_members(self):
        assert ok_value(R.zip2(Ok(1), Ok(2))) == (1, 2)
        assert err_value(R.zip5(Ok(1), Ok(2), Ok(3), Error("late"), Ok(5))) == "late"
        assert ok_value(R.zip10(*[Ok(n) for n in range(10)])) == tuple(range(10))

    def test_input_count_checked(self):
        with pytest.raises(ArityError):
            R.zip(Ok(1))


class TestZipWith:
    """Combining function runs only when all inputs succeeded."""

    def test_all_ok(self):
        assert ok_value(R.zip_with(lambda a, b: a * b, Ok(6), Ok(7))) == 42

    def test_failure_never_calls_function(self, forbidden):
        assert err_value(R.zip_with(forbidden, Ok(1), Error("bad"))) == "bad"
        assert err_value(R.zip3_with(forbidden, Error("a"), Ok(2), Error("c"))) == "a"

    def test_fixed_arity_member(self):
        total = R.zip4_with(lambda a, b, c, d: a + b + c + d, Ok(1), Ok(2), Ok(3), Ok(4))
        assert ok_value(total) == 10


class TestSequence:
    def test_sequence_collects(self):
        assert ok_value(R.sequence([Ok(1), Ok(2), Ok(3)])) == [1, 2, 3]
        assert ok_value(R.sequence([])) == []

    def test_sequence_stops_at_first_error(self):
        consumed: list[int] = []

        def results():
            for n in range(5):
                consumed.append(n)
                yield Ok(n) if n != 1 else Error(f"bad {n}")

        assert err_value(R.sequence(results())) == "bad 1"
        assert consumed == [0, 1]


class TestPointFree:
    """map / flat_map / map_error as pipe stages."""

    def test_map(self):
        assert ok_value(R.map(str.upper)(Ok("ada"))) == "ADA"

    def test_map_skips_error(self, forbidden):
        assert err_value(R.map(forbidden)(Error("e"))) == "e"

    def test_flat_map(self):
        half = lambda n: Ok(n // 2) if n % 2 == 0 else Error(f"odd {n}")
        assert ok_value(R.flat_map(half)(Ok(10))) == 5
        assert err_value(R.flat_map(half)(Ok(3))) == "odd 3"

    def test_flat_map_skips_error(self, forbidden):
        assert err_value(R.flat_map(forbidden)(Error("e"))) == "e"

    def test_map_error(self, forbidden):
        assert err_value(R.map_error(len)(Error("four"))) == 4
        assert ok_value(R.map_error(forbidden)(Ok(1))) == 1

    def test_in_pipe(self):
        describe = pipe(R.map(lambda n: n + 1), R.map_error(lambda e: f"failed: {e}"))
        assert ok_value(describe(Ok(1))) == 2
        assert err_value(describe(Error("x"))) == "failed: x"


class TestZipM:
    """Generic zip over a custom container."""

    def test_custom_wrap(self):
        raws = [Ok(1), Ok(2)]
        summary = zipM(
            *raws,
            extract=extract_result,
            wrap_ok=lambda values: ("ok", values),
            wrap_err=lambda e: ("err", e),
        )
        assert summary == ("ok", (1, 2))
