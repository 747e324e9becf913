"""Tests for arity inference, checks and curried-form adapters."""

from __future__ import annotations

import pytest

from overture import MAX_ARITY, ArityError, arity_of, check_arity, curry_n, spread, uncurry_n


class TestArityOf:
    """Arity is read from required positional parameters."""

    def test_counts_positional(self):
        def f(a, b, c):
            return a + b + c

        assert arity_of(f) == 3

    def test_ignores_defaults_and_keyword_only(self):
        def f(a, b=1, *, c, d=2):
            return a

        assert arity_of(f) == 1

    def test_lambda_and_zero_arity(self):
        assert arity_of(lambda x, y: x) == 2
        assert arity_of(lambda: None) == 0

    def test_rejects_varargs(self):
        def f(*args):
            return args

        with pytest.raises(ArityError):
            arity_of(f)

    def test_arity_error_is_type_error(self):
        assert issubclass(ArityError, TypeError)


class TestCheckArity:
    """Build-time range checks."""

    def test_in_range_returns_value(self):
        assert check_arity(3, what="stages") == 3
        assert check_arity(MAX_ARITY, what="stages") == MAX_ARITY

    @pytest.mark.parametrize("n", [0, MAX_ARITY + 1])
    def test_out_of_range(self, n):
        with pytest.raises(ArityError) as info:
            check_arity(n, what="stages")
        assert info.value.actual == n
        assert info.value.what == "stages"

    def test_custom_low_bound(self):
        with pytest.raises(ArityError):
            check_arity(1, what="zip inputs", low=2)


class TestCurryN:
    """curry_n / uncurry_n adapters."""

    def test_defers_until_last_argument(self, counter):
        add3 = counter.track(lambda a, b, c: a + b + c)
        partial = curry_n(add3, 3)(1)(2)
        assert counter.calls == 0
        assert partial(3) == 6
        assert counter.calls == 1

    def test_partial_applications_are_reusable(self):
        curried = curry_n(lambda a, b: (a, b), 2)
        first = curried("x")
        assert first(1) == ("x", 1)
        assert first(2) == ("x", 2)
        assert curried("y")(1) == ("y", 1)

    def test_arity_one(self):
        assert curry_n(str.upper, 1)("abc") == "ABC"

    def test_rejects_arity_out_of_range(self):
        with pytest.raises(ArityError):
            curry_n(lambda: None, 0)
        with pytest.raises(ArityError):
            curry_n(lambda *a: a, MAX_ARITY + 1)

    def test_uncurry_n_wrong_call_count(self):
        uncurried = uncurry_n(curry_n(lambda a, b: a - b, 2), 2)
        assert uncurried(5, 3) == 2
        with pytest.raises(ArityError):
            uncurried(5)

    def test_max_arity_round_trip(self):
        def f(*xs):
            return sum(xs)

        curried = curry_n(f, MAX_ARITY)
        step = curried
        for i in range(MAX_ARITY - 1):
            step = step(i)
        assert step(MAX_ARITY - 1) == sum(range(MAX_ARITY))
        assert uncurry_n(curried, MAX_ARITY)(*range(MAX_ARITY)) == sum(range(MAX_ARITY))


class TestSpread:
    def test_spread_applies_tuple(self):
        assert spread(lambda a, b, c: a * b * c)((2, 3, 4)) == 24
