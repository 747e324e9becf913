"""End-to-end: parse two fields and combine them into a user."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from kungfu import Error, Ok, Result

from _support import err_value, ok_value
from overture import lift as L, pipe_throwing, result as R


@dataclass(frozen=True)
class ParseError:
    field: str
    raw: str


@dataclass(frozen=True)
class User:
    id: int
    age: int


def parse_unsigned(field: str):
    def parse(raw: str) -> Result[int, ParseError]:
        if raw.isdecimal():
            return Ok(int(raw))
        return Error(ParseError(field, raw))

    return parse


parse_id = parse_unsigned("id")
parse_age = parse_unsigned("age")


@pytest.fixture
def make_user(counter):
    return counter.track(User)


def test_valid_input_builds_user(make_user, counter):
    user = ok_value(R.zip_with(make_user, parse_id("123"), parse_age("25")))
    assert user == User(id=123, age=25)
    assert counter.calls == 1


def test_bad_age_reports_age_error(make_user, counter):
    err = err_value(R.zip_with(make_user, parse_id("123"), parse_age("abc")))
    assert err == ParseError("age", "abc")
    assert counter.calls == 0


def test_superscript_digit_is_a_parse_error(make_user, counter):
    err = err_value(R.zip_with(make_user, parse_id("123"), parse_age("²")))
    assert err == ParseError("age", "²")
    assert counter.calls == 0


def test_both_bad_reports_first(make_user, counter):
    err = err_value(R.zip_with(make_user, parse_id("x"), parse_age("y")))
    assert err == ParseError("id", "x")
    assert counter.calls == 0


def test_validation_pipeline():
    adult = lambda age: Ok(age) if age >= 18 else Error(ParseError("age", str(age)))
    strip = L.catching(str.strip, on_error=lambda e: ParseError("age", repr(e)))
    validate_age = pipe_throwing(strip, parse_age, adult)

    assert ok_value(validate_age(" 30 ")) == 30
    assert err_value(validate_age("12")) == ParseError("age", "12")
