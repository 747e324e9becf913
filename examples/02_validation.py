from __future__ import annotations

from _infra import Address, Failure, User, banner, run, unsigned

from kungfu import Error, Ok, Result
from overture import lift as L, pipe_throwing, result as R, tap_err


def non_empty(field: str):
    def check(raw: str) -> Result[str, Failure]:
        text = raw.strip()
        return Ok(text) if text else Error(Failure(field, "empty"))

    return check


def at_least(field: str, minimum: int):
    def check(n: int) -> Result[int, Failure]:
        return Ok(n) if n >= minimum else Error(Failure(field, f"must be >= {minimum}"))

    return check


def main() -> None:
    banner("02_validation: pipe_throwing + result.zip_with, first failure wins")

    parse_age = pipe_throwing(unsigned("age"), at_least("age", 18))
    lookup_city = L.catching(
        {"ldn": "London", "lis": "Lisbon"}.__getitem__,
        on_error=lambda e: Failure("city", f"unknown code {e}"),
    )
    report = tap_err(lambda err: print(f"rejected -> {err}"))

    forms = [
        {"id": "1", "name": "Ada", "age": "36", "city": "ldn"},
        {"id": "2", "name": "Grace", "age": "abc", "city": "lis"},
        {"id": "x", "name": " ", "age": "12", "city": "nyc"},
    ]

    for form in forms:
        user = report(
            R.zip_with(
                lambda user_id, name, age, city: User(user_id, name, age, Address(city, "-")),
                unsigned("id")(form["id"]),
                non_empty("name")(form["name"]),
                parse_age(form["age"]),
                lookup_city(form["city"]),
            )
        )
        match user:
            case Ok(u):
                print(f"ok: {u}")
            case Error(_):
                pass


if __name__ == "__main__":
    run(main)
