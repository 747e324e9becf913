from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from kungfu import Error, Ok, Result

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Failure:
    field: str
    message: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return f"{self.field}: {self.message}"


@dataclass(frozen=True, slots=True)
class Address:
    city: str
    street: str


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    age: int
    address: Address


def unsigned(field: str) -> Callable[[str], Result[int, Failure]]:
    def parse(raw: str) -> Result[int, Failure]:
        if raw.strip().isdecimal():
            return Ok(int(raw))
        return Error(Failure(field, f"not an unsigned int: {raw!r}"))

    return parse


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], None]) -> None:  # pragma: no cover (examples only)
    main()
