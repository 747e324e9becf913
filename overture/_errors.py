from __future__ import annotations

class ArityError(TypeError):
    """Combinator built (or uncurried chain called) with the wrong number of arguments."""

    what: str
    actual: int | None
    expected: str

    def __init__(self, what: str, actual: int | None, expected: str) -> None:
        self.what = what
        self.actual = actual
        self.expected = expected
        if actual is None:
            super().__init__(f"{what}: expected {expected}")
        else:
            super().__init__(f"{what}: got {actual}, expected {expected}")

__all__ = ("ArityError",)
