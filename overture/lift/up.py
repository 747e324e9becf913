"""
Подъем значений в Result / Option.

Bridges from exception-raising and None-returning Python code into the
containers the combinators work with.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, Nothing, Ok, Option, Result, Some


def catching[**P, T, E](
    fn: Callable[P, T],
    *,
    on_error: Callable[[Exception], E],
) -> Callable[P, Result[T, E]]:
    """
    Wrap a raising function into one returning Result.

    **When to use:** Bridge between exception-based code and pipe_throwing /
    result.zip_with.

    Example:
        from overture import lift as L

        parse_int = L.catching(int, on_error=lambda e: ParseError(str(e)))
        parse_int("42")   # Ok(42)
        parse_int("x")    # Error(ParseError(...))

    NOTE: Catches all Exception subclasses. For specific exceptions,
          filter in on_error or use try/except manually.
    """

    def caught(*args: P.args, **kwargs: P.kwargs) -> Result[T, E]:
        try:
            return Ok(fn(*args, **kwargs))
        except Exception as exc:
            return Error(on_error(exc))

    return caught


def optional[T](value: T | None, /) -> Option[T]:
    """
    Convert `T | None` to Option. None becomes Nothing().

    **When to use:** dict.get, re.match, ORM lookups, anything returning None
    for "missing".
    """
    if value is None:
        return Nothing()
    return Some(value)


def from_optional[T, E](option: Option[T], *, error: Callable[[], E]) -> Result[T, E]:
    """
    Convert Option to Result. Nothing() becomes Error(error()).

    NOTE: error is a thunk (zero-arg callable) to avoid computing
          the error when the value is present.
    """
    match option:
        case Nothing():
            return Error(error())
        case _:
            return Ok(option.unwrap())


__all__ = ("catching", "optional", "from_optional")
