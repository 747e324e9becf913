"""
Keypath combinators
===================

Property access and immutable update as plain unary functions, so they
compose with pipe, map and the zip family.

Paths are dotted attribute names ("address.city"). Updates never mutate
the root: dataclasses are rebuilt with dataclasses.replace; other objects
(and dataclass fields declared init=False) are shallow-copied with
copy.copy before the attribute is set.

    city = get("address.city")
    relocate = set_("address.city", "Lisbon")
    shout = over("name", str.upper)

    pipe(relocate, shout)(user)
"""

from __future__ import annotations

import copy
import dataclasses
import operator
import typing
from collections.abc import Callable


def get[Root](path: str, /) -> Callable[[Root], typing.Any]:
    """Getter for a dotted attribute path."""
    return operator.attrgetter(path)


def prop[Root, V](path: str, /) -> Callable[[Callable[[V], V]], Callable[[Root], Root]]:
    """
    Immutable setter for a dotted attribute path.

    prop(path)(update)(root) returns a copy of root whose attribute at path
    is update(old value). Every object along the path is copied, none mutated.
    """
    head, _, tail = path.partition(".")

    def with_update(update: Callable[[V], V], /) -> Callable[[Root], Root]:
        def updated(root: Root, /) -> Root:
            old = getattr(root, head)
            new = prop(tail)(update)(old) if tail else update(old)
            return _replace(root, head, new)

        return updated

    return with_update


def over[Root, V](path: str, update: Callable[[V], V], /) -> Callable[[Root], Root]:
    """prop(path)(update): copy of the root with the value at path transformed."""
    return prop(path)(update)


def set_[Root, V](path: str, value: V, /) -> Callable[[Root], Root]:
    """Copy of the root with the value at path replaced. Trailing `_`: `set` is a builtin."""

    def replace_with(_: V, /) -> V:
        return value

    return over(path, replace_with)


def _replace[Root](root: Root, name: str, value: typing.Any) -> Root:
    if dataclasses.is_dataclass(root) and not isinstance(root, type) and _in_init(root, name):
        return typing.cast(Root, dataclasses.replace(root, **{name: value}))
    clone = copy.copy(root)
    # object.__setattr__ also reaches fields of frozen dataclasses
    object.__setattr__(clone, name, value)
    return clone


def _in_init(root: typing.Any, name: str) -> bool:
    # dataclasses.replace rejects init=False fields
    field = root.__dataclass_fields__.get(name)
    return field is not None and field.init


__all__ = ("get", "prop", "over", "set_")
