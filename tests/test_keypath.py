"""Tests for keypath getters and immutable setters."""

from __future__ import annotations

from dataclasses import dataclass, field

from overture import keypath as K, map, pipe


@dataclass(frozen=True)
class Address:
    city: str
    zip_code: str


@dataclass(frozen=True)
class User:
    name: str
    age: int
    address: Address


@dataclass(frozen=True)
class Tagged:
    name: str
    label: str = field(init=False, default="untagged")


@dataclass
class Cached:
    value: int
    hits: int = field(init=False, default=0)


class Plain:
    def __init__(self, value: int) -> None:
        self.value = value


def make_user() -> User:
    return User(name="ada", age=36, address=Address(city="London", zip_code="N1"))


class TestGet:
    def test_get_nested(self):
        assert K.get("address.city")(make_user()) == "London"

    def test_get_composes_with_map(self):
        users = [make_user(), make_user()]
        assert map(K.get("age"))(users) == [36, 36]


class TestSetters:
    def test_over_does_not_mutate(self):
        user = make_user()
        older = K.over("age", lambda n: n + 1)(user)
        assert older.age == 37
        assert user.age == 36

    def test_set_nested(self):
        user = make_user()
        moved = K.set_("address.city", "Lisbon")(user)
        assert moved.address.city == "Lisbon"
        assert moved.address.zip_code == "N1"
        assert user.address.city == "London"

    def test_prop(self):
        shout = K.prop("name")(str.upper)
        assert shout(make_user()).name == "ADA"

    def test_plain_objects_are_copied(self):
        original = Plain(1)
        updated = K.set_("value", 2)(original)
        assert updated.value == 2
        assert original.value == 1
        assert updated is not original

    def test_init_false_field_on_frozen_dataclass(self):
        original = Tagged("ada")
        tagged = K.set_("label", "admin")(original)
        assert (tagged.name, tagged.label) == ("ada", "admin")
        assert original.label == "untagged"

    def test_init_false_field_on_mutable_dataclass(self):
        original = Cached(1)
        bumped = K.over("hits", lambda n: n + 1)(original)
        assert (bumped.value, bumped.hits) == (1, 1)
        assert original.hits == 0

    def test_setters_compose(self):
        update = pipe(K.set_("name", "grace"), K.over("age", lambda n: n * 2))
        user = update(make_user())
        assert (user.name, user.age) == ("grace", 72)
