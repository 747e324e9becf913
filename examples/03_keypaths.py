from __future__ import annotations

from _infra import Address, User, banner, run

from overture import keypath as K, map, option as O, pipe
from overture import lift as L


def main() -> None:
    banner("03_keypaths: getters/setters as plain functions + option.zip")

    users = [
        User(1, "ada", 36, Address("London", "Baker St")),
        User(2, "grace", 45, Address("Arlington", "Main St")),
    ]

    relocate = pipe(
        K.set_("address.city", "Lisbon"),
        K.over("name", str.title),
    )
    print(map(pipe(relocate, K.get("address.city")))(users))

    env = {"HOST": "localhost", "PORT": "8080"}
    endpoint = O.zip_with(
        lambda host, port: f"http://{host}:{port}",
        L.optional(env.get("HOST")),
        L.optional(env.get("PORT")),
    )
    print(L.or_else(endpoint, "<not configured>"))


if __name__ == "__main__":
    run(main)
