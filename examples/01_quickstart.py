from __future__ import annotations

import operator

from _infra import banner, run

from overture import curry, filter, flip, map, pipe, reduce, with_


def main() -> None:
    banner("01_quickstart: pipe + curry + map/filter/reduce")

    add = curry(operator.add)
    minus = flip(operator.sub)

    score = pipe(
        filter(lambda n: n % 2 == 0),
        map(add(10)),
        reduce(operator.add, 0),
        minus(100),
    )

    print(with_([1, 2, 3, 4, 5, 6])(score))


if __name__ == "__main__":
    run(main)
