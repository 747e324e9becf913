from .curry import (
    curry,
    curry2,
    curry3,
    curry4,
    curry5,
    curry6,
    curry7,
    curry8,
    curry9,
    curry10,
    uncurry,
    uncurry2,
    uncurry3,
    uncurry4,
    uncurry5,
    uncurry6,
    uncurry7,
    uncurry8,
    uncurry9,
    uncurry10,
)
from .flip import flip

__all__ = (
    # Curry
    "curry",
    "curry2",
    "curry3",
    "curry4",
    "curry5",
    "curry6",
    "curry7",
    "curry8",
    "curry9",
    "curry10",
    # Uncurry
    "uncurry",
    "uncurry2",
    "uncurry3",
    "uncurry4",
    "uncurry5",
    "uncurry6",
    "uncurry7",
    "uncurry8",
    "uncurry9",
    "uncurry10",
    # Flip
    "flip",
)
