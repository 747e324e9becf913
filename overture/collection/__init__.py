from .fold import reduce
from .partition import partition
from .slicing import chunk, skip, take, window
from .traverse import (
    compact_map,
    compact_map_throwing,
    filter,
    filter_throwing,
    flat_map,
    flat_map_throwing,
    map,
    map_throwing,
    traverseM,
)

__all__ = (
    # Total
    "map",
    "filter",
    "flat_map",
    "compact_map",
    "reduce",
    "partition",
    # Slicing
    "take",
    "skip",
    "chunk",
    "window",
    # Fallible
    "traverseM",
    "map_throwing",
    "filter_throwing",
    "flat_map_throwing",
    "compact_map_throwing",
)
