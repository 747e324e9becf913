"""
Overture: functional combinators for composing plain Python functions.

Small, generic operators for building pipelines point-free: composition,
currying, zipping of optional and fallible values, and sequence transforms.

Architecture:
- Families generic over arity are defined once (variadic) with typed
  numbered entry points: pipe3, curry7, result.zip10_with, ...
- Generic combinators (*M functions) work with any container via the
  extract + wrap pattern
- Optional values are kungfu Option (Some / Nothing()), fallible values
  are kungfu Result (Ok / Error)
"""

# Core types
from ._types import Endo, Fallible, Partial, Predicate, Reducer, Thunk

# Internal helpers (for custom containers)
from . import _helpers

# Arity support
from . import arity
from .arity import MAX_ARITY, arity_of, check_arity, curry_n, spread, uncurry_n

# Composition
from .composition import (
    chain,
    compose,
    compose_throwing,
    concat,
    concat_throwing,
    pipe,
    pipe2,
    pipe3,
    pipe4,
    pipe5,
    pipe6,
    pipe7,
    pipe8,
    pipe9,
    pipe10,
    pipe_throwing,
    pipe2_throwing,
    pipe3_throwing,
    pipe4_throwing,
    pipe5_throwing,
    pipe6_throwing,
    pipe7_throwing,
    pipe8_throwing,
    pipe9_throwing,
    pipe10_throwing,
    pipeM,
)

# Curry / uncurry / flip
from .currying import (
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
    flip,
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

# Zip (namespace import: option.zip, result.zip)
from .zipping import option, result, zipM, zip_withM

# Sequence combinators
from .collection import (
    chunk,
    compact_map,
    compact_map_throwing,
    filter,
    filter_throwing,
    flat_map,
    flat_map_throwing,
    map,
    map_throwing,
    partition,
    reduce,
    skip,
    take,
    traverseM,
    window,
)

# Application, thunks, effects
from .apply import lazy, tap, tap_err, tap_ok, unzurry, with_, zurry

# Lift helpers
from . import lift

# Keypaths
from . import keypath

# Errors
from ._errors import ArityError

__all__ = (
    # Types
    "Endo",
    "Fallible",
    "Partial",
    "Predicate",
    "Reducer",
    "Thunk",
    # Internal helpers (for custom containers)
    "_helpers",
    # Arity
    "arity",
    "MAX_ARITY",
    "arity_of",
    "check_arity",
    "curry_n",
    "uncurry_n",
    "spread",
    # Pipe - total
    "pipe",
    "pipe2",
    "pipe3",
    "pipe4",
    "pipe5",
    "pipe6",
    "pipe7",
    "pipe8",
    "pipe9",
    "pipe10",
    # Pipe - Result
    "pipe_throwing",
    "pipe2_throwing",
    "pipe3_throwing",
    "pipe4_throwing",
    "pipe5_throwing",
    "pipe6_throwing",
    "pipe7_throwing",
    "pipe8_throwing",
    "pipe9_throwing",
    "pipe10_throwing",
    # Pipe - Option
    "chain",
    # Pipe - Generic
    "pipeM",
    # Compose / concat
    "compose",
    "compose_throwing",
    "concat",
    "concat_throwing",
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
    # Zip
    "option",
    "result",
    "zipM",
    "zip_withM",
    # Sequence
    "map",
    "filter",
    "flat_map",
    "compact_map",
    "reduce",
    "partition",
    "take",
    "skip",
    "chunk",
    "window",
    # Sequence - fallible
    "traverseM",
    "map_throwing",
    "filter_throwing",
    "flat_map_throwing",
    "compact_map_throwing",
    # Apply
    "with_",
    "zurry",
    "unzurry",
    "lazy",
    "tap",
    "tap_ok",
    "tap_err",
    # Lift module
    "lift",
    # Keypath module
    "keypath",
    # Errors
    "ArityError",
)
