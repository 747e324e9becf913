from .compose import compose, compose_throwing
from .concat import concat, concat_throwing
from .pipe import (
    chain,
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

__all__ = (
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
    # Compose
    "compose",
    "compose_throwing",
    # Concat
    "concat",
    "concat_throwing",
)
