from .effects import tap, tap_err, tap_ok
from .thunk import lazy, unzurry, zurry
from .with_ import Applied, with_

__all__ = (
    # Application
    "Applied",
    "with_",
    # Thunks
    "zurry",
    "unzurry",
    "lazy",
    # Effects
    "tap",
    "tap_ok",
    "tap_err",
)
