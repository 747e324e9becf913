from . import option, result
from .base import zipM, zip_withM

__all__ = (
    # Namespaces (option.zip, result.zip, ...)
    "option",
    "result",
    # Generic
    "zipM",
    "zip_withM",
)
