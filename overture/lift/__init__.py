"""
Lift helpers with semantic namespaces.

Supports the same import styles as the rest of the library:
    from overture import lift as L      # Recommended
    from overture import lift           # Explicit

Architecture:
- L.up.*    - подъем значений в Result / Option
- L.down.*  - опускание Result / Option в значение

Examples:
    from overture import lift as L

    parse = L.catching(int, on_error=str)
    maybe = L.optional(os.environ.get("PORT"))
    port = L.from_optional(maybe, error=lambda: "PORT is not set")
    value = L.or_else(port, 8080)
"""

from __future__ import annotations

from . import down, up
from .down import or_else, to_optional
from .up import catching, from_optional, optional

__all__ = (
    # Namespaces (L.up.*, L.down.*)
    "up",
    "down",
    # Up
    "catching",
    "optional",
    "from_optional",
    # Down
    "to_optional",
    "or_else",
)
