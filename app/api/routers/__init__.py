"""Router modules exposed for convenient imports."""

from . import equipment, healthz, readyz

__all__ = [
    "equipment",
    "healthz",
    "readyz",
]
