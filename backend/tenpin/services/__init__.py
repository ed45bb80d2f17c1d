"""Internal application services (in-memory, no I/O)."""

from .games import GameRegistry

__all__ = [
    "GameRegistry",
]
