"""
Per-game adapters that normalize raw weapon records into one canonical shape.
"""

from .base import GameAdapter, RecordSchema, as_requirement, first_present
from .games import (
    BLOODBORNE,
    DARK_SOULS_2,
    DARK_SOULS_3,
    DARK_SOULS_REMASTERED,
    ELDEN_RING,
    GAMES,
)

__all__ = [
    "GameAdapter",
    "RecordSchema",
    "as_requirement",
    "first_present",
    "GAMES",
    "DARK_SOULS_REMASTERED",
    "DARK_SOULS_2",
    "DARK_SOULS_3",
    "BLOODBORNE",
    "ELDEN_RING",
]
