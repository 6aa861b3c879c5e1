"""
soulsreq - weapon requirement checker for Dark Souls, Bloodborne and Elden Ring.
"""

from .adapters import GAMES, GameAdapter, RecordSchema
from .errors import DataUnavailableError, SoulsreqError, UnknownGameError
from .models import (
    CORE_ATTRS,
    NormalizedWeapon,
    Preset,
    RoundingMode,
    TwoHandRule,
    Usability,
    stat_value,
)
from .presets import PresetTable, default_presets
from .registry import AdapterRegistry, default_registry
from .session import WeaponSession
from .usability import check_usability

try:
    from importlib.metadata import version as _get_version
    __version__ = _get_version("soulsreq")
except Exception:
    __version__ = "0.1.0"  # Fallback if metadata unavailable

__all__ = [
    "GAMES",
    "GameAdapter",
    "RecordSchema",
    "AdapterRegistry",
    "default_registry",
    "WeaponSession",
    "check_usability",
    "PresetTable",
    "default_presets",
    "NormalizedWeapon",
    "Preset",
    "RoundingMode",
    "TwoHandRule",
    "Usability",
    "CORE_ATTRS",
    "stat_value",
    "SoulsreqError",
    "DataUnavailableError",
    "UnknownGameError",
]
