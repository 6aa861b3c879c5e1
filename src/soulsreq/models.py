"""
Data models shared by the adapters, the usability engine and the presets.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Literal, Mapping

from pydantic import BaseModel, Field, field_validator

# Attribute universe across all supported games
CoreAttr = Literal["str", "dex", "int", "fth", "arc", "skl", "bld"]
CORE_ATTRS: tuple[str, ...] = ("str", "dex", "int", "fth", "arc", "skl", "bld")

GameId = Literal["DSR", "DS2", "DS3", "BB", "ER"]

# Partial attribute map, used both for player stats and requirement thresholds
StatBlock = Mapping[str, int]


def stat_value(block: StatBlock | None, key: str) -> int:
    """Read an attribute from a partial stat block; absent keys read as 0."""
    if not block:
        return 0
    value = block.get(key)
    return value if value is not None else 0


class RoundingMode(str, Enum):
    """How the boosted two-hand value is converted back to an integer."""
    FLOOR = "floor"
    ROUND = "round"
    CEIL = "ceil"


class Usability(str, Enum):
    """Usability verdict for a weapon against a stat block."""
    ONE_HANDED = "1H"
    TWO_HANDED = "2H"
    NOT_USABLE = "NO"


class TwoHandRule(BaseModel):
    """Game-wide boost applied to one attribute when wielding two-handed.

    A multiplier of exactly 1.0 means the game has no requirement boost
    for two-handing (Bloodborne).
    """
    model_config = {"frozen": True}

    affected: CoreAttr = Field(default="str", description="Attribute boosted when two-handing")
    multiplier: float = Field(default=1.5, ge=1.0, description="Boost multiplier, 1.0 disables the rule")
    rounding: RoundingMode = Field(default=RoundingMode.FLOOR, description="Rounding of the boosted value")


class NormalizedWeapon(BaseModel):
    """A weapon record in the canonical shape, independent of its source game."""
    model_config = {"frozen": True}

    id: str = Field(description="Identifier unique within the game's dataset")
    name: str = Field(description="Display name")
    category: str = Field(description="Weapon class, used for grouping and ordering only")
    requirements: Mapping[CoreAttr, int] = Field(
        default_factory=dict,
        validate_default=True,
        description="Minimum attribute values needed to wield the weapon (read-only)",
    )
    two_hand_rule: bool | None = Field(
        default=None,
        description="False disables the game's two-hand boost for this weapon; None/True defer to the game",
    )

    @field_validator("requirements", mode="after")
    @classmethod
    def _freeze_requirements(cls, value: Mapping[str, int]) -> Mapping[str, int]:
        return MappingProxyType(dict(value))


class Preset(BaseModel):
    """A named starting stat block (usually a starting class) for one game."""
    model_config = {"frozen": True}

    name: str = Field(description="Preset display name")
    stats: dict[CoreAttr, int] = Field(default_factory=dict, description="Attribute values")
