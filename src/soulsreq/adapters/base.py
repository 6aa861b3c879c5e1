"""
Game adapter model and the lenient record normalizer.

Each supported game is described by a ``GameAdapter``: plain configuration
(attributes, labels, two-hand rule, dataset name) plus a ``RecordSchema``
that says where a raw record keeps its requirement values. ``normalize``
turns any raw record into a ``NormalizedWeapon`` without raising; missing
or malformed values degrade to 0 requirements and default categories.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, model_validator

from ..models import CoreAttr, GameId, NormalizedWeapon, TwoHandRule

if TYPE_CHECKING:
    from ..providers import DatasetProvider

UNKNOWN_WEAPON_NAME = "Unknown Weapon"

# Raw keys that carry the per-weapon two-hand override
TWO_HAND_OVERRIDE_KEYS: tuple[str, ...] = ("twoHandRule", "two_hand_rule")


# ---------------------------------------------------------------------------
# Lenient accessors
# ---------------------------------------------------------------------------

def as_requirement(value: Any) -> int:
    """Coerce a raw requirement value to a non-negative int.

    Ints and floats are truncated, numeric strings are parsed, and
    anything else (None, booleans, dicts, junk text) reads as 0.

    Args:
        value: Raw value from a scraped record.

    Returns:
        Requirement value, never negative.
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, str):
        text = value.strip()
        try:
            value = float(text)
        except ValueError:
            return 0
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return 0
        return max(int(value), 0)
    return 0


def first_present(obj: Any, keys: tuple[str, ...]) -> Any:
    """Return the value of the first key present (not None) in ``obj``.

    Later keys are only consulted when every earlier key is absent, so a
    canonical spelling always wins over an alternate one.
    """
    if not isinstance(obj, dict):
        return None
    for key in keys:
        value = obj.get(key)
        if value is not None:
            return value
    return None


def pick_container(raw: dict, containers: tuple[str, ...]) -> dict | None:
    """Return the first nested requirement object present in ``raw``."""
    for key in containers:
        value = raw.get(key)
        if value is not None:
            return value if isinstance(value, dict) else None
    return None


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

class RecordSchema(BaseModel):
    """Where a game's raw records keep names, categories and requirements."""
    model_config = {"frozen": True}

    containers: tuple[str, ...] = Field(
        default=("req", "requirements"),
        description="Nested requirement objects, first present one is used",
    )
    aliases: dict[CoreAttr, tuple[str, ...]] = Field(
        default_factory=dict,
        description="Key spellings inside the container per attribute, canonical first",
    )
    top_level: dict[CoreAttr, tuple[str, ...]] = Field(
        default_factory=dict,
        description="Key spellings on the record itself, read when the container has no value",
    )
    category_fields: tuple[str, ...] = Field(
        default=("category",),
        description="Raw keys holding the weapon class, first present one is used",
    )
    default_category: str = Field(default="Weapon", description="Category when the record has none")


class GameAdapter(BaseModel):
    """Declarative configuration for one supported game."""
    model_config = {"frozen": True}

    id: GameId = Field(description="Game identifier, unique per registry")
    label: str = Field(description="Display name of the game")
    attrs: tuple[CoreAttr, ...] = Field(description="Attributes relevant to this game, in display order")
    two_hand: TwoHandRule = Field(default_factory=TwoHandRule, description="Two-hand boost rule")
    attr_labels: dict[CoreAttr, str] = Field(default_factory=dict, description="Display label per attribute")
    record: RecordSchema = Field(default_factory=RecordSchema, description="Raw record layout")
    dataset: str = Field(description="Dataset basename the provider is asked for")

    @model_validator(mode="after")
    def _check_two_hand_attr(self) -> "GameAdapter":
        if self.two_hand.affected not in self.attrs:
            raise ValueError(
                f"Two-hand attribute '{self.two_hand.affected}' is not one of {self.id}'s attributes"
            )
        return self

    def attr_label(self, attr: str) -> str:
        """Display label for an attribute, falling back to its upper-cased key."""
        return self.attr_labels.get(attr, attr.upper())

    def normalize(self, raw: Any) -> NormalizedWeapon:
        """Map a raw dataset record to the canonical weapon shape.

        Never raises: anything missing or malformed degrades to a zero
        requirement, the default category, or an unknown name.

        Args:
            raw: One record from the game's raw dataset.

        Returns:
            The normalized weapon.
        """
        if not isinstance(raw, dict):
            raw = {}
        schema = self.record

        name = raw.get("name")
        name = str(name) if name is not None else UNKNOWN_WEAPON_NAME
        raw_id = raw.get("id")
        weapon_id = str(raw_id) if raw_id is not None else name

        category = next(
            (
                raw[key] for key in schema.category_fields
                if isinstance(raw.get(key), str) and raw[key].strip()
            ),
            schema.default_category,
        )

        container = pick_container(raw, schema.containers)
        requirements: dict[str, int] = {}
        for attr in self.attrs:
            value = first_present(container, schema.aliases.get(attr, (attr,)))
            if value is None and attr in schema.top_level:
                value = first_present(raw, schema.top_level[attr])
            requirements[attr] = as_requirement(value)

        override = first_present(raw, TWO_HAND_OVERRIDE_KEYS)

        return NormalizedWeapon(
            id=weapon_id,
            name=name,
            category=category,
            requirements=requirements,
            two_hand_rule=override if isinstance(override, bool) else None,
        )

    async def load_data(self, provider: "DatasetProvider") -> list[dict]:
        """Fetch this game's raw records from a dataset provider."""
        return await provider.fetch(self.dataset)
