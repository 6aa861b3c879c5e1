"""
Adapter definitions for every supported game.

Field spellings follow the datasets each scraper produces:

- DSR keeps requirements under ``req`` and some dumps spell faith ``fai``.
- DS2 uses ``req``/``requirements`` or flat long names (``strength``...).
- DS3 uses ``req``/``requirements`` with short codes.
- Bloodborne uses ``req`` with either short codes or long names.
- Elden Ring prefers ``requirements`` over ``req``.
"""

from .base import GameAdapter, RecordSchema
from ..models import RoundingMode, TwoHandRule

# ---------------------------------------------------------------------------
# Shared pieces
# ---------------------------------------------------------------------------

SOULS_ATTRS = ("str", "dex", "int", "fth")

SOULS_LABELS = {"str": "STR", "dex": "DEX", "int": "INT", "fth": "FTH"}

STANDARD_TWO_HAND = TwoHandRule(affected="str", multiplier=1.5, rounding=RoundingMode.FLOOR)

LONG_NAMES = {
    "str": ("strength",),
    "dex": ("dexterity",),
    "int": ("intelligence",),
    "fth": ("faith",),
    "arc": ("arcane",),
    "skl": ("skill",),
    "bld": ("bloodtinge",),
}

# ---------------------------------------------------------------------------
# Games, in display order
# ---------------------------------------------------------------------------

DARK_SOULS_REMASTERED = GameAdapter(
    id="DSR",
    label="Dark Souls Remastered",
    attrs=SOULS_ATTRS,
    two_hand=STANDARD_TWO_HAND,
    attr_labels=SOULS_LABELS,
    record=RecordSchema(
        containers=("req",),
        aliases={"fth": ("fth", "fai")},
        category_fields=("type", "category"),
        default_category="Weapon",
    ),
    dataset="dsr",
)

DARK_SOULS_2 = GameAdapter(
    id="DS2",
    label="Dark Souls II",
    attrs=SOULS_ATTRS,
    two_hand=STANDARD_TWO_HAND,
    attr_labels=SOULS_LABELS,
    record=RecordSchema(
        containers=("req", "requirements"),
        top_level={attr: LONG_NAMES[attr] for attr in SOULS_ATTRS},
    ),
    dataset="ds2",
)

DARK_SOULS_3 = GameAdapter(
    id="DS3",
    label="Dark Souls III",
    attrs=SOULS_ATTRS,
    two_hand=STANDARD_TWO_HAND,
    attr_labels=SOULS_LABELS,
    record=RecordSchema(containers=("req", "requirements")),
    dataset="ds3",
)

BLOODBORNE = GameAdapter(
    id="BB",
    label="Bloodborne",
    attrs=("str", "skl", "bld", "arc"),
    # Two-handing a trick weapon does not change its requirements
    two_hand=TwoHandRule(affected="str", multiplier=1.0, rounding=RoundingMode.FLOOR),
    attr_labels={"str": "Strength", "skl": "Skill", "bld": "Bloodtinge", "arc": "Arcane"},
    record=RecordSchema(
        containers=("req", "requirements"),
        aliases={attr: (attr, *LONG_NAMES[attr]) for attr in ("str", "skl", "bld", "arc")},
        default_category="Trick Weapon",
    ),
    dataset="bloodborne",
)

ELDEN_RING = GameAdapter(
    id="ER",
    label="Elden Ring",
    attrs=("str", "dex", "int", "fth", "arc"),
    two_hand=STANDARD_TWO_HAND,
    attr_labels={"str": "STR", "dex": "DEX", "int": "INT", "fth": "FAI", "arc": "ARC"},
    record=RecordSchema(containers=("requirements", "req")),
    dataset="eldenring",
)

GAMES: tuple[GameAdapter, ...] = (
    DARK_SOULS_REMASTERED,
    DARK_SOULS_2,
    DARK_SOULS_3,
    BLOODBORNE,
    ELDEN_RING,
)
