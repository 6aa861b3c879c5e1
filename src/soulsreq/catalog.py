"""
Bulk evaluation and ordering of a game's weapons against one stat block.

Two layouts are supported:

- list: every weapon sorted by verdict (1H, 2H, NO), then by the order
  in which its category first appears in the dataset, then by name.
- block: weapons grouped by category (dataset order), each group sorted
  by verdict then name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .adapters.base import GameAdapter
from .models import NormalizedWeapon, StatBlock, Usability, stat_value
from .usability import check_usability

STATUS_RANK: dict[Usability, int] = {
    Usability.ONE_HANDED: 0,
    Usability.TWO_HANDED: 1,
    Usability.NOT_USABLE: 2,
}

# Rank for categories missing from the order map
_UNORDERED = 1 << 30


@dataclass(frozen=True)
class RatedWeapon:
    """A weapon paired with its verdict."""
    weapon: NormalizedWeapon
    status: Usability

    def to_dict(self) -> dict:
        return {
            "id": self.weapon.id,
            "name": self.weapon.name,
            "category": self.weapon.category,
            "requirements": dict(self.weapon.requirements),
            "status": self.status.value,
        }


@dataclass
class CategoryGroup:
    """Weapons of one category for the block layout."""
    category: str
    items: list[RatedWeapon] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "category": self.category,
            "count": len(self.items),
            "items": [item.to_dict() for item in self.items],
        }


def rate_weapons(
    weapons: Iterable[NormalizedWeapon],
    stats: StatBlock,
    adapter: GameAdapter,
) -> list[RatedWeapon]:
    """Evaluate every weapon against the stat block, keeping input order."""
    return [RatedWeapon(weapon, check_usability(weapon, stats, adapter)) for weapon in weapons]


def category_order(weapons: Iterable[NormalizedWeapon]) -> dict[str, int]:
    """Index of each category by first appearance."""
    order: dict[str, int] = {}
    for weapon in weapons:
        order.setdefault(weapon.category, len(order))
    return order


def hide_unusable(rated: Iterable[RatedWeapon]) -> list[RatedWeapon]:
    return [item for item in rated if item.status != Usability.NOT_USABLE]


def sort_for_list(rated: Iterable[RatedWeapon], order: dict[str, int]) -> list[RatedWeapon]:
    """Verdict first, then category order, then name (case-insensitive)."""
    return sorted(
        rated,
        key=lambda item: (
            STATUS_RANK[item.status],
            order.get(item.weapon.category, _UNORDERED),
            item.weapon.name.casefold(),
        ),
    )


def group_by_category(rated: Iterable[RatedWeapon], order: dict[str, int]) -> list[CategoryGroup]:
    """Group by category in dataset order; inside a group, verdict then name."""
    groups: dict[str, CategoryGroup] = {}
    for item in rated:
        groups.setdefault(item.weapon.category, CategoryGroup(item.weapon.category)).items.append(item)

    result = sorted(groups.values(), key=lambda g: order.get(g.category, _UNORDERED))
    for group in result:
        group.items.sort(key=lambda item: (STATUS_RANK[item.status], item.weapon.name.casefold()))
    return result


def summarize(rated: Iterable[RatedWeapon]) -> dict[str, int]:
    """Count of weapons per verdict, keyed by verdict value."""
    counts = {status.value: 0 for status in Usability}
    for item in rated:
        counts[item.status.value] += 1
    return counts


def build_listing(
    weapons: list[NormalizedWeapon],
    stats: StatBlock,
    adapter: GameAdapter,
    layout: str = "list",
    unusable: bool = True,
) -> dict:
    """Evaluate, filter and lay out a game's weapons as a serializable dict.

    Args:
        weapons: The game's normalized weapons, in dataset order.
        stats: Player attributes.
        adapter: The game's adapter.
        layout: "list" for one sorted list, "block" for category groups.
        unusable: Include weapons the stat block cannot wield.

    Returns:
        Dict with game info, verdict counts over all weapons, the number
        shown, and either ``items`` or ``groups``.
    """
    if layout not in ("list", "block"):
        raise ValueError(f"Unknown layout '{layout}', expected 'list' or 'block'")

    rated = rate_weapons(weapons, stats, adapter)
    order = category_order(weapons)
    visible = rated if unusable else hide_unusable(rated)

    listing: dict = {
        "game": adapter.id,
        "label": adapter.label,
        "stats": {attr: stat_value(stats, attr) for attr in adapter.attrs},
        "summary": summarize(rated),
        "shown": len(visible),
        "total": len(rated),
    }
    if layout == "list":
        listing["items"] = [item.to_dict() for item in sort_for_list(visible, order)]
    else:
        listing["groups"] = [group.to_dict() for group in group_by_category(visible, order)]
    return listing
