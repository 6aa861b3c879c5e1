"""
Usability engine: can a stat block wield a weapon one-handed, two-handed, or not at all.
"""

from __future__ import annotations

import math
from fractions import Fraction

from .adapters.base import GameAdapter
from .models import NormalizedWeapon, RoundingMode, StatBlock, Usability, stat_value


def two_hand_value(value: int, multiplier: float, rounding: RoundingMode) -> int:
    """Apply a two-hand multiplier and round the result.

    ``ROUND`` rounds half up (16.5 -> 17), matching how the games
    display boosted values, rather than Python's banker's rounding.
    The product is exact in the multiplier's decimal form, so 10 x 1.1
    is 11 and not 11.000000000000002.
    """
    boosted = value * Fraction(str(multiplier))
    if rounding == RoundingMode.FLOOR:
        return math.floor(boosted)
    if rounding == RoundingMode.CEIL:
        return math.ceil(boosted)
    return math.floor(boosted + Fraction(1, 2))


def meets_requirements(requirements: StatBlock, stats: StatBlock) -> bool:
    """True when every requirement is met by the stat block (absent stats read as 0)."""
    return all(stat_value(stats, attr) >= (req or 0) for attr, req in requirements.items())


def boosted_stats(stats: StatBlock, adapter: GameAdapter) -> dict[str, int]:
    """Copy of ``stats`` with the game's two-hand attribute boosted."""
    rule = adapter.two_hand
    boosted = dict(stats)
    boosted[rule.affected] = two_hand_value(stat_value(stats, rule.affected), rule.multiplier, rule.rounding)
    return boosted


def can_two_hand(weapon: NormalizedWeapon, adapter: GameAdapter) -> bool:
    """Whether the two-hand boost is considered at all for this weapon."""
    return weapon.two_hand_rule is not False and adapter.two_hand.multiplier != 1


def check_usability(weapon: NormalizedWeapon, stats: StatBlock, adapter: GameAdapter) -> Usability:
    """Evaluate a weapon against a player's stat block under a game's rules.

    Args:
        weapon: Normalized weapon.
        stats: Player attributes; absent keys read as 0. Not modified.
        adapter: The weapon's game adapter.

    Returns:
        ``ONE_HANDED`` if requirements are met as-is, ``TWO_HANDED`` if they
        are only met with the game's two-hand boost, otherwise ``NOT_USABLE``.
    """
    if meets_requirements(weapon.requirements, stats):
        return Usability.ONE_HANDED

    if not can_two_hand(weapon, adapter):
        return Usability.NOT_USABLE

    if meets_requirements(weapon.requirements, boosted_stats(stats, adapter)):
        return Usability.TWO_HANDED
    return Usability.NOT_USABLE
