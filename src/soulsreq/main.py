"""
soulsreq MCP Server
Exposes the weapon requirement checker as FastMCP tools.
"""

import json
import logging
from typing import Annotated, Literal

from fastmcp import FastMCP
from pydantic import Field

from .catalog import build_listing
from .config import Settings
from .errors import DataUnavailableError, UnknownGameError
from .presets import apply_preset, default_presets
from .registry import default_registry
from .usability import check_usability

logger = logging.getLogger("soulsreq")

settings = Settings.from_env()

logging.basicConfig(
    level=settings.log_level,
    )

registry = default_registry(settings)
presets = default_presets()
logger.debug(f"Registered games: {', '.join(registry.ids())}")

mcp = FastMCP(
    name="soulsreq"
)


def _resolve_stats(game_id: str, stats: dict[str, int] | None, preset: str | None) -> dict[str, int]:
    """Start from a preset (if named) and overlay explicit stats."""
    adapter = registry.get(game_id)
    result: dict[str, int] = {}
    if preset:
        found = presets.get(game_id, preset)
        if found is None:
            names = ", ".join(p.name for p in presets.for_game(game_id))
            raise ValueError(f"Unknown preset '{preset}' for {game_id}. Available: {names}")
        result = apply_preset(result, found, adapter)
    for attr, value in (stats or {}).items():
        if attr in adapter.attrs:
            result[attr] = max(int(value), 0)
    return result


@mcp.tool
def list_games() -> str:
    """List supported games with their attributes and two-hand rule."""
    games = []
    for adapter in registry:
        games.append({
            "id": adapter.id,
            "label": adapter.label,
            "attributes": {attr: adapter.attr_label(attr) for attr in adapter.attrs},
            "two_hand": {
                "affected": adapter.two_hand.affected,
                "multiplier": adapter.two_hand.multiplier,
                "rounding": adapter.two_hand.rounding.value,
            },
        })
    return json.dumps(games, indent=2)


@mcp.tool
def list_presets(
    game_id: Annotated[str, Field(description="Game id, e.g. 'DSR', 'DS2', 'DS3', 'BB', 'ER'")],
) -> str:
    """List the starting classes of a game with their attributes."""
    try:
        registry.get(game_id)
    except UnknownGameError as e:
        return f"❌ {e}"
    return json.dumps(
        [{"name": p.name, "stats": p.stats} for p in presets.for_game(game_id)],
        indent=2,
    )


@mcp.tool
async def check_weapons(
    game_id: Annotated[str, Field(description="Game id, e.g. 'DSR', 'DS2', 'DS3', 'BB', 'ER'")],
    stats: Annotated[dict[str, int] | None, Field(description="Player attributes, e.g. {'str': 12, 'dex': 10}")] = None,
    preset: Annotated[str | None, Field(description="Starting class to start from; explicit stats override it")] = None,
    layout: Annotated[Literal["list", "block"], Field(description="'list' sorted by verdict, 'block' grouped by category")] = "list",
    hide_unusable: Annotated[bool, Field(description="Leave out weapons that cannot be wielded")] = False,
) -> str:
    """Check every weapon of a game against a stat block (1H, 2H or NO)."""
    try:
        player = _resolve_stats(game_id, stats, preset)
        adapter = registry.get(game_id)
        weapons = await registry.load_weapons(game_id)
    except (UnknownGameError, ValueError) as e:
        return f"❌ {e}"
    except DataUnavailableError as e:
        logger.error(f"check_weapons failed: {e}")
        return f"❌ {e}"

    listing = build_listing(weapons, player, adapter, layout=layout, unusable=not hide_unusable)
    matched = presets.match(player, adapter)
    listing["preset"] = matched.name if matched else "custom"
    return json.dumps(listing, indent=2)


@mcp.tool
async def check_weapon(
    game_id: Annotated[str, Field(description="Game id, e.g. 'DSR', 'DS2', 'DS3', 'BB', 'ER'")],
    weapon: Annotated[str, Field(description="Weapon name or id (case-insensitive)")],
    stats: Annotated[dict[str, int] | None, Field(description="Player attributes, e.g. {'str': 12, 'dex': 10}")] = None,
    preset: Annotated[str | None, Field(description="Starting class to start from; explicit stats override it")] = None,
) -> str:
    """Check whether a single weapon can be wielded one-handed, two-handed or not at all."""
    try:
        player = _resolve_stats(game_id, stats, preset)
        adapter = registry.get(game_id)
        weapons = await registry.load_weapons(game_id)
    except (UnknownGameError, ValueError) as e:
        return f"❌ {e}"
    except DataUnavailableError as e:
        logger.error(f"check_weapon failed: {e}")
        return f"❌ {e}"

    wanted = weapon.casefold()
    for candidate in weapons:
        if candidate.id.casefold() == wanted or candidate.name.casefold() == wanted:
            status = check_usability(candidate, player, adapter)
            return json.dumps({
                "id": candidate.id,
                "name": candidate.name,
                "category": candidate.category,
                "requirements": dict(candidate.requirements),
                "stats": {attr: player.get(attr, 0) for attr in adapter.attrs},
                "status": status.value,
            }, indent=2)
    return f"❌ Weapon '{weapon}' not found in {adapter.label}"


def main() -> None:
    mcp.run()


if __name__ == "__main__":
    main()
