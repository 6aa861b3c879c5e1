"""
Named starting stat blocks per game.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import yaml

from .adapters.base import GameAdapter
from .models import Preset, StatBlock, stat_value

PRESETS_PATH = Path(__file__).parent / "data" / "presets.yaml"


class PresetTable:
    """Read-only lookup of presets by game id.

    Example:
        >>> table = PresetTable.load_yaml(PRESETS_PATH)
        >>> [p.name for p in table.for_game("BB")][:2]
        ['Milquetoast', 'Lone Survivor']
    """

    def __init__(self, presets: dict[str, list[Preset]] | None = None) -> None:
        self._presets: dict[str, tuple[Preset, ...]] = {
            game_id: tuple(entries) for game_id, entries in (presets or {}).items()
        }

    @classmethod
    def load_yaml(cls, path: Path) -> "PresetTable":
        """Load presets from a YAML file.

        Expected YAML format:
            games:
              DSR:
                - name: Warrior
                  stats: {str: 13, dex: 13, int: 9, fth: 9}

        Raises:
            FileNotFoundError: If the YAML file doesn't exist
            yaml.YAMLError: If the YAML is malformed
            ValueError: If the 'games' key is missing
        """
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not data or "games" not in data:
            raise ValueError("YAML file must contain a 'games' key")

        return cls({
            game_id: [Preset(**entry) for entry in entries or []]
            for game_id, entries in data["games"].items()
        })

    def game_ids(self) -> list[str]:
        return list(self._presets)

    def for_game(self, game_id: str) -> list[Preset]:
        """Presets for a game, in table order; empty for games without any."""
        return list(self._presets.get(game_id, ()))

    def get(self, game_id: str, name: str) -> Preset | None:
        for preset in self._presets.get(game_id, ()):
            if preset.name == name:
                return preset
        return None

    def match(self, stats: StatBlock, adapter: GameAdapter) -> Preset | None:
        """First preset equal to ``stats`` on the game's attributes, or None ("custom")."""
        for preset in self._presets.get(adapter.id, ()):
            if matches_preset(stats, preset, adapter):
                return preset
        return None


def matches_preset(stats: StatBlock, preset: Preset, adapter: GameAdapter) -> bool:
    """Compare only the attributes the game declares; absent values read as 0."""
    return all(stat_value(stats, attr) == stat_value(preset.stats, attr) for attr in adapter.attrs)


def apply_preset(stats: StatBlock, preset: Preset, adapter: GameAdapter) -> dict[str, int]:
    """New stat block with the game's attributes taken from the preset, other keys kept."""
    result = dict(stats)
    for attr in adapter.attrs:
        result[attr] = stat_value(preset.stats, attr)
    return result


@lru_cache(maxsize=1)
def default_presets() -> PresetTable:
    """The bundled preset table, parsed once."""
    return PresetTable.load_yaml(PRESETS_PATH)
