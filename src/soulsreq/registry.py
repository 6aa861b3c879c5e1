"""
AdapterRegistry - the single place that ties a game id to its adapter and dataset.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, Iterable, Iterator

from .adapters import GAMES, GameAdapter
from .config import Settings
from .errors import DataUnavailableError, UnknownGameError
from .models import NormalizedWeapon
from .providers import DatasetProvider, PackageDatasetProvider

logger = logging.getLogger("soulsreq.registry")


class AdapterRegistry:
    """
    Ordered, read-only collection of game adapters.

    Registration order is the display order for game selection. The
    registry also owns the dataset provider used to load each game's
    raw records.
    """

    def __init__(
        self,
        adapters: Iterable[GameAdapter] = GAMES,
        provider: DatasetProvider | None = None,
    ):
        self._adapters: dict[str, GameAdapter] = {}
        for adapter in adapters:
            if adapter.id in self._adapters:
                raise ValueError(f"Duplicate game id: {adapter.id}")
            self._adapters[adapter.id] = adapter
        self.provider: DatasetProvider = provider or PackageDatasetProvider()

    def __iter__(self) -> Iterator[GameAdapter]:
        return iter(self._adapters.values())

    def __len__(self) -> int:
        return len(self._adapters)

    def __contains__(self, game_id: object) -> bool:
        return game_id in self._adapters

    def ids(self) -> list[str]:
        """Game ids in display order."""
        return list(self._adapters)

    def get(self, game_id: str) -> GameAdapter:
        """
        Look up an adapter by game id.

        Raises:
            UnknownGameError: If the id is not registered
        """
        try:
            return self._adapters[game_id]
        except KeyError:
            raise UnknownGameError(game_id, self.ids()) from None

    # =========================================================================
    # Data loading
    # =========================================================================

    async def load_raw(self, game_id: str) -> list[dict]:
        """
        Fetch a game's raw records from the provider.

        Raises:
            UnknownGameError: If the id is not registered
            DataUnavailableError: If the provider fails or returns nothing
        """
        adapter = self.get(game_id)
        try:
            records = await adapter.load_data(self.provider)
        except DataUnavailableError:
            raise
        except Exception as e:
            logger.error(f"Provider failed loading {adapter.dataset}: {e}")
            raise DataUnavailableError(adapter.dataset, str(e) or type(e).__name__) from e
        if not records:
            raise DataUnavailableError(adapter.dataset, "dataset contains no weapon records")
        return records

    def loader_for(self, game_id: str) -> Callable[[], Awaitable[list[dict]]]:
        """Return a zero-argument coroutine function loading one game's raw records."""
        self.get(game_id)

        async def load() -> list[dict]:
            return await self.load_raw(game_id)

        return load

    async def load_weapons(self, game_id: str) -> list[NormalizedWeapon]:
        """Load and normalize a game's weapons, keeping dataset order."""
        adapter = self.get(game_id)
        records = await self.load_raw(game_id)
        weapons = [adapter.normalize(record) for record in records]
        logger.debug(f"Normalized {len(weapons)} weapons for {game_id}")
        return weapons


def default_registry(settings: Settings | None = None) -> AdapterRegistry:
    """Registry of all supported games using the configured dataset provider."""
    settings = settings or Settings.from_env()
    return AdapterRegistry(GAMES, settings.build_provider())
