"""
Active-game weapon loading.

``WeaponSession`` keeps the weapons of the currently selected game. When
the selection changes while a load is still in flight, the older load's
result is dropped on arrival: state is only ever written for the game
id that is active at completion time.
"""

from __future__ import annotations

import logging

from .adapters.base import GameAdapter
from .errors import DataUnavailableError
from .models import NormalizedWeapon
from .registry import AdapterRegistry

logger = logging.getLogger("soulsreq.session")


class WeaponSession:
    """Loading state for the selected game.

    Attributes:
        game_id: Currently selected game, or None before the first selection.
        weapons: Normalized weapons of the selected game (empty while loading or on error).
        loading: True while the selected game's load is outstanding.
        error: The failure of the selected game's last load, if any.
    """

    def __init__(self, registry: AdapterRegistry) -> None:
        self.registry = registry
        self.game_id: str | None = None
        self.weapons: list[NormalizedWeapon] = []
        self.loading = False
        self.error: DataUnavailableError | None = None

    @property
    def adapter(self) -> GameAdapter | None:
        return self.registry.get(self.game_id) if self.game_id else None

    async def select(self, game_id: str) -> bool:
        """Make ``game_id`` active and load its weapons.

        Args:
            game_id: Registered game id.

        Returns:
            True if this load's outcome (weapons or error) was applied,
            False if another game was selected before it completed.

        Raises:
            UnknownGameError: If the id is not registered
        """
        self.registry.get(game_id)
        self.game_id = game_id
        self.weapons = []
        self.loading = True
        self.error = None

        try:
            weapons = await self.registry.load_weapons(game_id)
        except DataUnavailableError as e:
            if self.game_id != game_id:
                logger.debug("Discarding failed load for %s, %s is now active", game_id, self.game_id)
                return False
            logger.error("Failed to load weapons for %s: %s", game_id, e)
            self.error = e
            return True
        finally:
            if self.game_id == game_id:
                self.loading = False

        if self.game_id != game_id:
            logger.debug("Discarding stale load for %s, %s is now active", game_id, self.game_id)
            return False

        self.weapons = weapons
        return True
