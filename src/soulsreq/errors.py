"""
Exceptions raised by the soulsreq package.
"""

from __future__ import annotations


class SoulsreqError(Exception):
    """Base class for soulsreq errors."""


class DataUnavailableError(SoulsreqError):
    """Raised when a game's raw weapon dataset cannot be retrieved.

    Covers provider failures (missing file, bad JSON, HTTP errors) and
    datasets that come back empty. Callers should report this as a
    distinct condition rather than showing zero weapons.
    """

    def __init__(self, dataset: str, message: str) -> None:
        self.dataset = dataset
        super().__init__(f"Weapon data for '{dataset}' is unavailable: {message}")


class UnknownGameError(SoulsreqError, KeyError):
    """Raised when a game id is not registered."""

    def __init__(self, game_id: str, known: list[str] | None = None) -> None:
        self.game_id = game_id
        self.known = known or []
        super().__init__(game_id)

    def __str__(self) -> str:
        if self.known:
            return f"Unknown game '{self.game_id}'. Known games: {', '.join(self.known)}"
        return f"Unknown game '{self.game_id}'"
