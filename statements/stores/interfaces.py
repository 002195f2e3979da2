"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from statements.domain import Play, PlayId


class PlayCatalog(ABC):
    """Interface for looking up play reference data."""

    @abstractmethod
    def get_play(self, play_id: PlayId) -> Play | None:
        """Return a play by ID, or None if not found."""
        ...
