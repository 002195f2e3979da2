"""In-memory implementation of the PlayCatalog."""

from collections.abc import Mapping

from statements.domain import Play, PlayId
from statements.stores.interfaces import PlayCatalog


class InMemoryPlayCatalog(PlayCatalog):
    """Play catalog backed by a mapping of play ID to Play."""

    def __init__(self, plays: Mapping[str, Play]) -> None:
        self._plays = dict(plays)

    def get_play(self, play_id: PlayId) -> Play | None:
        return self._plays.get(play_id.value)
