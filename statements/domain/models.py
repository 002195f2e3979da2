"""Domain models for season statements.

These are pure domain objects built by the caller. Nothing here is
persisted; a Statement is the computed, unformatted result of pricing a
PerformanceSummary against a play catalog.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Self

from statements.domain.errors import UnknownPlayTypeError
from statements.domain.value_objects import Money, PlayId


class PlayType(Enum):
    """Genres with a known pricing rule."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"

    @classmethod
    def from_string(cls, value: str) -> Self:
        try:
            return cls(value)
        except ValueError:
            raise UnknownPlayTypeError(value) from None


@dataclass(frozen=True)
class Play:
    """Reference data for a play.

    ``type`` stays a raw string so catalogs may carry genres we cannot
    price yet; it is resolved to a PlayType only when pricing.
    """

    name: str
    type: str

    @property
    def play_type(self) -> PlayType:
        return PlayType.from_string(self.type)


@dataclass(frozen=True)
class Performance:
    """One show date for a customer."""

    play_id: PlayId
    audience: int

    def __post_init__(self) -> None:
        if isinstance(self.play_id, str):
            object.__setattr__(self, "play_id", PlayId.from_string(self.play_id))
        elif not isinstance(self.play_id, PlayId):
            raise ValueError("Play ID must be a string or PlayId")
        if isinstance(self.audience, bool) or not isinstance(self.audience, int):
            raise ValueError("Audience must be an integer")
        if self.audience < 0:
            raise ValueError("Audience cannot be negative")


@dataclass(frozen=True)
class PerformanceSummary:
    """A customer's performances, in the order they appear on the statement."""

    customer: str
    performances: tuple[Performance, ...] = ()


@dataclass(frozen=True)
class StatementLine:
    play_name: str
    audience: int
    amount: Money
    credits: int


@dataclass(frozen=True)
class Statement:
    """Priced statement, ready for rendering."""

    customer: str
    lines: tuple[StatementLine, ...]
    total_amount: Money
    volume_credits: int
