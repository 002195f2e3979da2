from statements.domain.models import (
    Performance,
    PerformanceSummary,
    Play,
    PlayType,
    Statement,
    StatementLine,
)
from statements.domain.value_objects import Money, PlayId

__all__ = [
    "Play",
    "PlayType",
    "Performance",
    "PerformanceSummary",
    "Statement",
    "StatementLine",
    "PlayId",
    "Money",
]
