"""Statement service - all business logic lives here.

Services:
- Depend only on interfaces (stores, formatters)
- Validate domain invariants
- Raise domain errors; never return a partial statement
"""

import logging
from collections.abc import Mapping

from statements.domain import (
    Money,
    PerformanceSummary,
    Play,
    Statement,
    StatementLine,
)
from statements.domain.errors import PlayNotFoundError
from statements.domain.pricing import amount_for, volume_credits_for
from statements.services.formatters import CurrencyFormatter, USDFormatter
from statements.stores.interfaces import PlayCatalog
from statements.stores.memory_store import InMemoryPlayCatalog

logger = logging.getLogger(__name__)


class StatementService:
    """Service for pricing and rendering customer statements."""

    def __init__(
        self, catalog: PlayCatalog, formatter: CurrencyFormatter | None = None
    ) -> None:
        self._catalog = catalog
        self._formatter = formatter or USDFormatter()

    def build(self, summary: PerformanceSummary) -> Statement:
        """Price every performance in the summary.

        Raises:
            PlayNotFoundError: If a performance references an unknown play ID.
            UnknownPlayTypeError: If a play's genre has no pricing rule.
        """
        lines = []
        total_amount = Money.zero()
        volume_credits = 0

        for performance in summary.performances:
            play = self._catalog.get_play(performance.play_id)
            if play is None:
                raise PlayNotFoundError(performance.play_id.value)

            amount = amount_for(play, performance)
            credits = volume_credits_for(play, performance)
            logger.debug(
                "Priced %s for %s: %d cents, %d credits",
                performance.play_id,
                summary.customer,
                amount.cents,
                credits,
            )

            lines.append(
                StatementLine(
                    play_name=play.name,
                    audience=performance.audience,
                    amount=amount,
                    credits=credits,
                )
            )
            total_amount += amount
            volume_credits += credits

        statement = Statement(
            customer=summary.customer,
            lines=tuple(lines),
            total_amount=total_amount,
            volume_credits=volume_credits,
        )
        logger.info(
            "Built statement for %s: %d lines, %d cents, %d credits",
            statement.customer,
            len(statement.lines),
            statement.total_amount.cents,
            statement.volume_credits,
        )
        return statement

    def render(self, statement: Statement) -> str:
        """Return the plain-text statement, one newline-terminated line each."""
        result = f"Statement for {statement.customer}\n"
        for line in statement.lines:
            result += (
                f" {line.play_name}: {self._formatter.format(line.amount.cents)}"
                f" ({line.audience} seats)\n"
            )
        result += f"Amount owed is {self._formatter.format(statement.total_amount.cents)}\n"
        result += f"You earned {statement.volume_credits} credits\n"
        return result

    def generate(self, summary: PerformanceSummary) -> str:
        """Build and render a statement in one step."""
        return self.render(self.build(summary))


def statement(
    summary: PerformanceSummary,
    catalog: Mapping[str, Play] | PlayCatalog,
    formatter: CurrencyFormatter | None = None,
) -> str:
    """Return the text statement for ``summary`` priced against ``catalog``.

    ``catalog`` may be a plain mapping of play ID to Play or any PlayCatalog.
    """
    if not isinstance(catalog, PlayCatalog):
        catalog = InMemoryPlayCatalog(catalog)
    return StatementService(catalog, formatter).generate(summary)
