"""Currency formatting collaborators.

The statement service hands over integer cents and gets back display text,
so pricing never depends on locale rules.
"""

from abc import ABC, abstractmethod

from statements.domain import Money


class CurrencyFormatter(ABC):
    """Interface for turning an amount of cents into display text."""

    @abstractmethod
    def format(self, cents: int) -> str:
        """Return the display string for ``cents``. Must be deterministic."""
        ...


class USDFormatter(CurrencyFormatter):
    """US dollars, thousands separators, two decimals: 173000 -> "$1,730.00"."""

    symbol = "$"

    def format(self, cents: int) -> str:
        return f"{self.symbol}{Money(cents=cents).dollars:,.2f}"
