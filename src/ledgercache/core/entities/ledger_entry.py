"""Ledger entry entity."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class LedgerEntry:
    """Immutable ledger entry value object.

    A single financial movement recorded on a calendar day. Negative
    amounts are expenses, positive amounts are income.
    """

    day: date
    amount: Decimal
    title: str = ""
    entry_id: str | None = None

    @property
    def is_expense(self) -> bool:
        """Check if the entry takes money out of the balance."""
        return self.amount < 0
