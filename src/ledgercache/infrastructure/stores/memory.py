"""In-memory ledger store implementation."""

import threading
from datetime import date
from decimal import Decimal

from ledgercache.core.entities.ledger_entry import LedgerEntry


class InMemoryLedgerStore:
    """Thread-safe in-memory ledger.

    Keeps entries in insertion order and computes running balances on
    demand. Suitable for tests, demos, and as a template for real stores.
    """

    def __init__(
        self,
        entries: list[LedgerEntry] | None = None,
        initial_balance: Decimal = Decimal("0"),
    ) -> None:
        """Initialize the store.

        Args:
            entries: Optional entries to start with.
            initial_balance: Balance before the first entry.
        """
        self._lock = threading.Lock()
        self._entries: list[LedgerEntry] = list(entries or [])
        self._initial_balance = initial_balance

    def add(self, entry: LedgerEntry) -> None:
        """Append an entry to the ledger."""
        with self._lock:
            self._entries.append(entry)

    def remove(self, entry: LedgerEntry) -> bool:
        """Remove an entry.

        Args:
            entry: The entry to remove.

        Returns:
            True if the entry existed and was removed, False otherwise.
        """
        with self._lock:
            try:
                self._entries.remove(entry)
                return True
            except ValueError:
                return False

    def entries_for_day(self, day: date) -> list[LedgerEntry]:
        """Return the entries recorded on a day, in insertion order."""
        with self._lock:
            return [entry for entry in self._entries if entry.day == day]

    def balance_for_day(self, day: date) -> Decimal:
        """Return the running balance at the end of a day."""
        with self._lock:
            total = sum(
                (entry.amount for entry in self._entries if entry.day <= day),
                self._initial_balance,
            )
        return total

    def __len__(self) -> int:
        """Return the number of entries."""
        with self._lock:
            return len(self._entries)
