"""Cache store - the entries and balance tables."""

from collections.abc import Sequence
from typing import Any

from ledgercache.core.entities.backfill_job import JobKind
from ledgercache.core.entities.day_key import ReferenceDayKey
from ledgercache.core.interfaces.day_table import IDayTable


class LedgerCacheStore:
    """Two independent day tables: entries by day and balance by day.

    Each table has its own lock, so entry operations never block balance
    operations. Entries are stored as tuples so cached sequences cannot
    be mutated by callers. A day cached with an empty tuple is known to
    have no entries; a day absent from the table is unknown.
    """

    def __init__(self, entries: IDayTable, balances: IDayTable) -> None:
        """Initialize the cache store.

        Args:
            entries: Table holding entries by day.
            balances: Table holding balances by day.
        """
        self._entries = entries
        self._balances = balances

    @property
    def entries(self) -> IDayTable:
        return self._entries

    @property
    def balances(self) -> IDayTable:
        return self._balances

    def table(self, kind: JobKind) -> IDayTable:
        """Return the table a backfill job of ``kind`` fills."""
        if kind is JobKind.ENTRIES:
            return self._entries
        return self._balances

    def get_entries(self, key: ReferenceDayKey) -> tuple[tuple[Any, ...], bool]:
        """Look up the entries of a day.

        Returns:
            ``(entries, True)`` if cached, ``((), False)`` otherwise.
        """
        value = self._entries.get(key)
        if value is None:
            return (), False
        return value, True

    def put_entries(self, key: ReferenceDayKey, entries: Sequence[Any]) -> None:
        """Cache the entries of a day, overwriting any previous value."""
        self._entries.put(key, tuple(entries))

    def get_balance(self, key: ReferenceDayKey) -> tuple[Any | None, bool]:
        """Look up the balance of a day.

        Returns:
            ``(balance, True)`` if cached, ``(None, False)`` otherwise.
        """
        value = self._balances.get(key)
        return value, value is not None

    def put_balance(self, key: ReferenceDayKey, balance: Any) -> None:
        """Cache the balance of a day, overwriting any previous value."""
        self._balances.put(key, balance)

    def fill(
        self,
        kind: JobKind,
        key: ReferenceDayKey,
        value: Any,
        generation: int,
    ) -> bool:
        """Write a backfilled value without clobbering fresher data.

        Args:
            kind: Table to write to.
            key: The reference day key.
            value: Entries sequence or balance read from the store.
            generation: Table generation observed when the job started.

        Returns:
            True if the value was written, False if the day was already
            cached or the table was cleared since ``generation``.
        """
        if kind is JobKind.ENTRIES:
            value = tuple(value)
        return self.table(kind).put_if_current(key, value, generation)

    def clear_entries(self) -> None:
        """Drop every cached entries day."""
        self._entries.clear()

    def clear_balances(self) -> None:
        """Drop every cached balance."""
        self._balances.clear()

    def clear(self) -> None:
        """Drop both tables."""
        self._balances.clear()
        self._entries.clear()
