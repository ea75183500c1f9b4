"""Ledger store interface."""

from collections.abc import Sequence
from datetime import date
from typing import Any, Protocol


class ILedgerStore(Protocol):
    """Contract for the persistent ledger the cache sits in front of.

    Both reads are side-effect free and may be slow. Implementations
    must tolerate concurrent calls, since the background loader and a
    synchronous ``refresh_day`` can read at the same time.
    """

    def entries_for_day(self, day: date) -> Sequence[Any]:
        """Return the entries recorded on a local calendar day.

        Args:
            day: The local calendar day.

        Returns:
            The day's entries in store order. Empty if there are none.
        """
        ...

    def balance_for_day(self, day: date) -> Any:
        """Return the running balance at the end of a local calendar day.

        Args:
            day: The local calendar day.

        Returns:
            The balance accounting for every entry up to and including
            that day.
        """
        ...
