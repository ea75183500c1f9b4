"""Day normalizer interface."""

from typing import Protocol

from ledgercache.core.entities.day_key import LocalDayKey, ReferenceDayKey, Timestamp


class IDayNormalizer(Protocol):
    """Contract for collapsing timestamps to day keys.

    Both methods are pure and total: every date or datetime maps to a key.
    """

    def to_local_day_key(self, timestamp: Timestamp) -> LocalDayKey:
        """Return the local calendar day of a timestamp.

        Args:
            timestamp: A date, or a datetime (naive values are local time).

        Returns:
            The calendar day in the local timezone.
        """
        ...

    def to_reference_day_key(self, timestamp: Timestamp) -> ReferenceDayKey:
        """Return the cache index for the local calendar day of a timestamp.

        Args:
            timestamp: A date, or a datetime (naive values are local time).

        Returns:
            Midnight of the local calendar day in the reference timezone.
            Timestamps on the same local day yield equal keys.
        """
        ...
