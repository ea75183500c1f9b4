"""Default day normalizer implementation."""

from datetime import date, datetime, tzinfo
from zoneinfo import ZoneInfo

from ledgercache.core.entities.day_key import LocalDayKey, ReferenceDayKey, Timestamp


class DefaultDayNormalizer:
    """Day normalizer based on zoneinfo timezones.

    The local day of a timestamp is its calendar date in the local zone.
    The reference key re-expresses that calendar date as midnight in the
    reference zone, so it does not shift when the local zone is ahead of
    or behind the reference zone.
    """

    def __init__(
        self,
        local_timezone: str | None = None,
        reference_timezone: str = "UTC",
    ) -> None:
        """Initialize the normalizer.

        Args:
            local_timezone: IANA zone name. None uses the system local zone.
            reference_timezone: IANA zone name of the reference keys.
        """
        self._local_tz: tzinfo | None = (
            ZoneInfo(local_timezone) if local_timezone else None
        )
        self._reference_tz: tzinfo = ZoneInfo(reference_timezone)

    def to_local_day_key(self, timestamp: Timestamp) -> LocalDayKey:
        """Return the local calendar day of a timestamp.

        Args:
            timestamp: A date, or a datetime (naive values are local time).

        Returns:
            The calendar day in the local timezone.
        """
        # datetime is a date subclass, so check it first
        if isinstance(timestamp, datetime):
            if timestamp.tzinfo is not None:
                timestamp = timestamp.astimezone(self._local_tz)
            return timestamp.date()
        return date(timestamp.year, timestamp.month, timestamp.day)

    def to_reference_day_key(self, timestamp: Timestamp) -> ReferenceDayKey:
        """Return the cache index for the local calendar day of a timestamp.

        Args:
            timestamp: A date, or a datetime (naive values are local time).

        Returns:
            Midnight of the local calendar day in the reference timezone.
        """
        day = self.to_local_day_key(timestamp)
        return datetime(day.year, day.month, day.day, tzinfo=self._reference_tz)
