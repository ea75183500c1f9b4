"""Cache configuration entity."""

from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ledgercache.core.exceptions import ConfigurationError


@dataclass
class CacheConfig:
    """Cache configuration.

    Attributes:
        local_timezone: IANA zone used to find a timestamp's calendar day.
            None uses the system local zone.
        reference_timezone: IANA zone of the reference day keys that index
            the cache tables.
        deduplicate_jobs: Skip enqueueing a backfill when an equivalent
            job for the same month and table is still pending.
        max_days: Upper bound on days held per table. None is unbounded.
            An evicted day is reloaded on its own by the next lookup
            that misses it.
        worker_name: Thread name prefix of the background loader.
    """

    local_timezone: str | None = None
    reference_timezone: str = "UTC"
    deduplicate_jobs: bool = True
    max_days: int | None = None
    worker_name: str = "ledgercache-backfill"

    def __post_init__(self) -> None:
        """Validate timezone names and bounds."""
        for zone in (self.local_timezone, self.reference_timezone):
            if zone is None:
                continue
            try:
                ZoneInfo(zone)
            except (ZoneInfoNotFoundError, ValueError) as e:
                raise ConfigurationError(f"Unknown timezone: {zone!r}") from e

        if self.max_days is not None and self.max_days <= 0:
            raise ConfigurationError(
                f"max_days must be positive or None, got {self.max_days}"
            )

        if not self.worker_name:
            self.worker_name = "ledgercache-backfill"
