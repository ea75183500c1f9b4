"""Backfill job value objects."""

import calendar
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum


class JobKind(Enum):
    """Which cache table a backfill job populates."""

    ENTRIES = "entries"
    BALANCE = "balance"


@dataclass(frozen=True)
class BackfillJob:
    """Immutable description of one month backfill.

    Attributes:
        month: First local day of the month to load.
        kind: Table the job fills.
        day: Day whose miss triggered the job, if any. When the month is
            already cached but this day is not, only this day is loaded.
    """

    month: date
    kind: JobKind
    day: date | None = None

    def __post_init__(self) -> None:
        if self.month.day != 1:
            raise ValueError(f"month must be the first day of a month, got {self.month}")
        if self.day is not None and self.day.replace(day=1) != self.month:
            raise ValueError(f"day {self.day} is outside month {self.month:%Y-%m}")

    @property
    def year(self) -> int:
        return self.month.year

    @property
    def month_number(self) -> int:
        return self.month.month

    @property
    def dedup_key(self) -> tuple[int, int, JobKind, date | None]:
        """Identity used to detect an equivalent job already queued."""
        return (self.month.year, self.month.month, self.kind, self.day)

    def days(self) -> Iterator[date]:
        """Yield every local day of the month, the 1st through the last."""
        _, length = calendar.monthrange(self.month.year, self.month.month)
        for offset in range(length):
            yield self.month + timedelta(days=offset)

    @classmethod
    def for_day(cls, day: date, kind: JobKind) -> "BackfillJob":
        """Create the job covering the month that contains ``day``.

        Args:
            day: Any local day of the target month.
            kind: Table the job fills.

        Returns:
            A new BackfillJob for that month.
        """
        return cls(month=day.replace(day=1), kind=kind)

    @classmethod
    def for_missing_day(cls, day: date, kind: JobKind) -> "BackfillJob":
        """Create the job that answers a miss on ``day``.

        Loads the whole month if its first day is not cached yet, and
        only ``day`` otherwise.
        """
        return cls(month=day.replace(day=1), kind=kind, day=day)

    def __str__(self) -> str:
        if self.day is not None:
            return f"{self.kind.value}:{self.day:%Y-%m-%d}"
        return f"{self.kind.value}:{self.month:%Y-%m}"


@dataclass(frozen=True)
class BackfillResult:
    """Outcome of a finished backfill job.

    Attributes:
        job: The job that ran.
        loaded: Days written to the cache.
        failed: Days that could not be read or cached.
        skipped: True when the month, or the requested day of a cached
            month, was already cached at job start.
        aborted: True when the table was cleared while the job ran.
    """

    job: BackfillJob
    loaded: int = 0
    failed: int = 0
    skipped: bool = False
    aborted: bool = False
