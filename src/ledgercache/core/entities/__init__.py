"""Domain entities for ledgercache."""

from ledgercache.core.entities.backfill_job import BackfillJob, BackfillResult, JobKind
from ledgercache.core.entities.cache_config import CacheConfig
from ledgercache.core.entities.day_key import LocalDayKey, ReferenceDayKey, Timestamp
from ledgercache.core.entities.ledger_entry import LedgerEntry

__all__ = [
    "BackfillJob",
    "BackfillResult",
    "JobKind",
    "CacheConfig",
    "LedgerEntry",
    "LocalDayKey",
    "ReferenceDayKey",
    "Timestamp",
]
