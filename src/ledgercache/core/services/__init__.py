"""Core services for ledgercache."""

from ledgercache.core.services.backfill_loader import BackfillLoader
from ledgercache.core.services.cache_store import LedgerCacheStore
from ledgercache.core.services.ledger_cache import LedgerCache

__all__ = [
    "BackfillLoader",
    "LedgerCache",
    "LedgerCacheStore",
]
