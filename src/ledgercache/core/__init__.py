"""Core domain layer for ledgercache."""

from ledgercache.core.entities import (
    BackfillJob,
    BackfillResult,
    CacheConfig,
    JobKind,
    LedgerEntry,
)
from ledgercache.core.exceptions import (
    ConfigurationError,
    LedgerCacheError,
    LoaderClosedError,
)
from ledgercache.core.interfaces import IDayNormalizer, IDayTable, ILedgerStore
from ledgercache.core.services import BackfillLoader, LedgerCache, LedgerCacheStore

__all__ = [
    # Entities
    "BackfillJob",
    "BackfillResult",
    "CacheConfig",
    "JobKind",
    "LedgerEntry",
    # Exceptions
    "LedgerCacheError",
    "ConfigurationError",
    "LoaderClosedError",
    # Interfaces
    "IDayNormalizer",
    "IDayTable",
    "ILedgerStore",
    # Services
    "BackfillLoader",
    "LedgerCache",
    "LedgerCacheStore",
]
