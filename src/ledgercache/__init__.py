"""ledgercache - In-memory read cache for date-indexed ledgers.

Answers "entries on day D" and "balance on day D" from memory. A miss
returns None immediately and loads the whole month in the background,
so the next lookups of nearby days hit without touching the store.

Example:
    from datetime import date
    from decimal import Decimal

    from ledgercache import (
        CacheConfig,
        InMemoryLedgerStore,
        LedgerEntry,
        create_ledger_cache,
    )

    store = InMemoryLedgerStore()
    store.add(LedgerEntry(day=date(2024, 3, 5), amount=Decimal("-12.30")))

    cache = create_ledger_cache(store, CacheConfig(local_timezone="Europe/Paris"))

    cache.lookup_entries(date(2024, 3, 5))   # None, March is now loading
    cache.wait_until_idle()
    cache.lookup_entries(date(2024, 3, 5))   # (LedgerEntry(...),)
    cache.has_entries(date(2024, 3, 6))      # False

Keeping the cache in step with writes:
    from ledgercache.decorators import configure, refreshes_day

    configure(cache)

    @refreshes_day(arg="day")
    def add_expense(day: date, amount: Decimal) -> None:
        store.add(LedgerEntry(day=day, amount=amount))
"""

from ledgercache.core.entities import (
    BackfillJob,
    BackfillResult,
    CacheConfig,
    JobKind,
    LedgerEntry,
    LocalDayKey,
    ReferenceDayKey,
    Timestamp,
)
from ledgercache.core.exceptions import (
    ConfigurationError,
    LedgerCacheError,
    LoaderClosedError,
)
from ledgercache.core.interfaces import IDayNormalizer, IDayTable, ILedgerStore
from ledgercache.core.services import BackfillLoader, LedgerCache, LedgerCacheStore
from ledgercache.decorators import configure, invalidates_all, refreshes_day
from ledgercache.factory import create_ledger_cache
from ledgercache.infrastructure import (
    DefaultDayNormalizer,
    InMemoryDayTable,
    InMemoryLedgerStore,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "BackfillJob",
    "BackfillResult",
    "CacheConfig",
    "JobKind",
    "LedgerEntry",
    "LocalDayKey",
    "ReferenceDayKey",
    "Timestamp",
    # Exceptions
    "LedgerCacheError",
    "ConfigurationError",
    "LoaderClosedError",
    # Core interfaces
    "IDayNormalizer",
    "IDayTable",
    "ILedgerStore",
    # Core services
    "BackfillLoader",
    "LedgerCache",
    "LedgerCacheStore",
    "create_ledger_cache",
    # Infrastructure implementations
    "DefaultDayNormalizer",
    "InMemoryDayTable",
    "InMemoryLedgerStore",
    # Decorators
    "configure",
    "refreshes_day",
    "invalidates_all",
]
