"""Wiring of a ledger cache from the default implementations."""

from ledgercache.core.entities.cache_config import CacheConfig
from ledgercache.core.interfaces.day_normalizer import IDayNormalizer
from ledgercache.core.interfaces.ledger_store import ILedgerStore
from ledgercache.core.services.cache_store import LedgerCacheStore
from ledgercache.core.services.ledger_cache import LedgerCache
from ledgercache.infrastructure.normalizers.default import DefaultDayNormalizer
from ledgercache.infrastructure.tables.memory import InMemoryDayTable


def create_ledger_cache(
    store: ILedgerStore,
    config: CacheConfig | None = None,
    normalizer: IDayNormalizer | None = None,
) -> LedgerCache:
    """Create a ledger cache with in-memory tables.

    Args:
        store: The ledger the cache reads from.
        config: Optional configuration. Uses defaults if not provided.
        normalizer: Optional day normalizer. Defaults to one built from
            the configured timezones.

    Returns:
        A ready LedgerCache with its own background loader.
    """
    config = config or CacheConfig()
    normalizer = normalizer or DefaultDayNormalizer(
        local_timezone=config.local_timezone,
        reference_timezone=config.reference_timezone,
    )
    cache_store = LedgerCacheStore(
        entries=InMemoryDayTable("entries", maxsize=config.max_days),
        balances=InMemoryDayTable("balances", maxsize=config.max_days),
    )
    return LedgerCache(
        store=store,
        normalizer=normalizer,
        cache_store=cache_store,
        config=config,
    )
