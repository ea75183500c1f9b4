"""Ledger cache - the public read cache facade."""

import logging
import threading
from typing import Any

from ledgercache.core.entities.backfill_job import BackfillJob, JobKind
from ledgercache.core.entities.cache_config import CacheConfig
from ledgercache.core.entities.day_key import Timestamp
from ledgercache.core.exceptions import LoaderClosedError
from ledgercache.core.interfaces.day_normalizer import IDayNormalizer
from ledgercache.core.interfaces.ledger_store import ILedgerStore
from ledgercache.core.services.backfill_loader import BackfillLoader
from ledgercache.core.services.cache_store import LedgerCacheStore

logger = logging.getLogger(__name__)


class LedgerCache:
    """Read cache in front of a ledger store.

    Lookups answer from memory. A miss returns None right away and
    queues a background backfill of the whole month, so later lookups of
    nearby days hit. If the month is already loaded but the day is not,
    only that day is fetched. The write path keeps the cache honest by calling
    ``refresh_day`` or ``invalidate_all`` after it changes the ledger.

    The cache is best-effort: readers can observe a partially loaded
    month, and nothing expires on its own.
    """

    def __init__(
        self,
        store: ILedgerStore,
        normalizer: IDayNormalizer,
        cache_store: LedgerCacheStore,
        config: CacheConfig | None = None,
        loader: BackfillLoader | None = None,
    ) -> None:
        """Initialize the ledger cache.

        Args:
            store: The ledger the cache reads from.
            normalizer: Maps timestamps to local days and reference keys.
            cache_store: The entries and balance tables.
            config: Optional configuration. Uses defaults if not provided.
            loader: Optional background loader. One is created from the
                other arguments if not provided.
        """
        self._store = store
        self._normalizer = normalizer
        self._cache_store = cache_store
        self._config = config or CacheConfig()
        self._loader = loader or BackfillLoader(
            store=store,
            cache_store=cache_store,
            normalizer=normalizer,
            deduplicate=self._config.deduplicate_jobs,
            worker_name=self._config.worker_name,
        )

        # Statistics
        self._stats_lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._scheduled = 0

    @property
    def config(self) -> CacheConfig:
        """Get the cache configuration."""
        return self._config

    @property
    def cache_store(self) -> LedgerCacheStore:
        return self._cache_store

    @property
    def stats(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dictionary with hits, misses, scheduled jobs, and total lookups.
        """
        with self._stats_lock:
            return {
                "hits": self._hits,
                "misses": self._misses,
                "scheduled": self._scheduled,
                "total": self._hits + self._misses,
            }

    def reset_stats(self) -> None:
        """Zero every statistics counter."""
        with self._stats_lock:
            self._hits = 0
            self._misses = 0
            self._scheduled = 0

    # Write path

    def preload_month(self, day: Timestamp) -> None:
        """Queue entries and balance backfills for the month of ``day``.

        Returns immediately; the tables fill in the background.
        """
        logger.debug("Request to cache month of %s", day)
        local_day = self._normalizer.to_local_day_key(day)
        self._schedule(BackfillJob.for_day(local_day, JobKind.ENTRIES))
        self._schedule(BackfillJob.for_day(local_day, JobKind.BALANCE))

    def refresh_day(self, day: Timestamp) -> None:
        """Reload the entries of one day and drop every cached balance.

        An edit on one day shifts the running balance of every later day,
        so all balances go, not just this month's. Only the entries of
        ``day`` are reread; other days keep their cached entries.

        Args:
            day: The day that was just written.

        Raises:
            Exception: Whatever the store raises while reading the day.
                The balance table is already cleared at that point.
        """
        logger.debug("Refreshing cache for day %s", day)
        self._cache_store.clear_balances()

        local_day = self._normalizer.to_local_day_key(day)
        entries = self._store.entries_for_day(local_day)
        self._cache_store.put_entries(
            self._normalizer.to_reference_day_key(local_day),
            entries,
        )

    def invalidate_all(self) -> None:
        """Drop every cached entry and balance."""
        logger.debug("Wiping all cached data")
        self._cache_store.clear()

    # Read path

    def lookup_entries(self, day: Timestamp) -> tuple[Any, ...] | None:
        """Get the cached entries of a day.

        Args:
            day: Any timestamp on the wanted day.

        Returns:
            The day's entries (possibly empty) if cached. None if unknown,
            in which case a backfill of the month has been queued.
        """
        entries, found = self._cache_store.get_entries(self._reference_key(day))
        if found:
            self._count_hit()
            return entries

        self._count_miss()
        self._schedule_for(day, JobKind.ENTRIES)
        return None

    def has_entries(self, day: Timestamp) -> bool | None:
        """Check whether a day has any entries.

        Returns:
            True or False if the day is cached, None if unknown. A miss
            queues a backfill like ``lookup_entries``.
        """
        entries = self.lookup_entries(day)
        if entries is None:
            return None
        return len(entries) > 0

    def lookup_balance(self, day: Timestamp) -> Any | None:
        """Get the cached running balance of a day.

        Args:
            day: Any timestamp on the wanted day.

        Returns:
            The balance if cached. None if unknown, in which case a
            balance backfill of the month has been queued.
        """
        balance, found = self._cache_store.get_balance(self._reference_key(day))
        if found:
            self._count_hit()
            return balance

        self._count_miss()
        self._schedule_for(day, JobKind.BALANCE)
        return None

    # Lifecycle

    def wait_until_idle(self, timeout: float | None = None) -> bool:
        """Block until every queued backfill has finished.

        Args:
            timeout: Seconds to wait. None waits forever.

        Returns:
            True if the queue drained, False if the timeout expired.
        """
        return self._loader.wait_until_idle(timeout=timeout)

    def close(self, wait: bool = True) -> None:
        """Shut down the background loader.

        Lookups keep answering from memory afterwards, but misses no
        longer schedule backfills.
        """
        self._loader.close(wait=wait)

    def __enter__(self) -> "LedgerCache":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _reference_key(self, day: Timestamp) -> Any:
        return self._normalizer.to_reference_day_key(day)

    def _schedule_for(self, day: Timestamp, kind: JobKind) -> None:
        local_day = self._normalizer.to_local_day_key(day)
        self._schedule(BackfillJob.for_missing_day(local_day, kind))

    def _schedule(self, job: BackfillJob) -> None:
        try:
            self._loader.submit(job)
        except LoaderClosedError:
            logger.warning("Backfill %s not scheduled: loader is closed", job)
            return

        with self._stats_lock:
            self._scheduled += 1

    def _count_hit(self) -> None:
        with self._stats_lock:
            self._hits += 1

    def _count_miss(self) -> None:
        with self._stats_lock:
            self._misses += 1
