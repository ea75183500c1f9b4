"""Background loader - runs month backfill jobs one at a time."""

import functools
import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from datetime import date
from typing import Any

from ledgercache.core.entities.backfill_job import BackfillJob, BackfillResult, JobKind
from ledgercache.core.exceptions import LoaderClosedError
from ledgercache.core.interfaces.day_normalizer import IDayNormalizer
from ledgercache.core.interfaces.ledger_store import ILedgerStore
from ledgercache.core.services.cache_store import LedgerCacheStore

logger = logging.getLogger(__name__)


class BackfillLoader:
    """Sequential worker that fills the cache one month at a time.

    Jobs run strictly in submission order on a single dedicated thread.
    A month job is a no-op when the first day of its month is already
    cached. A job carrying a day then loads that single day instead.
    Store failures for one day are logged and skipped; the remaining
    days of the month still load.
    """

    def __init__(
        self,
        store: ILedgerStore,
        cache_store: LedgerCacheStore,
        normalizer: IDayNormalizer,
        deduplicate: bool = True,
        worker_name: str = "ledgercache-backfill",
    ) -> None:
        """Initialize the loader.

        Args:
            store: The ledger to read from.
            cache_store: The tables to fill.
            normalizer: Maps local days to reference day keys.
            deduplicate: Return the pending future instead of enqueueing a
                job equivalent to one that has not started yet.
            worker_name: Thread name prefix of the worker.
        """
        self._store = store
        self._cache_store = cache_store
        self._normalizer = normalizer
        self._deduplicate = deduplicate
        self._executor = ThreadPoolExecutor(
            max_workers=1,
            thread_name_prefix=worker_name,
        )
        self._lock = threading.Lock()
        self._queued: dict[
            tuple[int, int, JobKind, date | None], Future[BackfillResult]
        ] = {}
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def submit(self, job: BackfillJob) -> "Future[BackfillResult]":
        """Queue a backfill job.

        Args:
            job: The month and table to load.

        Returns:
            A future resolving to the job's BackfillResult. With
            deduplication on, an equivalent queued job's future.

        Raises:
            LoaderClosedError: If the loader has been closed.
        """
        with self._lock:
            if self._closed:
                raise LoaderClosedError(f"Cannot submit {job}: loader is closed")

            if self._deduplicate:
                queued = self._queued.get(job.dedup_key)
                if queued is not None:
                    logger.debug("Backfill %s already queued", job)
                    return queued

            future = self._executor.submit(self._run, job)
            future.add_done_callback(functools.partial(self._log_job_error, job))
            if self._deduplicate:
                self._queued[job.dedup_key] = future
            return future

    def wait_until_idle(self, timeout: float | None = None) -> bool:
        """Block until every job submitted so far has finished.

        Args:
            timeout: Seconds to wait. None waits forever.

        Returns:
            True if the queue drained, False if the timeout expired.
        """
        with self._lock:
            if self._closed:
                marker = None
            else:
                marker = self._executor.submit(lambda: None)

        if marker is None:
            # Closed loaders finish their queue during shutdown
            self._executor.shutdown(wait=True)
            return True

        try:
            marker.result(timeout=timeout)
        except FutureTimeoutError:
            return False
        return True

    def close(self, wait: bool = True) -> None:
        """Stop accepting jobs and shut the worker down.

        Args:
            wait: Block until queued jobs have finished.
        """
        with self._lock:
            self._closed = True
            self._queued.clear()
        self._executor.shutdown(wait=wait)

    def _run(self, job: BackfillJob) -> BackfillResult:
        """Execute a job on the worker thread."""
        with self._lock:
            # A job that has started no longer absorbs new submissions
            self._queued.pop(job.dedup_key, None)

        table = self._cache_store.table(job.kind)
        first_key = self._normalizer.to_reference_day_key(job.month)
        if table.contains(first_key):
            if job.day is None:
                logger.debug("Backfill %s skipped: month already cached", job)
                return BackfillResult(job=job, skipped=True)
            return self._run_single_day(job, job.day)

        generation = table.generation
        loaded = 0
        failed = 0

        logger.debug("Caching %s data for month %s", job.kind.value, f"{job.month:%Y-%m}")

        for day in job.days():
            written = self._load_day(job.kind, day, generation)
            if written is None:
                failed += 1
            elif written:
                loaded += 1
            elif table.generation != generation:
                logger.debug("Backfill %s aborted: table cleared while loading", job)
                return BackfillResult(job=job, loaded=loaded, failed=failed, aborted=True)

        logger.info(
            "Cached %s data for month %s (%d days loaded, %d failed)",
            job.kind.value,
            f"{job.month:%Y-%m}",
            loaded,
            failed,
        )
        return BackfillResult(job=job, loaded=loaded, failed=failed)

    def _run_single_day(self, job: BackfillJob, day: date) -> BackfillResult:
        """Load one missing day of a month whose first day is cached.

        Days left out of an earlier backfill (failed reads, evictions)
        are filled this way without reloading the whole month.
        """
        table = self._cache_store.table(job.kind)
        if table.contains(self._normalizer.to_reference_day_key(day)):
            logger.debug("Backfill %s skipped: day already cached", job)
            return BackfillResult(job=job, skipped=True)

        written = self._load_day(job.kind, day, table.generation)
        if written is None:
            return BackfillResult(job=job, failed=1)
        return BackfillResult(job=job, loaded=int(written))

    def _load_day(self, kind: JobKind, day: date, generation: int) -> bool | None:
        """Read one day from the store and cache it.

        Returns:
            True if the day was written, False if it was already cached or
            the table was cleared, None if reading or storing it failed.
        """
        try:
            value = self._reader(kind)(day)
            key = self._normalizer.to_reference_day_key(day)
            return self._cache_store.fill(kind, key, value, generation)
        except Exception:
            logger.warning(
                "Failed to load %s for %s; leaving the day uncached",
                kind.value,
                day,
                exc_info=True,
            )
            return None

    @staticmethod
    def _log_job_error(job: BackfillJob, future: "Future[BackfillResult]") -> None:
        if future.cancelled():
            return
        error = future.exception()
        if error is not None:
            logger.error("Backfill %s failed", job, exc_info=error)

    def _reader(self, kind: JobKind) -> Callable[[date], Any]:
        if kind is JobKind.ENTRIES:
            return self._store.entries_for_day
        return self._store.balance_for_day
