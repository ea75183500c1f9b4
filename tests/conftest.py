"""Pytest configuration for ledgercache tests."""

import threading
from collections.abc import Iterator
from datetime import date
from decimal import Decimal
from typing import Any

import pytest

from ledgercache import (
    CacheConfig,
    DefaultDayNormalizer,
    InMemoryDayTable,
    InMemoryLedgerStore,
    LedgerCache,
    LedgerCacheStore,
    LedgerEntry,
    create_ledger_cache,
)


class GatedStore:
    """Ledger store whose first read of one day blocks until released.

    The value is read before blocking, so the caller ends up holding
    whatever the ledger contained when the read started.
    """

    def __init__(self, inner: Any, gate_day: date) -> None:
        self.inner = inner
        self.gate_day = gate_day
        self.reached = threading.Event()
        self.release = threading.Event()
        self._gated = False
        self._lock = threading.Lock()

    def _wait(self, day: date) -> None:
        with self._lock:
            if day != self.gate_day or self._gated:
                return
            self._gated = True
        self.reached.set()
        assert self.release.wait(timeout=5)

    def entries_for_day(self, day: date) -> list[Any]:
        value = self.inner.entries_for_day(day)
        self._wait(day)
        return value

    def balance_for_day(self, day: date) -> Any:
        value = self.inner.balance_for_day(day)
        self._wait(day)
        return value


@pytest.fixture(autouse=True)
def reset_decorator_config() -> Iterator[None]:
    """Reset decorator configuration around each test."""
    import ledgercache.decorators

    original = ledgercache.decorators._ledger_cache

    yield

    ledgercache.decorators._ledger_cache = original


@pytest.fixture
def normalizer() -> DefaultDayNormalizer:
    """Create a normalizer with a fixed local zone."""
    return DefaultDayNormalizer(local_timezone="Europe/Paris")


@pytest.fixture
def cache_store() -> LedgerCacheStore:
    """Create empty in-memory tables."""
    return LedgerCacheStore(
        entries=InMemoryDayTable("entries"),
        balances=InMemoryDayTable("balances"),
    )


@pytest.fixture
def march_store() -> InMemoryLedgerStore:
    """Ledger with two entries on 2024-03-05 and a flat March balance."""
    return InMemoryLedgerStore(
        entries=[
            LedgerEntry(day=date(2024, 3, 5), amount=Decimal("-7.50"), title="A"),
            LedgerEntry(day=date(2024, 3, 5), amount=Decimal("7.50"), title="B"),
        ],
        initial_balance=Decimal("42.50"),
    )


@pytest.fixture
def ledger_cache(march_store: InMemoryLedgerStore) -> Iterator[LedgerCache]:
    """Create a cache over the March ledger and close it afterwards."""
    cache = create_ledger_cache(
        march_store,
        CacheConfig(local_timezone="Europe/Paris"),
    )
    yield cache
    cache.close()


@pytest.fixture
def make_gated_store() -> Any:
    """Return a factory for stores that pause on one day."""
    return GatedStore
