"""Infrastructure layer implementations for ledgercache."""

from ledgercache.infrastructure.normalizers import DefaultDayNormalizer
from ledgercache.infrastructure.stores import InMemoryLedgerStore
from ledgercache.infrastructure.tables import InMemoryDayTable

__all__ = [
    "DefaultDayNormalizer",
    "InMemoryDayTable",
    "InMemoryLedgerStore",
]
