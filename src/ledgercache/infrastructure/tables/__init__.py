"""Cache table implementations."""

from ledgercache.infrastructure.tables.memory import InMemoryDayTable

__all__ = ["InMemoryDayTable"]
