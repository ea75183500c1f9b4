"""Ledger store implementations."""

from ledgercache.infrastructure.stores.memory import InMemoryLedgerStore

__all__ = ["InMemoryLedgerStore"]
