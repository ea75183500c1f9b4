"""Core interfaces (Protocol classes) for ledgercache."""

from ledgercache.core.interfaces.day_normalizer import IDayNormalizer
from ledgercache.core.interfaces.day_table import IDayTable
from ledgercache.core.interfaces.ledger_store import ILedgerStore

__all__ = [
    "IDayNormalizer",
    "IDayTable",
    "ILedgerStore",
]
