"""Exceptions raised by ledgercache."""


class LedgerCacheError(Exception):
    """Base class for every error raised by ledgercache."""

    pass


class ConfigurationError(LedgerCacheError):
    """Raised when a CacheConfig holds an invalid value."""

    pass


class LoaderClosedError(LedgerCacheError):
    """Raised when a backfill job is submitted after the loader closed."""

    pass
