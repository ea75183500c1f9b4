"""Day normalizer implementations."""

from ledgercache.infrastructure.normalizers.default import DefaultDayNormalizer

__all__ = ["DefaultDayNormalizer"]
