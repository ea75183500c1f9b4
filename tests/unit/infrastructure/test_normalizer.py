"""Tests for DefaultDayNormalizer."""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from ledgercache.infrastructure.normalizers.default import DefaultDayNormalizer


class TestDefaultDayNormalizer:
    """Tests for DefaultDayNormalizer."""

    @pytest.fixture
    def normalizer(self) -> DefaultDayNormalizer:
        """Create a normalizer for a zone ahead of UTC."""
        return DefaultDayNormalizer(local_timezone="Asia/Tokyo")

    def test_date_is_its_own_local_day(self, normalizer: DefaultDayNormalizer) -> None:
        """Test that plain dates pass through."""
        assert normalizer.to_local_day_key(date(2024, 3, 5)) == date(2024, 3, 5)

    def test_naive_datetime_is_local_time(
        self, normalizer: DefaultDayNormalizer
    ) -> None:
        """Test that naive datetimes keep their calendar date."""
        assert normalizer.to_local_day_key(datetime(2024, 3, 5, 23, 59)) == date(
            2024, 3, 5
        )

    def test_aware_datetime_converted_to_local_zone(
        self, normalizer: DefaultDayNormalizer
    ) -> None:
        """Test that 20:00 UTC is already the next day in Tokyo."""
        stamp = datetime(2024, 3, 5, 20, 0, tzinfo=timezone.utc)

        assert normalizer.to_local_day_key(stamp) == date(2024, 3, 6)

    def test_local_day_key_returns_plain_date(
        self, normalizer: DefaultDayNormalizer
    ) -> None:
        """Test the local key type."""
        key = normalizer.to_local_day_key(datetime(2024, 3, 5, 12, 0))
        assert type(key) is date

    def test_reference_key_is_reference_midnight(
        self, normalizer: DefaultDayNormalizer
    ) -> None:
        """Test the reference key shape."""
        key = normalizer.to_reference_day_key(datetime(2024, 3, 5, 8, 30))

        assert key == datetime(2024, 3, 5, tzinfo=timezone.utc)
        assert key.utcoffset() is not None
        assert (key.hour, key.minute, key.second) == (0, 0, 0)

    def test_same_local_day_same_reference_key(
        self, normalizer: DefaultDayNormalizer
    ) -> None:
        """Test that all timestamps of a local day share one key."""
        morning = datetime(2024, 3, 5, 0, 30, tzinfo=ZoneInfo("Asia/Tokyo"))
        evening = datetime(2024, 3, 5, 23, 30, tzinfo=ZoneInfo("Asia/Tokyo"))

        keys = {
            normalizer.to_reference_day_key(date(2024, 3, 5)),
            normalizer.to_reference_day_key(datetime(2024, 3, 5, 12)),
            normalizer.to_reference_day_key(morning),
            normalizer.to_reference_day_key(evening),
        }

        assert len(keys) == 1

    def test_different_days_different_keys(
        self, normalizer: DefaultDayNormalizer
    ) -> None:
        """Test that neighbouring days do not collide."""
        assert normalizer.to_reference_day_key(
            date(2024, 3, 5)
        ) != normalizer.to_reference_day_key(date(2024, 3, 6))

    def test_custom_reference_timezone(self) -> None:
        """Test keys expressed in a non-UTC reference zone."""
        normalizer = DefaultDayNormalizer(
            local_timezone="UTC",
            reference_timezone="America/New_York",
        )

        key = normalizer.to_reference_day_key(date(2024, 3, 10))

        assert key == datetime(2024, 3, 10, tzinfo=ZoneInfo("America/New_York"))

    def test_system_local_zone(self) -> None:
        """Test that no local zone falls back to the system zone."""
        normalizer = DefaultDayNormalizer()
        stamp = datetime(2024, 3, 5, 12, 0, tzinfo=timezone.utc)

        assert normalizer.to_local_day_key(stamp) == stamp.astimezone().date()
