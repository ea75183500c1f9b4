"""Tests for write-path decorators."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from ledgercache.decorators import (
    configure,
    get_ledger_cache,
    invalidates_all,
    refreshes_day,
)

FIFTH = date(2024, 3, 5)


@pytest.fixture
def cache() -> MagicMock:
    """Configure a cache double for the decorators."""
    cache = MagicMock()
    configure(cache)
    return cache


class TestConfigure:
    """Tests for decorator configuration."""

    def test_configure_sets_cache(self) -> None:
        """Test that configure stores the cache."""
        cache = MagicMock()
        configure(cache)

        assert get_ledger_cache() is cache

    def test_configure_none_disables(self) -> None:
        """Test that decorators run untouched when unconfigured."""
        configure(None)
        calls: list[date] = []

        @refreshes_day()
        def add_expense(day: date) -> str:
            calls.append(day)
            return "ok"

        assert add_expense(FIFTH) == "ok"
        assert calls == [FIFTH]


class TestRefreshesDay:
    """Tests for @refreshes_day."""

    def test_refreshes_positional_argument(self, cache: MagicMock) -> None:
        """Test refresh with the day passed positionally."""

        @refreshes_day(arg="day")
        def add_expense(day: date, amount: Decimal) -> Decimal:
            return amount

        assert add_expense(FIFTH, Decimal("3")) == Decimal("3")
        cache.refresh_day.assert_called_once_with(FIFTH)

    def test_refreshes_keyword_argument(self, cache: MagicMock) -> None:
        """Test refresh with the day passed by keyword."""

        @refreshes_day(arg="when")
        def move_expense(entry_id: str, when: date) -> None:
            return None

        move_expense("e1", when=FIFTH)
        cache.refresh_day.assert_called_once_with(FIFTH)

    def test_refreshes_default_argument(self, cache: MagicMock) -> None:
        """Test refresh with the parameter's default value."""

        @refreshes_day(arg="day")
        def add_today(amount: Decimal, day: date = FIFTH) -> None:
            return None

        add_today(Decimal("1"))
        cache.refresh_day.assert_called_once_with(FIFTH)

    def test_no_refresh_when_write_fails(self, cache: MagicMock) -> None:
        """Test that a failed write leaves the cache alone."""

        @refreshes_day()
        def add_expense(day: date) -> None:
            raise RuntimeError("constraint violated")

        with pytest.raises(RuntimeError):
            add_expense(FIFTH)

        cache.refresh_day.assert_not_called()

    def test_unknown_parameter(self) -> None:
        """Test that naming a missing parameter fails at decoration."""
        with pytest.raises(TypeError, match="no parameter named 'day'"):

            @refreshes_day()
            def add_expense(when: date) -> None:
                return None

    def test_preserves_metadata(self, cache: MagicMock) -> None:
        """Test that functools.wraps keeps the name and docstring."""

        @refreshes_day()
        def add_expense(day: date) -> None:
            """Add an expense."""

        assert add_expense.__name__ == "add_expense"
        assert add_expense.__doc__ == "Add an expense."

    async def test_async_function(self, cache: MagicMock) -> None:
        """Test refresh after an awaited write."""

        @refreshes_day()
        async def add_expense(day: date) -> str:
            return "saved"

        assert await add_expense(FIFTH) == "saved"
        cache.refresh_day.assert_called_once_with(FIFTH)


class TestInvalidatesAll:
    """Tests for @invalidates_all."""

    def test_invalidates_after_write(self, cache: MagicMock) -> None:
        """Test that the whole cache is wiped after the write."""

        @invalidates_all
        def import_statement(path: str) -> int:
            return 12

        assert import_statement("march.csv") == 12
        cache.invalidate_all.assert_called_once_with()

    def test_no_invalidation_when_write_fails(self, cache: MagicMock) -> None:
        """Test that a failed write leaves the cache alone."""

        @invalidates_all
        def import_statement(path: str) -> None:
            raise ValueError("bad file")

        with pytest.raises(ValueError):
            import_statement("march.csv")

        cache.invalidate_all.assert_not_called()

    async def test_async_function(self, cache: MagicMock) -> None:
        """Test invalidation after an awaited write."""

        @invalidates_all
        async def import_statement(path: str) -> None:
            return None

        await import_statement("march.csv")
        cache.invalidate_all.assert_called_once_with()
