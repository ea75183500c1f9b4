"""In-memory day table implementation."""

import math
import threading
from typing import Any

from cachetools import LRUCache  # type: ignore[import-untyped]

from ledgercache.core.entities.day_key import ReferenceDayKey


class InMemoryDayTable:
    """Lock-guarded in-memory table of per-day values.

    Every operation takes the table's own lock, so operations on one
    table never wait on another table. Uses cachetools for storage; the
    table is unbounded unless ``maxsize`` is given, in which case the
    least recently read days are evicted first.
    """

    def __init__(self, name: str, maxsize: int | None = None) -> None:
        """Initialize the table.

        Args:
            name: Table name, used in logs and repr.
            maxsize: Maximum number of days held. None is unbounded.
        """
        self._name = name
        self._maxsize = maxsize
        self._lock = threading.Lock()
        self._data: LRUCache[ReferenceDayKey, Any] = LRUCache(
            maxsize=maxsize if maxsize is not None else math.inf,
        )
        self._generation = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def maxsize(self) -> int | None:
        """Return the maximum number of days held, or None if unbounded."""
        return self._maxsize

    @property
    def generation(self) -> int:
        """Number of times the table has been cleared."""
        with self._lock:
            return self._generation

    def get(self, key: ReferenceDayKey) -> Any | None:
        """Retrieve the value cached for a day.

        Args:
            key: The reference day key.

        Returns:
            The cached value, or None if the day is not cached.
        """
        with self._lock:
            return self._data.get(key)

    def contains(self, key: ReferenceDayKey) -> bool:
        """Check if a day is cached.

        Args:
            key: The reference day key.

        Returns:
            True if the day is cached, False otherwise.
        """
        with self._lock:
            return key in self._data

    def put(self, key: ReferenceDayKey, value: Any) -> None:
        """Store a value for a day, overwriting any previous one.

        Args:
            key: The reference day key.
            value: The value to store.
        """
        with self._lock:
            self._data[key] = value

    def put_if_current(
        self,
        key: ReferenceDayKey,
        value: Any,
        generation: int,
    ) -> bool:
        """Store a value unless the day is cached or the table was cleared.

        Args:
            key: The reference day key.
            value: The value to store.
            generation: Generation observed when the caller read the value.

        Returns:
            True if the value was written, False otherwise.
        """
        with self._lock:
            if generation != self._generation or key in self._data:
                return False
            self._data[key] = value
            return True

    def clear(self) -> None:
        """Drop every cached day and advance the generation."""
        with self._lock:
            self._data.clear()
            self._generation += 1

    def __len__(self) -> int:
        """Return the number of cached days."""
        with self._lock:
            return len(self._data)

    def __repr__(self) -> str:
        return f"InMemoryDayTable(name={self._name!r}, maxsize={self._maxsize!r})"
