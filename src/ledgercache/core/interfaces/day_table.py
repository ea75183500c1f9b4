"""Day table interface."""

from typing import Any, Protocol

from ledgercache.core.entities.day_key import ReferenceDayKey


class IDayTable(Protocol):
    """Contract for one keyed cache table.

    Every operation on a table is mutually exclusive with every other
    operation on the same table. Tables never perform I/O.
    """

    @property
    def generation(self) -> int:
        """Number of times the table has been cleared."""
        ...

    def get(self, key: ReferenceDayKey) -> Any | None:
        """Retrieve the value cached for a day.

        Args:
            key: The reference day key.

        Returns:
            The cached value, or None if the day is not cached.
        """
        ...

    def contains(self, key: ReferenceDayKey) -> bool:
        """Check if a day is cached."""
        ...

    def put(self, key: ReferenceDayKey, value: Any) -> None:
        """Store a value for a day, overwriting any previous one."""
        ...

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
        ...

    def clear(self) -> None:
        """Drop every cached day and advance the generation."""
        ...

    def __len__(self) -> int:
        ...
