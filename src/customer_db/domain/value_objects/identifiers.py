"""Customer identifiers and the id allocator.

Ids are handed out from a monotonically increasing counter owned by the
customer table. The counter only goes backwards when the table is truncated,
so a record inserted after a truncate reuses id 1.
"""

from __future__ import annotations

from typing import NewType

CustomerId = NewType("CustomerId", int)
"""Identifier of a live customer record."""

FIRST_CUSTOMER_ID = CustomerId(1)


class IdAllocator:
    """Sequential customer id source.

    Example:
        >>> ids = IdAllocator()
        >>> ids.next_id(), ids.next_id()
        (1, 2)
        >>> ids.reset()
        >>> ids.next_id()
        1
    """

    def __init__(self, start: int = FIRST_CUSTOMER_ID) -> None:
        self._start = start
        self._next = start

    def next_id(self) -> CustomerId:
        """Return the current counter value and advance it."""
        value = CustomerId(self._next)
        self._next += 1
        return value

    def peek(self) -> CustomerId:
        """Return the id the next call to next_id() will hand out."""
        return CustomerId(self._next)

    def reset(self) -> None:
        """Rewind the counter to its starting value."""
        self._next = self._start
