"""Customer table: the growable, ordered record store.

Records are kept in insertion order. UPDATE mutates a record where it sits;
DELETE closes the gap so the remaining records keep their relative order.

Capacity is tracked explicitly so the table behaves like a classic dynamic
array: it starts empty, is allocated with ``initial_capacity`` slots on the
first append, and is multiplied by ``growth_factor`` whenever an append would
overflow it. Removing records never shrinks capacity; only clear() releases it.

Example:
    >>> table = CustomerTable()
    >>> c = table.create_customer(CustomerFields(name="Alice"))
    >>> c.id, table.size, table.capacity
    (1, 1, 10)
    >>> table.clear()
    >>> table.size, table.capacity, table.next_id
    (0, 0, 1)
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator

from customer_db.domain.entities import Customer, CustomerFields
from customer_db.domain.value_objects import CustomerId, IdAllocator

logger = logging.getLogger(__name__)

DEFAULT_INITIAL_CAPACITY = 10
DEFAULT_GROWTH_FACTOR = 2

CustomerPredicate = Callable[[Customer], bool]


class CustomerTableView:
    """Lazy, restartable view over the live records of a table.

    Every iteration walks the table's current storage, so a view obtained
    before a mutation reflects that mutation when iterated again.
    """

    def __init__(self, table: CustomerTable) -> None:
        self._table = table

    def __iter__(self) -> Iterator[Customer]:
        return self._table._iter_records()

    def __len__(self) -> int:
        return self._table.size


class CustomerTable:
    """Ordered in-memory store of customer records.

    The table also owns the id allocator, so that truncating the table and
    rewinding the id sequence happen together.

    Invariants:
        * ``size <= capacity`` at all times.
        * Capacity never decreases except through clear().
        * Ids of live records are unique.
    """

    def __init__(
        self,
        initial_capacity: int = DEFAULT_INITIAL_CAPACITY,
        growth_factor: int = DEFAULT_GROWTH_FACTOR,
    ) -> None:
        """Initialize an empty table.

        Args:
            initial_capacity: Slots allocated on the first append.
            growth_factor: Multiplier applied when capacity is exhausted.

        Raises:
            ValueError: If initial_capacity < 1 or growth_factor < 2.
        """
        if initial_capacity < 1:
            raise ValueError(f"initial_capacity must be >= 1, got {initial_capacity}")
        if growth_factor < 2:
            raise ValueError(f"growth_factor must be >= 2, got {growth_factor}")

        self._initial_capacity = initial_capacity
        self._growth_factor = growth_factor
        self._records: list[Customer] = []
        self._capacity = 0
        self._ids = IdAllocator()

    @property
    def size(self) -> int:
        """Number of live records."""
        return len(self._records)

    @property
    def capacity(self) -> int:
        """Number of allocated slots."""
        return self._capacity

    @property
    def next_id(self) -> CustomerId:
        """Id the next created record will receive."""
        return self._ids.peek()

    def __len__(self) -> int:
        return len(self._records)

    def allocate_id(self) -> CustomerId:
        """Take the next id from the allocator."""
        return self._ids.next_id()

    def create_customer(self, fields: CustomerFields) -> Customer:
        """Allocate an id, build a record from fields and append it."""
        customer = Customer.from_fields(self.allocate_id(), fields)
        self.append(customer)
        return customer

    def append(self, customer: Customer) -> None:
        """Append a record at the end, growing capacity if needed."""
        self._ensure_capacity(len(self._records) + 1)
        self._records.append(customer)

    def remove_all_matching(self, predicate: CustomerPredicate) -> int:
        """Remove every record matching predicate in a single pass.

        Returns:
            Number of records removed.
        """
        kept: list[Customer] = []
        removed = 0
        for customer in self._records:
            if predicate(customer):
                removed += 1
            else:
                kept.append(customer)

        if removed:
            self._records[:] = kept
        return removed

    def find_first_matching(self, predicate: CustomerPredicate) -> Customer | None:
        """Return the first record matching predicate, or None."""
        for customer in self._records:
            if predicate(customer):
                return customer
        return None

    def find_by_id(self, customer_id: int) -> Customer | None:
        return self.find_first_matching(lambda c: c.has_id(customer_id))

    def remove_by_id(self, customer_id: int) -> int:
        return self.remove_all_matching(lambda c: c.has_id(customer_id))

    def clear(self) -> None:
        """Drop all records, release capacity and rewind the id sequence."""
        self._records = []
        self._capacity = 0
        self._ids.reset()

    def snapshot(self) -> CustomerTableView:
        """Return a lazy view over the live records in storage order."""
        return CustomerTableView(self)

    def _iter_records(self) -> Iterator[Customer]:
        # Index-based so a view stays valid if the list object is replaced.
        index = 0
        while index < len(self._records):
            yield self._records[index]
            index += 1

    def _ensure_capacity(self, required: int) -> None:
        if required <= self._capacity:
            return

        new_capacity = self._capacity or self._initial_capacity
        while new_capacity < required:
            new_capacity *= self._growth_factor

        logger.debug(
            "Growing customer table capacity from %d to %d", self._capacity, new_capacity
        )
        self._capacity = new_capacity
