"""Domain services for the customer database.

Exports:
    - CustomerTable: Ordered, growable record store that owns the id sequence
    - CustomerTableView: Lazy, restartable view of the live records
"""

from customer_db.domain.services.customer_table import (
    DEFAULT_GROWTH_FACTOR,
    DEFAULT_INITIAL_CAPACITY,
    CustomerPredicate,
    CustomerTable,
    CustomerTableView,
)

__all__ = [
    "CustomerTable",
    "CustomerTableView",
    "CustomerPredicate",
    "DEFAULT_INITIAL_CAPACITY",
    "DEFAULT_GROWTH_FACTOR",
]
