"""Domain entities for the customer database.

Exports:
    - Customer: A live record with a store-assigned id
    - CustomerFields: Normalized field values awaiting an id
"""

from customer_db.domain.entities.customer import Customer, CustomerFields

__all__ = [
    "Customer",
    "CustomerFields",
]
