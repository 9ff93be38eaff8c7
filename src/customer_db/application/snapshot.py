"""Snapshot serializer.

The output log starts with the table as loaded from seed data, without a
separator. Every processed command then adds a block: the separator line
followed by either the whole table or, after a failed UPDATE, the error
marker alone.

Row format:
    name,mail,JOB_TYPE_NAME,true|false,DD.MM.YYYY
"""

from __future__ import annotations

from typing import Iterable

from customer_db.application.executor import ExecutionResult
from customer_db.domain.entities import Customer
from customer_db.domain.value_objects import job_type_to_name

DEFAULT_SEPARATOR = "----------"
DEFAULT_ERROR_MARKER = "error"


class SnapshotRenderer:
    """Renders the customer table as snapshot log lines.

    Example:
        >>> renderer = SnapshotRenderer()
        >>> renderer.render_row(Customer(id=1, name="Alice", mail="a@x.com"))
        'Alice,a@x.com,BACKEND_DEVELOPER,false,00.00.0000'
    """

    def __init__(
        self,
        separator: str = DEFAULT_SEPARATOR,
        error_marker: str = DEFAULT_ERROR_MARKER,
    ) -> None:
        self._separator = separator
        self._error_marker = error_marker

    @property
    def separator(self) -> str:
        return self._separator

    @property
    def error_marker(self) -> str:
        return self._error_marker

    def render_row(self, customer: Customer) -> str:
        """Render one customer as a comma-separated line."""
        return ",".join(
            (
                customer.name,
                customer.mail,
                job_type_to_name(customer.job_type),
                "true" if customer.email_verified else "false",
                customer.date_of_birth.render(),
            )
        )

    def render_table(self, customers: Iterable[Customer]) -> list[str]:
        """Render every customer, in iteration order."""
        return [self.render_row(customer) for customer in customers]

    def render_initial(self, customers: Iterable[Customer]) -> list[str]:
        """Render the initial dump written right after seeding."""
        return self.render_table(customers)

    def render_block(
        self,
        customers: Iterable[Customer],
        result: ExecutionResult | None = None,
    ) -> list[str]:
        """Render the block appended after a command.

        Args:
            customers: Current table contents.
            result: Result of the command; an error result replaces the
                table with the error marker.
        """
        if result is not None and result.is_error:
            return [self._separator, self._error_marker]
        return [self._separator, *self.render_table(customers)]
