"""Command executor: dispatches parsed plans to their handlers.

Each command line is independent. Handlers mutate the customer table
directly; there is no transaction or rollback.

Outcomes:
    - APPLIED: the handler ran (a DELETE that matched nothing still counts)
    - IGNORED: the line did not have a usable shape; nothing changed
    - ERROR: an UPDATE could not resolve its target; nothing changed
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from customer_db.adapters.inbound.command_parser import (
    Assignment,
    CommandPlan,
    DeletePlan,
    InsertPlan,
    NoOpPlan,
    StatementType,
    TruncatePlan,
    UpdatableField,
    UpdatePlan,
)
from customer_db.domain.entities import Customer
from customer_db.domain.services import CustomerTable
from customer_db.domain.value_objects import (
    CustomerId,
    atoi,
    job_type_from_int,
    parse_date,
    parse_flag,
    text_or_null,
)

logger = logging.getLogger(__name__)


class Outcome(Enum):
    """How a command line was handled."""

    APPLIED = "applied"
    IGNORED = "ignored"
    ERROR = "error"


@dataclass
class ExecutionResult:
    """Result of executing one command plan."""

    statement_type: StatementType
    outcome: Outcome
    affected_rows: int = 0
    message: str = ""
    customer_id: CustomerId | None = None

    @property
    def success(self) -> bool:
        return self.outcome is not Outcome.ERROR

    @property
    def is_error(self) -> bool:
        return self.outcome is Outcome.ERROR


def apply_assignment(customer: Customer, assignment: Assignment) -> None:
    """Write one SET-clause assignment onto a customer through its codec."""
    value = assignment.value
    if assignment.field is UpdatableField.NAME:
        customer.name = text_or_null(value)
    elif assignment.field is UpdatableField.MAIL:
        customer.mail = text_or_null(value)
    elif assignment.field is UpdatableField.JOB_TYPE:
        customer.job_type = job_type_from_int(atoi(value))
    elif assignment.field is UpdatableField.EMAIL_VERIFIED:
        customer.email_verified = parse_flag(value)
    elif assignment.field is UpdatableField.DATE:
        customer.date_of_birth = parse_date(value)


class CommandExecutor:
    """Executes command plans against a customer table.

    Example:
        >>> table = CustomerTable()
        >>> executor = CommandExecutor(table)
        >>> parser = CommandParser()
        >>> executor.execute(parser.parse("INSERT INTO CUSTOMER (Alice)")).outcome
        <Outcome.APPLIED: 'applied'>
        >>> executor.execute(parser.parse("UPDATE CUSTOMER SET name=Bo WHERE id=9")).outcome
        <Outcome.ERROR: 'error'>
    """

    def __init__(self, table: CustomerTable) -> None:
        self._table = table

    @property
    def table(self) -> CustomerTable:
        return self._table

    def execute(self, plan: CommandPlan) -> ExecutionResult:
        """Execute a plan.

        Args:
            plan: The parsed command.

        Returns:
            ExecutionResult describing the outcome.
        """
        if isinstance(plan, InsertPlan):
            return self._execute_insert(plan)
        elif isinstance(plan, DeletePlan):
            return self._execute_delete(plan)
        elif isinstance(plan, UpdatePlan):
            return self._execute_update(plan)
        elif isinstance(plan, TruncatePlan):
            return self._execute_truncate(plan)
        elif isinstance(plan, NoOpPlan):
            return ExecutionResult(
                statement_type=StatementType.NOOP,
                outcome=Outcome.IGNORED,
                message=f"Ignored: {plan.reason}",
            )
        return ExecutionResult(
            statement_type=StatementType.NOOP,
            outcome=Outcome.IGNORED,
            message=f"Unsupported plan type: {type(plan).__name__}",
        )

    def _execute_insert(self, plan: InsertPlan) -> ExecutionResult:
        customer = self._table.create_customer(plan.fields)
        logger.debug("Inserted customer %d", customer.id)
        return ExecutionResult(
            statement_type=StatementType.INSERT,
            outcome=Outcome.APPLIED,
            affected_rows=1,
            message="OK: 1 row inserted",
            customer_id=customer.id,
        )

    def _execute_delete(self, plan: DeletePlan) -> ExecutionResult:
        if plan.customer_id is None:
            return ExecutionResult(
                statement_type=StatementType.DELETE,
                outcome=Outcome.IGNORED,
                message="Ignored: DELETE without WHERE id=<n>",
            )

        count = self._table.remove_by_id(plan.customer_id)
        return ExecutionResult(
            statement_type=StatementType.DELETE,
            outcome=Outcome.APPLIED,
            affected_rows=count,
            message=f"OK: {count} row(s) deleted",
            customer_id=plan.customer_id,
        )

    def _execute_update(self, plan: UpdatePlan) -> ExecutionResult:
        if not plan.well_formed:
            return self._update_error("UPDATE requires ' SET ' before ' WHERE id='")
        if plan.customer_id is None:
            return self._update_error("UPDATE has no integer after 'WHERE id='")

        customer = self._table.find_by_id(plan.customer_id)
        if customer is None:
            return self._update_error(
                f"Customer {plan.customer_id} does not exist", plan.customer_id
            )

        for assignment in plan.assignments:
            apply_assignment(customer, assignment)

        return ExecutionResult(
            statement_type=StatementType.UPDATE,
            outcome=Outcome.APPLIED,
            affected_rows=1,
            message=f"OK: {len(plan.assignments)} field(s) updated",
            customer_id=customer.id,
        )

    def _execute_truncate(self, plan: TruncatePlan) -> ExecutionResult:
        count = self._table.size
        self._table.clear()
        return ExecutionResult(
            statement_type=StatementType.TRUNCATE,
            outcome=Outcome.APPLIED,
            affected_rows=count,
            message=f"OK: {count} row(s) truncated",
        )

    @staticmethod
    def _update_error(message: str, customer_id: CustomerId | None = None) -> ExecutionResult:
        return ExecutionResult(
            statement_type=StatementType.UPDATE,
            outcome=Outcome.ERROR,
            message=message,
            customer_id=customer_id,
        )
