"""Unit tests for the command executor."""

from __future__ import annotations

import pytest

from customer_db.adapters.inbound import (
    Assignment,
    CommandParser,
    DeletePlan,
    NoOpPlan,
    StatementType,
    UpdatableField,
    UpdatePlan,
)
from customer_db.application import CommandExecutor, Outcome, apply_assignment
from customer_db.domain.entities import Customer, CustomerFields
from customer_db.domain.services import CustomerTable
from customer_db.domain.value_objects import BirthDate, CustomerId, JobType


@pytest.fixture
def executor(table: CustomerTable) -> CommandExecutor:
    """Create an executor over a table holding two customers."""
    table.create_customer(CustomerFields(name="Alice", mail="a@x.com"))
    table.create_customer(CustomerFields(name="Bob", mail="b@x.com"))
    return CommandExecutor(table)


@pytest.fixture
def parser() -> CommandParser:
    return CommandParser()


@pytest.mark.unit
class TestInsertExecution:
    """Tests for INSERT."""

    def test_insert_appends(self, executor: CommandExecutor, parser: CommandParser) -> None:
        result = executor.execute(parser.parse("INSERT INTO CUSTOMER (Carol, c@x.com, 5)"))

        assert result.outcome is Outcome.APPLIED
        assert result.affected_rows == 1
        assert result.customer_id == 3
        last = list(executor.table.snapshot())[-1]
        assert last.name == "Carol"
        assert last.job_type is JobType.GAME_DEVELOPER


@pytest.mark.unit
class TestDeleteExecution:
    """Tests for DELETE."""

    def test_delete_existing(self, executor: CommandExecutor) -> None:
        result = executor.execute(DeletePlan(customer_id=CustomerId(1)))

        assert result.outcome is Outcome.APPLIED
        assert result.affected_rows == 1
        assert [c.name for c in executor.table.snapshot()] == ["Bob"]

    def test_delete_missing_is_silent(self, executor: CommandExecutor) -> None:
        result = executor.execute(DeletePlan(customer_id=CustomerId(9)))

        assert result.outcome is Outcome.APPLIED
        assert result.affected_rows == 0
        assert result.success
        assert executor.table.size == 2

    def test_delete_without_id_ignored(self, executor: CommandExecutor) -> None:
        result = executor.execute(DeletePlan(customer_id=None))
        assert result.outcome is Outcome.IGNORED
        assert executor.table.size == 2


@pytest.mark.unit
class TestUpdateExecution:
    """Tests for UPDATE."""

    def test_update_fields(self, executor: CommandExecutor, parser: CommandParser) -> None:
        result = executor.execute(
            parser.parse("UPDATE CUSTOMER SET job_type=2, email_verified=true, date=3.4.2001 WHERE id=2")
        )

        assert result.outcome is Outcome.APPLIED
        bob = executor.table.find_by_id(2)
        assert bob is not None
        assert bob.job_type is JobType.FULLSTACK_DEVELOPER
        assert bob.email_verified is True
        assert bob.date_of_birth == BirthDate(3, 4, 2001)

    def test_update_missing_customer_is_error(self, executor: CommandExecutor) -> None:
        plan = UpdatePlan(
            customer_id=CustomerId(42),
            assignments=[Assignment(UpdatableField.NAME, "Zed")],
        )
        result = executor.execute(plan)

        assert result.is_error
        assert result.statement_type is StatementType.UPDATE
        assert [c.name for c in executor.table.snapshot()] == ["Alice", "Bob"]

    def test_update_malformed_is_error(self, executor: CommandExecutor) -> None:
        result = executor.execute(UpdatePlan(customer_id=None, well_formed=False))
        assert result.is_error

    def test_update_without_id_is_error(self, executor: CommandExecutor) -> None:
        result = executor.execute(UpdatePlan(customer_id=None))
        assert result.is_error

    def test_update_with_no_assignments_succeeds(self, executor: CommandExecutor) -> None:
        result = executor.execute(UpdatePlan(customer_id=CustomerId(1)))
        assert result.outcome is Outcome.APPLIED


@pytest.mark.unit
class TestApplyAssignment:
    """Tests for per-field assignment codecs."""

    def test_empty_name_becomes_null(self) -> None:
        customer = Customer(id=CustomerId(1), name="Ann")
        apply_assignment(customer, Assignment(UpdatableField.NAME, ""))
        assert customer.name == "null"

    def test_mail(self) -> None:
        customer = Customer(id=CustomerId(1))
        apply_assignment(customer, Assignment(UpdatableField.MAIL, "m@x.com"))
        assert customer.mail == "m@x.com"

    def test_job_type_out_of_range(self) -> None:
        customer = Customer(id=CustomerId(1), job_type=JobType.TEST_ENGINEER)
        apply_assignment(customer, Assignment(UpdatableField.JOB_TYPE, "99"))
        assert customer.job_type is JobType.BACKEND_DEVELOPER

    def test_verified_false(self) -> None:
        customer = Customer(id=CustomerId(1), email_verified=True)
        apply_assignment(customer, Assignment(UpdatableField.EMAIL_VERIFIED, "false"))
        assert customer.email_verified is False

    def test_bad_date_resets(self) -> None:
        customer = Customer(id=CustomerId(1), date_of_birth=BirthDate(1, 1, 2000))
        apply_assignment(customer, Assignment(UpdatableField.DATE, "soon"))
        assert customer.date_of_birth.is_unknown


@pytest.mark.unit
class TestTruncateAndNoOp:
    """Tests for TRUNCATE and ignored lines."""

    def test_truncate(self, executor: CommandExecutor, parser: CommandParser) -> None:
        result = executor.execute(parser.parse("TRUNCATE TABLE CUSTOMER"))

        assert result.outcome is Outcome.APPLIED
        assert result.affected_rows == 2
        assert executor.table.size == 0
        assert executor.table.next_id == 1

    def test_noop(self, executor: CommandExecutor) -> None:
        result = executor.execute(NoOpPlan(reason="unknown verb"))
        assert result.outcome is Outcome.IGNORED
        assert executor.table.size == 2
