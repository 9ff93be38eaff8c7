"""Unit tests for the customer table."""

from __future__ import annotations

import pytest

from customer_db.domain.entities import Customer, CustomerFields
from customer_db.domain.services import CustomerTable
from customer_db.domain.value_objects import CustomerId, JobType


def _fields(name: str) -> CustomerFields:
    return CustomerFields(name=name, mail=f"{name.lower()}@x.com")


@pytest.mark.unit
class TestCustomerTableGrowth:
    """Tests for capacity management."""

    def test_empty_table(self, table: CustomerTable) -> None:
        assert table.size == 0
        assert table.capacity == 0
        assert table.next_id == 1

    def test_first_append_allocates_initial_capacity(self, table: CustomerTable) -> None:
        table.create_customer(_fields("A"))
        assert table.size == 1
        assert table.capacity == 10

    def test_capacity_doubles(self, table: CustomerTable) -> None:
        for i in range(11):
            table.create_customer(_fields(f"C{i}"))
        assert table.size == 11
        assert table.capacity == 20

        for i in range(10):
            table.create_customer(_fields(f"D{i}"))
        assert table.capacity == 40

    def test_size_never_exceeds_capacity(self, table: CustomerTable) -> None:
        for i in range(57):
            table.create_customer(_fields(f"C{i}"))
            assert table.size <= table.capacity

    def test_removal_keeps_capacity(self, table: CustomerTable) -> None:
        for i in range(15):
            table.create_customer(_fields(f"C{i}"))
        table.remove_all_matching(lambda c: True)
        assert table.size == 0
        assert table.capacity == 20

    def test_custom_sizing(self) -> None:
        table = CustomerTable(initial_capacity=2, growth_factor=3)
        for i in range(3):
            table.create_customer(_fields(f"C{i}"))
        assert table.capacity == 6

    @pytest.mark.parametrize("kwargs", [{"initial_capacity": 0}, {"growth_factor": 1}])
    def test_invalid_sizing(self, kwargs: dict) -> None:
        with pytest.raises(ValueError):
            CustomerTable(**kwargs)


@pytest.mark.unit
class TestCustomerTableOperations:
    """Tests for append, find, remove and clear."""

    def test_ids_are_sequential(self, table: CustomerTable) -> None:
        ids = [table.create_customer(_fields(n)).id for n in ("A", "B", "C")]
        assert ids == [1, 2, 3]

    def test_append_keeps_order(self, table: CustomerTable) -> None:
        for name in ("A", "B", "C"):
            table.create_customer(_fields(name))
        assert [c.name for c in table.snapshot()] == ["A", "B", "C"]

    def test_find_first_matching(self, table: CustomerTable) -> None:
        table.create_customer(_fields("A"))
        table.create_customer(_fields("B"))
        found = table.find_first_matching(lambda c: c.name == "B")
        assert found is not None
        assert found.id == 2

    def test_find_returns_none(self, table: CustomerTable) -> None:
        table.create_customer(_fields("A"))
        assert table.find_by_id(99) is None

    def test_find_returns_live_reference(self, table: CustomerTable) -> None:
        table.create_customer(_fields("A"))
        found = table.find_by_id(1)
        assert found is not None
        found.job_type = JobType.GAME_DEVELOPER
        assert next(iter(table.snapshot())).job_type is JobType.GAME_DEVELOPER

    def test_remove_closes_gap(self, table: CustomerTable) -> None:
        for name in ("A", "B", "C", "D"):
            table.create_customer(_fields(name))
        removed = table.remove_by_id(2)
        assert removed == 1
        assert [c.name for c in table.snapshot()] == ["A", "C", "D"]

    def test_remove_multiple_matches_in_one_pass(self, table: CustomerTable) -> None:
        table.append(Customer(id=CustomerId(7), name="X"))
        table.append(Customer(id=CustomerId(8), name="Y"))
        table.append(Customer(id=CustomerId(7), name="Z"))
        assert table.remove_by_id(7) == 2
        assert [c.name for c in table.snapshot()] == ["Y"]

    def test_remove_nothing(self, table: CustomerTable) -> None:
        table.create_customer(_fields("A"))
        assert table.remove_by_id(42) == 0
        assert table.size == 1

    def test_ids_not_reused_after_delete(self, table: CustomerTable) -> None:
        table.create_customer(_fields("A"))
        table.create_customer(_fields("B"))
        table.remove_by_id(2)
        assert table.create_customer(_fields("C")).id == 3

    def test_clear_resets_everything(self, table: CustomerTable) -> None:
        for i in range(12):
            table.create_customer(_fields(f"C{i}"))
        table.clear()
        assert table.size == 0
        assert table.capacity == 0
        assert table.next_id == 1
        assert table.create_customer(_fields("New")).id == 1
        assert table.capacity == 10


@pytest.mark.unit
class TestCustomerTableView:
    """Tests for the lazy snapshot view."""

    def test_view_is_restartable(self, table: CustomerTable) -> None:
        table.create_customer(_fields("A"))
        table.create_customer(_fields("B"))
        view = table.snapshot()
        assert [c.name for c in view] == ["A", "B"]
        assert [c.name for c in view] == ["A", "B"]

    def test_view_reflects_later_mutations(self, table: CustomerTable) -> None:
        view = table.snapshot()
        assert list(view) == []
        table.create_customer(_fields("A"))
        assert [c.name for c in view] == ["A"]
        assert len(view) == 1

    def test_view_after_clear(self, table: CustomerTable) -> None:
        table.create_customer(_fields("A"))
        view = table.snapshot()
        table.clear()
        assert list(view) == []
