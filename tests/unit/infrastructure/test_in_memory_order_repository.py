"""
Tests for InMemoryOrderRepository.

Validates insert/replace/patch rules, filters and removal.
"""
import copy
import dataclasses
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from core.domain.entities.order import Customer, DeliveryAddress, OrderItem, OrderPatch, RiceOrder
from core.domain.enums.order_status import OrderStatus
from core.domain.exceptions import InvalidArgumentError


class TestInsert:
    """Test adding orders."""

    def test_insert_valid_order(self, repository, make_order):
        result = repository.insert(make_order("TEST001"))

        assert result.order_id == "TEST001"
        assert repository.count() == 1
        assert repository.get_by_id("TEST001") is result

    def test_insert_sets_order_date_when_missing(self, repository, make_order):
        before = datetime.now(timezone.utc)

        result = repository.insert(make_order("TEST001"))

        assert result.order_date is not None
        assert result.order_date >= before

    def test_insert_keeps_given_order_date(self, repository, make_order):
        order_date = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

        result = repository.insert(make_order("TEST001", order_date=order_date))

        assert result.order_date == order_date

    def test_insert_computes_total_when_missing(self, repository, make_order):
        order = make_order("TEST001", items=[("50000", 2), ("35000", 1)])

        result = repository.insert(order)

        assert result.total_amount == Decimal("135000")

    def test_insert_keeps_explicit_total(self, repository, make_order):
        order = make_order("TEST001", total_amount=Decimal("99"))

        assert repository.insert(order).total_amount == Decimal("99")

    def test_insert_order_without_items_totals_zero(self, repository, make_order):
        result = repository.insert(make_order("TEST001", items=[]))

        assert result.total_amount == Decimal("0")

    def test_insert_none_raises(self, repository):
        with pytest.raises(InvalidArgumentError, match="Order cannot be null"):
            repository.insert(None)

    @pytest.mark.parametrize("order_id", [None, "", "   "])
    def test_insert_blank_id_raises(self, repository, make_order, order_id):
        with pytest.raises(InvalidArgumentError, match="Order ID cannot be null or empty"):
            repository.insert(make_order(order_id))

        assert repository.count() == 0

    def test_insert_duplicate_id_raises_and_keeps_existing(self, repository, make_order):
        original = repository.insert(make_order("TEST001", payment_method="Cash"))
        snapshot = copy.deepcopy(original)

        with pytest.raises(InvalidArgumentError, match="already exists"):
            repository.insert(make_order("TEST001", payment_method="E-Wallet"))

        assert repository.count() == 1
        assert repository.get_by_id("TEST001") == snapshot

    def test_failed_duplicate_insert_does_not_default_fields(self, repository, make_order):
        repository.insert(make_order("TEST001"))
        duplicate = make_order("TEST001")

        with pytest.raises(InvalidArgumentError):
            repository.insert(duplicate)

        assert duplicate.order_date is None
        assert duplicate.total_amount is None

    def test_count_matches_unique_ids(self, repository, make_order):
        for order_id in ("A", "B", "C"):
            repository.insert(make_order(order_id))

        assert repository.count() == 3


class TestReads:
    """Test lookups and filters."""

    @pytest.fixture(autouse=True)
    def add_test_orders(self, repository, make_order):
        repository.insert(make_order("TEST001", customer_id="CUST001", status=OrderStatus.PENDING))
        repository.insert(make_order("TEST002", customer_id="CUST002", status=OrderStatus.CONFIRMED))
        repository.insert(make_order("TEST003", customer_id="CUST001", status=OrderStatus.PENDING))

    def test_list_all(self, repository):
        orders = repository.list_all()

        assert {order.order_id for order in orders} == {"TEST001", "TEST002", "TEST003"}

    def test_list_all_returns_a_copy(self, repository):
        orders = repository.list_all()
        orders.clear()

        assert repository.count() == 3

    def test_get_by_id(self, repository):
        result = repository.get_by_id("TEST001")

        assert result is not None
        assert result.customer.name == "John Doe"

    def test_get_by_id_missing(self, repository):
        assert repository.get_by_id("NOPE") is None

    def test_list_by_status(self, repository):
        pending = repository.list_by_status(OrderStatus.PENDING)

        assert len(pending) == 2
        assert all(order.status is OrderStatus.PENDING for order in pending)

    def test_list_by_status_no_match(self, repository):
        assert repository.list_by_status(OrderStatus.DELIVERED) == []
        assert repository.count() == 3

    def test_list_by_customer(self, repository):
        orders = repository.list_by_customer("CUST001")

        assert {order.order_id for order in orders} == {"TEST001", "TEST003"}

    def test_list_by_customer_no_match(self, repository):
        assert repository.list_by_customer("CUST999") == []
        assert repository.count() == 3

    def test_order_without_customer_never_matches(self, repository, make_order):
        repository.insert(make_order("TEST004", customer_id=None))

        assert all(order.order_id != "TEST004" for order in repository.list_by_customer(None))
        assert "TEST004" not in {o.order_id for o in repository.list_by_customer("CUST001")}

    def test_customer_without_id_never_matches(self, repository, make_order):
        order = make_order("TEST005")
        order.customer = Customer(name="Anonymous")
        repository.insert(order)

        assert repository.list_by_customer(None) == []
        assert "TEST005" not in {o.order_id for o in repository.list_by_customer("CUST001")}

    def test_exists(self, repository):
        assert repository.exists("TEST001")
        assert not repository.exists("NOPE")
        assert not repository.exists(None)


class TestReplace:
    """Test full updates."""

    @pytest.fixture
    def stored(self, repository, make_order):
        return repository.insert(
            make_order(
                "TEST001",
                order_date=datetime(2024, 1, 1, 8, 30, tzinfo=timezone.utc),
            )
        )

    def test_replace_existing_order(self, repository, make_order, stored):
        replacement = make_order("TEST001", status=OrderStatus.DELIVERED, payment_method="E-Wallet")

        result = repository.replace("TEST001", replacement)

        assert result is replacement
        assert result.status is OrderStatus.DELIVERED
        assert result.payment_method == "E-Wallet"
        assert repository.get_by_id("TEST001") is replacement

    def test_replace_forces_target_id(self, repository, make_order, stored):
        result = repository.replace("TEST001", make_order("SOMETHING-ELSE"))

        assert result.order_id == "TEST001"
        assert not repository.exists("SOMETHING-ELSE")
        assert repository.count() == 1

    def test_replace_preserves_order_date_when_missing(self, repository, make_order, stored):
        original_date = stored.order_date

        result = repository.replace("TEST001", make_order("TEST001", payment_method="Updated Payment"))

        assert result.order_date == original_date
        assert result.payment_method == "Updated Payment"

    def test_replace_uses_given_order_date(self, repository, make_order, stored):
        new_date = stored.order_date + timedelta(days=1)

        result = repository.replace("TEST001", make_order("TEST001", order_date=new_date))

        assert result.order_date == new_date

    def test_replace_recalculates_total_when_missing(self, repository, make_order, stored):
        result = repository.replace("TEST001", make_order("TEST001", items=[("30000", 2), ("40000", 1)]))

        assert result.total_amount == Decimal("100000")

    def test_replace_keeps_explicit_total(self, repository, make_order, stored):
        result = repository.replace("TEST001", make_order("TEST001", total_amount=Decimal("1")))

        assert result.total_amount == Decimal("1")

    def test_replace_is_destructive(self, repository, stored):
        result = repository.replace("TEST001", RiceOrder(status=OrderStatus.CANCELLED))

        assert result.customer is None
        assert result.delivery_address is None
        assert result.payment_method is None
        assert result.items == []
        assert result.total_amount == Decimal("0")

    def test_replace_missing_returns_none(self, repository, make_order, stored):
        assert repository.replace("NOPE", make_order("NOPE")) is None
        assert repository.count() == 1
        assert not repository.exists("NOPE")

    def test_replace_none_raises(self, repository, stored):
        with pytest.raises(InvalidArgumentError, match="Updated order cannot be null"):
            repository.replace("TEST001", None)

    @pytest.mark.parametrize("order_id", [None, "", "  "])
    def test_replace_blank_id_raises(self, repository, make_order, stored, order_id):
        with pytest.raises(InvalidArgumentError, match="Order ID cannot be null or empty"):
            repository.replace(order_id, make_order("TEST001"))


class TestPatch:
    """Test partial updates."""

    @pytest.fixture
    def stored(self, repository, make_order):
        return repository.insert(make_order("TEST001", items=[("50000", 2)]))

    def test_patch_status_only_leaves_everything_else(self, repository, stored):
        before = copy.deepcopy(stored)

        result = repository.patch("TEST001", OrderPatch(status=OrderStatus.CONFIRMED))

        assert result.status is OrderStatus.CONFIRMED
        assert result == dataclasses.replace(before, status=OrderStatus.CONFIRMED)

    def test_patch_mutates_stored_order_in_place(self, repository, stored):
        result = repository.patch("TEST001", OrderPatch(payment_method="Cash"))

        assert result is stored
        assert repository.get_by_id("TEST001").payment_method == "Cash"

    def test_patch_customer(self, repository, stored):
        customer = Customer(customer_id="CUST001", name="Updated Name", email="u@example.com")

        result = repository.patch("TEST001", OrderPatch(customer=customer))

        assert result.customer.name == "Updated Name"
        assert result.status is OrderStatus.PENDING

    def test_patch_delivery_address(self, repository, stored):
        address = DeliveryAddress(street="1 Harbor Rd", city="Boston", state="MA")

        result = repository.patch("TEST001", OrderPatch(delivery_address=address))

        assert result.delivery_address.city == "Boston"

    def test_patch_delivery_time(self, repository, stored):
        delivery_time = datetime(2024, 6, 1, 19, 0, tzinfo=timezone.utc)

        result = repository.patch("TEST001", OrderPatch(delivery_time=delivery_time))

        assert result.delivery_time == delivery_time

    def test_patch_items_recalculates_total(self, repository, stored):
        items = [
            OrderItem(item_id="N1", quantity=2, price_per_unit=Decimal("30000")),
            OrderItem(item_id="N2", quantity=1, price_per_unit=Decimal("40000")),
        ]

        result = repository.patch("TEST001", OrderPatch(items=items))

        assert [item.item_id for item in result.items] == ["N1", "N2"]
        assert result.total_amount == Decimal("100000")

    def test_patch_items_wins_over_explicit_total(self, repository, stored):
        items = [OrderItem(quantity=3, price_per_unit=Decimal("100"))]

        result = repository.patch("TEST001", OrderPatch(items=items, total_amount=Decimal("5")))

        assert result.total_amount == Decimal("300")

    def test_patch_empty_items_resets_total_to_zero(self, repository, stored):
        result = repository.patch("TEST001", OrderPatch(items=[]))

        assert result.items == []
        assert result.total_amount == Decimal("0")

    def test_patch_total_without_items(self, repository, stored):
        result = repository.patch("TEST001", OrderPatch(total_amount=Decimal("77777")))

        assert result.total_amount == Decimal("77777")
        assert len(result.items) == 1

    def test_patch_none_values_are_ignored(self, repository, stored):
        before = copy.deepcopy(stored)

        result = repository.patch(
            "TEST001", OrderPatch(customer=None, items=None, status=None, total_amount=None)
        )

        assert result == before

    def test_patch_never_touches_order_date(self, repository, stored):
        original_date = stored.order_date

        result = repository.patch("TEST001", OrderPatch(status=OrderStatus.PREPARING))

        assert result.order_date == original_date

    def test_patch_missing_returns_none(self, repository, stored):
        assert repository.patch("NOPE", OrderPatch(status=OrderStatus.CONFIRMED)) is None

    def test_patch_none_raises(self, repository, stored):
        with pytest.raises(InvalidArgumentError, match="Updates cannot be null"):
            repository.patch("TEST001", None)

    def test_patch_blank_id_raises(self, repository, stored):
        with pytest.raises(InvalidArgumentError, match="Order ID cannot be null or empty"):
            repository.patch(" ", OrderPatch(status=OrderStatus.CONFIRMED))


class TestRemoveAndCount:
    """Test removal, clearing and counting."""

    @pytest.fixture(autouse=True)
    def add_test_orders(self, repository, make_order):
        for order_id in ("TEST001", "TEST002", "TEST003"):
            repository.insert(make_order(order_id))

    def test_remove_existing(self, repository):
        assert repository.remove("TEST001") is True
        assert repository.count() == 2
        assert not repository.exists("TEST001")

    def test_remove_missing_returns_false(self, repository):
        assert repository.remove("NOPE") is False
        assert repository.count() == 3

    @pytest.mark.parametrize("order_id", [None, ""])
    def test_remove_blank_id_raises(self, repository, order_id):
        with pytest.raises(InvalidArgumentError, match="Order ID cannot be null or empty"):
            repository.remove(order_id)

    def test_clear(self, repository):
        repository.clear()

        assert repository.count() == 0
        assert repository.list_all() == []

    def test_count_tracks_inserts_and_removes(self, repository, make_order):
        repository.clear()
        assert repository.count() == 0

        repository.insert(make_order("X1"))
        repository.insert(make_order("X2"))
        assert repository.count() == 2

        repository.remove("X1")
        assert repository.count() == 1


def test_end_to_end_lifecycle(repository):
    """Insert, read, patch status, remove."""
    repository.insert(
        RiceOrder(order_id="A1", items=[OrderItem(quantity=3, price_per_unit=Decimal("100"))])
    )

    assert repository.get_by_id("A1").total_amount == Decimal("300")

    patched = repository.patch("A1", OrderPatch(status=OrderStatus.CONFIRMED))
    assert patched.status is OrderStatus.CONFIRMED
    assert patched.total_amount == Decimal("300")

    assert repository.remove("A1") is True
    assert repository.get_by_id("A1") is None
