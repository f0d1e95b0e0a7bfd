"""Shared fixtures: isolated repositories and order builders."""
from __future__ import annotations

import os

# Set env vars BEFORE any app imports
os.environ["RICE_API_SEED_SAMPLE_DATA"] = "false"
os.environ.setdefault("RICE_API_LOG_LEVEL", "WARNING")

from decimal import Decimal
from typing import Callable, List, Optional, Tuple

import pytest

from core.domain.entities.order import Customer, DeliveryAddress, OrderItem, RiceOrder
from core.domain.enums.order_status import OrderStatus
from core.infrastructure.adapters.persistence.in_memory_order_repository import InMemoryOrderRepository


@pytest.fixture
def repository() -> InMemoryOrderRepository:
    """Fresh, empty repository per test."""
    return InMemoryOrderRepository()


@pytest.fixture
def make_order() -> Callable[..., RiceOrder]:
    """
    Build a RiceOrder with sensible defaults.

    items is a list of (price, quantity) pairs.
    """

    def _make(
        order_id: Optional[str] = "TEST001",
        customer_id: Optional[str] = "CUST001",
        status: Optional[OrderStatus] = OrderStatus.PENDING,
        items: Optional[List[Tuple[str, int]]] = None,
        **overrides,
    ) -> RiceOrder:
        pairs = items if items is not None else [("50000", 2)]
        order = RiceOrder(
            order_id=order_id,
            customer=Customer(
                customer_id=customer_id,
                name="John Doe",
                email="john@example.com",
                phone_number="+1-555-0100",
            )
            if customer_id is not None
            else None,
            items=[
                OrderItem(
                    item_id=f"ITEM{index:03d}",
                    rice_type="Nasi Goreng Special",
                    quantity=quantity,
                    price_per_unit=Decimal(price),
                    spice_level="Medium",
                    notes=None,
                )
                for index, (price, quantity) in enumerate(pairs, start=1)
            ],
            delivery_address=DeliveryAddress(
                street="123 Main St",
                city="New York",
                state="NY",
                postal_code="10001",
                country="USA",
                instructions="Ring the bell",
            ),
            status=status,
            payment_method="Credit Card",
        )
        for name, value in overrides.items():
            setattr(order, name, value)
        return order

    return _make
