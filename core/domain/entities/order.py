"""
Rice order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- pydantic
- fastapi
"""
from dataclasses import dataclass, field, fields
from datetime import datetime
from decimal import Decimal
from typing import Any, List, Optional

from ..enums.order_status import OrderStatus


@dataclass
class Customer:
    """Customer who placed the order."""
    customer_id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None


@dataclass
class DeliveryAddress:
    """Where the order is delivered."""
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    instructions: Optional[str] = None


@dataclass
class OrderItem:
    """Individual line item within an order."""
    item_id: Optional[str] = None
    rice_type: Optional[str] = None  # "Nasi Goreng Special", "Nasi Goreng Ayam", ...
    quantity: Optional[int] = None
    price_per_unit: Optional[Decimal] = None
    spice_level: Optional[str] = None  # "Mild", "Medium", "Hot", "Extra Hot"
    notes: Optional[str] = None

    @property
    def subtotal(self) -> Decimal:
        """Price times quantity; zero when either is missing."""
        if self.price_per_unit is None or self.quantity is None:
            return Decimal("0")
        return self.price_per_unit * self.quantity


@dataclass
class RiceOrder:
    """
    Rice order aggregate root.

    Every field except the items is optional at construction time:
    the repository enforces the ID rules and fills in order_date and
    total_amount when they are missing.
    """
    order_id: Optional[str] = None
    customer: Optional[Customer] = None
    items: List[OrderItem] = field(default_factory=list)
    delivery_address: Optional[DeliveryAddress] = None
    status: Optional[OrderStatus] = None
    order_date: Optional[datetime] = None
    delivery_time: Optional[datetime] = None
    payment_method: Optional[str] = None
    total_amount: Optional[Decimal] = None

    @property
    def item_count(self) -> int:
        return len(self.items) if self.items else 0

    def calculate_total_amount(self) -> Decimal:
        """Sum of all item subtotals."""
        if not self.items:
            return Decimal("0")
        return sum((item.subtotal for item in self.items), Decimal("0"))


class _Unset:
    """Marker for a patch field the caller did not supply."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass
class OrderPatch:
    """
    Partial update for a stored order.

    Fields left as UNSET (or set to None) are not applied. An empty
    items list counts as supplied and resets the total to zero.
    """
    customer: Optional[Customer] = UNSET
    items: Optional[List[OrderItem]] = UNSET
    delivery_address: Optional[DeliveryAddress] = UNSET
    status: Optional[OrderStatus] = UNSET
    delivery_time: Optional[datetime] = UNSET
    payment_method: Optional[str] = UNSET
    total_amount: Optional[Decimal] = UNSET

    def is_supplied(self, name: str) -> bool:
        value = getattr(self, name)
        return value is not UNSET and value is not None

    def supplied_fields(self) -> List[str]:
        return [f.name for f in fields(self) if self.is_supplied(f.name)]
