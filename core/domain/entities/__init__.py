"""Domain entities."""

from .order import (
    UNSET,
    Customer,
    DeliveryAddress,
    OrderItem,
    OrderPatch,
    RiceOrder,
)

__all__ = [
    "UNSET",
    "Customer",
    "DeliveryAddress",
    "OrderItem",
    "OrderPatch",
    "RiceOrder",
]
