"""Domain layer - pure domain models and interfaces."""

from .entities import Customer, DeliveryAddress, OrderItem, OrderPatch, RiceOrder
from .enums import OrderStatus
from .exceptions import InvalidArgumentError
from .repositories import OrderRepository

__all__ = [
    "Customer",
    "DeliveryAddress",
    "InvalidArgumentError",
    "OrderItem",
    "OrderPatch",
    "OrderRepository",
    "OrderStatus",
    "RiceOrder",
]
