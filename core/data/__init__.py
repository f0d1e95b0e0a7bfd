"""Data layer - mapping between wire DTOs and domain entities."""

from .mappers import (
    CustomerMapper,
    DeliveryAddressMapper,
    OrderItemMapper,
    RiceOrderMapper,
)

__all__ = [
    "CustomerMapper",
    "DeliveryAddressMapper",
    "OrderItemMapper",
    "RiceOrderMapper",
]
