"""Application DTOs."""

from .order_dto import (
    BatchCreateResult,
    BatchOrderError,
    BatchOrderRequest,
    CustomerDTO,
    DeliveryAddressDTO,
    OrderItemDTO,
    RiceOrderRequest,
    RiceOrderResponse,
    format_validation_errors,
)

__all__ = [
    "BatchCreateResult",
    "BatchOrderError",
    "BatchOrderRequest",
    "CustomerDTO",
    "DeliveryAddressDTO",
    "OrderItemDTO",
    "RiceOrderRequest",
    "RiceOrderResponse",
    "format_validation_errors",
]
