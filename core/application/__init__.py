"""Application layer - services and DTOs.

Services are imported from core.application.services; the mappers in
core.data import the DTOs from here.
"""

from .dtos import (
    BatchCreateResult,
    BatchOrderRequest,
    RiceOrderRequest,
    RiceOrderResponse,
)

__all__ = [
    "BatchCreateResult",
    "BatchOrderRequest",
    "RiceOrderRequest",
    "RiceOrderResponse",
]
