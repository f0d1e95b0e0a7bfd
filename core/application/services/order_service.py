"""Application service for RiceOrder operations."""

import logging
from typing import Any, List, Optional, Sequence

from pydantic import ValidationError

from core.application.dtos.order_dto import (
    BatchCreateResult,
    BatchOrderError,
    RiceOrderRequest,
    RiceOrderResponse,
    format_validation_errors,
)
from core.data.mappers import RiceOrderMapper
from core.domain.enums.order_status import OrderStatus
from core.domain.exceptions import InvalidArgumentError
from core.domain.repositories.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class OrderApplicationService:
    """
    Application service for orchestrating order operations.

    Responsibilities:
    - Transform between DTOs and domain entities (RiceOrderMapper)
    - Delegate storage and business rules to the repository
    - Isolate per-entry failures in batch creates

    Not-found outcomes come back as None/False. Validation failures
    propagate as InvalidArgumentError.
    """

    def __init__(self, repository: OrderRepository) -> None:
        """Initialize order application service.

        Args:
            repository: OrderRepository implementation
        """
        self._repository = repository

    async def list_orders(self) -> List[RiceOrderResponse]:
        return [RiceOrderMapper.to_response(order) for order in self._repository.list_all()]

    async def get_order(self, order_id: str) -> Optional[RiceOrderResponse]:
        """Get order by ID.

        Args:
            order_id: Order ID string

        Returns:
            RiceOrderResponse if found, None otherwise
        """
        return RiceOrderMapper.to_response(self._repository.get_by_id(order_id))

    async def list_orders_by_status(self, status: str) -> List[RiceOrderResponse]:
        """List orders with the given status name.

        Raises:
            InvalidArgumentError: If status names no OrderStatus
        """
        order_status = OrderStatus.parse(status)
        return [
            RiceOrderMapper.to_response(order)
            for order in self._repository.list_by_status(order_status)
        ]

    async def list_orders_by_customer(self, customer_id: str) -> List[RiceOrderResponse]:
        return [
            RiceOrderMapper.to_response(order)
            for order in self._repository.list_by_customer(customer_id)
        ]

    async def create_order(self, request: RiceOrderRequest) -> RiceOrderResponse:
        """Create a new order.

        Args:
            request: RiceOrderRequest DTO

        Returns:
            RiceOrderResponse with the stored order

        Raises:
            InvalidArgumentError: If the request is invalid or the ID is taken
        """
        order = RiceOrderMapper.to_entity(request)
        saved = self._repository.insert(order)
        return RiceOrderMapper.to_response(saved)

    async def create_orders(self, entries: Optional[Sequence[Any]]) -> BatchCreateResult:
        """Create several orders, each independently.

        A failing entry is recorded in the result's errors and does not
        stop the remaining entries.

        Args:
            entries: RiceOrderRequest DTOs or raw JSON values; anything that is
                not an order object is reported as that entry's error

        Returns:
            BatchCreateResult with created orders and per-entry errors

        Raises:
            InvalidArgumentError: If entries is None or empty
        """
        if not entries:
            raise InvalidArgumentError("Request body must contain a list of orders")

        result = BatchCreateResult(total_count=len(entries))

        for entry in entries:
            order_id = self._submitted_order_id(entry)
            try:
                request = (
                    entry
                    if isinstance(entry, RiceOrderRequest)
                    else RiceOrderRequest.model_validate(entry)
                )
                result.orders.append(await self.create_order(request))
            except ValidationError as e:
                message = format_validation_errors(e.errors())
                logger.warning(f"Batch entry {order_id} rejected: {message}")
                result.errors.append(BatchOrderError(order_id=order_id, error=message))
            except InvalidArgumentError as e:
                logger.warning(f"Batch entry {order_id} rejected: {e}")
                result.errors.append(BatchOrderError(order_id=order_id, error=str(e)))
            except Exception as e:
                logger.error(f"Batch entry {order_id} failed: {e}", exc_info=True)
                result.errors.append(BatchOrderError(order_id=order_id, error=str(e)))

        result.success_count = len(result.orders)
        logger.info(result.summary())
        return result

    async def update_order(
        self, order_id: str, request: RiceOrderRequest
    ) -> Optional[RiceOrderResponse]:
        """Replace an order wholesale; None if it does not exist."""
        order = RiceOrderMapper.to_entity(request)
        return RiceOrderMapper.to_response(self._repository.replace(order_id, order))

    async def patch_order(
        self, order_id: str, request: RiceOrderRequest
    ) -> Optional[RiceOrderResponse]:
        """Apply the fields sent in request; None if the order does not exist."""
        partial = RiceOrderMapper.to_patch(request)
        return RiceOrderMapper.to_response(self._repository.patch(order_id, partial))

    async def delete_order(self, order_id: str) -> bool:
        return self._repository.remove(order_id)

    async def delete_all_orders(self) -> int:
        """Delete every order.

        Returns:
            Number of orders present before clearing
        """
        count = self._repository.count()
        self._repository.clear()
        return count

    @staticmethod
    def _submitted_order_id(entry: Any) -> Optional[str]:
        if isinstance(entry, RiceOrderRequest):
            return entry.order_id
        if isinstance(entry, dict):
            value = entry.get("orderId", entry.get("order_id"))
            return str(value) if value is not None else None
        return None
