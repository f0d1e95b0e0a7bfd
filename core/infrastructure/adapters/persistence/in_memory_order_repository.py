"""
In-Memory Order Repository Implementation.

Process-local storage for rice orders, safe to share between threads.
"""
from datetime import datetime, timezone
from typing import Dict, List, Optional
import logging
import threading

from core.domain.entities.order import OrderPatch, RiceOrder
from core.domain.enums.order_status import OrderStatus
from core.domain.exceptions import InvalidArgumentError
from core.domain.repositories.order_repository import OrderRepository


logger = logging.getLogger(__name__)

_PATCHABLE_FIELDS = (
    "customer",
    "items",
    "delivery_address",
    "status",
    "delivery_time",
    "payment_method",
)


def _require_order_id(order_id: Optional[str]) -> None:
    if order_id is None or not order_id.strip():
        raise InvalidArgumentError("Order ID cannot be null or empty")


class InMemoryOrderRepository(OrderRepository):
    """
    In-memory implementation of OrderRepository.

    Stores orders in a dictionary keyed by order ID. Every public method
    holds self._lock for its whole body, so each call is atomic:
    - two inserts racing on the same new ID have exactly one winner
    - list methods copy the values under the lock and filter the copy
    - validation runs before anything is written

    There are no multi-call transactions; the last writer wins.
    """

    def __init__(self):
        """Initialize empty storage."""
        self._storage: Dict[str, RiceOrder] = {}
        self._lock = threading.RLock()
        logger.info("InMemoryOrderRepository initialized (in-memory storage)")

    # -------------------- Reads --------------------

    def _snapshot(self) -> List[RiceOrder]:
        with self._lock:
            return list(self._storage.values())

    def list_all(self) -> List[RiceOrder]:
        orders = self._snapshot()
        logger.debug(f"Found {len(orders)} order(s) in repository")
        return orders

    def list_by_status(self, status: OrderStatus) -> List[RiceOrder]:
        return [order for order in self._snapshot() if order.status == status]

    def get_by_id(self, order_id: str) -> Optional[RiceOrder]:
        """
        Get order by ID.

        Args:
            order_id: Order ID to lookup

        Returns:
            RiceOrder if found, None otherwise
        """
        with self._lock:
            order = self._storage.get(order_id)

        if order:
            logger.debug(f"Order found in repository: {order_id}")
        else:
            logger.debug(f"Order not found in repository: {order_id}")

        return order

    def list_by_customer(self, customer_id: Optional[str]) -> List[RiceOrder]:
        if customer_id is None:
            return []
        return [
            order
            for order in self._snapshot()
            if order.customer is not None and order.customer.customer_id == customer_id
        ]

    # -------------------- Writes --------------------

    def insert(self, order: RiceOrder) -> RiceOrder:
        """
        Add a new order.

        Fills in order_date (now, UTC) and total_amount (sum of item
        subtotals) when the caller left them empty.

        Args:
            order: Order to store

        Returns:
            The stored order

        Raises:
            InvalidArgumentError: If order is None, its ID is blank or already taken
        """
        if order is None:
            raise InvalidArgumentError("Order cannot be null")
        _require_order_id(order.order_id)

        with self._lock:
            if order.order_id in self._storage:
                raise InvalidArgumentError(f"Order with ID {order.order_id} already exists")

            if order.order_date is None:
                order.order_date = datetime.now(timezone.utc)
            if order.total_amount is None:
                order.total_amount = order.calculate_total_amount()

            self._storage[order.order_id] = order

        logger.info(
            f"Order saved to repository: {order.order_id} "
            f"(status: {order.status}, total: {order.total_amount})"
        )
        return order

    def replace(self, order_id: str, order: RiceOrder) -> Optional[RiceOrder]:
        """
        Full update of an existing order.

        The stored ID always wins over the one in the payload, and the
        original order_date is kept unless the payload carries one. Any
        other field missing from the payload is lost.

        Args:
            order_id: ID of the order to overwrite
            order: Replacement order

        Returns:
            The replacement, or None if no order has that ID

        Raises:
            InvalidArgumentError: If order is None or order_id is blank
        """
        if order is None:
            raise InvalidArgumentError("Updated order cannot be null")
        _require_order_id(order_id)

        with self._lock:
            existing = self._storage.get(order_id)
            if existing is None:
                logger.info(f"Order not found for update: {order_id}")
                return None

            order.order_id = order_id
            if order.order_date is None:
                order.order_date = existing.order_date
            if order.total_amount is None:
                order.total_amount = order.calculate_total_amount()

            self._storage[order_id] = order

        logger.info(f"Order replaced in repository: {order_id}")
        return order

    def patch(self, order_id: str, partial: OrderPatch) -> Optional[RiceOrder]:
        """
        Partial update of an existing order, in place.

        New items always trigger a total recalculation, even when the
        patch also carries total_amount.

        Args:
            order_id: ID of the order to update
            partial: Fields to apply

        Returns:
            The updated stored order, or None if no order has that ID

        Raises:
            InvalidArgumentError: If partial is None or order_id is blank
        """
        if partial is None:
            raise InvalidArgumentError("Updates cannot be null")
        _require_order_id(order_id)

        with self._lock:
            existing = self._storage.get(order_id)
            if existing is None:
                logger.info(f"Order not found for partial update: {order_id}")
                return None

            for name in _PATCHABLE_FIELDS:
                if partial.is_supplied(name):
                    setattr(existing, name, getattr(partial, name))

            if partial.is_supplied("items"):
                existing.total_amount = existing.calculate_total_amount()
            elif partial.is_supplied("total_amount"):
                existing.total_amount = partial.total_amount

        logger.info(
            f"Order partially updated: {order_id} (fields: {', '.join(partial.supplied_fields()) or 'none'})"
        )
        return existing

    def remove(self, order_id: str) -> bool:
        """
        Delete order from storage.

        Args:
            order_id: Order ID to delete

        Returns:
            True if the order existed and was removed
        """
        _require_order_id(order_id)

        with self._lock:
            removed = self._storage.pop(order_id, None) is not None

        if removed:
            logger.info(f"Order deleted from repository: {order_id}")
        else:
            logger.warning(f"Order not found for deletion: {order_id}")
        return removed

    def clear(self) -> None:
        """Clear all orders."""
        with self._lock:
            self._storage.clear()
        logger.info("Order repository cleared")

    def count(self) -> int:
        with self._lock:
            return len(self._storage)

    def exists(self, order_id: Optional[str]) -> bool:
        """
        Check if order exists in storage.

        Args:
            order_id: Order ID to check

        Returns:
            True if exists, False otherwise (always False for None)
        """
        if order_id is None:
            return False
        with self._lock:
            exists = order_id in self._storage
        logger.debug(f"Order {order_id} exists: {exists}")
        return exists
