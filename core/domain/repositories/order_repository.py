"""Repository interfaces for RiceOrder aggregate."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.order import OrderPatch, RiceOrder
from ..enums.order_status import OrderStatus


class OrderRepository(ABC):
    """Abstract repository for RiceOrder storage."""

    @abstractmethod
    def list_all(self) -> List[RiceOrder]:
        """Snapshot of every stored order."""

    @abstractmethod
    def list_by_status(self, status: OrderStatus) -> List[RiceOrder]:
        """Orders whose status equals the given one."""

    @abstractmethod
    def get_by_id(self, order_id: str) -> Optional[RiceOrder]:
        """Retrieve order by unique identifier.

        Args:
            order_id: Order identifier

        Returns:
            RiceOrder if found, None otherwise
        """

    @abstractmethod
    def list_by_customer(self, customer_id: str) -> List[RiceOrder]:
        """Orders placed by the given customer."""

    @abstractmethod
    def insert(self, order: RiceOrder) -> RiceOrder:
        """Store a new order.

        Args:
            order: Order with a unique, non-blank order_id

        Returns:
            The stored order, with order_date and total_amount filled in

        Raises:
            InvalidArgumentError: If the order or its ID is missing, or the ID is taken
        """

    @abstractmethod
    def replace(self, order_id: str, order: RiceOrder) -> Optional[RiceOrder]:
        """Overwrite a stored order wholesale.

        Returns:
            The new order, or None if order_id is unknown
        """

    @abstractmethod
    def patch(self, order_id: str, partial: OrderPatch) -> Optional[RiceOrder]:
        """Apply only the supplied fields to a stored order.

        Returns:
            The updated order, or None if order_id is unknown
        """

    @abstractmethod
    def remove(self, order_id: str) -> bool:
        """Delete an order. Returns True if it existed."""

    @abstractmethod
    def clear(self) -> None:
        """Delete every order."""

    @abstractmethod
    def count(self) -> int:
        """Number of stored orders."""

    @abstractmethod
    def exists(self, order_id: Optional[str]) -> bool:
        """Check if order already exists (duplicate prevention)."""
