"""
Order Status Enum.

Lifecycle states of a rice order.
"""
from enum import Enum

from ..exceptions import InvalidArgumentError


class OrderStatus(str, Enum):
    """Order status values."""

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    PREPARING = "PREPARING"
    OUT_FOR_DELIVERY = "OUT_FOR_DELIVERY"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

    @classmethod
    def valid_values(cls) -> str:
        """Comma separated list of every status name."""
        return ", ".join(member.name for member in cls)

    @classmethod
    def parse(cls, value: str) -> "OrderStatus":
        """
        Resolve a status name, ignoring case.

        Args:
            value: Status name as sent by a client (e.g. "pending")

        Returns:
            Matching OrderStatus

        Raises:
            InvalidArgumentError: If value names no status
        """
        member = _STATUS_BY_NAME.get(value.upper()) if isinstance(value, str) else None
        if member is None:
            raise InvalidArgumentError(
                f"Invalid status: {value}. Valid values are: {cls.valid_values()}"
            )
        return member


_STATUS_BY_NAME = {member.name: member for member in OrderStatus}
