"""Application DTOs for RiceOrder operations."""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel


# Amounts stay Decimal in Python and go out as JSON numbers
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class WireModel(BaseModel):
    """Base for wire DTOs: camelCase on the wire, snake_case accepted too."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CustomerDTO(WireModel):
    """DTO for the ordering customer."""

    customer_id: Optional[str] = Field(None, description="Customer ID")
    name: Optional[str] = Field(None, description="Full name")
    email: Optional[str] = Field(None, description="Email address")
    phone_number: Optional[str] = Field(None, description="Phone number")


class DeliveryAddressDTO(WireModel):
    """DTO for the delivery address."""

    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    additional_instructions: Optional[str] = Field(None, description="Notes for the courier")


class OrderItemDTO(WireModel):
    """DTO for order item."""

    item_id: Optional[str] = Field(None, description="Item ID")
    rice_type: Optional[str] = Field(None, description="Dish name, e.g. Nasi Goreng Ayam")
    quantity: Optional[int] = Field(None, ge=0, description="Quantity ordered")
    price_per_unit: Optional[Money] = Field(None, description="Unit price")
    spice_level: Optional[str] = Field(None, description="Mild, Medium, Hot, Extra Hot")
    additional_notes: Optional[str] = Field(None, description="Kitchen notes")


class RiceOrderRequest(WireModel):
    """
    Request DTO for creating, replacing or patching an order.

    Every field is optional here: the repository decides which are required
    for each operation, and a PATCH only applies the fields actually sent.
    """

    order_id: Optional[str] = Field(None, description="Order ID")
    customer: Optional[CustomerDTO] = None
    order_items: Optional[List[OrderItemDTO]] = Field(None, description="Order items")
    delivery_address: Optional[DeliveryAddressDTO] = None
    status: Optional[str] = Field(None, description="Order status name, case-insensitive")
    order_date: Optional[datetime] = None
    delivery_time: Optional[datetime] = None
    payment_method: Optional[str] = None
    total_amount: Optional[Money] = Field(None, description="Computed from items when omitted")


class RiceOrderResponse(WireModel):
    """Response DTO for order details."""

    order_id: Optional[str] = None
    customer: Optional[CustomerDTO] = None
    order_items: Optional[List[OrderItemDTO]] = None
    delivery_address: Optional[DeliveryAddressDTO] = None
    status: Optional[str] = None
    order_date: Optional[datetime] = None
    delivery_time: Optional[datetime] = None
    payment_method: Optional[str] = None
    total_amount: Optional[Money] = None
    item_count: int = Field(0, ge=0, description="Number of order items")


class BatchOrderRequest(WireModel):
    """
    Request DTO for creating several orders at once.

    Orders are kept as raw objects so each one is validated on its own
    and a bad entry cannot reject the whole batch.
    """

    orders: Optional[List[Any]] = None


class BatchOrderError(WireModel):
    """One failed entry of a batch."""

    order_id: Optional[str] = None
    error: str


class BatchCreateResult(WireModel):
    """Outcome of a batch create."""

    orders: List[RiceOrderResponse] = Field(default_factory=list)
    success_count: int = 0
    total_count: int = 0
    errors: List[BatchOrderError] = Field(default_factory=list)

    def summary(self) -> str:
        message = f"Successfully added {self.success_count} out of {self.total_count} orders"
        if self.errors:
            details = "; ".join(
                f"Failed to add order {entry.order_id}: {entry.error}" for entry in self.errors
            )
            message += f". Errors: {details}"
        return message


def format_validation_errors(errors: Iterable[Dict[str, Any]]) -> str:
    """Flatten pydantic error dicts into a single readable line."""
    parts = []
    for err in errors:
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        parts.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return "; ".join(parts)
