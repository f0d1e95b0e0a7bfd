"""Static mappers for domain entities ↔ wire DTOs.

Every mapper is pure and null-safe: None in, None out, at every level.
"""

from typing import List, Optional

from core.application.dtos.order_dto import (
    CustomerDTO,
    DeliveryAddressDTO,
    OrderItemDTO,
    RiceOrderRequest,
    RiceOrderResponse,
)
from core.domain.entities.order import (
    Customer,
    DeliveryAddress,
    OrderItem,
    OrderPatch,
    RiceOrder,
)
from core.domain.enums.order_status import OrderStatus


class CustomerMapper:
    """Static mapper for Customer ↔ CustomerDTO."""

    @staticmethod
    def to_domain(dto: Optional[CustomerDTO]) -> Optional[Customer]:
        if dto is None:
            return None
        return Customer(
            customer_id=dto.customer_id,
            name=dto.name,
            email=dto.email,
            phone_number=dto.phone_number,
        )

    @staticmethod
    def to_dto(entity: Optional[Customer]) -> Optional[CustomerDTO]:
        if entity is None:
            return None
        return CustomerDTO(
            customer_id=entity.customer_id,
            name=entity.name,
            email=entity.email,
            phone_number=entity.phone_number,
        )


class DeliveryAddressMapper:
    """Static mapper for DeliveryAddress ↔ DeliveryAddressDTO."""

    @staticmethod
    def to_domain(dto: Optional[DeliveryAddressDTO]) -> Optional[DeliveryAddress]:
        if dto is None:
            return None
        return DeliveryAddress(
            street=dto.street,
            city=dto.city,
            state=dto.state,
            postal_code=dto.postal_code,
            country=dto.country,
            instructions=dto.additional_instructions,
        )

    @staticmethod
    def to_dto(entity: Optional[DeliveryAddress]) -> Optional[DeliveryAddressDTO]:
        if entity is None:
            return None
        return DeliveryAddressDTO(
            street=entity.street,
            city=entity.city,
            state=entity.state,
            postal_code=entity.postal_code,
            country=entity.country,
            additional_instructions=entity.instructions,
        )


class OrderItemMapper:
    """Static mapper for OrderItem ↔ OrderItemDTO."""

    @staticmethod
    def to_domain(dto: Optional[OrderItemDTO]) -> Optional[OrderItem]:
        """Convert wire item to domain entity.

        Args:
            dto: OrderItemDTO instance

        Returns:
            OrderItem domain entity
        """
        if dto is None:
            return None
        return OrderItem(
            item_id=dto.item_id,
            rice_type=dto.rice_type,
            quantity=dto.quantity,
            price_per_unit=dto.price_per_unit,
            spice_level=dto.spice_level,
            notes=dto.additional_notes,
        )

    @staticmethod
    def to_dto(entity: Optional[OrderItem]) -> Optional[OrderItemDTO]:
        if entity is None:
            return None
        return OrderItemDTO(
            item_id=entity.item_id,
            rice_type=entity.rice_type,
            quantity=entity.quantity,
            price_per_unit=entity.price_per_unit,
            spice_level=entity.spice_level,
            additional_notes=entity.notes,
        )

    @staticmethod
    def to_domain_list(dtos: Optional[List[OrderItemDTO]]) -> Optional[List[OrderItem]]:
        if dtos is None:
            return None
        return [OrderItemMapper.to_domain(dto) for dto in dtos]


class RiceOrderMapper:
    """Static mapper for RiceOrder ↔ request/response DTOs with nested values."""

    @staticmethod
    def parse_status(value: Optional[str]) -> Optional[OrderStatus]:
        """Status name to enum; raises InvalidArgumentError on unknown names."""
        if value is None:
            return None
        return OrderStatus.parse(value)

    @staticmethod
    def to_entity(request: Optional[RiceOrderRequest]) -> Optional[RiceOrder]:
        """Convert request DTO to domain aggregate (with nested values).

        Args:
            request: RiceOrderRequest instance

        Returns:
            RiceOrder domain aggregate; a missing item list becomes empty

        Raises:
            InvalidArgumentError: If the status names no OrderStatus
        """
        if request is None:
            return None

        return RiceOrder(
            order_id=request.order_id,
            customer=CustomerMapper.to_domain(request.customer),
            items=OrderItemMapper.to_domain_list(request.order_items) or [],
            delivery_address=DeliveryAddressMapper.to_domain(request.delivery_address),
            status=RiceOrderMapper.parse_status(request.status),
            order_date=request.order_date,
            delivery_time=request.delivery_time,
            payment_method=request.payment_method,
            total_amount=request.total_amount,
        )

    @staticmethod
    def to_response(entity: Optional[RiceOrder]) -> Optional[RiceOrderResponse]:
        """Convert domain aggregate to response DTO.

        Args:
            entity: RiceOrder domain aggregate

        Returns:
            RiceOrderResponse with item_count derived from the items
        """
        if entity is None:
            return None

        return RiceOrderResponse(
            order_id=entity.order_id,
            customer=CustomerMapper.to_dto(entity.customer),
            order_items=[OrderItemMapper.to_dto(item) for item in entity.items]
            if entity.items is not None
            else None,
            delivery_address=DeliveryAddressMapper.to_dto(entity.delivery_address),
            status=entity.status.name if entity.status is not None else None,
            order_date=entity.order_date,
            delivery_time=entity.delivery_time,
            payment_method=entity.payment_method,
            total_amount=entity.total_amount,
            item_count=entity.item_count,
        )

    @staticmethod
    def to_patch(request: Optional[RiceOrderRequest]) -> Optional[OrderPatch]:
        """Convert request DTO to a partial update.

        Only fields the client actually sent with a non-null value are
        carried over; everything else stays UNSET. order_id and
        order_date are never patchable.

        Args:
            request: RiceOrderRequest instance

        Returns:
            OrderPatch instance

        Raises:
            InvalidArgumentError: If the status names no OrderStatus
        """
        if request is None:
            return None

        sent = {name for name in request.model_fields_set if getattr(request, name) is not None}
        patch = OrderPatch()

        if "customer" in sent:
            patch.customer = CustomerMapper.to_domain(request.customer)
        if "order_items" in sent:
            patch.items = OrderItemMapper.to_domain_list(request.order_items)
        if "delivery_address" in sent:
            patch.delivery_address = DeliveryAddressMapper.to_domain(request.delivery_address)
        if "status" in sent:
            patch.status = RiceOrderMapper.parse_status(request.status)
        if "delivery_time" in sent:
            patch.delivery_time = request.delivery_time
        if "payment_method" in sent:
            patch.payment_method = request.payment_method
        if "total_amount" in sent:
            patch.total_amount = request.total_amount

        return patch
