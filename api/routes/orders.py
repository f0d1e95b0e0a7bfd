"""
Rice order management endpoints.

Provides CRUD operations for orders. Every response is wrapped in the
ApiResponse envelope.
"""
from typing import Optional

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse
import logging

from api.dependencies import get_order_service
from api.responses import error_response, success_response
from core.application.dtos.order_dto import BatchOrderRequest, RiceOrderRequest
from core.application.services.order_service import OrderApplicationService
from core.domain.exceptions import InvalidArgumentError


logger = logging.getLogger(__name__)
router = APIRouter()


def _not_found(order_id: str) -> JSONResponse:
    return error_response(f"Order with ID {order_id} not found", status.HTTP_404_NOT_FOUND)


# =============================================================================
# READ
# =============================================================================

@router.get(
    "",
    summary="List all orders",
    description="Get list of all orders in the system"
)
async def list_orders(service: OrderApplicationService = Depends(get_order_service)):
    orders = await service.list_orders()
    return success_response(orders, f"Retrieved {len(orders)} orders successfully")


@router.get(
    "/status/{order_status}",
    summary="List orders by status",
    description="Status names are matched case-insensitively"
)
async def list_orders_by_status(
    order_status: str,
    service: OrderApplicationService = Depends(get_order_service)
):
    try:
        orders = await service.list_orders_by_status(order_status)
    except InvalidArgumentError as e:
        logger.warning(f"Rejected status filter: {e}")
        return error_response(str(e), status.HTTP_400_BAD_REQUEST)

    return success_response(
        orders, f"Retrieved {len(orders)} orders with status: {order_status}"
    )


@router.get(
    "/customer/{customer_id}",
    summary="List orders by customer"
)
async def list_orders_by_customer(
    customer_id: str,
    service: OrderApplicationService = Depends(get_order_service)
):
    orders = await service.list_orders_by_customer(customer_id)
    return success_response(
        orders, f"Retrieved {len(orders)} orders for customer: {customer_id}"
    )


@router.get(
    "/{order_id}",
    summary="Get order by ID",
    description="Get detailed information about a specific order"
)
async def get_order(
    order_id: str,
    service: OrderApplicationService = Depends(get_order_service)
):
    order = await service.get_order(order_id)
    if order is None:
        return _not_found(order_id)
    return success_response(order, "Order retrieved successfully")


# =============================================================================
# CREATE
# =============================================================================

@router.post(
    "",
    summary="Create an order",
    description="totalAmount is computed from the items when omitted"
)
async def create_order(
    request: RiceOrderRequest = Body(...),
    service: OrderApplicationService = Depends(get_order_service)
):
    try:
        order = await service.create_order(request)
    except InvalidArgumentError as e:
        logger.warning(f"Create order rejected: {e}")
        return error_response(f"Failed to create order: {e}", status.HTTP_400_BAD_REQUEST)
    except Exception as e:
        logger.error(f"Create order failed: {e}", exc_info=True)
        return error_response(
            f"An error occurred while creating the order: {e}",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return success_response(
        order,
        f"Order created successfully with ID: {order.order_id}",
        status.HTTP_201_CREATED,
    )


@router.post(
    "/batch",
    summary="Create several orders",
    description="Each order is created independently; failures are reported per order"
)
async def create_orders(
    batch: Optional[BatchOrderRequest] = None,
    service: OrderApplicationService = Depends(get_order_service)
):
    try:
        result = await service.create_orders(batch.orders if batch else None)
    except InvalidArgumentError as e:
        return error_response(str(e), status.HTTP_400_BAD_REQUEST)

    if result.success_count == 0:
        return error_response(result.summary(), status.HTTP_400_BAD_REQUEST)

    return success_response(result, result.summary(), status.HTTP_201_CREATED)


# =============================================================================
# UPDATE
# =============================================================================

@router.put(
    "/{order_id}",
    summary="Replace an order",
    description="Fields missing from the body are cleared; orderDate is kept when omitted"
)
async def update_order(
    order_id: str,
    request: RiceOrderRequest = Body(...),
    service: OrderApplicationService = Depends(get_order_service)
):
    try:
        order = await service.update_order(order_id, request)
    except InvalidArgumentError as e:
        logger.warning(f"Update of {order_id} rejected: {e}")
        return error_response(f"Failed to update order: {e}", status.HTTP_400_BAD_REQUEST)
    except Exception as e:
        logger.error(f"Update order failed: {e}", exc_info=True)
        return error_response(
            f"An error occurred while updating the order: {e}",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if order is None:
        return _not_found(order_id)
    return success_response(order, "Order updated successfully")


@router.patch(
    "/{order_id}",
    summary="Partially update an order",
    description="Only fields present and non-null in the body are applied"
)
async def patch_order(
    order_id: str,
    request: RiceOrderRequest = Body(...),
    service: OrderApplicationService = Depends(get_order_service)
):
    try:
        order = await service.patch_order(order_id, request)
    except InvalidArgumentError as e:
        logger.warning(f"Partial update of {order_id} rejected: {e}")
        return error_response(f"Failed to update order: {e}", status.HTTP_400_BAD_REQUEST)
    except Exception as e:
        logger.error(f"Partial update failed: {e}", exc_info=True)
        return error_response(
            f"An error occurred while updating the order: {e}",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if order is None:
        return _not_found(order_id)
    return success_response(order, "Order partially updated successfully")


# =============================================================================
# DELETE
# =============================================================================

@router.delete(
    "/{order_id}",
    summary="Delete an order"
)
async def delete_order(
    order_id: str,
    service: OrderApplicationService = Depends(get_order_service)
):
    try:
        deleted = await service.delete_order(order_id)
    except InvalidArgumentError as e:
        return error_response(f"Failed to delete order: {e}", status.HTTP_400_BAD_REQUEST)
    except Exception as e:
        logger.error(f"Delete order failed: {e}", exc_info=True)
        return error_response(
            f"An error occurred while deleting the order: {e}",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if not deleted:
        return _not_found(order_id)
    return success_response(None, "Order deleted successfully")


@router.delete(
    "",
    summary="Delete all orders"
)
async def delete_all_orders(service: OrderApplicationService = Depends(get_order_service)):
    try:
        count = await service.delete_all_orders()
    except Exception as e:
        logger.error(f"Delete all orders failed: {e}", exc_info=True)
        return error_response(
            f"An error occurred while deleting orders: {e}",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return success_response(None, f"Successfully deleted {count} orders")
