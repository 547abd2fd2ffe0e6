from fastapi import APIRouter, Depends, status

from dependencies import get_order_service
from schemas import (
    MessageResponse,
    OrderCreatedResponse,
    OrderRequest,
    OrderResponse,
    OrdersResponse,
)
from services.orders_service import OrderService

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.post("", response_model=OrderCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_order(
    payload: OrderRequest,
    service: OrderService = Depends(get_order_service),
) -> OrderCreatedResponse:
    created = await service.create_order(payload.sandwich_id, payload.extras)
    return OrderCreatedResponse(data=created)


@router.get("", response_model=OrdersResponse)
async def list_orders(
    service: OrderService = Depends(get_order_service),
) -> OrdersResponse:
    orders = await service.list_orders()
    return OrdersResponse(data=orders)


@router.put("/{order_id}", response_model=OrderResponse)
async def update_order(
    order_id: int,
    payload: OrderRequest,
    service: OrderService = Depends(get_order_service),
) -> OrderResponse:
    order = await service.update_order(order_id, payload.sandwich_id, payload.extras)
    return OrderResponse(data=order)


@router.delete("/{order_id}", response_model=MessageResponse)
async def delete_order(
    order_id: int,
    service: OrderService = Depends(get_order_service),
) -> MessageResponse:
    await service.delete_order(order_id)
    return MessageResponse(message="Order deleted successfully.")
