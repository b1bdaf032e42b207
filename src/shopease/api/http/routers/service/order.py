"""Order API router: checkout submissions and order lookup."""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from src.shopease.api.http.deps import get_storage, parse_id
from src.shopease.core.errors import NotFoundError, store_errors
from src.shopease.core.storage import Storage
from src.shopease.entities.service.order import Order, validate_insert_order

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=Order, status_code=status.HTTP_201_CREATED)
def create_order(
    payload: Any = Body(default=None),
    storage: Storage = Depends(get_storage),
) -> Order:
    """Place an order."""
    fields = validate_insert_order(payload)
    with store_errors("Failed to create order"):
        return storage.create_order(fields)


@router.get("", response_model=list[Order])
def list_orders(storage: Storage = Depends(get_storage)) -> list[Order]:
    with store_errors("Failed to fetch orders"):
        return storage.get_all_orders()


@router.get("/{order_id}", response_model=Order)
def get_order(order_id: str, storage: Storage = Depends(get_storage)) -> Order:
    with store_errors("Failed to fetch order"):
        parsed_id = parse_id(order_id)
        order = storage.get_order(parsed_id) if parsed_id is not None else None
    if order is None:
        raise NotFoundError("Order not found")
    return order
