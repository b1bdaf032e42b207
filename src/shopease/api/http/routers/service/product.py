"""Product API router with CRUD operations."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from src.shopease.api.http.deps import get_storage, parse_id, require_admin
from src.shopease.core.errors import NotFoundError, store_errors
from src.shopease.core.storage import Storage
from src.shopease.entities.service.product import (
    Product,
    validate_insert_product,
    validate_partial_product,
)

PRODUCT_NOT_FOUND = "Product not found"

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=list[Product])
def list_products(storage: Storage = Depends(get_storage)) -> list[Product]:
    """List all products in insertion order."""
    with store_errors("Failed to fetch products"):
        return storage.get_all_products()


@router.get("/{item_id}", response_model=Product)
def get_product(item_id: str, storage: Storage = Depends(get_storage)) -> Product:
    """Get a product by ID."""
    with store_errors("Failed to fetch product"):
        product_id = parse_id(item_id)
        product = storage.get_product(product_id) if product_id is not None else None
    if product is None:
        raise NotFoundError(PRODUCT_NOT_FOUND)
    return product


@router.post(
    "",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_product(
    payload: Any = Body(default=None),
    storage: Storage = Depends(get_storage),
) -> Product:
    """Create a new product."""
    fields = validate_insert_product(payload)
    with store_errors("Failed to create product"):
        return storage.create_product(fields)


@router.put(
    "/{item_id}", response_model=Product, dependencies=[Depends(require_admin)]
)
def update_product(
    item_id: str,
    payload: Any = Body(default=None),
    storage: Storage = Depends(get_storage),
) -> Product:
    """Apply a partial update; fields not sent keep their values."""
    update = validate_partial_product(payload)
    with store_errors("Failed to update product"):
        product_id = parse_id(item_id)
        product = (
            storage.update_product(product_id, update)
            if product_id is not None
            else None
        )
    if product is None:
        raise NotFoundError(PRODUCT_NOT_FOUND)
    return product


@router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[Depends(require_admin)],
)
def delete_product(item_id: str, storage: Storage = Depends(get_storage)) -> Response:
    """Delete a product. Its id is never handed out again."""
    with store_errors("Failed to delete product"):
        product_id = parse_id(item_id)
        deleted = storage.delete_product(product_id) if product_id is not None else False
    if not deleted:
        raise NotFoundError(PRODUCT_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
