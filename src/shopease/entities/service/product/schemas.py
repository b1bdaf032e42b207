"""Validation schemas for product payloads."""

from typing import Any

from pydantic import field_validator

from src.shopease.entities.core._base import (
    NonEmptyStr,
    NumericStr,
    UrlStr,
    WireModel,
    validate_payload,
)

INVALID_PRODUCT = "Invalid product data"


class InsertProduct(WireModel):
    """Fields required to create a product."""

    name: NonEmptyStr
    price: NumericStr
    image: UrlStr
    description: NonEmptyStr


class ProductUpdate(WireModel):
    """Partial product update.

    Any subset of fields may be sent. A field that is sent must satisfy the
    same rules as on creation, so ``null`` is rejected rather than stored.
    """

    name: NonEmptyStr | None = None
    price: NumericStr | None = None
    image: UrlStr | None = None
    description: NonEmptyStr | None = None

    @field_validator("name", "price", "image", "description", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("may be omitted but not null")
        return value

    def changes(self) -> dict[str, Any]:
        """Fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


def validate_insert_product(payload: Any) -> InsertProduct:
    return validate_payload(InsertProduct, payload, INVALID_PRODUCT)


def validate_partial_product(payload: Any) -> ProductUpdate:
    return validate_payload(ProductUpdate, payload, INVALID_PRODUCT)
