"""Entity: Order."""

from pydantic import Field

from src.shopease.entities.core._base import Entity


class Order(Entity):
    """Order placed from a checkout submission.

    Orders are never updated or deleted; a cancellation is only a
    notification to the store. ``product_id`` is not guaranteed to point at
    an existing product.
    """

    product_id: int = Field(description="Id of the ordered product")
    customer_name: str
    customer_email: str
    customer_phone: str
    customer_address: str
    notes: str | None = Field(default=None, description="Free-form delivery notes")
    total_amount: str = Field(description="Order total as a decimal string")
