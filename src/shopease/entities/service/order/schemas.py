"""Validation schema for checkout submissions."""

from typing import Annotated, Any

from pydantic import StrictInt, StrictStr, StringConstraints

from src.shopease.entities.core._base import (
    EmailShapedStr,
    NumericStr,
    PhoneStr,
    WireModel,
    validate_payload,
)

INVALID_ORDER = "Invalid order data"


class InsertOrder(WireModel):
    """Fields required to place an order."""

    product_id: StrictInt
    customer_name: Annotated[StrictStr, StringConstraints(min_length=2)]
    customer_email: EmailShapedStr
    customer_phone: PhoneStr
    customer_address: Annotated[StrictStr, StringConstraints(min_length=10)]
    notes: StrictStr | None = None
    total_amount: NumericStr


def validate_insert_order(payload: Any) -> InsertOrder:
    return validate_payload(InsertOrder, payload, INVALID_ORDER)
