"""Payloads accepted by the WhatsApp notification helpers."""

from typing import Annotated

from pydantic import Field, StrictInt, StrictStr, StringConstraints

from src.shopease.entities.core._base import PhoneStr, WireModel

Text = Annotated[StrictStr, StringConstraints(min_length=1)]


class OrderNotification(WireModel):
    """Details of a freshly placed order, as shown to the store owner."""

    customer_name: Text
    customer_email: Text
    customer_phone: PhoneStr
    customer_address: Text
    product_name: Text
    product_price: Text
    notes: StrictStr | None = None


class CancellationNotification(WireModel):
    """A customer's request to cancel an existing order."""

    customer_name: Annotated[StrictStr, StringConstraints(min_length=2)]
    customer_phone: PhoneStr
    product_name: Text
    order_id: StrictInt


class NotificationLink(WireModel):
    """Rendered message and the deep link that sends it."""

    message: str
    link: str
    destination: str = Field(description="Number the link addresses")
