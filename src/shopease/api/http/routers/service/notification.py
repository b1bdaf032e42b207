"""Notification router: WhatsApp messages and deep links for the store owner.

These endpoints only render text and links; they never change the store.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from src.shopease.api.http.deps import get_app_config
from src.shopease.core.models.notification import (
    CancellationNotification,
    NotificationLink,
    OrderNotification,
)
from src.shopease.core.services.notification_service import (
    render_cancellation_link,
    render_order_link,
)
from src.shopease.entities.core._base import validate_payload
from src.shopease.runtime.config.config_data import ConfigData

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.post("/orders", response_model=NotificationLink)
def order_notification(
    payload: Any = Body(default=None),
    config: ConfigData = Depends(get_app_config),
) -> NotificationLink:
    """Render the new-order message for the store's WhatsApp number."""
    order = validate_payload(OrderNotification, payload, "Invalid notification data")
    return render_order_link(order, config.notifications.store_whatsapp_number)


@router.post("/cancellations", response_model=NotificationLink)
def cancellation_notification(
    payload: Any = Body(default=None),
    config: ConfigData = Depends(get_app_config),
) -> NotificationLink:
    """Render the cancellation request message for the store's WhatsApp number."""
    cancel = validate_payload(
        CancellationNotification, payload, "Invalid cancellation data"
    )
    return render_cancellation_link(cancel, config.notifications.store_whatsapp_number)
