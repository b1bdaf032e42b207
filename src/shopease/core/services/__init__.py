from .notification_service import (
    build_whatsapp_link,
    format_cancellation_message,
    format_order_message,
    render_cancellation_link,
    render_order_link,
    send_cancel_order_whatsapp,
    send_order_whatsapp,
    share_message,
)

__all__ = [
    "build_whatsapp_link",
    "format_cancellation_message",
    "format_order_message",
    "render_cancellation_link",
    "render_order_link",
    "send_cancel_order_whatsapp",
    "send_order_whatsapp",
    "share_message",
]
