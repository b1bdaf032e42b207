"""WhatsApp notifications for new orders and cancellation requests.

Nothing here touches the store. Each helper renders a message, turns it
into a ``wa.me`` deep link for the destination number it is given, and
optionally hands the link to an opener (a browser by default).
"""

from __future__ import annotations

import webbrowser
from collections.abc import Callable
from urllib.parse import quote

from loguru import logger

from src.shopease.core.models.notification import (
    CancellationNotification,
    NotificationLink,
    OrderNotification,
)

LinkOpener = Callable[[str], bool]

_FOOTER = "_Sent from ShopEase E-Commerce System_"


def format_order_message(order: OrderNotification) -> str:
    return (
        "🛍️ *NEW ORDER RECEIVED - ShopEase Store*\n"
        "\n"
        "📦 *Order Details:*\n"
        f"• Product: {order.product_name}\n"
        f"• Price: ${order.product_price}\n"
        f"• Notes: {order.notes or 'None'}\n"
        "\n"
        "👤 *Customer Information:*\n"
        f"• Name: {order.customer_name}\n"
        f"• Email: {order.customer_email}\n"
        f"• Phone: {order.customer_phone}\n"
        f"• Address: {order.customer_address}\n"
        "\n"
        "Please process this order promptly!\n"
        "\n"
        f"{_FOOTER}"
    )


def format_cancellation_message(cancel: CancellationNotification) -> str:
    return (
        "❌ *ORDER CANCELLATION REQUEST - ShopEase Store*\n"
        "\n"
        f"🆔 *Order ID:* #{cancel.order_id}\n"
        f"🛍️ *Product:* {cancel.product_name}\n"
        "\n"
        "👤 *Customer Details:*\n"
        f"• Name: {cancel.customer_name}\n"
        f"• Phone: {cancel.customer_phone}\n"
        "\n"
        "⚠️ *Action Required:* Please process this cancellation request immediately.\n"
        "\n"
        f"{_FOOTER}"
    )


def build_whatsapp_link(message: str, destination: str) -> str:
    """Return the ``wa.me`` link that opens a chat prefilled with ``message``."""
    number = destination.replace("+", "").replace(" ", "")
    # same escaping as JavaScript's encodeURIComponent
    encoded = quote(message, safe="!*'()")
    return f"https://wa.me/{number}?text={encoded}"


def render_order_link(order: OrderNotification, destination: str) -> NotificationLink:
    message = format_order_message(order)
    return NotificationLink(
        message=message,
        link=build_whatsapp_link(message, destination),
        destination=destination,
    )


def render_cancellation_link(
    cancel: CancellationNotification, destination: str
) -> NotificationLink:
    message = format_cancellation_message(cancel)
    return NotificationLink(
        message=message,
        link=build_whatsapp_link(message, destination),
        destination=destination,
    )


def share_message(
    message: str,
    destination: str,
    *,
    simulate: bool = False,
    opener: LinkOpener = webbrowser.open,
) -> bool:
    """Open the deep link for ``message``.

    Returns:
        True when the link was opened (or only logged, in simulate mode),
        False when the opener failed. The link is logged either way so it
        can be sent by hand.
    """
    link = build_whatsapp_link(message, destination)

    if simulate:
        logger.info(f"WhatsApp simulation to {destination}:\n{message}")
        logger.info(f"WhatsApp link: {link}")
        return True

    try:
        opened = opener(link)
    except (webbrowser.Error, OSError) as exc:
        logger.error(f"Failed to open WhatsApp link for {destination}: {exc}")
        opened = False

    if not opened:
        logger.warning(f"WhatsApp link not opened, send manually: {link}")
        return False

    logger.info(f"WhatsApp message opened for {destination}")
    return True


def send_order_whatsapp(
    order: OrderNotification,
    destination: str,
    *,
    simulate: bool = False,
    opener: LinkOpener = webbrowser.open,
) -> bool:
    return share_message(
        format_order_message(order), destination, simulate=simulate, opener=opener
    )


def send_cancel_order_whatsapp(
    cancel: CancellationNotification,
    destination: str,
    *,
    simulate: bool = False,
    opener: LinkOpener = webbrowser.open,
) -> bool:
    return share_message(
        format_cancellation_message(cancel),
        destination,
        simulate=simulate,
        opener=opener,
    )
