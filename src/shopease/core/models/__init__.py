from .notification import CancellationNotification, NotificationLink, OrderNotification

__all__ = ["CancellationNotification", "NotificationLink", "OrderNotification"]
