from .notification import (
    AcknowledgementRead,
    InboxRead,
    LocalNotificationCreate,
    NotificationViewRead,
)

__all__ = [
    "AcknowledgementRead",
    "InboxRead",
    "LocalNotificationCreate",
    "NotificationViewRead",
]
