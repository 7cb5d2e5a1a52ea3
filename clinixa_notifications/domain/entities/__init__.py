"""Domain entities exposed by the application."""

from .notification import (
    CATEGORY_APPOINTMENT,
    CATEGORY_EMERGENCY,
    CATEGORY_ERROR,
    CATEGORY_INFO,
    CATEGORY_LAB,
    CATEGORY_PAYMENT,
    CATEGORY_SUCCESS,
    CATEGORY_SYSTEM,
    NOTIFICATION_CATEGORIES,
    LocalId,
    NotificationId,
    NotificationRecord,
    ServerId,
    parse_notification_id,
)

__all__ = [
    "CATEGORY_EMERGENCY",
    "CATEGORY_APPOINTMENT",
    "CATEGORY_PAYMENT",
    "CATEGORY_SYSTEM",
    "CATEGORY_SUCCESS",
    "CATEGORY_ERROR",
    "CATEGORY_INFO",
    "CATEGORY_LAB",
    "NOTIFICATION_CATEGORIES",
    "LocalId",
    "NotificationId",
    "NotificationRecord",
    "ServerId",
    "parse_notification_id",
]
