"""HTTP access to the backend notification endpoints."""

from .gateway import HttpNotificationGateway
from .schemas import RemoteNotification, RemoteNotificationList

__all__ = [
    "HttpNotificationGateway",
    "RemoteNotification",
    "RemoteNotificationList",
]
