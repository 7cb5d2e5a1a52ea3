"""Domain entities representing staff notifications and their identifiers."""

from __future__ import annotations

import secrets
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Union

CATEGORY_EMERGENCY = "emergency"
CATEGORY_APPOINTMENT = "appointment"
CATEGORY_PAYMENT = "payment"
CATEGORY_SYSTEM = "system"
CATEGORY_SUCCESS = "success"
CATEGORY_ERROR = "error"
CATEGORY_INFO = "info"
CATEGORY_LAB = "lab"

NOTIFICATION_CATEGORIES: tuple[str, ...] = (
    CATEGORY_EMERGENCY,
    CATEGORY_APPOINTMENT,
    CATEGORY_PAYMENT,
    CATEGORY_SYSTEM,
    CATEGORY_SUCCESS,
    CATEGORY_ERROR,
    CATEGORY_INFO,
    CATEGORY_LAB,
)


@dataclass(frozen=True)
class ServerId:
    """Identifier assigned by the backend; acknowledgements are sent for it."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("ServerId value must be an integer")
        if self.value < 0:
            raise ValueError("ServerId value must be non-negative")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class LocalId:
    """Identifier of an optimistic notification the server does not know about."""

    value: str

    @classmethod
    def mint(cls, created_at: datetime) -> "LocalId":
        """Return a fresh ``<epoch-millis>-<random hex>`` identifier."""

        millis = int(created_at.timestamp() * 1000)
        return cls(f"{millis}-{secrets.token_hex(3)}")

    def __str__(self) -> str:
        return self.value


NotificationId = Union[ServerId, LocalId]


def parse_notification_id(raw: object) -> NotificationId:
    """Classify ``raw`` into a :class:`ServerId` or a :class:`LocalId`.

    Integers and strings made only of decimal digits belong to the server.
    Any other non-empty string is a local (or synthetic) identifier.
    """

    if isinstance(raw, bool):
        raise ValueError("Boolean values are not valid notification ids")
    if isinstance(raw, int):
        return ServerId(raw)
    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            raise ValueError("Notification id cannot be empty")
        if text.isascii() and text.isdigit():
            return ServerId(int(text))
        return LocalId(text)
    raise ValueError(f"Unsupported notification id: {raw!r}")


@dataclass(frozen=True)
class NotificationRecord:
    """A single entry of the notification inventory."""

    id: NotificationId
    category: str
    title: str
    message: str
    created_at: datetime
    read: bool = False

    @property
    def is_local(self) -> bool:
        return isinstance(self.id, LocalId)

    def as_read(self) -> "NotificationRecord":
        """Return a copy flagged as read (``self`` when already read)."""

        if self.read:
            return self
        return replace(self, read=True)


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
