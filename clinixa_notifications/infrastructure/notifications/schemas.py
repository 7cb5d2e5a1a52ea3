"""Pydantic models describing the backend's notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from clinixa_notifications.domain.entities import (
    CATEGORY_SYSTEM,
    NotificationRecord,
    parse_notification_id,
)
from clinixa_notifications.utils import ensure_app_timezone


class RemoteNotification(BaseModel):
    """One item of ``GET /notifications``."""

    model_config = ConfigDict(extra="ignore")

    id: int | str
    type: str = Field(default=CATEGORY_SYSTEM)
    title: str = ""
    message: str = ""
    timestamp: datetime
    read: bool = False

    @field_validator("id", mode="before")
    @classmethod
    def _validate_id(cls, value: Any) -> Any:
        # Raises for booleans, negative numbers and empty strings.
        parse_notification_id(value)
        return value

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_type(cls, value: Any) -> Any:
        if value is None:
            return CATEGORY_SYSTEM
        if isinstance(value, str):
            return value.strip().lower() or CATEGORY_SYSTEM
        return value

    def to_record(self) -> NotificationRecord:
        return NotificationRecord(
            id=parse_notification_id(self.id),
            category=self.type,
            title=self.title,
            message=self.message,
            created_at=ensure_app_timezone(self.timestamp),
            read=self.read,
        )


class RemoteNotificationList(BaseModel):
    """Envelope returned by ``GET /notifications``.

    Items are kept raw so a single malformed entry can be skipped without
    rejecting the whole snapshot.
    """

    model_config = ConfigDict(extra="ignore")

    success: bool
    notifications: list[Any] = Field(default_factory=list)
    message: str | None = None


__all__ = ["RemoteNotification", "RemoteNotificationList"]
