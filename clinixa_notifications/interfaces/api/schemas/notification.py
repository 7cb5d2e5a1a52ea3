"""Pydantic models describing the inbox payloads served to the staff UI."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from clinixa_notifications.domain.entities import CATEGORY_SYSTEM


class NotificationViewRead(BaseModel):
    """A decorated notification as rendered by the dropdown and the toast."""

    id: int | str
    kind: Literal["server", "local"]
    category: str
    title: str
    message: str
    created_at: datetime
    read: bool
    icon: str
    color: str
    background: str
    accent: str
    age_label: str


class InboxRead(BaseModel):
    """Everything a consumer needs to render the bell, dropdown and toast."""

    notifications: list[NotificationViewRead] = Field(default_factory=list)
    unread_count: int
    loading: bool
    toast: NotificationViewRead | None = None


class LocalNotificationCreate(BaseModel):
    """Payload used to surface an optimistic notification after a mutation."""

    category: str = Field(default=CATEGORY_SYSTEM, description="Notification category")
    title: str = Field(..., min_length=1, max_length=200)
    message: str = Field(default="", max_length=2000)


class AcknowledgementRead(BaseModel):
    """Outcome of a read transition.

    ``acknowledged`` is ``None`` when no remote call was needed (local ids).
    """

    id: int | str | None = None
    acknowledged: bool | None
    error: str | None = None


__all__ = [
    "AcknowledgementRead",
    "InboxRead",
    "LocalNotificationCreate",
    "NotificationViewRead",
]
