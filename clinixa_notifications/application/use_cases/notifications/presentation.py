"""Display metadata derived from raw notification fields."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from clinixa_notifications.domain.entities import (
    CATEGORY_APPOINTMENT,
    CATEGORY_EMERGENCY,
    CATEGORY_ERROR,
    CATEGORY_INFO,
    CATEGORY_LAB,
    CATEGORY_PAYMENT,
    CATEGORY_SUCCESS,
    CATEGORY_SYSTEM,
    NotificationId,
    NotificationRecord,
)
from clinixa_notifications.utils import ensure_app_timezone, now_in_app_timezone


@dataclass(frozen=True)
class Presentation:
    """Icon identifier plus the colour tokens used by the dropdown and toast."""

    icon: str
    color: str
    background: str
    accent: str


FALLBACK_PRESENTATION = Presentation(
    icon="clock",
    color="text-amber-500",
    background="bg-amber-50",
    accent="border-amber-500",
)

_PRESENTATIONS: dict[str, Presentation] = {
    CATEGORY_EMERGENCY: Presentation(
        "alert-circle", "text-red-500", "bg-red-50", "border-red-500"
    ),
    CATEGORY_APPOINTMENT: Presentation(
        "calendar", "text-blue-500", "bg-blue-50", "border-blue-500"
    ),
    CATEGORY_PAYMENT: Presentation(
        "check-circle-2", "text-green-500", "bg-green-50", "border-emerald-500"
    ),
    CATEGORY_SYSTEM: FALLBACK_PRESENTATION,
    CATEGORY_SUCCESS: Presentation(
        "check-circle-2", "text-emerald-500", "bg-emerald-50", "border-emerald-500"
    ),
    CATEGORY_ERROR: Presentation(
        "x-circle", "text-rose-500", "bg-rose-50", "border-rose-500"
    ),
    CATEGORY_INFO: Presentation(
        "info", "text-sky-500", "bg-sky-50", "border-sky-500"
    ),
    CATEGORY_LAB: Presentation(
        "flask-conical", "text-violet-500", "bg-violet-50", "border-violet-500"
    ),
}

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR


def presentation_for(category: str | None) -> Presentation:
    """Return the display metadata for ``category`` (fallback when unknown)."""

    return _PRESENTATIONS.get((category or "").lower(), FALLBACK_PRESENTATION)


def describe_age(created_at: datetime, now: datetime | None = None) -> str:
    """Return a coarse relative label such as ``"5m ago"`` for ``created_at``."""

    current = ensure_app_timezone(now) if now is not None else now_in_app_timezone()
    elapsed = int((current - ensure_app_timezone(created_at)).total_seconds())
    if elapsed < _MINUTE:
        return "just now"
    if elapsed < _HOUR:
        return f"{elapsed // _MINUTE}m ago"
    if elapsed < _DAY:
        return f"{elapsed // _HOUR}h ago"
    return f"{elapsed // _DAY}d ago"


@dataclass(frozen=True)
class NotificationView:
    """A record decorated for rendering; rebuilt on every read."""

    id: NotificationId
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


def decorate(record: NotificationRecord, now: datetime | None = None) -> NotificationView:
    """Attach presentation metadata and the age label to ``record``."""

    presentation = presentation_for(record.category)
    return NotificationView(
        id=record.id,
        category=record.category,
        title=record.title,
        message=record.message,
        created_at=record.created_at,
        read=record.read,
        icon=presentation.icon,
        color=presentation.color,
        background=presentation.background,
        accent=presentation.accent,
        age_label=describe_age(record.created_at, now),
    )


__all__ = [
    "FALLBACK_PRESENTATION",
    "NotificationView",
    "Presentation",
    "decorate",
    "describe_age",
    "presentation_for",
]
