"""Endpoints that expose the live notification inventory to the staff UI."""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Response, status

from clinixa_notifications.application.use_cases.notifications import (
    GatewayResult,
    NotificationCenter,
    NotificationView,
)
from clinixa_notifications.domain.entities import (
    LocalId,
    NotificationId,
    parse_notification_id,
)
from clinixa_notifications.interfaces.api.dependencies import get_notification_center
from clinixa_notifications.interfaces.api.schemas import (
    AcknowledgementRead,
    InboxRead,
    LocalNotificationCreate,
    NotificationViewRead,
)

router = APIRouter(prefix="/inbox", tags=["inbox"])


def _wire_id(notification_id: NotificationId) -> int | str:
    return notification_id.value


def _view_to_schema(view: NotificationView) -> NotificationViewRead:
    return NotificationViewRead(
        id=_wire_id(view.id),
        kind="local" if isinstance(view.id, LocalId) else "server",
        category=view.category,
        title=view.title,
        message=view.message,
        created_at=view.created_at,
        read=view.read,
        icon=view.icon,
        color=view.color,
        background=view.background,
        accent=view.accent,
        age_label=view.age_label,
    )


def _inbox_snapshot(center: NotificationCenter, now: datetime | None = None) -> InboxRead:
    toast = center.active_toast
    return InboxRead(
        notifications=[_view_to_schema(view) for view in center.notifications(now)],
        unread_count=center.unread_count(),
        loading=center.loading,
        toast=_view_to_schema(center.view(toast, now)) if toast is not None else None,
    )


def _parse_path_id(raw: str) -> NotificationId:
    try:
        return parse_notification_id(raw)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc


def _acknowledgement_to_schema(
    notification_id: NotificationId | None, result: GatewayResult[None] | None
) -> AcknowledgementRead:
    return AcknowledgementRead(
        id=_wire_id(notification_id) if notification_id is not None else None,
        acknowledged=None if result is None else result.ok,
        error=None if result is None else result.error,
    )


@router.get("", response_model=InboxRead)
def read_inbox(center: NotificationCenter = Depends(get_notification_center)) -> InboxRead:
    """Return the decorated notifications, the unread counter and the toast."""

    return _inbox_snapshot(center)


@router.post("", response_model=NotificationViewRead, status_code=status.HTTP_201_CREATED)
def add_local_notification(
    payload: LocalNotificationCreate,
    center: NotificationCenter = Depends(get_notification_center),
) -> NotificationViewRead:
    """Surface an optimistic notification right after a successful mutation."""

    record = center.add_local(payload.category, payload.title, payload.message)
    return _view_to_schema(center.view(record))


@router.post("/refresh", response_model=InboxRead)
async def refresh_inbox(
    center: NotificationCenter = Depends(get_notification_center),
) -> InboxRead:
    """Fetch from the backend immediately instead of waiting for the next tick."""

    await center.refresh()
    return _inbox_snapshot(center)


@router.post("/read-all", response_model=AcknowledgementRead)
async def mark_all_notifications_read(
    center: NotificationCenter = Depends(get_notification_center),
) -> AcknowledgementRead:
    result = await center.mark_all_read()
    return _acknowledgement_to_schema(None, result)


@router.post("/{notification_id}/read", response_model=AcknowledgementRead)
async def mark_notification_read(
    notification_id: str,
    center: NotificationCenter = Depends(get_notification_center),
) -> AcknowledgementRead:
    parsed_id = _parse_path_id(notification_id)
    result = await center.mark_read(parsed_id)
    return _acknowledgement_to_schema(parsed_id, result)


@router.delete("/toast", status_code=status.HTTP_204_NO_CONTENT)
def dismiss_toast(center: NotificationCenter = Depends(get_notification_center)) -> Response:
    center.dismiss_toast()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
def clear_notification(
    notification_id: str,
    center: NotificationCenter = Depends(get_notification_center),
) -> Response:
    """Dismiss a notification locally."""

    if not center.clear(_parse_path_id(notification_id)):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Notification not found"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
