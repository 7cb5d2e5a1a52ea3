"""FastAPI dependency utilities."""

from fastapi import HTTPException, Request, status

from clinixa_notifications.application.use_cases.notifications import NotificationCenter


def get_notification_center(request: Request) -> NotificationCenter:
    """Return the notification center created by the application lifespan."""

    center = getattr(request.app.state, "notification_center", None)
    if center is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Notification center is not running",
        )
    return center
