"""Optimistic read-state transitions and their remote acknowledgements."""

from __future__ import annotations

import logging

from clinixa_notifications.domain.entities import LocalId, NotificationId, ServerId

from .gateway import GatewayResult, NotificationGateway
from .store import NotificationStore

logger = logging.getLogger(__name__)


def requires_acknowledgement(notification_id: NotificationId) -> bool:
    """Return ``True`` when the backend must be told about a read transition."""

    if isinstance(notification_id, ServerId):
        return True
    if isinstance(notification_id, LocalId):
        return False
    raise TypeError(f"Unsupported notification id type: {type(notification_id).__name__}")


class ReadStateReconciler:
    """Flip read flags locally and acknowledge them remotely when needed.

    Local flips are never rolled back. If an acknowledgement fails the server
    keeps the item unread and the next poll shows it unread again.
    """

    def __init__(self, store: NotificationStore, gateway: NotificationGateway) -> None:
        self._store = store
        self._gateway = gateway

    async def mark_read(self, notification_id: NotificationId) -> GatewayResult[None] | None:
        """Mark one notification as read.

        Returns the acknowledgement outcome, or ``None`` for local ids, which
        have no server-side counterpart.
        """

        self._store.mark_read(notification_id)
        if not requires_acknowledgement(notification_id):
            return None

        result = await self._gateway.acknowledge(notification_id)
        if not result.ok:
            logger.warning(
                "Failed to acknowledge notification %s: %s", notification_id, result.error
            )
        return result

    async def mark_all_read(self) -> GatewayResult[None]:
        self._store.mark_all_read()
        result = await self._gateway.acknowledge_all()
        if not result.ok:
            logger.warning("Failed to acknowledge all notifications: %s", result.error)
        return result


__all__ = ["ReadStateReconciler", "requires_acknowledgement"]
