"""Session-scoped entry point used by the dropdown and toast consumers."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

import anyio
from anyio.abc import TaskStatus

from clinixa_notifications.config import Settings
from clinixa_notifications.domain.entities import NotificationId, NotificationRecord
from clinixa_notifications.utils import now_in_app_timezone

from .gateway import GatewayResult, NotificationGateway
from .poller import DEFAULT_POLL_INTERVAL, NotificationPoller
from .presentation import NotificationView, decorate
from .read_state import ReadStateReconciler
from .store import Clock, NotificationStore

logger = logging.getLogger(__name__)


class NotificationCenter:
    """Bundle the store, the poller and the read-state reconciler of one session.

    Build one instance per session and pass it to consumers. Consumers read
    through the query methods and change state only through the actions below;
    they never mutate records directly.
    """

    def __init__(
        self,
        gateway: NotificationGateway,
        *,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        toast_ttl: timedelta = timedelta(seconds=5),
        clock: Clock = now_in_app_timezone,
    ) -> None:
        self._clock = clock
        self.store = NotificationStore(toast_ttl=toast_ttl, clock=clock)
        self.poller = NotificationPoller(self.store, gateway, interval=poll_interval)
        self.read_state = ReadStateReconciler(self.store, gateway)

    @classmethod
    def from_settings(
        cls, gateway: NotificationGateway, settings: Settings
    ) -> "NotificationCenter":
        return cls(
            gateway,
            poll_interval=settings.notification_poll_interval_seconds,
            toast_ttl=timedelta(seconds=settings.notification_toast_ttl_seconds),
        )

    def notifications(self, now: datetime | None = None) -> list[NotificationView]:
        current = now or self._clock()
        return [decorate(record, current) for record in self.store.list()]

    def view(self, record: NotificationRecord, now: datetime | None = None) -> NotificationView:
        return decorate(record, now or self._clock())

    def unread_count(self) -> int:
        return self.store.unread_count()

    @property
    def active_toast(self) -> NotificationRecord | None:
        return self.store.active_toast

    @property
    def loading(self) -> bool:
        return self.poller.loading

    def add_local(self, category: str | None, title: str, message: str) -> NotificationRecord:
        record = self.store.add_local(category, title, message)
        logger.debug("Added optimistic notification %s", record.id)
        return record

    def clear(self, notification_id: NotificationId) -> bool:
        return self.store.clear(notification_id)

    def dismiss_toast(self) -> None:
        self.store.dismiss_toast()

    async def mark_read(self, notification_id: NotificationId) -> GatewayResult[None] | None:
        return await self.read_state.mark_read(notification_id)

    async def mark_all_read(self) -> GatewayResult[None]:
        return await self.read_state.mark_all_read()

    async def refresh(self) -> bool:
        """Fetch immediately, surfacing the loading state to consumers."""

        return await self.poller.fetch(quiet=False)

    async def run(self, *, task_status: TaskStatus[None] = anyio.TASK_STATUS_IGNORED) -> None:
        await self.poller.run(task_status=task_status)

    def stop(self) -> None:
        """Stop polling and discard any snapshot that arrives afterwards."""

        self.poller.stop()
        self.store.dispose()


__all__ = ["NotificationCenter"]
