"""Test doubles shared by the notification engine tests."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from clinixa_notifications.application.use_cases.notifications import GatewayResult
from clinixa_notifications.domain.entities import NotificationRecord, ServerId

BASE_TIME = datetime(2026, 3, 14, 9, 30, tzinfo=timezone.utc)


class FrozenClock:
    """Manually advanced clock used in place of the wall clock."""

    def __init__(self, start: datetime = BASE_TIME) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


class FakeGateway:
    """In-memory gateway returning scripted snapshots and recording acks.

    Queued responses are consumed in order; the last one keeps being returned.
    """

    def __init__(self) -> None:
        self.responses: list[GatewayResult[list[NotificationRecord]]] = []
        self.fetch_calls = 0
        self.acknowledged: list[ServerId] = []
        self.acknowledged_all = 0
        self.ack_result: GatewayResult[None] = GatewayResult.success()

    def queue(self, *records: NotificationRecord) -> None:
        self.responses.append(GatewayResult.success(list(records)))

    def queue_failure(self, error: str = "connection refused") -> None:
        self.responses.append(GatewayResult.failure(error))

    async def fetch_notifications(self) -> GatewayResult[list[NotificationRecord]]:
        self.fetch_calls += 1
        if len(self.responses) > 1:
            return self.responses.pop(0)
        if self.responses:
            return self.responses[0]
        return GatewayResult.success([])

    async def acknowledge(self, notification_id: ServerId) -> GatewayResult[None]:
        self.acknowledged.append(notification_id)
        return self.ack_result

    async def acknowledge_all(self) -> GatewayResult[None]:
        self.acknowledged_all += 1
        return self.ack_result


def make_record(
    notification_id: int | ServerId,
    *,
    read: bool = False,
    category: str = "appointment",
    minutes_ago: int = 0,
) -> NotificationRecord:
    """Build a server-origin record for ``notification_id``."""

    if isinstance(notification_id, int):
        notification_id = ServerId(notification_id)
    return NotificationRecord(
        id=notification_id,
        category=category,
        title=f"Notification {notification_id}",
        message="Mr. John Doe booked a consultation with Dr. Smith for 4:30 PM.",
        created_at=BASE_TIME - timedelta(minutes=minutes_ago),
        read=read,
    )
