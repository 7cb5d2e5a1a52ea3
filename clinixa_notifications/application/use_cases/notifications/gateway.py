"""Contract between the engine and the notification backend."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

from clinixa_notifications.domain.entities import NotificationRecord, ServerId

T = TypeVar("T")


@dataclass(frozen=True)
class GatewayResult(Generic[T]):
    """Explicit outcome of a remote call; failures carry a description."""

    ok: bool
    value: T | None = None
    error: str | None = None

    @classmethod
    def success(cls, value: T | None = None) -> "GatewayResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "GatewayResult[T]":
        return cls(ok=False, error=error)


class NotificationGateway(Protocol):
    """Remote operations the engine depends on."""

    async def fetch_notifications(self) -> GatewayResult[list[NotificationRecord]]:
        ...

    async def acknowledge(self, notification_id: ServerId) -> GatewayResult[None]:
        ...

    async def acknowledge_all(self) -> GatewayResult[None]:
        ...


__all__ = ["GatewayResult", "NotificationGateway"]
