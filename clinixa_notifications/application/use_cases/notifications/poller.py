"""Periodic synchronization of the store with the backend snapshot."""

from __future__ import annotations

import logging

import anyio
from anyio.abc import TaskStatus

from .gateway import NotificationGateway
from .store import NotificationStore

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 30.0


class NotificationPoller:
    """Fetch once on activation, then on a fixed cadence until stopped.

    Each tick starts its fetch as a separate task, so a slow or hung request
    never delays the next tick. When two fetches overlap, whichever resolves
    last decides the contents of the store.
    """

    def __init__(
        self,
        store: NotificationStore,
        gateway: NotificationGateway,
        *,
        interval: float = DEFAULT_POLL_INTERVAL,
    ) -> None:
        if interval <= 0:
            raise ValueError("Polling interval must be positive")
        self._store = store
        self._gateway = gateway
        self._interval = interval
        self._loading_depth = 0
        self._timer_scope: anyio.CancelScope | None = None
        self._stopped = False

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def loading(self) -> bool:
        """``True`` while a non-quiet fetch is awaiting the backend."""

        return self._loading_depth > 0

    @property
    def running(self) -> bool:
        return self._timer_scope is not None and not self._stopped

    async def run(self, *, task_status: TaskStatus[None] = anyio.TASK_STATUS_IGNORED) -> None:
        """Run the polling loop until :meth:`stop` is called.

        Compatible with ``TaskGroup.start`` so callers can wait for activation.
        Returns once the timer is cancelled and every in-flight fetch settled.
        """

        if self._timer_scope is not None:
            raise RuntimeError("Notification poller is already running")
        if self._stopped:
            task_status.started()
            return

        async with anyio.create_task_group() as task_group:
            with anyio.CancelScope() as timer_scope:
                self._timer_scope = timer_scope
                task_status.started()
                task_group.start_soon(self.fetch, False)
                while True:
                    await anyio.sleep(self._interval)
                    task_group.start_soon(self.fetch, True)
        logger.info("Notification poller stopped")

    def stop(self) -> None:
        """Cancel the recurring timer; in-flight fetches are left to finish."""

        if self._stopped:
            logger.debug("Notification poller already stopped")
            return
        self._stopped = True
        if self._timer_scope is not None:
            self._timer_scope.cancel()

    async def fetch(self, quiet: bool = False) -> bool:
        """Fetch a snapshot and reconcile it; return whether it was applied."""

        if not quiet:
            self._loading_depth += 1
        try:
            result = await self._gateway.fetch_notifications()
        except Exception:
            logger.exception("Unexpected error while fetching notifications")
            return False
        finally:
            if not quiet:
                self._loading_depth -= 1

        if not result.ok:
            logger.warning("Failed to fetch notifications: %s", result.error)
            return False

        outcome = self._store.apply_snapshot(result.value or [])
        if outcome is None:
            return False
        if outcome.newly_arrived:
            logger.debug(
                "Notification snapshot applied with %d new item(s)", len(outcome.newly_arrived)
            )
        return True


__all__ = ["DEFAULT_POLL_INTERVAL", "NotificationPoller"]
