"""In-memory inventory of the current session's notifications."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime, timedelta
from typing import Callable

from clinixa_notifications.domain.entities import (
    CATEGORY_SYSTEM,
    LocalId,
    NotificationId,
    NotificationRecord,
)
from clinixa_notifications.utils import now_in_app_timezone

from .reconciler import MergeOutcome, reconcile

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class NotificationStore:
    """Ordered, newest-first collection of :class:`NotificationRecord` objects.

    The store also owns the single toast slot. Every operation is total: unknown
    ids are ignored instead of raising.
    """

    def __init__(
        self,
        *,
        toast_ttl: timedelta = timedelta(seconds=5),
        clock: Clock = now_in_app_timezone,
    ) -> None:
        self._records: list[NotificationRecord] = []
        self._toast: NotificationRecord | None = None
        self._toast_raised_at: datetime | None = None
        self._toast_ttl = toast_ttl
        self._clock = clock
        self._disposed = False

    def list(self) -> tuple[NotificationRecord, ...]:
        return tuple(self._records)

    def unread_count(self) -> int:
        return sum(1 for record in self._records if not record.read)

    def get(self, notification_id: NotificationId) -> NotificationRecord | None:
        for record in self._records:
            if record.id == notification_id:
                return record
        return None

    def __len__(self) -> int:
        return len(self._records)

    @property
    def active_toast(self) -> NotificationRecord | None:
        """Return the toast record until its time-to-live elapses."""

        if self._toast is None or self._toast_raised_at is None:
            return None
        if self._clock() - self._toast_raised_at >= self._toast_ttl:
            self.dismiss_toast()
            return None
        return self._toast

    @property
    def disposed(self) -> bool:
        return self._disposed

    def add_local(self, category: str | None, title: str, message: str) -> NotificationRecord:
        """Insert an optimistic notification at the head and raise it as toast."""

        created_at = self._clock()
        local_id = LocalId.mint(created_at)
        while self.get(local_id) is not None:
            local_id = LocalId.mint(created_at)

        record = NotificationRecord(
            id=local_id,
            category=category or CATEGORY_SYSTEM,
            title=title,
            message=message,
            created_at=created_at,
            read=False,
        )
        self._records.insert(0, record)
        self._raise_toast(record)
        return record

    def clear(self, notification_id: NotificationId) -> bool:
        """Remove the record with ``notification_id``; return whether one was removed."""

        before = len(self._records)
        self._records = [record for record in self._records if record.id != notification_id]
        if self._toast is not None and self._toast.id == notification_id:
            self.dismiss_toast()
        return len(self._records) < before

    def mark_read(self, notification_id: NotificationId) -> bool:
        """Flag the matching record as read; return whether it was found."""

        for index, record in enumerate(self._records):
            if record.id == notification_id:
                self._records[index] = record.as_read()
                return True
        return False

    def mark_all_read(self) -> None:
        self._records = [record.as_read() for record in self._records]

    def replace(self, records: Iterable[NotificationRecord]) -> None:
        """Adopt ``records`` wholesale, dropping repeated ids."""

        self._records = _drop_duplicates(records)

    def apply_snapshot(self, incoming: Iterable[NotificationRecord]) -> MergeOutcome | None:
        """Reconcile a fetched snapshot into the store.

        Returns ``None`` when the store has already been disposed, in which case
        the snapshot is discarded.
        """

        if self._disposed:
            logger.debug("Discarding notification snapshot for a disposed store")
            return None

        outcome = reconcile(self._records, _drop_duplicates(incoming))
        self._records = list(outcome.records)
        if outcome.toast is not None:
            self._raise_toast(outcome.toast)
        return outcome

    def dismiss_toast(self) -> None:
        self._toast = None
        self._toast_raised_at = None

    def dispose(self) -> None:
        self._disposed = True
        self.dismiss_toast()

    def _raise_toast(self, record: NotificationRecord) -> None:
        self._toast = record
        self._toast_raised_at = self._clock()


def _drop_duplicates(records: Iterable[NotificationRecord]) -> list[NotificationRecord]:
    """Keep the first record of every id."""

    seen: set[NotificationId] = set()
    adopted: list[NotificationRecord] = []
    for record in records:
        if record.id in seen:
            logger.warning("Dropping duplicate notification id %s from snapshot", record.id)
            continue
        seen.add(record.id)
        adopted.append(record)
    return adopted


__all__ = ["Clock", "NotificationStore"]
