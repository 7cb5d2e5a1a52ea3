"""Diff a freshly fetched snapshot against the current inventory."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from clinixa_notifications.domain.entities import NotificationRecord


@dataclass(frozen=True)
class MergeOutcome:
    """Result of reconciling one snapshot."""

    records: tuple[NotificationRecord, ...]
    newly_arrived: tuple[NotificationRecord, ...]
    toast: NotificationRecord | None


def reconcile(
    previous: Sequence[NotificationRecord],
    incoming: Sequence[NotificationRecord],
) -> MergeOutcome:
    """Return the records to adopt and the toast candidate, if any.

    The incoming snapshot replaces ``previous`` wholesale, so a local read flip
    the server has not seen yet is overwritten by the server's value.
    """

    known_ids = {record.id for record in previous}
    newly_arrived = tuple(record for record in incoming if record.id not in known_ids)

    toast: NotificationRecord | None = None
    # The first fetch of a session only seeds the inventory.
    if previous and newly_arrived:
        toast = next((record for record in newly_arrived if not record.read), None)

    return MergeOutcome(records=tuple(incoming), newly_arrived=newly_arrived, toast=toast)


__all__ = ["MergeOutcome", "reconcile"]
