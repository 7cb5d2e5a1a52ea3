"""Public helpers for synchronizing and presenting staff notifications."""

from .center import NotificationCenter
from .gateway import GatewayResult, NotificationGateway
from .poller import DEFAULT_POLL_INTERVAL, NotificationPoller
from .presentation import (
    FALLBACK_PRESENTATION,
    NotificationView,
    Presentation,
    decorate,
    describe_age,
    presentation_for,
)
from .read_state import ReadStateReconciler, requires_acknowledgement
from .reconciler import MergeOutcome, reconcile
from .store import NotificationStore

__all__ = [
    "DEFAULT_POLL_INTERVAL",
    "FALLBACK_PRESENTATION",
    "GatewayResult",
    "MergeOutcome",
    "NotificationCenter",
    "NotificationGateway",
    "NotificationPoller",
    "NotificationStore",
    "NotificationView",
    "Presentation",
    "ReadStateReconciler",
    "decorate",
    "describe_age",
    "presentation_for",
    "reconcile",
    "requires_acknowledgement",
]
