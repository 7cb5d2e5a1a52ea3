"""Aggregate application use cases."""

from .notifications import NotificationCenter

__all__ = ["NotificationCenter"]
