"""Aggregate application use cases."""

from .alignment_notifications import (
    get_pending_notification_count,
    process_pending_alignment_notifications,
    queue_alignment_change_notifications,
    retry_failed_notifications,
)

__all__ = [
    "get_pending_notification_count",
    "process_pending_alignment_notifications",
    "queue_alignment_change_notifications",
    "retry_failed_notifications",
]
