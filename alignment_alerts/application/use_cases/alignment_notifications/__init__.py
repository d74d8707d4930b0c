"""Use cases driving the alignment-change notification queue."""

from .context import (
    AlignmentNotificationContext,
    DeliveryLog,
    DeviceLookup,
    FollowerLookup,
    NotificationQueue,
    PreferenceLookup,
    PushTransport,
    build_notification_context,
)
from .dispatch import (
    DEFAULT_BATCH_SIZE,
    DispatchResult,
    build_push_payload,
    process_pending_alignment_notifications,
)
from .monitoring import (
    DEFAULT_RETRY_LIMIT,
    QueueCounts,
    get_pending_notification_count,
    retry_failed_notifications,
)
from .queue_changes import queue_alignment_change_notifications

__all__ = [
    "AlignmentNotificationContext",
    "DeliveryLog",
    "DeviceLookup",
    "FollowerLookup",
    "NotificationQueue",
    "PreferenceLookup",
    "PushTransport",
    "build_notification_context",
    "DEFAULT_BATCH_SIZE",
    "DispatchResult",
    "build_push_payload",
    "process_pending_alignment_notifications",
    "DEFAULT_RETRY_LIMIT",
    "QueueCounts",
    "get_pending_notification_count",
    "retry_failed_notifications",
    "queue_alignment_change_notifications",
]
