"""Domain entities exposed by the application."""

from .alignment_change import AlignmentChange
from .notification import NOTIFICATION_TYPE_ALIGNMENT, Notification
from .notification_preference import NotificationPreference
from .pending_alignment_notification import (
    NOTIFICATION_STATUS_FAILED,
    NOTIFICATION_STATUS_PENDING,
    NOTIFICATION_STATUS_SENT,
    NOTIFICATION_STATUSES,
    PendingAlignmentNotification,
)
from .user_device import UserDevice

__all__ = [
    "AlignmentChange",
    "Notification",
    "NOTIFICATION_TYPE_ALIGNMENT",
    "NotificationPreference",
    "PendingAlignmentNotification",
    "NOTIFICATION_STATUS_PENDING",
    "NOTIFICATION_STATUS_SENT",
    "NOTIFICATION_STATUS_FAILED",
    "NOTIFICATION_STATUSES",
    "UserDevice",
]
