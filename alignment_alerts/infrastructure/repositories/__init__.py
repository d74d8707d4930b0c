"""Repository implementations for infrastructure layer."""

from .followed_source_repository import FollowedSourceRepository
from .notification_preference_repository import NotificationPreferenceRepository
from .notification_repository import NotificationRepository
from .pending_alignment_notification_repository import (
    PendingAlignmentNotificationRepository,
)
from .user_device_repository import UserDeviceRepository

__all__ = [
    "FollowedSourceRepository",
    "NotificationPreferenceRepository",
    "NotificationRepository",
    "PendingAlignmentNotificationRepository",
    "UserDeviceRepository",
]
