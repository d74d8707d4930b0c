"""ORM models used by the application infrastructure."""

from .notification import NotificationModel
from .pending_alignment_notification import PendingAlignmentNotificationModel
from .user_device import UserDeviceModel
from .user_followed_source import UserFollowedSourceModel
from .user_notification_preference import UserNotificationPreferenceModel

__all__ = [
    "NotificationModel",
    "PendingAlignmentNotificationModel",
    "UserDeviceModel",
    "UserFollowedSourceModel",
    "UserNotificationPreferenceModel",
]
