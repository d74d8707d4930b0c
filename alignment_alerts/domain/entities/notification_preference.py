"""Domain entity describing a user's notification opt-ins."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NotificationPreference:
    """Alignment-change opt-in stored for a user.

    Users without a stored preference are treated as opted in.
    """

    user_id: str
    notif_alignment_changes: bool = True


__all__ = ["NotificationPreference"]
