"""Domain entity for a queued alignment-change notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

NOTIFICATION_STATUS_PENDING = "pending"
NOTIFICATION_STATUS_SENT = "sent"
NOTIFICATION_STATUS_FAILED = "failed"

NOTIFICATION_STATUSES = (
    NOTIFICATION_STATUS_PENDING,
    NOTIFICATION_STATUS_SENT,
    NOTIFICATION_STATUS_FAILED,
)


@dataclass
class PendingAlignmentNotification:
    """One recipient's copy of an alignment change waiting to be delivered.

    ``source_name``, ``old_label`` and ``new_label`` are captured when the row
    is queued and never re-derived from the live source.
    """

    id: str
    user_id: str
    source_id: int
    source_name: str
    old_score: int | None
    new_score: int
    old_label: str | None
    new_label: str | None
    change_reason: str | None
    status: str = NOTIFICATION_STATUS_PENDING
    created_at: datetime | None = None
    sent_at: datetime | None = None


__all__ = [
    "PendingAlignmentNotification",
    "NOTIFICATION_STATUS_PENDING",
    "NOTIFICATION_STATUS_SENT",
    "NOTIFICATION_STATUS_FAILED",
    "NOTIFICATION_STATUSES",
]
