"""Queue health counters and the retry sweep for failed deliveries."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from alignment_alerts.domain.entities import (
    NOTIFICATION_STATUS_FAILED,
    NOTIFICATION_STATUS_PENDING,
)

from .context import AlignmentNotificationContext

logger = logging.getLogger(__name__)

DEFAULT_RETRY_LIMIT = 20


@dataclass(frozen=True)
class QueueCounts:
    pending: int = 0
    failed: int = 0


def get_pending_notification_count(context: AlignmentNotificationContext) -> QueueCounts:
    """Return how many rows are ``pending`` and ``failed``.

    This feeds dashboards only, so read errors are logged and reported as
    zero counts.
    """

    try:
        return QueueCounts(
            pending=context.queue.count_by_status(NOTIFICATION_STATUS_PENDING),
            failed=context.queue.count_by_status(NOTIFICATION_STATUS_FAILED),
        )
    except Exception:
        logger.exception("Failed to count queued alignment notifications")
        return QueueCounts()


def retry_failed_notifications(
    context: AlignmentNotificationContext, limit: int = DEFAULT_RETRY_LIMIT
) -> int:
    """Move up to ``limit`` failed rows back to ``pending``.

    Returns the number of rows re-queued; ``0`` both when nothing failed and
    when the sweep itself errored.
    """

    try:
        failed = context.queue.list_by_status(NOTIFICATION_STATUS_FAILED, limit=limit)
        if not failed:
            return 0

        ids = [notification.id for notification in failed]
        context.queue.update_status_many(ids, NOTIFICATION_STATUS_PENDING)
    except Exception:
        logger.exception("Failed to reset failed alignment notifications for retry")
        return 0

    logger.info("Reset %s failed alignment notifications for retry", len(ids))
    return len(ids)


__all__ = [
    "DEFAULT_RETRY_LIMIT",
    "QueueCounts",
    "get_pending_notification_count",
    "retry_failed_notifications",
]
