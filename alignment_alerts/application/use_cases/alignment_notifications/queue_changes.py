"""Use case queueing alignment-change notifications for a source's followers."""

from __future__ import annotations

import logging

from alignment_alerts.domain.entities import (
    NOTIFICATION_STATUS_PENDING,
    AlignmentChange,
    PendingAlignmentNotification,
)
from alignment_alerts.utils import now_in_app_timezone

from .context import AlignmentNotificationContext

logger = logging.getLogger(__name__)


def _eligible_user_ids(
    context: AlignmentNotificationContext, follower_ids: list[str]
) -> list[str]:
    """Drop followers who explicitly turned alignment notifications off.

    A follower without a stored preference is notified.
    """

    opted_out = {
        preference.user_id
        for preference in context.preferences.list_for_users(follower_ids)
        if preference.notif_alignment_changes is False
    }
    return [user_id for user_id in follower_ids if user_id not in opted_out]


def queue_alignment_change_notifications(
    context: AlignmentNotificationContext, change: AlignmentChange
) -> int:
    """Queue one pending notification per eligible follower of the source.

    Returns the number of rows queued. Lookup and insert errors propagate.
    """

    try:
        follower_ids = list(dict.fromkeys(context.followers.list_follower_ids(change.source_id)))
        if not follower_ids:
            logger.info(
                "No followers for source %s, skipping alignment notifications",
                change.source_id,
            )
            return 0

        eligible = _eligible_user_ids(context, follower_ids)
        if not eligible:
            logger.info(
                "No eligible users for alignment notifications of source %s",
                change.source_id,
            )
            return 0

        created_at = now_in_app_timezone()
        notifications = [
            PendingAlignmentNotification(
                id=context.id_factory(),
                user_id=user_id,
                source_id=change.source_id,
                source_name=change.source_name,
                old_score=change.old_score,
                new_score=change.new_score,
                old_label=change.old_label,
                new_label=change.new_label,
                change_reason=change.reason,
                status=NOTIFICATION_STATUS_PENDING,
                created_at=created_at,
            )
            for user_id in eligible
        ]
        context.queue.add_many(notifications)
    except Exception:
        logger.exception(
            "Failed to queue alignment change notifications for source %s",
            change.source_id,
        )
        raise

    logger.info(
        "Queued %s alignment change notifications for source %s (%s)",
        len(notifications),
        change.source_id,
        change.source_name,
    )
    return len(notifications)


__all__ = ["queue_alignment_change_notifications"]
