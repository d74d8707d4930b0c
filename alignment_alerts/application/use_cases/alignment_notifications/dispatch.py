"""Use case delivering queued alignment-change notifications."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from alignment_alerts.domain.entities import (
    NOTIFICATION_STATUS_FAILED,
    NOTIFICATION_STATUS_PENDING,
    NOTIFICATION_STATUS_SENT,
    NOTIFICATION_TYPE_ALIGNMENT,
    Notification,
    PendingAlignmentNotification,
)
from alignment_alerts.infrastructure.push import PushPayload
from alignment_alerts.utils import now_in_app_timezone

from .context import AlignmentNotificationContext

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 50
PUSH_DATA_TYPE = "alignment_change"
ALIGNMENT_NOTIFICATION_TITLE = "Kaynak Durumu Güncellendi"


@dataclass(frozen=True)
class DispatchResult:
    """Number of queue rows moved to ``sent`` and to ``failed`` by one run."""

    sent: int = 0
    failed: int = 0


def build_notification_body(notification: PendingAlignmentNotification) -> str:
    if notification.new_label:
        return (
            f"{notification.source_name} kaynağının editoryal durumu "
            f'"{notification.new_label}" olarak güncellendi.'
        )
    return f"{notification.source_name} kaynağının editoryal durumu güncellendi."


def build_push_payload(notification: PendingAlignmentNotification) -> PushPayload:
    return PushPayload(
        title=ALIGNMENT_NOTIFICATION_TITLE,
        body=build_notification_body(notification),
        data={"type": PUSH_DATA_TYPE, "sourceId": str(notification.source_id)},
    )


def _snapshot(notification: PendingAlignmentNotification) -> dict:
    return {
        "sourceId": notification.source_id,
        "sourceName": notification.source_name,
        "oldScore": notification.old_score,
        "newScore": notification.new_score,
        "oldLabel": notification.old_label,
        "newLabel": notification.new_label,
        "reason": notification.change_reason,
    }


def _deliver(
    context: AlignmentNotificationContext, notification: PendingAlignmentNotification
) -> None:
    devices = context.devices.list_active_for_user(notification.user_id)
    payload = build_push_payload(notification)
    for device in devices:
        context.push.send(device, payload)

    sent_at = now_in_app_timezone()
    context.delivery_log.create(
        Notification(
            id=context.id_factory(),
            user_id=notification.user_id,
            type=NOTIFICATION_TYPE_ALIGNMENT,
            title=payload.title,
            body=payload.body,
            data=_snapshot(notification),
            is_read=False,
            sent_at=sent_at,
        )
    )
    context.queue.update_status(notification.id, NOTIFICATION_STATUS_SENT, sent_at=sent_at)


def _rollback(context: AlignmentNotificationContext) -> None:
    if context.rollback is None:
        return
    try:
        context.rollback()
    except Exception:
        logger.exception("Could not roll back after a failed alignment notification")


def _mark_failed(
    context: AlignmentNotificationContext, notification: PendingAlignmentNotification
) -> None:
    _rollback(context)
    try:
        context.queue.update_status(notification.id, NOTIFICATION_STATUS_FAILED)
    except Exception:
        logger.exception(
            "Could not mark alignment notification %s as failed", notification.id
        )
        _rollback(context)


def process_pending_alignment_notifications(
    context: AlignmentNotificationContext, batch_size: int = DEFAULT_BATCH_SIZE
) -> DispatchResult:
    """Deliver up to ``batch_size`` pending notifications.

    Every row is handled independently: a failure while resolving devices,
    pushing or recording the delivery rolls back its partial writes, marks
    that row ``failed`` and the batch carries on. Only a failure to read the
    pending rows propagates.
    """

    if batch_size <= 0:
        msg = "batch_size must be a positive integer"
        raise ValueError(msg)
    if context.push is None:
        msg = "A push transport is required to dispatch notifications"
        raise ValueError(msg)

    try:
        pending = context.queue.list_by_status(NOTIFICATION_STATUS_PENDING, limit=batch_size)
    except Exception:
        logger.exception("Failed to load pending alignment notifications")
        raise

    if not pending:
        return DispatchResult()

    sent = 0
    failed = 0
    for notification in pending:
        try:
            _deliver(context, notification)
        except Exception:
            logger.exception(
                "Failed to send alignment notification %s to user %s",
                notification.id,
                notification.user_id,
            )
            _mark_failed(context, notification)
            failed += 1
        else:
            sent += 1

    logger.info("Alignment notifications processed: %s sent, %s failed", sent, failed)
    return DispatchResult(sent=sent, failed=failed)


__all__ = [
    "ALIGNMENT_NOTIFICATION_TITLE",
    "DEFAULT_BATCH_SIZE",
    "DispatchResult",
    "build_notification_body",
    "build_push_payload",
    "process_pending_alignment_notifications",
]
