"""Endpoints to feed and operate the alignment notification queue."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from alignment_alerts.application.use_cases.alignment_notifications import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_RETRY_LIMIT,
    AlignmentNotificationContext,
    get_pending_notification_count,
    process_pending_alignment_notifications,
    queue_alignment_change_notifications,
    retry_failed_notifications,
)
from alignment_alerts.domain.entities import AlignmentChange
from alignment_alerts.interfaces.api.dependencies import (
    get_dispatch_context,
    get_notification_context,
)
from alignment_alerts.interfaces.api.schemas import (
    AlignmentChangeCreate,
    AlignmentChangeQueued,
    AlignmentLabelsRead,
    DispatchResultRead,
    QueueStatusRead,
    RetryResultRead,
)
from alignment_alerts.utils import alignment_labels

router = APIRouter(prefix="/alignment-notifications", tags=["alignment-notifications"])

logger = logging.getLogger(__name__)


def _payload_to_change(
    payload: AlignmentChangeCreate, labels: dict[str, str]
) -> AlignmentChange:
    new_label = payload.new_label or labels["tr"]
    return AlignmentChange(
        source_id=payload.source_id,
        source_name=payload.source_name,
        old_score=payload.old_score,
        new_score=payload.new_score,
        old_label=payload.old_label,
        new_label=new_label,
        reason=payload.reason,
    )


@router.post(
    "/changes",
    response_model=AlignmentChangeQueued,
    status_code=status.HTTP_201_CREATED,
)
def queue_alignment_change(
    payload: AlignmentChangeCreate,
    context: AlignmentNotificationContext = Depends(get_notification_context),
) -> AlignmentChangeQueued:
    """Queue notifications for every follower of the changed source."""

    labels = alignment_labels(payload.new_score, payload.confidence)
    change = _payload_to_change(payload, labels)
    try:
        queued = queue_alignment_change_notifications(context, change)
    except Exception as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not queue alignment notifications",
        ) from exc
    return AlignmentChangeQueued(queued=queued, labels=AlignmentLabelsRead(**labels))


@router.get("/status", response_model=QueueStatusRead)
def read_queue_status(
    context: AlignmentNotificationContext = Depends(get_notification_context),
) -> QueueStatusRead:
    counts = get_pending_notification_count(context)
    return QueueStatusRead(pending=counts.pending, failed=counts.failed)


@router.post("/process", response_model=DispatchResultRead)
def process_queue(
    batch_size: int = Query(DEFAULT_BATCH_SIZE, gt=0, le=500),
    context: AlignmentNotificationContext = Depends(get_dispatch_context),
) -> DispatchResultRead:
    """Deliver one batch of pending notifications now."""

    try:
        result = process_pending_alignment_notifications(context, batch_size)
    except Exception as exc:
        logger.exception("On-demand alignment notification processing failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not process pending notifications",
        ) from exc
    return DispatchResultRead(sent=result.sent, failed=result.failed)


@router.post("/retry", response_model=RetryResultRead)
def retry_failed(
    limit: int = Query(DEFAULT_RETRY_LIMIT, gt=0, le=500),
    context: AlignmentNotificationContext = Depends(get_notification_context),
) -> RetryResultRead:
    return RetryResultRead(retried=retry_failed_notifications(context, limit))
