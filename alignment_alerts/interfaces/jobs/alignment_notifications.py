"""Periodic dispatch and retry of queued alignment-change notifications."""

from __future__ import annotations

import logging
from collections.abc import Callable

from apscheduler.schedulers.background import BackgroundScheduler
from sqlalchemy.orm import Session

from alignment_alerts.application.use_cases.alignment_notifications import (
    DispatchResult,
    PushTransport,
    build_notification_context,
    get_pending_notification_count,
    process_pending_alignment_notifications,
    retry_failed_notifications,
)
from alignment_alerts.config import get_settings
from alignment_alerts.infrastructure.database import SessionLocal
from alignment_alerts.infrastructure.push import ExpoPushClient

logger = logging.getLogger(__name__)

MANUAL_BATCH_SIZE = 100

SessionFactory = Callable[[], Session]


def run_dispatch_job(
    *,
    batch_size: int | None = None,
    session_factory: SessionFactory = SessionLocal,
    push: PushTransport | None = None,
) -> DispatchResult | None:
    """Log the queue status and deliver one batch.

    Returns ``None`` when the run itself failed; the error is logged.
    """

    if batch_size is None:
        batch_size = get_settings().dispatch_batch_size
    owned_client = ExpoPushClient.from_settings() if push is None else None
    session = session_factory()
    try:
        context = build_notification_context(session, push=push or owned_client)
        counts = get_pending_notification_count(context)
        logger.info(
            "Notification queue status: %s pending, %s failed",
            counts.pending,
            counts.failed,
        )
        result = process_pending_alignment_notifications(context, batch_size)
    except Exception:
        logger.exception("Alignment notification processing failed")
        return None
    finally:
        session.close()
        if owned_client is not None:
            owned_client.close()

    logger.info(
        "Alignment notification processing completed: %s sent, %s failed",
        result.sent,
        result.failed,
    )
    return result


def run_retry_job(
    *,
    limit: int | None = None,
    session_factory: SessionFactory = SessionLocal,
) -> int:
    if limit is None:
        limit = get_settings().retry_limit
    session = session_factory()
    try:
        context = build_notification_context(session)
        retried = retry_failed_notifications(context, limit)
    finally:
        session.close()

    if retried > 0:
        logger.info("%s failed alignment notifications queued for retry", retried)
    return retried


def start_alignment_notification_scheduler(
    scheduler: BackgroundScheduler | None = None,
) -> Callable[[], None]:
    """Schedule the dispatch and retry jobs and start the scheduler.

    ``max_instances=1`` keeps dispatcher runs from overlapping. Returns a
    callable that stops both jobs.
    """

    settings = get_settings()
    scheduler = scheduler or BackgroundScheduler()
    dispatch_job = scheduler.add_job(
        run_dispatch_job,
        "interval",
        minutes=settings.dispatch_interval_minutes,
        id="alignment-notifications-dispatch",
        max_instances=1,
        coalesce=True,
        replace_existing=True,
    )
    retry_job = scheduler.add_job(
        run_retry_job,
        "interval",
        minutes=settings.retry_interval_minutes,
        id="alignment-notifications-retry",
        max_instances=1,
        coalesce=True,
        replace_existing=True,
    )
    if not scheduler.running:
        scheduler.start()
    logger.info(
        "Alignment notification jobs started (dispatch every %s min, retry every %s min)",
        settings.dispatch_interval_minutes,
        settings.retry_interval_minutes,
    )

    def stop() -> None:
        dispatch_job.remove()
        retry_job.remove()
        if scheduler.running:
            scheduler.shutdown(wait=False)
        logger.info("Alignment notification jobs stopped")

    return stop


def trigger_notification_processing(
    *,
    session_factory: SessionFactory = SessionLocal,
    push: PushTransport | None = None,
) -> DispatchResult | None:
    """Run one dispatcher batch on demand."""

    logger.info("Manual alignment notification processing triggered")
    return run_dispatch_job(
        batch_size=MANUAL_BATCH_SIZE, session_factory=session_factory, push=push
    )


__all__ = [
    "MANUAL_BATCH_SIZE",
    "run_dispatch_job",
    "run_retry_job",
    "start_alignment_notification_scheduler",
    "trigger_notification_processing",
]
