"""FastAPI dependency utilities."""

from collections.abc import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from alignment_alerts.application.use_cases.alignment_notifications import (
    AlignmentNotificationContext,
    PushTransport,
    build_notification_context,
)
from alignment_alerts.infrastructure.database import get_db
from alignment_alerts.infrastructure.push import ExpoPushClient


def get_push_client() -> Generator[PushTransport, None, None]:
    """Yield an Expo push client for the duration of the request."""

    client = ExpoPushClient.from_settings()
    try:
        yield client
    finally:
        client.close()


def get_notification_context(
    db: Session = Depends(get_db),
) -> AlignmentNotificationContext:
    """Return the queue collaborators bound to the request session."""

    return build_notification_context(db)


def get_dispatch_context(
    db: Session = Depends(get_db),
    push: PushTransport = Depends(get_push_client),
) -> AlignmentNotificationContext:
    return build_notification_context(db, push=push)
