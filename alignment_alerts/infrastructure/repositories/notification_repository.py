"""Persistence helpers for delivered notification entries."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from alignment_alerts.domain.entities import Notification
from alignment_alerts.infrastructure.models import NotificationModel
from alignment_alerts.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class NotificationRepository:
    """Record and read back :class:`Notification` inbox entries."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel(
            id=notification.id,
            user_id=notification.user_id,
            type=notification.type,
            title=notification.title,
            body=notification.body,
            data=notification.data or {},
            is_read=notification.is_read,
            sent_at=ensure_app_naive_datetime(
                notification.sent_at or now_in_app_timezone()
            ),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_for_user(self, user_id: str, *, limit: int | None = 50) -> Sequence[Notification]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .order_by(NotificationModel.sent_at.desc(), NotificationModel.id.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            type=model.type,
            title=model.title,
            body=model.body,
            data=model.data or {},
            is_read=bool(model.is_read),
            sent_at=ensure_app_timezone(model.sent_at),
        )


__all__ = ["NotificationRepository"]
