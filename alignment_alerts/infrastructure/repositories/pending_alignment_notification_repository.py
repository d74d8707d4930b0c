"""Persistence helpers for the alignment-change notification queue."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Iterable

from sqlalchemy import func
from sqlalchemy.orm import Session

from alignment_alerts.domain.entities import (
    NOTIFICATION_STATUSES,
    PendingAlignmentNotification,
)
from alignment_alerts.infrastructure.models import PendingAlignmentNotificationModel
from alignment_alerts.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class PendingAlignmentNotificationRepository:
    """Queue operations over :class:`PendingAlignmentNotification` rows.

    Rows are only ever inserted or moved between statuses; nothing here
    deletes them.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def add_many(self, notifications: Sequence[PendingAlignmentNotification]) -> None:
        """Insert ``notifications`` in a single transaction."""

        if not notifications:
            return
        models = []
        for notification in notifications:
            model = PendingAlignmentNotificationModel()
            self._apply_entity_to_model(model, notification)
            models.append(model)
        self.session.add_all(models)
        self.session.commit()

    def get(self, notification_id: str) -> PendingAlignmentNotification | None:
        model = self.session.get(PendingAlignmentNotificationModel, notification_id)
        if model is None:
            return None
        return self._to_entity(model)

    def list_by_status(
        self, status: str, *, limit: int | None = None
    ) -> Sequence[PendingAlignmentNotification]:
        """Return rows in ``status`` oldest first, at most ``limit`` of them."""

        self._check_status(status)
        query = (
            self.session.query(PendingAlignmentNotificationModel)
            .filter(PendingAlignmentNotificationModel.status == status)
            .order_by(
                PendingAlignmentNotificationModel.created_at.asc(),
                PendingAlignmentNotificationModel.id.asc(),
            )
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def count_by_status(self, status: str) -> int:
        self._check_status(status)
        count = (
            self.session.query(func.count(PendingAlignmentNotificationModel.id))
            .filter(PendingAlignmentNotificationModel.status == status)
            .scalar()
        )
        return int(count or 0)

    def update_status(
        self,
        notification_id: str,
        status: str,
        *,
        sent_at: datetime | None = None,
    ) -> None:
        """Move a single row to ``status``, stamping ``sent_at`` when given."""

        self._check_status(status)
        values: dict = {PendingAlignmentNotificationModel.status: status}
        if sent_at is not None:
            values[PendingAlignmentNotificationModel.sent_at] = ensure_app_naive_datetime(
                sent_at
            )
        self.session.query(PendingAlignmentNotificationModel).filter(
            PendingAlignmentNotificationModel.id == notification_id
        ).update(values, synchronize_session=False)
        self.session.commit()

    def update_status_many(self, notification_ids: Iterable[str], status: str) -> int:
        """Move exactly the rows in ``notification_ids`` to ``status``."""

        self._check_status(status)
        ids = [notification_id for notification_id in notification_ids if notification_id]
        if not ids:
            return 0
        updated = (
            self.session.query(PendingAlignmentNotificationModel)
            .filter(PendingAlignmentNotificationModel.id.in_(ids))
            .update(
                {PendingAlignmentNotificationModel.status: status},
                synchronize_session=False,
            )
        )
        self.session.commit()
        return int(updated)

    @staticmethod
    def _check_status(status: str) -> None:
        if status not in NOTIFICATION_STATUSES:
            msg = f"Unknown notification status '{status}'"
            raise ValueError(msg)

    @staticmethod
    def _apply_entity_to_model(
        model: PendingAlignmentNotificationModel,
        notification: PendingAlignmentNotification,
    ) -> None:
        model.id = notification.id
        model.user_id = notification.user_id
        model.source_id = notification.source_id
        model.source_name = notification.source_name
        model.old_score = notification.old_score
        model.new_score = notification.new_score
        model.old_label = notification.old_label
        model.new_label = notification.new_label
        model.change_reason = notification.change_reason
        model.status = notification.status
        model.created_at = ensure_app_naive_datetime(
            notification.created_at or now_in_app_timezone()
        )
        model.sent_at = ensure_app_naive_datetime(notification.sent_at)

    @staticmethod
    def _to_entity(model: PendingAlignmentNotificationModel) -> PendingAlignmentNotification:
        return PendingAlignmentNotification(
            id=model.id,
            user_id=model.user_id,
            source_id=model.source_id,
            source_name=model.source_name,
            old_score=model.old_score,
            new_score=model.new_score,
            old_label=model.old_label,
            new_label=model.new_label,
            change_reason=model.change_reason,
            status=model.status,
            created_at=ensure_app_timezone(model.created_at),
            sent_at=ensure_app_timezone(model.sent_at),
        )


__all__ = ["PendingAlignmentNotificationRepository"]
