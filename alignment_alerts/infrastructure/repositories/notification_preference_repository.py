"""Read-only access to stored notification preferences."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from alignment_alerts.domain.entities import NotificationPreference
from alignment_alerts.infrastructure.models import UserNotificationPreferenceModel


class NotificationPreferenceRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_users(self, user_ids: Sequence[str]) -> list[NotificationPreference]:
        """Return the preferences stored for ``user_ids``.

        Users that never saved preferences have no entry in the result.
        """

        if not user_ids:
            return []
        models = (
            self.session.query(UserNotificationPreferenceModel)
            .filter(UserNotificationPreferenceModel.user_id.in_(list(user_ids)))
            .all()
        )
        return [
            NotificationPreference(
                user_id=model.user_id,
                notif_alignment_changes=bool(model.notif_alignment_changes),
            )
            for model in models
        ]


__all__ = ["NotificationPreferenceRepository"]
