"""Read-only access to the user/source follow relationship."""

from __future__ import annotations

from sqlalchemy.orm import Session

from alignment_alerts.infrastructure.models import UserFollowedSourceModel


class FollowedSourceRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def list_follower_ids(self, source_id: int) -> list[str]:
        """Return the ids of every user following ``source_id``."""

        rows = (
            self.session.query(UserFollowedSourceModel.user_id)
            .filter(UserFollowedSourceModel.source_id == source_id)
            .order_by(UserFollowedSourceModel.created_at, UserFollowedSourceModel.id)
            .all()
        )
        return [user_id for (user_id,) in rows]


__all__ = ["FollowedSourceRepository"]
