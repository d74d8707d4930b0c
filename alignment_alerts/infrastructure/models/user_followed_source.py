"""SQLAlchemy model for the user/source follow relationship."""

from sqlalchemy import Column, DateTime, Integer, String, UniqueConstraint

from alignment_alerts.infrastructure.database import Base
from alignment_alerts.utils import now_in_app_naive_datetime


class UserFollowedSourceModel(Base):
    """A user following a news source. Owned by the accounts service."""

    __tablename__ = "user_followed_source"
    __table_args__ = (UniqueConstraint("user_id", "source_id"),)

    id = Column(String(36), primary_key=True)
    user_id = Column(String(128), nullable=False, index=True)
    source_id = Column(Integer, nullable=False, index=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["UserFollowedSourceModel"]
