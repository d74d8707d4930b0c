"""SQLAlchemy model for delivered in-app notifications."""

from sqlalchemy import Boolean, Column, DateTime, JSON, String, Text

from alignment_alerts.infrastructure.database import Base
from alignment_alerts.utils import now_in_app_naive_datetime


class NotificationModel(Base):
    """Database representation of a user's inbox entry."""

    __tablename__ = "notification"

    id = Column(String(36), primary_key=True)
    user_id = Column(String(128), nullable=False, index=True)
    type = Column(String(32), nullable=False)
    title = Column(String(255), nullable=False)
    body = Column(Text, nullable=False)
    data = Column(JSON, nullable=True)
    is_read = Column(Boolean, nullable=False, default=False, index=True)
    sent_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["NotificationModel"]
