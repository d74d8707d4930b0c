"""SQLAlchemy model for per-user notification preferences."""

from sqlalchemy import Boolean, Column, DateTime, String
from sqlalchemy.sql import expression

from alignment_alerts.infrastructure.database import Base
from alignment_alerts.utils import now_in_app_naive_datetime


class UserNotificationPreferenceModel(Base):
    """Notification opt-ins; every flag defaults to enabled."""

    __tablename__ = "user_notification_preference"

    user_id = Column(String(128), primary_key=True)
    notif_followed_sources = Column(
        Boolean, nullable=False, default=True, server_default=expression.true()
    )
    notif_daily_digest = Column(
        Boolean, nullable=False, default=True, server_default=expression.true()
    )
    notif_breaking_news = Column(
        Boolean, nullable=False, default=True, server_default=expression.true()
    )
    notif_alignment_changes = Column(
        Boolean, nullable=False, default=True, server_default=expression.true()
    )
    updated_at = Column(
        DateTime(),
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )


__all__ = ["UserNotificationPreferenceModel"]
