"""SQLAlchemy model for the alignment-change notification queue."""

from sqlalchemy import Column, DateTime, Index, Integer, String, Text

from alignment_alerts.domain.entities import NOTIFICATION_STATUS_PENDING
from alignment_alerts.infrastructure.database import Base
from alignment_alerts.utils import now_in_app_naive_datetime


class PendingAlignmentNotificationModel(Base):
    """Queue row holding one follower's copy of an alignment change."""

    __tablename__ = "pending_alignment_notification"
    __table_args__ = (
        Index("pending_alignment_notif_status_idx", "status", "created_at"),
    )

    id = Column(String(36), primary_key=True)
    user_id = Column(String(128), nullable=False, index=True)
    source_id = Column(Integer, nullable=False, index=True)
    source_name = Column(String(255), nullable=False)
    old_score = Column(Integer, nullable=True)
    new_score = Column(Integer, nullable=False)
    old_label = Column(String(64), nullable=True)
    new_label = Column(String(64), nullable=True)
    change_reason = Column(Text, nullable=True)
    status = Column(String(16), nullable=False, default=NOTIFICATION_STATUS_PENDING)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    sent_at = Column(DateTime(), nullable=True)


__all__ = ["PendingAlignmentNotificationModel"]
