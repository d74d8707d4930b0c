"""SQLAlchemy model for registered push devices."""

from sqlalchemy import Boolean, Column, DateTime, String
from sqlalchemy.sql import expression

from alignment_alerts.infrastructure.database import Base
from alignment_alerts.utils import now_in_app_naive_datetime


class UserDeviceModel(Base):
    """Device and push token registered by the mobile client."""

    __tablename__ = "user_device"

    id = Column(String(36), primary_key=True)
    user_id = Column(String(128), nullable=False, index=True)
    fcm_token = Column(String(255), nullable=False)
    device_type = Column(String(16), nullable=False)
    device_name = Column(String(120), nullable=True)
    is_active = Column(
        Boolean, nullable=False, default=True, server_default=expression.true()
    )
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    last_active = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["UserDeviceModel"]
