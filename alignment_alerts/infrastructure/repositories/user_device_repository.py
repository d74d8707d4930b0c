"""Read-only access to users' registered push devices."""

from __future__ import annotations

from sqlalchemy import true
from sqlalchemy.orm import Session

from alignment_alerts.domain.entities import UserDevice
from alignment_alerts.infrastructure.models import UserDeviceModel


class UserDeviceRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def list_active_for_user(self, user_id: str) -> list[UserDevice]:
        """Return the active devices registered by ``user_id``."""

        models = (
            self.session.query(UserDeviceModel)
            .filter(
                UserDeviceModel.user_id == user_id,
                UserDeviceModel.is_active == true(),
            )
            .order_by(UserDeviceModel.created_at, UserDeviceModel.id)
            .all()
        )
        return [
            UserDevice(fcm_token=model.fcm_token, device_type=model.device_type)
            for model in models
        ]


__all__ = ["UserDeviceRepository"]
