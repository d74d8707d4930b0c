"""Collaborators used by the alignment-change notification use cases."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Protocol
from uuid import uuid4

from sqlalchemy.orm import Session

from alignment_alerts.domain.entities import (
    Notification,
    NotificationPreference,
    PendingAlignmentNotification,
    UserDevice,
)
from alignment_alerts.infrastructure.push import PushPayload
from alignment_alerts.infrastructure.repositories import (
    FollowedSourceRepository,
    NotificationPreferenceRepository,
    NotificationRepository,
    PendingAlignmentNotificationRepository,
    UserDeviceRepository,
)


class FollowerLookup(Protocol):
    def list_follower_ids(self, source_id: int) -> Sequence[str]: ...


class PreferenceLookup(Protocol):
    def list_for_users(self, user_ids: Sequence[str]) -> Sequence[NotificationPreference]: ...


class DeviceLookup(Protocol):
    def list_active_for_user(self, user_id: str) -> Sequence[UserDevice]: ...


class PushTransport(Protocol):
    def send(self, device: UserDevice, payload: PushPayload) -> Any: ...


class NotificationQueue(Protocol):
    def add_many(self, notifications: Sequence[PendingAlignmentNotification]) -> None: ...

    def list_by_status(
        self, status: str, *, limit: int | None = None
    ) -> Sequence[PendingAlignmentNotification]: ...

    def count_by_status(self, status: str) -> int: ...

    def update_status(
        self, notification_id: str, status: str, *, sent_at: datetime | None = None
    ) -> None: ...

    def update_status_many(self, notification_ids: Iterable[str], status: str) -> int: ...


class DeliveryLog(Protocol):
    def create(self, notification: Notification) -> Notification: ...


def _new_id() -> str:
    return str(uuid4())


@dataclass
class AlignmentNotificationContext:
    """Everything the queue operations read from or write to."""

    followers: FollowerLookup
    preferences: PreferenceLookup
    devices: DeviceLookup
    queue: NotificationQueue
    delivery_log: DeliveryLog
    push: PushTransport | None = None
    id_factory: Callable[[], str] = field(default=_new_id)
    rollback: Callable[[], None] | None = None


def build_notification_context(
    session: Session, *, push: PushTransport | None = None
) -> AlignmentNotificationContext:
    """Wire the SQLAlchemy repositories bound to ``session``.

    ``push`` is only needed by the dispatcher. ``rollback`` discards a failed
    write so the next record starts from a usable session.
    """

    return AlignmentNotificationContext(
        followers=FollowedSourceRepository(session),
        preferences=NotificationPreferenceRepository(session),
        devices=UserDeviceRepository(session),
        queue=PendingAlignmentNotificationRepository(session),
        delivery_log=NotificationRepository(session),
        push=push,
        rollback=session.rollback,
    )


__all__ = [
    "AlignmentNotificationContext",
    "DeliveryLog",
    "DeviceLookup",
    "FollowerLookup",
    "NotificationQueue",
    "PreferenceLookup",
    "PushTransport",
    "build_notification_context",
]
