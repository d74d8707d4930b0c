"""Domain entity representing an entry in a user's notification inbox."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

NOTIFICATION_TYPE_ALIGNMENT = "alignment"


@dataclass
class Notification:
    """Delivered message recorded for auditing and in-app display."""

    id: str
    user_id: str
    type: str
    title: str
    body: str
    data: dict[str, Any] = field(default_factory=dict)
    is_read: bool = False
    sent_at: datetime | None = None


__all__ = ["Notification", "NOTIFICATION_TYPE_ALIGNMENT"]
