"""Domain entity for a registered push-capable device."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserDevice:
    fcm_token: str
    device_type: str


__all__ = ["UserDevice"]
