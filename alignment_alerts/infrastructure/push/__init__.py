"""Push notification transports."""

from .expo import ExpoPushClient, PushDeliveryError, PushPayload, build_expo_message

__all__ = ["ExpoPushClient", "PushDeliveryError", "PushPayload", "build_expo_message"]
