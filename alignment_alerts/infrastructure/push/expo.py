"""Push delivery through the Expo push notification service."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from alignment_alerts.config import Settings, get_settings
from alignment_alerts.domain.entities import UserDevice

logger = logging.getLogger(__name__)


class PushDeliveryError(RuntimeError):
    """Raised when a push message could not be handed to the provider."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class PushPayload:
    """Title, body and data map shown by the mobile client."""

    title: str
    body: str
    data: dict[str, str] = field(default_factory=dict)


def build_expo_message(device: UserDevice, payload: PushPayload) -> dict[str, Any]:
    return {
        "to": device.fcm_token,
        "sound": "default",
        "title": payload.title,
        "body": payload.body,
        "data": dict(payload.data),
    }


def _describe_ticket_error(ticket: dict[str, Any]) -> str:
    message = ticket.get("message") or "Expo rejected the push message"
    details = ticket.get("details")
    if isinstance(details, dict) and details.get("error"):
        return f"{message} ({details['error']})"
    return str(message)


class ExpoPushClient:
    """Send push notifications to Expo push tokens over HTTP."""

    def __init__(
        self,
        *,
        url: str,
        access_token: str | None = None,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        self.url = url
        self.access_token = access_token
        self._client = client or httpx.Client(timeout=httpx.Timeout(timeout, connect=5.0))

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "ExpoPushClient":
        settings = settings or get_settings()
        return cls(
            url=settings.expo_push_url,
            access_token=settings.expo_access_token,
            timeout=settings.push_timeout_seconds,
        )

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    def send(self, device: UserDevice, payload: PushPayload) -> dict[str, Any]:
        """Deliver ``payload`` to ``device`` and return the Expo push ticket.

        Raises :class:`PushDeliveryError` for transport errors, non-2xx
        responses and error tickets.
        """

        message = build_expo_message(device, payload)
        try:
            response = self._client.post(self.url, json=[message], headers=self._headers())
        except httpx.HTTPError as exc:
            raise PushDeliveryError(f"Expo push request failed: {exc}") from exc

        if response.is_error:
            logger.error(
                "Expo push API responded with status %s: %s",
                response.status_code,
                response.text[:500],
            )
            raise PushDeliveryError(
                f"Expo push API responded with status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise PushDeliveryError("Expo push API returned an unreadable body") from exc

        tickets = body.get("data") if isinstance(body, dict) else None
        if isinstance(tickets, dict):
            tickets = [tickets]
        if not tickets:
            raise PushDeliveryError("Expo push API returned no push ticket")

        ticket = tickets[0]
        if ticket.get("status") == "error":
            raise PushDeliveryError(_describe_ticket_error(ticket))

        logger.debug(
            "Push delivered to %s device (ticket %s)", device.device_type, ticket.get("id")
        )
        return ticket

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "ExpoPushClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["ExpoPushClient", "PushDeliveryError", "PushPayload", "build_expo_message"]
