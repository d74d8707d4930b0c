"""Unit tests for the Expo push transport."""

from __future__ import annotations

import json

import httpx
import pytest

from alignment_alerts.domain.entities import UserDevice
from alignment_alerts.infrastructure.push import ExpoPushClient, PushDeliveryError, PushPayload

EXPO_URL = "https://exp.host/--/api/v2/push/send"
DEVICE = UserDevice(fcm_token="ExponentPushToken[abc]", device_type="ios")
PAYLOAD = PushPayload(
    title="Kaynak Durumu Güncellendi",
    body="Test Source kaynağının editoryal durumu güncellendi.",
    data={"type": "alignment_change", "sourceId": "1"},
)


def _client(handler, *, access_token: str | None = None) -> ExpoPushClient:
    return ExpoPushClient(
        url=EXPO_URL,
        access_token=access_token,
        client=httpx.Client(transport=httpx.MockTransport(handler)),
    )


def test_send_posts_expo_message_and_returns_ticket() -> None:
    captured: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = str(request.url)
        captured["auth"] = request.headers.get("Authorization")
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json={"data": [{"status": "ok", "id": "ticket-1"}]})

    with _client(handler, access_token="expo-secret") as client:
        ticket = client.send(DEVICE, PAYLOAD)

    assert ticket == {"status": "ok", "id": "ticket-1"}
    assert captured["url"] == EXPO_URL
    assert captured["auth"] == "Bearer expo-secret"
    assert captured["body"] == [
        {
            "to": "ExponentPushToken[abc]",
            "sound": "default",
            "title": PAYLOAD.title,
            "body": PAYLOAD.body,
            "data": {"type": "alignment_change", "sourceId": "1"},
        }
    ]


def test_send_without_access_token_omits_authorization() -> None:
    seen: list[str | None] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.headers.get("Authorization"))
        return httpx.Response(200, json={"data": {"status": "ok"}})

    _client(handler).send(DEVICE, PAYLOAD)

    assert seen == [None]


def test_http_error_status_raises_push_delivery_error(caplog) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="unavailable")

    with caplog.at_level("ERROR"), pytest.raises(PushDeliveryError) as excinfo:
        _client(handler).send(DEVICE, PAYLOAD)

    assert excinfo.value.status_code == 503
    assert "status 503" in caplog.text


def test_error_ticket_raises_push_delivery_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "data": [
                    {
                        "status": "error",
                        "message": "The recipient device is not registered",
                        "details": {"error": "DeviceNotRegistered"},
                    }
                ]
            },
        )

    with pytest.raises(PushDeliveryError, match="DeviceNotRegistered"):
        _client(handler).send(DEVICE, PAYLOAD)


def test_transport_error_raises_push_delivery_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(PushDeliveryError):
        _client(handler).send(DEVICE, PAYLOAD)


def test_missing_ticket_raises_push_delivery_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"data": []})

    with pytest.raises(PushDeliveryError):
        _client(handler).send(DEVICE, PAYLOAD)
