"""Integration tests for the alignment notification endpoints."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[4]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from alignment_alerts.infrastructure import database
from alignment_alerts.infrastructure.models import (
    UserDeviceModel,
    UserFollowedSourceModel,
    UserNotificationPreferenceModel,
)
from alignment_alerts.infrastructure.repositories import PendingAlignmentNotificationRepository
from alignment_alerts.interfaces.api.dependencies import get_push_client


class StubPush:
    def __init__(self) -> None:
        self.tokens: list[str] = []

    def send(self, device, payload):
        self.tokens.append(device.fcm_token)
        return {"status": "ok"}


@pytest.fixture()
def push() -> StubPush:
    return StubPush()


@pytest.fixture()
def client(push: StubPush):
    """Return a test client bound to a clean database and a stub push transport."""

    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.Base.metadata.create_all(bind=database.engine)

    from main import create_app

    app = create_app()
    app.dependency_overrides[get_push_client] = lambda: push
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)


@pytest.fixture()
def followers() -> None:
    session = database.SessionLocal()
    try:
        session.add_all(
            [
                UserFollowedSourceModel(id="f-1", user_id="user-1", source_id=12),
                UserFollowedSourceModel(id="f-2", user_id="user-2", source_id=12),
                UserFollowedSourceModel(id="f-3", user_id="user-3", source_id=12),
                UserNotificationPreferenceModel(user_id="user-2", notif_alignment_changes=False),
                UserDeviceModel(id="d-1", user_id="user-1", fcm_token="token-1", device_type="ios"),
                UserDeviceModel(id="d-3", user_id="user-3", fcm_token="token-3", device_type="android"),
            ]
        )
        session.commit()
    finally:
        session.close()


def _stored_labels() -> set[tuple[str | None, str | None]]:
    session = database.SessionLocal()
    try:
        rows = PendingAlignmentNotificationRepository(session).list_by_status("pending")
        return {(row.old_label, row.new_label) for row in rows}
    finally:
        session.close()


def test_health_reports_database(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"server": "ok", "database": "ok"}


def test_queue_process_and_status_flow(client: TestClient, push: StubPush, followers) -> None:
    """Queue a change, inspect the queue and deliver it."""

    response = client.post(
        "/alignment-notifications/changes",
        json={
            "source_id": 12,
            "source_name": "Test Source",
            "old_score": 0,
            "new_score": 3,
            "old_label": "Karışık / Merkez",
            "reason": "Admin update",
        },
    )
    assert response.status_code == 201
    assert response.json() == {
        "queued": 2,
        "labels": {"tr": "İktidara Yakın", "en": "Pro-Government"},
    }
    assert _stored_labels() == {("Karışık / Merkez", "İktidara Yakın")}

    status_response = client.get("/alignment-notifications/status")
    assert status_response.json() == {"pending": 2, "failed": 0}

    process_response = client.post("/alignment-notifications/process", params={"batch_size": 50})
    assert process_response.status_code == 200
    assert process_response.json() == {"sent": 2, "failed": 0}
    assert sorted(push.tokens) == ["token-1", "token-3"]

    assert client.get("/alignment-notifications/status").json() == {"pending": 0, "failed": 0}


def test_queue_keeps_explicit_labels(client: TestClient, followers) -> None:
    response = client.post(
        "/alignment-notifications/changes",
        json={
            "source_id": 12,
            "source_name": "Test Source",
            "new_score": -4,
            "new_label": "Custom",
            "reason": "Recalculated",
        },
    )

    assert response.json()["queued"] == 2
    assert _stored_labels() == {(None, "Custom")}


def test_queue_for_source_without_followers(client: TestClient) -> None:
    response = client.post(
        "/alignment-notifications/changes",
        json={"source_id": 99, "source_name": "Nobody", "new_score": 1},
    )

    assert response.status_code == 201
    assert response.json()["queued"] == 0


@pytest.mark.parametrize(
    "payload",
    [
        {"source_id": 12, "source_name": "Test Source", "new_score": 6},
        {"source_id": 12, "source_name": "Test Source", "new_score": 1, "old_score": -9},
        {"source_id": 12, "source_name": "", "new_score": 1},
        {"source_id": 12, "source_name": "Test Source", "new_score": 1, "confidence": 1.5},
        {"source_id": 12, "source_name": "Test Source", "new_score": 2.5},
    ],
)
def test_queue_rejects_invalid_payloads(client: TestClient, payload) -> None:
    response = client.post("/alignment-notifications/changes", json=payload)

    assert response.status_code == 422


def test_queue_reports_uncertain_labels_for_low_confidence(client: TestClient, followers) -> None:
    response = client.post(
        "/alignment-notifications/changes",
        json={"source_id": 12, "source_name": "Test Source", "new_score": -4, "confidence": 0.3},
    )

    assert response.status_code == 201
    assert response.json()["labels"] == {"tr": "Belirsiz", "en": "Uncertain"}
    assert _stored_labels() == {(None, "Belirsiz")}


def test_retry_endpoint_requeues_failed_rows(client: TestClient, followers) -> None:
    client.post(
        "/alignment-notifications/changes",
        json={"source_id": 12, "source_name": "Test Source", "new_score": 2},
    )
    session = database.SessionLocal()
    try:
        repository = PendingAlignmentNotificationRepository(session)
        ids = [row.id for row in repository.list_by_status("pending")]
        repository.update_status_many(ids, "failed")
    finally:
        session.close()

    assert client.get("/alignment-notifications/status").json() == {"pending": 0, "failed": 2}

    response = client.post("/alignment-notifications/retry", params={"limit": 1})

    assert response.status_code == 200
    assert response.json() == {"retried": 1}
    assert client.get("/alignment-notifications/status").json() == {"pending": 1, "failed": 1}


def test_process_rejects_non_positive_batch_size(client: TestClient) -> None:
    response = client.post("/alignment-notifications/process", params={"batch_size": 0})

    assert response.status_code == 422
