from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from telemetry_hub.main.app import create_app


@pytest.fixture()
def client(clean_env):
    app = create_app()

    with TestClient(app) as test_client:
        yield test_client


def test_health_is_waiting_before_first_ingest(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "waiting"
    assert body["store"]["ingest_count"] == 0


def test_health_is_receiving_after_ingest(client):
    client.post("/api/iot-data", json={"ambient_temp": 22.5})

    body = client.get("/health").json()

    assert body["status"] == "receiving"
    assert body["store"]["ingest_count"] == 1
    assert body["store"]["history_size"] == 1


def test_info_endpoint(client):
    response = client.get("/info")

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Telemetry Hub"
    assert body["rules"]["history_capacity"] == 14400
