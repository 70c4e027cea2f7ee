from fastapi.testclient import TestClient

import main


def test_health_ok():
    client = TestClient(main.app)
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["ok"] is True


def test_root_reports_service():
    client = TestClient(main.app)
    resp = client.get("/")
    assert resp.status_code == 200
    body = resp.json()
    assert body["service"] == "portfolio-api"
    assert "commit" in body


def test_request_id_is_propagated():
    client = TestClient(main.app)
    resp = client.get("/health", headers={"X-Request-Id": "req-123"})
    assert resp.headers["X-Request-Id"] == "req-123"

    resp = client.get("/health")
    assert resp.headers["X-Request-Id"]
