from fastapi.testclient import TestClient

import main


def test_missing_query_param_uses_error_envelope():
    client = TestClient(main.app)
    resp = client.get("/v1/i18n/resolve")
    assert resp.status_code == 422
    body = resp.json()
    assert body["ok"] is False
    assert body["error"]["code"] == "SITE-422"
    assert "path" in body["error"]["message"]
    assert body["error"]["retryable"] is False


def test_invalid_bool_param_is_rejected():
    client = TestClient(main.app)
    resp = client.get("/v1/posts", params={"include_drafts": "perhaps"})
    assert resp.status_code == 422
    assert resp.json()["error"]["code"] == "SITE-422"


def test_unknown_route_uses_error_envelope():
    client = TestClient(main.app)
    resp = client.get("/nothing-here", headers={"X-Request-Id": "req-404"})
    assert resp.status_code == 404
    body = resp.json()
    assert body["error"]["code"] == "SITE-404"
    assert body["request_id"] == "req-404"
