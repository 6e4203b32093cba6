import httpx
from fastapi.testclient import TestClient

from janproxy.main import app

client = TestClient(app)

PATH = "/api/bihinkanri-proxy"


def test_missing_jan_code_returns_usage_hint():
    resp = client.get(PATH)
    assert resp.status_code == 400
    detail = resp.json()["detail"]
    assert detail["error"]
    assert detail["usage"] == "?jan_code=4901234567890"


def test_malformed_jan_code_echoes_input():
    resp = client.get(PATH, params={"jan_code": "abc"})
    assert resp.status_code == 400
    detail = resp.json()["detail"]
    assert "8桁または13桁" in detail["error"]
    assert detail["received"] == "abc"


def test_upstream_timeout_returns_fallback(upstream):
    upstream.raise_error(httpx.ReadTimeout)

    resp = client.get(PATH, params={"jan_code": "4901234567890"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["janCode"] == "4901234567890"
    assert body["dataSource"] == "fallback"
    assert body["timestamp"]
    # last digit 0 -> display device template
    assert body["data"]["specs"]["画面サイズ"] == "20インチ"
    assert "リフレッシュレート" in body["data"]["specs"]


def test_real_data_is_normalized(upstream):
    upstream.respond(
        json={
            "product_name": "ワイヤレスマウス",
            "manufacturer_name": "ロジクール",
            "model_number": "M705",
            "specs": {"接続方式": "USBレシーバー"},
        }
    )

    resp = client.get(PATH, params={"jan_code": "4943765-041234"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["dataSource"] == "api"
    assert body["janCode"] == "4943765-041234"
    assert body["normalizedJanCode"] == "4943765041234"
    assert body["data"] == {
        "name": "ワイヤレスマウス",
        "manufacturer_name": "ロジクール",
        "model_name": "M705",
        "specs": {"接続方式": "USBレシーバー"},
    }
    assert upstream.requests[0].url.params["jan_code"] == "4943765041234"


def test_debug_includes_raw_payload(upstream):
    upstream.respond(json={})

    resp = client.get(PATH, params={"jan_code": "49123451", "debug": "true"})

    body = resp.json()
    assert body["dataSource"] == "mock"
    assert body["raw"] == {}


def test_post_not_allowed():
    resp = client.post(PATH, params={"jan_code": "4901234567890"})
    assert resp.status_code == 405


def test_cors_preflight():
    resp = client.options(
        PATH,
        headers={
            "Origin": "https://example.test",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert resp.status_code == 200
    assert "GET" in resp.headers["access-control-allow-methods"]
