"""
Tests for the FastAPI routes and the /session WebSocket protocol.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from hudsummary import server
from hudsummary.config import AppConfig, ConfigError
from hudsummary.server import create_app

TEST_API_KEY = "test-key"
AUTH = {"x-api-key": TEST_API_KEY}


@pytest.fixture
def client(config):
    return TestClient(create_app(config))


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "package": "com.example.hudsummary", "active_sessions": 0}


def test_summarize_korean(client):
    r = client.post("/summarize", json={"text": "오늘 날씨가 정말 좋네요 완전 최고"})
    assert r.status_code == 200
    data = r.json()
    assert data["summary"] == "키워드 요약: 날씨가, 좋네요, 완전, 최고"
    assert data["keywords"] == ["날씨가", "좋네요", "완전", "최고"]
    assert data["is_korean"] is True


def test_summarize_top_k_and_fallback(client):
    r = client.post("/summarize", json={"text": "apple banana cherry", "top_k": 1})
    assert r.json()["summary"] == "Summary: banana"

    r = client.post("/summarize", json={"text": "is a the"})
    assert r.json() == {"summary": "is a the", "keywords": [], "is_korean": False}


def test_summarize_validation(client):
    assert client.post("/summarize", json={}).status_code == 422
    assert client.post("/summarize", json={"text": "x", "top_k": 0}).status_code == 422


def test_session_flow(client):
    with client.websocket_connect("/session", headers=AUTH) as ws:
        welcome = ws.receive_json()
        assert welcome["type"] == "display"
        assert welcome["view"] == "main"
        assert welcome["durationMs"] == 2500

        assert client.get("/health").json()["active_sessions"] == 1

        # 부분 인식은 표시 요청을 만들지 않으므로 다음 메시지는 최종 인식 결과
        ws.send_json({"type": "transcription", "text": "The quick", "isFinal": False})
        ws.send_json({"type": "transcription", "text": "", "isFinal": True})
        ws.send_json({
            "type": "transcription",
            "text": "The quick brown fox jumps over the lazy dog repeatedly",
            "isFinal": True,
        })
        assert ws.receive_json() == {
            "type": "display",
            "text": "Summary: repeatedly, brown, jumps, quick, lazy, dog",
            "view": "main",
            "durationMs": 3000,
        }


def test_session_reports_malformed_messages(client):
    with client.websocket_connect("/session", headers=AUTH) as ws:
        ws.receive_json()

        ws.send_text("not json")
        assert ws.receive_json()["type"] == "error"

        ws.send_text("[1, 2, 3]")
        assert ws.receive_json()["type"] == "error"

        ws.send_json({"type": "gesture"})
        error = ws.receive_json()
        assert error["type"] == "error"
        assert "gesture" in error["message"]

        ws.send_json({"type": "transcription", "text": "hi", "isFinal": "maybe"})
        assert ws.receive_json()["type"] == "error"

        # 오류 후에도 세션은 유지된다
        ws.send_json({"type": "battery", "level": 77})
        ws.send_json({"type": "transcription", "text": "apple pear", "isFinal": True})
        assert ws.receive_json()["text"] == "Summary: apple, pear"


def test_session_api_key_query_param(client):
    with client.websocket_connect(f"/session?api_key={TEST_API_KEY}") as ws:
        assert ws.receive_json()["type"] == "display"


def test_session_rejects_wrong_api_key(client):
    with pytest.raises(WebSocketDisconnect) as exc_info:
        with client.websocket_connect("/session", headers={"x-api-key": "wrong"}):
            pass
    assert exc_info.value.code == 1008


def test_session_rejects_missing_api_key(client):
    with pytest.raises(WebSocketDisconnect) as exc_info:
        with client.websocket_connect("/session"):
            pass
    assert exc_info.value.code == 1008


def test_session_echo_original():
    config = AppConfig(package_name="p", api_key=TEST_API_KEY, echo_original=True)
    client = TestClient(create_app(config))
    with client.websocket_connect("/session", headers=AUTH) as ws:
        ws.receive_json()
        ws.send_json({"type": "transcription", "text": "회의 회의 일정", "isFinal": True})
        first = ws.receive_json()
        second = ws.receive_json()
        assert first["text"] == "키워드 요약: 회의, 일정"
        assert second == {
            "type": "display",
            "text": "You said: 회의 회의 일정",
            "view": "secondary",
            "durationMs": 2000,
        }


@pytest.fixture
def captured_run(clean_env, monkeypatch, tmp_path):
    import uvicorn

    calls = []
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(uvicorn, "run", lambda **kwargs: calls.append(kwargs))
    return calls


def test_main_runs_uvicorn(captured_run):
    server.main(["--package-name", "p", "--api-key", "k", "--port", "4001", "--host", "127.0.0.1"])
    assert len(captured_run) == 1
    kwargs = captured_run[0]
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 4001
    assert kwargs["log_level"] == "info"
    assert kwargs["app"].state.config.package_name == "p"
    assert "ssl_certfile" not in kwargs


def test_main_requires_both_ssl_files(captured_run):
    with pytest.raises(ValueError, match="ssl"):
        server.main(["--package-name", "p", "--api-key", "k", "--ssl-certfile", "cert.pem"])
    assert captured_run == []


def test_main_passes_ssl_and_proxy_settings(captured_run):
    server.main([
        "--package-name", "p",
        "--api-key", "k",
        "--ssl-certfile", "cert.pem",
        "--ssl-keyfile", "key.pem",
        "--forwarded-allow-ips", "10.0.0.1",
    ])
    kwargs = captured_run[0]
    assert kwargs["ssl_certfile"] == "cert.pem"
    assert kwargs["ssl_keyfile"] == "key.pem"
    assert kwargs["forwarded_allow_ips"] == "10.0.0.1"


def test_main_fails_without_credentials(captured_run):
    with pytest.raises(ConfigError):
        server.main([])
