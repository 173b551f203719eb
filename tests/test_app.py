import pytest
import responses
from fastapi.testclient import TestClient

import app as gateway
from tools import TOOL_SPECS

from conftest import API


@pytest.fixture
def http():
    return TestClient(gateway.app)


def test_health(http):
    r = http.get("/health")

    assert r.status_code == 200
    body = r.json()
    assert body["ok"] is True
    assert body["service"] == gateway.SERVICE_NAME


def test_root_reports_tool_count(http):
    body = http.get("/").json()

    assert body["tools_available"] == 25
    assert body["mcp"] == "/mcp"


def test_tools_listing_is_the_catalog_verbatim(http):
    r = http.get("/tools")

    assert r.status_code == 200
    assert r.json()["tools"] == TOOL_SPECS


def test_call_without_credential_returns_error_envelope(http, monkeypatch):
    monkeypatch.setattr(gateway.invoker, "api_key", None)

    r = http.post("/tools/notion_get_page", json={"page_id": "p1"})

    assert r.status_code == 200
    assert r.json() == {
        "content": [{"type": "text", "text": "Error: NOTION_API_KEY is required"}],
        "isError": True,
    }


def test_call_with_per_call_credential(http, monkeypatch, mocked):
    monkeypatch.setattr(gateway.invoker, "api_key", None)
    mocked.add(responses.GET, f"{API}/users/me", json={"object": "user", "id": "bot"})

    r = http.post("/tools/notion_get_bot_user", json={"NOTION_API_KEY": "tok"})

    body = r.json()
    assert body["isError"] is False
    assert '"id": "bot"' in body["content"][0]["text"]
    assert mocked.calls[0].request.headers["Authorization"] == "Bearer tok"


def test_call_unknown_tool(http, monkeypatch):
    monkeypatch.setattr(gateway.invoker, "api_key", "k")

    body = http.post("/tools/notion_teleport", json={}).json()

    assert body["isError"] is True
    assert body["content"][0]["text"] == "Error: Unknown tool: notion_teleport"
