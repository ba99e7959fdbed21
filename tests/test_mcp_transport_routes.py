"""Route-level tests for the HTTP MCP transport."""

import json

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.dependencies import get_gateway
from src.mcp_transport.router import router as mcp_router


def _tool_call_payload(name: str, arguments: dict | None = None) -> dict:
    return {
        "jsonrpc": "2.0",
        "id": "req-2",
        "method": "tools/call",
        "params": {
            "name": name,
            "arguments": arguments or {},
        },
    }


@pytest.fixture
def client(gateway):
    app = FastAPI()
    app.include_router(mcp_router)

    async def mock_get_gateway():
        return gateway

    app.dependency_overrides[get_gateway] = mock_get_gateway
    return TestClient(app)


def test_tools_call_round_trip(client, fizzy):
    fizzy.reply(201, headers={"Location": "/1/cards/19.json"})

    response = client.post(
        "/mcp",
        json=_tool_call_payload("fizzy_create_card", {"board_id": "b1", "title": "New"}),
    )

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == "req-2"
    assert "error" not in body
    assert body["result"]["isError"] is False
    assert json.loads(body["result"]["content"][0]["text"])["cardNumber"] == "19"


def test_tools_call_validation_error(client, fizzy):
    response = client.post("/mcp", json=_tool_call_payload("fizzy_create_card", {"board_id": "b1"}))

    body = response.json()
    assert body["result"]["isError"] is True
    assert "title" in body["result"]["content"][0]["text"]
    assert fizzy.requests == []


def test_notification_returns_202(client):
    response = client.post("/mcp", json={"jsonrpc": "2.0", "method": "notifications/initialized"})

    assert response.status_code == 202
    assert response.content == b""


def test_malformed_json_is_parse_error(client):
    response = client.post("/mcp", content=b"{oops", headers={"Content-Type": "application/json"})

    body = response.json()
    assert body["id"] is None
    assert body["error"]["code"] == -32700


def test_unknown_method(client):
    response = client.post("/mcp", json={"jsonrpc": "2.0", "id": 1, "method": "prompts/list"})

    assert response.json()["error"]["code"] == -32601


def test_undecodable_body_is_parse_error(client):
    response = client.post("/mcp", content=b"\xff\xfe", headers={"Content-Type": "application/json"})

    assert response.status_code == 200
    assert response.json()["error"]["code"] == -32700


def test_unknown_method_notification_returns_202(client):
    response = client.post("/mcp", json={"jsonrpc": "2.0", "method": "prompts/list"})

    assert response.status_code == 202
