import pytest
from fastapi.testclient import TestClient

from monad_mcp.catalog import build_default_registry
from monad_mcp.dispatcher import Dispatcher
from monad_mcp.metrics import MetricsRecorder
from monad_mcp.server import create_app

ADDRESS = "0x742d35Cc6634C0532925a3b844Bc454e4438f44e"
MCP_HEADERS = {"Accept": "application/json, text/event-stream"}


class StubChainClient:
    async def get_balance(self, address):
        return 2 * 10**18

    async def get_transaction_count(self, address):
        return 5


@pytest.fixture
def client():
    dispatcher = Dispatcher(build_default_registry(), StubChainClient(), metrics=MetricsRecorder())
    with TestClient(create_app(dispatcher)) as test_client:
        yield test_client


def _rpc(client, rpc_id, method, params=None):
    payload = {"jsonrpc": "2.0", "id": rpc_id, "method": method}
    if params is not None:
        payload["params"] = params
    resp = client.post("/mcp/", json=payload, headers=MCP_HEADERS)
    assert resp.status_code == 200
    return resp.json()


def test_health_route(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_tools_listing(client):
    resp = client.get("/tools")
    assert resp.status_code == 200
    names = [tool["name"] for tool in resp.json()["tools"]]
    assert names == [
        "get-mon-balance",
        "get-gas-price",
        "get-transaction-count",
        "sign-and-send-transaction",
    ]


def test_metrics_route_counts_tool_calls(client):
    _rpc(client, 1, "tools/call", {"name": "get-transaction-count", "arguments": {"address": ADDRESS}})
    snap = client.get("/metrics").json()
    assert snap["tool_success"] == {"get-transaction-count": 1}
    assert len(snap["recent_calls"]) == 1


def test_mcp_initialize(client):
    body = _rpc(
        client,
        1,
        "initialize",
        {"protocolVersion": "2025-03-26", "capabilities": {}, "clientInfo": {"name": "test", "version": "0.0.1"}},
    )
    assert body["id"] == 1
    assert body["result"]["serverInfo"]["name"] == "monad-mcp"
    assert "tools" in body["result"]["capabilities"]


def test_mcp_list_tools(client):
    body = _rpc(client, 2, "tools/list")
    tools = body["result"]["tools"]
    assert [tool["name"] for tool in tools][0] == "get-mon-balance"
    assert tools[0]["inputSchema"]["required"] == ["address"]


def test_mcp_call_tool(client):
    body = _rpc(client, 3, "tools/call", {"name": "get-mon-balance", "arguments": {"address": ADDRESS}})
    content = body["result"]["content"]
    assert len(content) == 1
    assert content[0]["type"] == "text"
    assert content[0]["text"] == f"Balance for {ADDRESS}: 2 MON"


def test_mcp_validation_failure_is_a_tool_result(client):
    body = _rpc(client, 4, "tools/call", {"name": "get-mon-balance", "arguments": {"address": "oops"}})
    assert "error" not in body
    text = body["result"]["content"][0]["text"]
    assert text.startswith("Invalid arguments for get-mon-balance")
    assert "address" in text


def test_mcp_unknown_tool_is_a_tool_result(client):
    body = _rpc(client, 5, "tools/call", {"name": "get-btc-balance", "arguments": {}})
    assert body["result"]["content"][0]["text"] == "Unknown tool: get-btc-balance"
