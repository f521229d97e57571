import pytest

from monad_mcp.catalog import build_default_registry
from monad_mcp.dispatcher import Dispatcher
from monad_mcp.metrics import MetricsRecorder
from monad_mcp.protocol import build_server, handle_call, tool_descriptors

ADDRESS = "0x742d35Cc6634C0532925a3b844Bc454e4438f44e"


class StubChainClient:
    async def get_transaction_count(self, address):
        return 11


@pytest.fixture
def dispatcher():
    return Dispatcher(build_default_registry(), StubChainClient(), metrics=MetricsRecorder())


def test_tool_descriptors(dispatcher):
    tools = tool_descriptors(dispatcher)
    assert [tool.name for tool in tools] == [
        "get-mon-balance",
        "get-gas-price",
        "get-transaction-count",
        "sign-and-send-transaction",
    ]
    assert tools[3].inputSchema["required"] == ["privateKey", "to", "value"]


@pytest.mark.asyncio
async def test_handle_call_returns_text_content(dispatcher):
    content = await handle_call(dispatcher, "get-transaction-count", {"address": ADDRESS})
    assert len(content) == 1
    assert content[0].type == "text"
    assert content[0].text == f"Transaction count for {ADDRESS}: 11"


@pytest.mark.asyncio
async def test_handle_call_unknown_tool(dispatcher):
    content = await handle_call(dispatcher, "nope", None)
    assert content[0].text == "Unknown tool: nope"


def test_build_server(dispatcher):
    server = build_server(dispatcher)
    assert server.name == "monad-mcp"
