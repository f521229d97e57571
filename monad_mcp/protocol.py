"""
Adapter from the ``mcp`` SDK's low-level Server onto the Dispatcher.

Both transports (stdio and Streamable HTTP) serve the Server built here. The
SDK owns the wire framing; SDK-side input validation is disabled so the
Dispatcher's validator decides, and its failures come back as ordinary text
responses.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import mcp.types as types
from mcp.server import Server

from monad_mcp.config import SERVER_NAME, SERVER_VERSION
from monad_mcp.dispatcher import Dispatcher


def tool_descriptors(dispatcher: Dispatcher) -> List[types.Tool]:
    return [
        types.Tool(
            name=tool["name"],
            description=tool["description"],
            inputSchema=tool["inputSchema"],
        )
        for tool in dispatcher.list_tools()
    ]


async def handle_call(
    dispatcher: Dispatcher, name: str, arguments: Optional[Dict[str, Any]]
) -> List[types.TextContent]:
    envelope = await dispatcher.dispatch(name, arguments)
    return [types.TextContent(type="text", text=item["text"]) for item in envelope["content"]]


def build_server(dispatcher: Dispatcher) -> Server:
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def _list_tools() -> List[types.Tool]:
        return tool_descriptors(dispatcher)

    @server.call_tool(validate_input=False)
    async def _call_tool(name: str, arguments: Dict[str, Any]) -> List[types.TextContent]:
        return await handle_call(dispatcher, name, arguments)

    return server
