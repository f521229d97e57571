"""MCP stdio entry point."""

from __future__ import annotations

import asyncio
import logging
import sys

from mcp.server.stdio import stdio_server

from monad_mcp.catalog import build_default_registry
from monad_mcp.chain_api import MonadRpcClient
from monad_mcp.config import MonadConfig, default_config
from monad_mcp.dispatcher import Dispatcher
from monad_mcp.logging_config import configure_logging
from monad_mcp.protocol import build_server

logger = logging.getLogger(__name__)


async def serve(config: MonadConfig = default_config) -> None:
    """Serve tools over stdin/stdout until the client closes the channel."""
    client = MonadRpcClient(config)
    dispatcher = Dispatcher(build_default_registry(), client)
    server = build_server(dispatcher)
    try:
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Monad testnet MCP Server running on stdio")
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        await client.aclose()


def main() -> None:
    configure_logging(default_config)
    try:
        asyncio.run(serve(default_config))
    except KeyboardInterrupt:
        pass
    except Exception:
        logger.exception("Fatal error in main()")
        sys.exit(1)
