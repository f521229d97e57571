"""
HTTP entry point.

Serves the same MCP Server as the stdio transport over the SDK's Streamable
HTTP transport (stateless, JSON responses) at ``/mcp/``, alongside a few
read-only operational routes. Run with ``uvicorn monad_mcp.server:app``.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager

from monad_mcp.catalog import build_default_registry
from monad_mcp.chain_api import MonadRpcClient
from monad_mcp.config import SERVER_VERSION, MonadConfig, default_config
from monad_mcp.dispatcher import Dispatcher
from monad_mcp.logging_config import configure_logging
from monad_mcp.protocol import build_server

logger = logging.getLogger(__name__)


def create_app(
    dispatcher: Optional[Dispatcher] = None,
    config: MonadConfig = default_config,
) -> FastAPI:
    """Build the FastAPI app; a dispatcher backed by a fresh chain client is created if none is given."""
    owned_client: Optional[MonadRpcClient] = None
    if dispatcher is None:
        owned_client = MonadRpcClient(config)
        dispatcher = Dispatcher(build_default_registry(), owned_client)

    # A session manager runs once, so each app gets its own.
    session_manager = StreamableHTTPSessionManager(
        app=build_server(dispatcher),
        json_response=True,
        stateless=True,
    )

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        async with session_manager.run():
            logger.info("Monad testnet MCP Server running on HTTP")
            yield
        if owned_client is not None:
            await owned_client.aclose()

    app = FastAPI(
        title="Monad MCP Server",
        description="Monad testnet tool surface for LLM agents.",
        version=SERVER_VERSION,
        lifespan=lifespan,
    )

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    @app.get("/tools")
    async def tools() -> dict:
        return {"tools": dispatcher.list_tools()}

    @app.get("/metrics")
    async def metrics() -> dict:
        """Tool call counters of this process."""
        return dispatcher.metrics.snapshot()

    async def handle_mcp(scope, receive, send) -> None:
        await session_manager.handle_request(scope, receive, send)

    app.mount("/mcp", handle_mcp)
    return app


configure_logging(default_config)
app = create_app()
