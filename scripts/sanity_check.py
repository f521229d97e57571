"""Minimal read-only sanity checks against a live Monad RPC endpoint."""

from __future__ import annotations

import asyncio
import os
import sys

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from monad_mcp.catalog import build_default_registry  # noqa: E402
from monad_mcp.chain_api import MonadRpcClient  # noqa: E402
from monad_mcp.config import default_config  # noqa: E402
from monad_mcp.dispatcher import Dispatcher  # noqa: E402

# Any testnet address works; override via env.
SAMPLE_ADDRESS = os.getenv("MONAD_SAMPLE_ADDRESS", "0x760afe86e5de5fa0ee542fc7b7b713e1c5425701")


async def main() -> None:
    client = MonadRpcClient(default_config)
    dispatcher = Dispatcher(build_default_registry(), client)
    try:
        for name, arguments in (
            ("get-gas-price", {}),
            ("get-mon-balance", {"address": SAMPLE_ADDRESS}),
            ("get-transaction-count", {"address": SAMPLE_ADDRESS}),
        ):
            envelope = await dispatcher.dispatch(name, arguments)
            print(f"{name}:", envelope["content"][0]["text"])
    finally:
        await client.aclose()


if __name__ == "__main__":
    asyncio.run(main())
