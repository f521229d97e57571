"""
Configuration helpers for the Monad MCP server.

This module centralizes RPC endpoint selection, chain id, RPC timeouts, fee
estimation tuning, and logging settings. Nothing here is required: every value
has a default suitable for Monad testnet and can be overridden from the
environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

# Default connection settings
DEFAULT_RPC_URL = os.getenv("MONAD_RPC_URL", "https://testnet-rpc.monad.xyz")
MONAD_TESTNET_CHAIN_ID = 10143


def _load_timeout() -> float:
    raw_timeout = os.getenv("MONAD_HTTP_TIMEOUT")
    if raw_timeout:
        try:
            return float(raw_timeout)
        except ValueError:
            return 30.0
    return 30.0


def _load_chain_id() -> Optional[int]:
    """Chain id from env; an explicitly empty value means "ask the node"."""
    raw_chain_id = os.getenv("MONAD_CHAIN_ID")
    if raw_chain_id is None:
        return MONAD_TESTNET_CHAIN_ID
    raw_chain_id = raw_chain_id.strip()
    if not raw_chain_id:
        return None
    try:
        return int(raw_chain_id, 0)
    except ValueError:
        return MONAD_TESTNET_CHAIN_ID


def _load_base_fee_multiplier() -> float:
    raw_multiplier = os.getenv("MONAD_BASE_FEE_MULTIPLIER")
    if raw_multiplier:
        try:
            parsed = float(raw_multiplier)
        except ValueError:
            return 1.2
        return parsed if parsed >= 1 else 1.2
    return 1.2


DEFAULT_TIMEOUT = _load_timeout()
DEFAULT_CHAIN_ID = _load_chain_id()
DEFAULT_BASE_FEE_MULTIPLIER = _load_base_fee_multiplier()

# Units
NATIVE_SYMBOL = "MON"
NATIVE_UNIT = "ether"  # 18 decimals
GAS_PRICE_SYMBOL = "Gwei"
GAS_PRICE_UNIT = "gwei"  # 9 decimals

SERVER_NAME = "monad-mcp"
SERVER_VERSION = "0.1.0"

LOG_LEVEL = os.getenv("MONAD_MCP_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("MONAD_MCP_LOG_FORMAT", "json")  # json or plain


@dataclass(slots=True)
class MonadConfig:
    """Runtime configuration for Monad RPC access."""

    rpc_url: str = DEFAULT_RPC_URL
    chain_id: Optional[int] = DEFAULT_CHAIN_ID
    timeout: float = DEFAULT_TIMEOUT
    base_fee_multiplier: float = DEFAULT_BASE_FEE_MULTIPLIER
    native_symbol: str = NATIVE_SYMBOL
    native_unit: str = NATIVE_UNIT
    gas_price_symbol: str = GAS_PRICE_SYMBOL
    gas_price_unit: str = GAS_PRICE_UNIT
    log_level: str = LOG_LEVEL
    log_format: str = LOG_FORMAT


default_config = MonadConfig()
