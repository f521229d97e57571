"""
Tool catalog for the MCP surface.

Maps the fixed set of tool names to their descriptions, parameter schemas, and
handlers. The registry is built once at startup and frozen; transports only
read it.
"""

from __future__ import annotations

from monad_mcp.registry import ToolRegistry
from monad_mcp.schema import ParamSpec
from monad_mcp.tools import (
    get_gas_price,
    get_mon_balance,
    get_transaction_count,
    sign_and_send_transaction,
)
from monad_mcp.validators import ADDRESS_REGEX, HEX_DATA_REGEX, PRIVATE_KEY_REGEX

ADDRESS_PATTERN = ADDRESS_REGEX.pattern
ADDRESS_LABEL = "a 0x-prefixed 20-byte hex address"


def _address_param(description: str) -> ParamSpec:
    return ParamSpec(
        type="string",
        description=description,
        pattern=ADDRESS_PATTERN,
        pattern_label=ADDRESS_LABEL,
    )


def build_default_registry() -> ToolRegistry:
    """Register the Monad tools and return the frozen registry."""
    registry = ToolRegistry()
    registry.register(
        "get-mon-balance",
        "Get MON balance for an address on Monad testnet",
        {"address": _address_param("Monad testnet address to check balance for")},
        get_mon_balance,
    )
    registry.register(
        "get-gas-price",
        "Get the current gas price on the Monad testnet",
        {},
        get_gas_price,
    )
    registry.register(
        "get-transaction-count",
        "Get the transaction count (nonce) for an address",
        {"address": _address_param("Address to check transaction count for")},
        get_transaction_count,
    )
    registry.register(
        "sign-and-send-transaction",
        "Sign and send a transaction to the Monad testnet",
        {
            "privateKey": ParamSpec(
                type="string",
                description="Private key of the sender (DO NOT SHARE YOUR REAL PRIVATE KEY)",
                pattern=PRIVATE_KEY_REGEX.pattern,
                pattern_label="a 0x-prefixed 32-byte hex private key",
                secret=True,
                kwarg="private_key",
            ),
            "to": _address_param("Receiver address"),
            "value": ParamSpec(type="string", description="Amount to send in MON"),
            "data": ParamSpec(
                type="string",
                description="Transaction data",
                optional=True,
                pattern=HEX_DATA_REGEX.pattern,
                pattern_label="0x-prefixed hex data",
            ),
        },
        sign_and_send_transaction,
    )
    return registry.freeze()

