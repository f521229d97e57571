"""Account-related tools."""

from __future__ import annotations

import logging

from monad_mcp.chain_api import ChainApiError
from monad_mcp.config import MonadConfig, default_config
from monad_mcp.outcome import Failure, FailureKind, Outcome, Success, error_detail
from monad_mcp.units import format_units

logger = logging.getLogger(__name__)


async def get_mon_balance(
    address: str,
    *,
    client,
    config: MonadConfig = default_config,
) -> Outcome:
    """
    Look up the native token balance of an address.

    Args:
        address: 0x-prefixed account address.
        client: Chain client (override for testing).
        config: Configuration providing the unit name and symbol.

    Returns:
        Success with the formatted balance, or Failure carrying the error detail.
    """
    try:
        balance = await client.get_balance(address)
    except ChainApiError as exc:
        logger.warning("Error getting balance for %s: %s", address, exc)
        return Failure(
            f"Failed to retrieve balance for address: {address}. Error: {error_detail(exc)}"
        )
    except Exception as exc:
        logger.exception("Unexpected error getting balance for %s", address)
        return Failure(
            f"Failed to retrieve balance for address: {address}. Error: {error_detail(exc)}",
            FailureKind.UNEXPECTED,
        )

    amount = format_units(balance, config.native_unit)
    return Success(f"Balance for {address}: {amount} {config.native_symbol}")


async def get_transaction_count(address: str, *, client) -> Outcome:
    """Return the transaction count (next nonce) for an address."""
    try:
        count = await client.get_transaction_count(address)
    except ChainApiError as exc:
        logger.warning("Error getting transaction count for %s: %s", address, exc)
        return Failure(
            f"Failed to get transaction count for address: {address}. Error: {error_detail(exc)}"
        )
    except Exception as exc:
        logger.exception("Unexpected error getting transaction count for %s", address)
        return Failure(
            f"Failed to get transaction count for address: {address}. Error: {error_detail(exc)}",
            FailureKind.UNEXPECTED,
        )

    return Success(f"Transaction count for {address}: {int(count)}")
