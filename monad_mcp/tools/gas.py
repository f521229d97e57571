"""Fee-related tools."""

from __future__ import annotations

import logging

from monad_mcp.chain_api import ChainApiError
from monad_mcp.config import MonadConfig, default_config
from monad_mcp.outcome import Failure, FailureKind, Outcome, Success, error_detail
from monad_mcp.units import format_units

logger = logging.getLogger(__name__)


async def get_gas_price(*, client, config: MonadConfig = default_config) -> Outcome:
    """
    Report the current max fee per gas in Gwei.

    A missing max fee (legacy fee market) is reported as zero.
    """
    try:
        fees = await client.estimate_fees_per_gas()
    except ChainApiError as exc:
        logger.warning("Error getting gas price: %s", exc)
        return Failure(f"Failed to get gas price. Error: {error_detail(exc)}")
    except Exception as exc:
        logger.exception("Unexpected error getting gas price")
        return Failure(
            f"Failed to get gas price. Error: {error_detail(exc)}", FailureKind.UNEXPECTED
        )

    max_fee = getattr(fees, "max_fee_per_gas", None) or 0
    amount = format_units(max_fee, config.gas_price_unit)
    return Success(f"Current gas price: {amount} {config.gas_price_symbol}")
