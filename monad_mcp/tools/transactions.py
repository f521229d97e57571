"""Transaction submission tool."""

from __future__ import annotations

import logging
from typing import Optional

from eth_account import Account

from monad_mcp.chain_api import ChainApiError
from monad_mcp.config import MonadConfig, default_config
from monad_mcp.outcome import Failure, FailureKind, Outcome, Success, error_detail
from monad_mcp.units import parse_units

logger = logging.getLogger(__name__)


async def sign_and_send_transaction(
    private_key: str,
    to: str,
    value: str,
    data: Optional[str] = None,
    *,
    client,
    config: MonadConfig = default_config,
) -> Outcome:
    """
    Sign a value transfer with ``private_key`` and broadcast it.

    The broadcast is attempted once; a failure is reported back rather than
    retried, since resubmitting could spend twice. The private key is never
    logged.

    Args:
        private_key: 0x-prefixed 32-byte hex private key of the sender.
        to: Recipient address.
        value: Decimal amount of the native token, e.g. "0.01".
        data: Optional 0x-prefixed call data.
        client: Chain client (override for testing).
        config: Configuration providing the native token unit.
    """
    try:
        account = Account.from_key(private_key)
        amount = parse_units(value, config.native_unit)
    except Exception as exc:
        # Malformed keys surface as ValueError or eth_keys' ValidationError.
        logger.warning("Rejected transaction request to %s: %s", to, exc)
        return Failure(
            f"Failed to send transaction. Error: {error_detail(exc)}", FailureKind.VALIDATION
        )
    if amount < 0:
        return Failure(
            f'Failed to send transaction. Error: Value "{value}" must not be negative.',
            FailureKind.VALIDATION,
        )

    try:
        tx_hash = await client.send_transaction(account, to=to, value=amount, data=data)
    except ChainApiError as exc:
        logger.warning("Error sending transaction from %s to %s: %s", account.address, to, exc)
        return Failure(f"Failed to send transaction. Error: {error_detail(exc)}")
    except Exception as exc:
        logger.exception("Unexpected error sending transaction from %s to %s", account.address, to)
        return Failure(
            f"Failed to send transaction. Error: {error_detail(exc)}", FailureKind.UNEXPECTED
        )

    return Success(f"Transaction sent successfully! Transaction hash: {tx_hash}")
