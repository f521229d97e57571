"""
Async web3 client for the Monad (EVM) node calls the tools rely on.

Node and transport errors are mapped to internal exceptions that the tool layer
turns into user-facing failure messages. The node's own error text is kept on
the exception so callers can surface it verbatim.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from decimal import ROUND_FLOOR, Decimal
from typing import Any, Awaitable, Dict, Optional, TypeVar

import aiohttp
from eth_utils import to_checksum_address
from web3 import AsyncHTTPProvider, AsyncWeb3, Web3
from web3.exceptions import InvalidAddress, Web3Exception, Web3RPCError

from monad_mcp.config import MonadConfig, default_config
from monad_mcp.validators import is_valid_address

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ChainApiError(Exception):
    """Base exception for chain RPC errors."""

    def __init__(
        self,
        message: str,
        *,
        code: Optional[int] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.status_code = status_code


class InvalidAddressError(ChainApiError):
    """Raised when an address is malformed, fails its checksum, or is rejected by the node."""


class InsufficientFundsError(ChainApiError):
    """Raised when the sender cannot cover value plus gas."""


class NonceTooLowError(ChainApiError):
    """Raised when the node has already seen the submitted nonce."""


class NodeUnreachableError(ChainApiError):
    """Raised when the RPC endpoint cannot be reached or times out."""


@dataclass(slots=True)
class FeeEstimate:
    """Fee values in wei. EIP-1559 chains fill the max fee fields, legacy ones gas_price."""

    max_fee_per_gas: Optional[int] = None
    max_priority_fee_per_gas: Optional[int] = None
    gas_price: Optional[int] = None


class MonadRpcClient:
    """Thin async wrapper over AsyncWeb3 for the calls used by the tools."""

    def __init__(
        self,
        config: MonadConfig | None = None,
        *,
        web3: Optional[AsyncWeb3] = None,
    ) -> None:
        self.config = config or default_config
        self._w3: Optional[AsyncWeb3] = web3
        self._owns_web3 = web3 is None

    def _get_web3(self) -> AsyncWeb3:
        if self._w3 is None:
            provider = AsyncHTTPProvider(
                self.config.rpc_url,
                request_kwargs={"timeout": aiohttp.ClientTimeout(total=self.config.timeout)},
                # One attempt per call; a retried broadcast could spend twice.
                exception_retry_configuration=None,
            )
            self._w3 = AsyncWeb3(provider)
            self._owns_web3 = True
        return self._w3

    async def aclose(self) -> None:
        if self._w3 is not None and self._owns_web3:
            await self._w3.provider.disconnect()
            self._w3 = None

    def _map_error(
        self, code: Optional[int], message: Optional[str], status_code: Optional[int] = None
    ) -> ChainApiError:
        text = message or "Chain RPC error."
        lowered = text.lower()
        if "insufficient funds" in lowered:
            return InsufficientFundsError(text, code=code, status_code=status_code)
        if "nonce too low" in lowered:
            return NonceTooLowError(text, code=code, status_code=status_code)
        if "invalid address" in lowered:
            return InvalidAddressError(text, code=code, status_code=status_code)
        return ChainApiError(text, code=code, status_code=status_code)

    def _map_rpc_error(self, exc: Web3RPCError) -> ChainApiError:
        response = getattr(exc, "rpc_response", None) or {}
        error = response.get("error") if isinstance(response, dict) else None
        if isinstance(error, dict):
            raw_code = error.get("code")
            raw_message = error.get("message")
            return self._map_error(
                raw_code if isinstance(raw_code, int) else None,
                raw_message if isinstance(raw_message, str) else None,
            )
        return self._map_error(None, getattr(exc, "message", None) or str(exc))

    async def _call(self, method: str, request: Awaitable[T]) -> T:
        try:
            return await request
        except aiohttp.ClientResponseError as exc:
            raise ChainApiError(
                f"HTTP {exc.status} from RPC endpoint.", status_code=exc.status
            ) from exc
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            logger.warning("Monad RPC unreachable for method %s", method)
            raise NodeUnreachableError("Node unreachable") from exc
        except Web3RPCError as exc:
            raise self._map_rpc_error(exc) from exc
        except InvalidAddress as exc:
            raise InvalidAddressError(str(exc)) from exc
        except Web3Exception as exc:
            raise ChainApiError(str(exc) or "Unexpected response from node.") from exc

    @staticmethod
    def _require_address(address: str) -> str:
        """Validate an address (including its checksum) and return the checksummed form."""
        if not is_valid_address(address):
            raise InvalidAddressError(f'Address "{address}" is invalid.')
        return to_checksum_address(address)

    async def get_balance(self, address: str, *, block: str = "latest") -> int:
        """Return the account balance in wei."""
        checksummed = self._require_address(address)
        w3 = self._get_web3()
        return int(await self._call("eth_getBalance", w3.eth.get_balance(checksummed, block)))

    async def get_transaction_count(self, address: str, *, block: str = "latest") -> int:
        """Return the number of transactions sent from an address (its next nonce)."""
        checksummed = self._require_address(address)
        w3 = self._get_web3()
        return int(
            await self._call(
                "eth_getTransactionCount", w3.eth.get_transaction_count(checksummed, block)
            )
        )

    async def get_gas_price(self) -> int:
        return int(await self._call("eth_gasPrice", self._get_web3().eth.gas_price))

    async def get_max_priority_fee_per_gas(self) -> int:
        return int(
            await self._call("eth_maxPriorityFeePerGas", self._get_web3().eth.max_priority_fee)
        )

    async def get_latest_block(self) -> Dict[str, Any]:
        block = await self._call("eth_getBlockByNumber", self._get_web3().eth.get_block("latest"))
        return dict(block)

    async def get_chain_id(self) -> int:
        if self.config.chain_id is not None:
            return self.config.chain_id
        return int(await self._call("eth_chainId", self._get_web3().eth.chain_id))

    async def estimate_gas(self, transaction: Dict[str, Any]) -> int:
        return int(await self._call("eth_estimateGas", self._get_web3().eth.estimate_gas(transaction)))

    async def send_raw_transaction(self, raw_transaction: bytes) -> str:
        tx_hash = await self._call(
            "eth_sendRawTransaction", self._get_web3().eth.send_raw_transaction(raw_transaction)
        )
        return Web3.to_hex(tx_hash)

    def _apply_base_fee_multiplier(self, base_fee: int) -> int:
        scaled = Decimal(base_fee) * Decimal(str(self.config.base_fee_multiplier))
        return int(scaled.to_integral_value(rounding=ROUND_FLOOR))

    async def estimate_fees_per_gas(self) -> FeeEstimate:
        """
        Estimate fees for the next block.

        EIP-1559 blocks yield ``max_fee_per_gas = base_fee * multiplier +
        priority_fee``. Blocks without a base fee yield only ``gas_price``.
        """
        block = await self.get_latest_block()
        raw_base_fee = block.get("baseFeePerGas")
        if raw_base_fee is None:
            gas_price = await self.get_gas_price()
            return FeeEstimate(gas_price=self._apply_base_fee_multiplier(gas_price))

        base_fee = int(raw_base_fee)
        try:
            priority_fee = await self.get_max_priority_fee_per_gas()
        except NodeUnreachableError:
            raise
        except ChainApiError:
            # Nodes without eth_maxPriorityFeePerGas: derive it from the gas price.
            priority_fee = max(await self.get_gas_price() - base_fee, 0)

        max_fee = self._apply_base_fee_multiplier(base_fee) + priority_fee
        return FeeEstimate(max_fee_per_gas=max_fee, max_priority_fee_per_gas=priority_fee)

    async def send_transaction(
        self,
        account: Any,
        *,
        to: str,
        value: int,
        data: Optional[str] = None,
    ) -> str:
        """
        Build, sign and broadcast a value transfer from ``account``.

        ``account`` is an eth_account LocalAccount (anything exposing
        ``address`` and ``sign_transaction``). Returns the transaction hash.
        The broadcast is attempted exactly once.
        """
        recipient = self._require_address(to)
        sender = account.address

        call: Dict[str, Any] = {"from": sender, "to": recipient, "value": int(value)}
        if data:
            call["data"] = data

        nonce = await self.get_transaction_count(sender, block="pending")
        fees = await self.estimate_fees_per_gas()
        gas = await self.estimate_gas(call)
        chain_id = await self.get_chain_id()

        transaction: Dict[str, Any] = {
            "chainId": chain_id,
            "nonce": nonce,
            "to": recipient,
            "value": int(value),
            "gas": gas,
        }
        if fees.max_fee_per_gas is not None:
            transaction["type"] = 2
            transaction["maxFeePerGas"] = fees.max_fee_per_gas
            transaction["maxPriorityFeePerGas"] = fees.max_priority_fee_per_gas or 0
        else:
            transaction["gasPrice"] = fees.gas_price or 0
        if data:
            transaction["data"] = data

        signed = account.sign_transaction(transaction)
        tx_hash = await self.send_raw_transaction(signed.raw_transaction)
        logger.info("Broadcast transaction %s from %s", tx_hash, sender)
        return tx_hash
