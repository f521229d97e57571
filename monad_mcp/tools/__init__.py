"""LLM-facing tool implementations."""

from .account import get_mon_balance, get_transaction_count
from .gas import get_gas_price
from .transactions import sign_and_send_transaction

__all__ = [
    "get_mon_balance",
    "get_gas_price",
    "get_transaction_count",
    "sign_and_send_transaction",
]
