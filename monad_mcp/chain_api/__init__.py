"""JSON-RPC client wrappers for the Monad node."""

from .client import (
    ChainApiError,
    FeeEstimate,
    InsufficientFundsError,
    InvalidAddressError,
    MonadRpcClient,
    NodeUnreachableError,
    NonceTooLowError,
)

__all__ = [
    "MonadRpcClient",
    "ChainApiError",
    "FeeEstimate",
    "InvalidAddressError",
    "InsufficientFundsError",
    "NonceTooLowError",
    "NodeUnreachableError",
]
