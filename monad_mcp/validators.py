"""Shared format checks for EVM-style argument values."""

from __future__ import annotations

import re
from typing import Optional

from eth_utils import is_address

# Shape only: 0x-prefixed, 20 bytes of hex. Checksums are checked by is_valid_address.
ADDRESS_REGEX = re.compile(r"^0x[0-9a-fA-F]{40}$")
PRIVATE_KEY_REGEX = re.compile(r"^0x[0-9a-fA-F]{64}$")
HEX_DATA_REGEX = re.compile(r"^0x[0-9a-fA-F]*$")


def is_valid_address(address: Optional[str]) -> bool:
    """
    Full address validation.

    All-lowercase and all-uppercase hex are accepted as-is; mixed case must be
    a valid EIP-55 checksum.
    """
    if not address or not isinstance(address, str):
        return False
    return bool(ADDRESS_REGEX.fullmatch(address)) and is_address(address)
