"""Conversions between integer wei amounts and decimal strings in named units."""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, localcontext

from eth_utils import from_wei, to_wei

DECIMAL_REGEX = re.compile(r"^-?(?:\d+(?:\.\d*)?|\.\d+)$")


def format_units(value: int, unit: str) -> str:
    """
    Render a wei amount in ``unit`` ("ether", "gwei", ...) without trailing zeros.

    ``format_units(10**18, "ether")`` is ``"1"`` and ``format_units(0, "gwei")``
    is ``"0"``.
    """
    text = format(Decimal(from_wei(int(value), unit)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def parse_units(value: str, unit: str) -> int:
    """
    Parse a decimal amount such as ``"0.5"`` in ``unit`` into wei.

    Digits finer than one wei are rounded half-up. Negative amounts keep their
    sign. Raises ValueError for anything that is not a plain decimal number.
    """
    if not isinstance(value, str):
        raise ValueError(f"Number {value!r} is not a valid decimal number.")
    text = value.strip()
    if not DECIMAL_REGEX.fullmatch(text):
        raise ValueError(f'Number "{value}" is not a valid decimal number.')

    amount = Decimal(text)
    one_wei = Decimal(1) / to_wei(1, unit)
    with localcontext() as ctx:
        ctx.prec = 999
        amount = amount.quantize(one_wei, rounding=ROUND_HALF_UP)
    if amount < 0:
        return -to_wei(-amount, unit)
    return to_wei(amount, unit)
