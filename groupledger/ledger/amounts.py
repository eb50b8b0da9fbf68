"""Mini README: Parsing of user supplied currency amounts.

``parse_amount`` is the only way amounts enter the ledger. It accepts the
raw text typed into a form (or an already numeric value) and returns a float
that is guaranteed finite and non-negative, raising ``InvalidAmount``
otherwise so nothing unchecked is ever stored.
"""

from __future__ import annotations

import math
import re
from numbers import Real
from typing import Union

from ..errors import InvalidAmount

AmountInput = Union[str, int, float]

_CURRENCY_PREFIX = "$"
_THOUSANDS_SEPARATOR = ","
_DECIMAL_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)", re.ASCII)


def _normalise_text(text: str) -> str:
    """Strip whitespace, a leading currency symbol and thousands separators."""

    cleaned = text.strip()
    if cleaned.startswith(_CURRENCY_PREFIX):
        cleaned = cleaned[len(_CURRENCY_PREFIX):].lstrip()
    return cleaned.replace(_THOUSANDS_SEPARATOR, "")


def parse_amount(value: AmountInput) -> float:
    """Convert ``value`` into a validated currency amount."""

    if isinstance(value, bool):
        raise InvalidAmount(value, "booleans are not amounts")
    if isinstance(value, str):
        cleaned = _normalise_text(value)
        if not cleaned:
            raise InvalidAmount(value, "amount is empty")
        if not _DECIMAL_PATTERN.fullmatch(cleaned):
            raise InvalidAmount(value, "not a number")
        amount = float(cleaned)
    elif isinstance(value, Real):
        amount = float(value)
    else:
        raise InvalidAmount(value, f"unsupported type {type(value).__name__}")

    if not math.isfinite(amount):
        raise InvalidAmount(value, "amount must be finite")
    if amount < 0:
        raise InvalidAmount(value, "amount must not be negative")
    # Normalise negative zero so balances never display as -0.00.
    return amount + 0.0
