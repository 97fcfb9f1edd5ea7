"""
app/validators/monetary.py

Monetary value normalization for loosely formatted snapshot amounts.

Accepts both ``1.234,56`` and ``1,234.56`` conventions: when both
separators are present, the one appearing last is the decimal point and
the other is a thousands separator. A lone comma is a decimal point; a
lone dot is left as is. Anything unparseable, including digit group
underscores and amounts too large to round to cents, becomes
``Decimal("0")``.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

_ZERO = Decimal("0")
_CENT = Decimal("0.01")


@dataclass(frozen=True)
class MonetaryParse:
    """
    Parsed amount plus the reason it fell back to zero, if it did.
    """

    amount: Decimal
    warning: str | None = None


def _within_range(amount: Decimal) -> bool:
    try:
        amount.quantize(_CENT)
    except InvalidOperation:
        return False
    return True


def _finite_amount(parsed: Decimal, value: Any) -> MonetaryParse:
    if not parsed.is_finite():
        return MonetaryParse(_ZERO, f"Non-finite amount {value!r}.")
    if not _within_range(parsed):
        return MonetaryParse(_ZERO, f"Amount out of range {value!r}.")
    return MonetaryParse(parsed)


def _canonicalize(text: str) -> str:
    has_comma = "," in text
    has_dot = "." in text

    if has_comma and has_dot:
        if text.rfind(",") > text.rfind("."):
            return text.replace(".", "").replace(",", ".")
        return text.replace(",", "")
    if has_comma:
        return text.replace(",", ".")
    return text


def parse_monetary_value_checked(value: Any) -> MonetaryParse:
    """
    Parse ``value`` into a Decimal amount and report why it fell back to 0.
    """

    if isinstance(value, bool):
        return MonetaryParse(_ZERO, "Boolean is not a monetary amount.")
    if isinstance(value, Decimal):
        return _finite_amount(value, value)
    if isinstance(value, int):
        return _finite_amount(Decimal(value), value)
    if isinstance(value, float):
        return _finite_amount(Decimal(repr(value)), value)
    if value is None:
        return MonetaryParse(_ZERO, "Missing amount.")
    if not isinstance(value, str):
        return MonetaryParse(_ZERO, f"Unsupported amount type {type(value).__name__}.")

    cleaned = value.strip()
    if not cleaned:
        return MonetaryParse(_ZERO, "Missing amount.")
    if "_" in cleaned or not cleaned.isascii():
        return MonetaryParse(_ZERO, f"Unparseable amount {value!r}.")

    try:
        parsed = Decimal(_canonicalize(cleaned))
    except InvalidOperation:
        return MonetaryParse(_ZERO, f"Unparseable amount {value!r}.")
    return _finite_amount(parsed, value)


def parse_monetary_value(value: Any) -> Decimal:
    """
    Parse ``value`` into a Decimal amount. Never raises; degrades to 0.
    """

    return parse_monetary_value_checked(value).amount
