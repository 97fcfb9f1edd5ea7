"""
segmentation/amounts.py

Decimal helpers shared by tiering and aggregation.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

CENT = Decimal("0.01")


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """
    Coerce a numeric input to Decimal without binary float artefacts.
    """

    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    try:
        return Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise ValueError(f"Not a numeric amount: {value!r}") from exc


def round_money(value: Decimal) -> Decimal:
    """
    Round to cents, halves away from zero.

    Precision is widened so that large finite totals keep every digit.
    """

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        return value.quantize(CENT, rounding=ROUND_HALF_UP)
