"""
segmentation/tiers.py

Loyalty tier table and threshold classification.

Eight ordered tiers keyed by display name. Bounds are inclusive lower
bounds. Bronze is a single-point band: only a total of exactly 2999.99
lands there, anything above falls into Prata.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Final

from segmentation.amounts import to_decimal


@dataclass(frozen=True)
class Tier:
    """
    One loyalty tier and its pointer to the tier above.
    """

    name: str
    floor: Decimal
    ceiling: Decimal | None
    next_tier: str | None
    color: str


INICIANTE: Final[str] = "Iniciante"
BRONZE: Final[str] = "Bronze"
PRATA: Final[str] = "Prata"
OURO: Final[str] = "Ouro"
PLATINA: Final[str] = "Platina"
RUBI: Final[str] = "Rubi"
ESMERALDA: Final[str] = "Esmeralda"
DIAMANTE: Final[str] = "Diamante"

TIER_ORDER: tuple[str, ...] = (
    INICIANTE,
    BRONZE,
    PRATA,
    OURO,
    PLATINA,
    RUBI,
    ESMERALDA,
    DIAMANTE,
)

LOWEST_TIER: Final[str] = INICIANTE

TIERS: dict[str, Tier] = {
    INICIANTE: Tier(INICIANTE, Decimal("0"), Decimal("2999.98"), BRONZE, "#9CA3AF"),
    BRONZE: Tier(BRONZE, Decimal("2999.99"), Decimal("2999.99"), PRATA, "#CD7F32"),
    PRATA: Tier(PRATA, Decimal("3000.00"), Decimal("8999.99"), OURO, "#C0C0C0"),
    OURO: Tier(OURO, Decimal("9000.00"), Decimal("19999.99"), PLATINA, "#FFD700"),
    PLATINA: Tier(PLATINA, Decimal("20000.00"), Decimal("49999.99"), RUBI, "#E5E4E2"),
    RUBI: Tier(RUBI, Decimal("50000.00"), Decimal("79999.99"), ESMERALDA, "#E0115F"),
    ESMERALDA: Tier(ESMERALDA, Decimal("80000.00"), Decimal("129999.99"), DIAMANTE, "#50C878"),
    DIAMANTE: Tier(DIAMANTE, Decimal("130000.00"), None, None, "#B9F2FF"),
}


def classify(total: Decimal | int | float) -> str:
    """
    Return the name of the highest tier whose floor is <= ``total``.

    Floors are tested from the top tier down; the first match wins.
    """

    amount = to_decimal(total)
    for name in reversed(TIER_ORDER):
        if amount >= TIERS[name].floor:
            return name
    return LOWEST_TIER


def minimum_to_maintain(tier_name: str) -> Decimal:
    tier = TIERS.get(tier_name)
    return tier.floor if tier is not None else Decimal("0")


def minimum_to_upgrade(tier_name: str) -> Decimal | None:
    tier = TIERS.get(tier_name)
    if tier is None or tier.next_tier is None:
        return None
    return TIERS[tier.next_tier].floor
