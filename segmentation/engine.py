"""
segmentation/engine.py

Tier engine: classifies a cumulative sales total and computes progress,
shortfall and risk metrics against the current and next tier floors.

Targets are cumulative over all billing cycles. The per-cycle targets
weight the tier floors by the current cycle's representativeness.
Intermediate values stay unrounded; monetary and percent outputs are
rounded to cents when the TierInfo is built.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Mapping

from segmentation.amounts import round_money, to_decimal
from segmentation.labeling import MotivationLabeler
from segmentation.tiers import (
    LOWEST_TIER,
    TIERS,
    classify,
    minimum_to_maintain,
    minimum_to_upgrade,
)

_HUNDRED = Decimal("100")
_ZERO = Decimal("0")

AT_RISK_PROGRESS_PERCENT = Decimal("80")


@dataclass(frozen=True)
class TierInfo:
    """
    Classification of one reseller's total under a configuration snapshot.

    ``fallback_tier`` is the tier obtained by reclassifying the current
    total when the reseller is at risk and below the maintain floor.
    """

    total_amount: Decimal
    current_tier: str
    color: str
    next_tier: str | None
    tier_maintain_floor: Decimal
    tier_upgrade_floor: Decimal | None
    cycle_maintain_target: Decimal
    cycle_upgrade_target: Decimal | None
    progress_maintain: Decimal
    progress_upgrade: Decimal
    shortfall_maintain: Decimal
    shortfall_upgrade: Decimal | None
    at_risk: bool
    fallback_tier: str | None
    motivation: str
    motivation_code: str
    motivation_kind: str


def _progress(total: Decimal, floor: Decimal) -> Decimal:
    if floor <= 0:
        return _ZERO
    return max(_ZERO, min(_HUNDRED, total / floor * _HUNDRED))


class SegmentationEngine:
    """
    Computes TierInfo for reseller totals.

    Args:
        labeler: Optional motivation labeler; a default one is built when
                 omitted.
    """

    def __init__(self, labeler: MotivationLabeler | None = None) -> None:
        self._labeler = labeler or MotivationLabeler()

    def get_segmentation_info(
        self,
        total: Decimal | int | float,
        representativeness_weights: Mapping[str, Decimal | int | float],
        current_cycle: str,
    ) -> TierInfo:
        """
        Classify ``total`` and compute maintain/upgrade metrics.

        Args:
            total:                      Cumulative sales total of one reseller.
            representativeness_weights: Mapping cycle -> percent weight.
            current_cycle:              Cycle whose weight scales the cycle targets.
                                        A missing cycle weighs 0.

        Returns:
            A TierInfo with rounded monetary and percent fields.
        """
        amount = to_decimal(total)
        tier_name = classify(amount)
        tier = TIERS[tier_name]

        maintain_floor = minimum_to_maintain(tier_name)
        upgrade_floor = minimum_to_upgrade(tier_name)

        weight = to_decimal(representativeness_weights.get(current_cycle, 0)) / _HUNDRED
        cycle_maintain_target = maintain_floor * weight
        cycle_upgrade_target = upgrade_floor * weight if upgrade_floor is not None else None

        progress_maintain = _progress(amount, maintain_floor)
        shortfall_maintain = max(_ZERO, maintain_floor - amount) if maintain_floor > 0 else _ZERO

        progress_upgrade = _ZERO
        shortfall_upgrade: Decimal | None = None
        if upgrade_floor is not None:
            progress_upgrade = _progress(amount, upgrade_floor)
            shortfall_upgrade = max(_ZERO, upgrade_floor - amount)

        motivation = self._labeler.label(progress_upgrade, progress_maintain)

        at_risk = progress_maintain < AT_RISK_PROGRESS_PERCENT and tier_name != LOWEST_TIER
        fallback_tier = None
        if at_risk and amount < maintain_floor:
            fallback_tier = classify(amount)

        return TierInfo(
            total_amount=round_money(amount),
            current_tier=tier.name,
            color=tier.color,
            next_tier=tier.next_tier,
            tier_maintain_floor=round_money(maintain_floor),
            tier_upgrade_floor=round_money(upgrade_floor) if upgrade_floor is not None else None,
            cycle_maintain_target=round_money(cycle_maintain_target),
            cycle_upgrade_target=(
                round_money(cycle_upgrade_target) if cycle_upgrade_target is not None else None
            ),
            progress_maintain=round_money(progress_maintain),
            progress_upgrade=round_money(progress_upgrade),
            shortfall_maintain=round_money(shortfall_maintain),
            shortfall_upgrade=round_money(shortfall_upgrade) if shortfall_upgrade is not None else None,
            at_risk=at_risk,
            fallback_tier=fallback_tier,
            motivation=motivation.message,
            motivation_code=motivation.code,
            motivation_kind=motivation.kind,
        )


def cumulative_representativeness(
    representativeness_weights: Mapping[str, Decimal | int | float],
    current_cycle: str,
) -> Decimal:
    """
    Sum cycle weights, in lexicographic cycle order, up to ``current_cycle``.

    When the current cycle is not configured every weight is summed.
    """

    accumulated = _ZERO
    for cycle in sorted(representativeness_weights):
        accumulated += to_decimal(representativeness_weights[cycle])
        if cycle == current_cycle:
            break
    return accumulated
