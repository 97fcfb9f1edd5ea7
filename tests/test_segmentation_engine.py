"""
tests/test_segmentation_engine.py

Pytest unit tests for the tier table, MotivationLabeler and SegmentationEngine.

All tests are pure Python. Every assertion is deterministic: given the same
total and configuration, the same TierInfo must be produced every time.

Coverage
--------
- Tier boundaries, including the single-point Bronze band
- minimum_to_maintain / minimum_to_upgrade helpers
- Motivation ladder priority order
- Cycle targets weighted by representativeness
- Progress bounds and top-tier behavior
- Cumulative representativeness
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from app.domain.dashboard_config import DEFAULT_REPRESENTATIVENESS_WEIGHTS
from segmentation.engine import SegmentationEngine, TierInfo, cumulative_representativeness
from segmentation.labeling import (
    ACCELERATE,
    ALMOST_MAINTAINING,
    EXCELLENT_PACE,
    FINAL_STRETCH,
    GOOD_PROGRESS,
    INTENSIFY,
    MUST_FOCUS,
    TIER_SECURED,
    MotivationLabeler,
)
from segmentation.tiers import TIER_ORDER, TIERS, classify, minimum_to_maintain, minimum_to_upgrade


@pytest.fixture()
def engine() -> SegmentationEngine:
    return SegmentationEngine()


def _info(engine: SegmentationEngine, total: str | int, cycle: str = "01/2026") -> TierInfo:
    return engine.get_segmentation_info(Decimal(total), DEFAULT_REPRESENTATIVENESS_WEIGHTS, cycle)


# ---------------------------------------------------------------------------
# Tier table
# ---------------------------------------------------------------------------


class TestClassify:
    @pytest.mark.parametrize(
        ("total", "expected"),
        [
            ("0", "Iniciante"),
            ("2999.98", "Iniciante"),
            ("2999.99", "Bronze"),
            ("2999.995", "Bronze"),
            ("3000", "Prata"),
            ("8999.99", "Prata"),
            ("9000", "Ouro"),
            ("20000", "Platina"),
            ("50000", "Rubi"),
            ("80000", "Esmeralda"),
            ("129999.99", "Esmeralda"),
            ("130000", "Diamante"),
            ("1000000", "Diamante"),
            ("-10", "Iniciante"),
        ],
    )
    def test_boundaries(self, total: str, expected: str) -> None:
        assert classify(Decimal(total)) == expected

    def test_accepts_plain_numbers(self) -> None:
        assert classify(3000) == "Prata"
        assert classify(2999.99) == "Bronze"

    def test_next_tier_pointers_follow_order(self) -> None:
        for current, following in zip(TIER_ORDER, TIER_ORDER[1:]):
            assert TIERS[current].next_tier == following
        assert TIERS[TIER_ORDER[-1]].next_tier is None

    def test_minimum_helpers(self) -> None:
        assert minimum_to_maintain("Ouro") == Decimal("9000.00")
        assert minimum_to_upgrade("Ouro") == Decimal("20000.00")
        assert minimum_to_upgrade("Diamante") is None
        assert minimum_to_maintain("Unknown") == Decimal("0")
        assert minimum_to_upgrade("Unknown") is None


# ---------------------------------------------------------------------------
# Motivation ladder
# ---------------------------------------------------------------------------


class TestMotivationLabeler:
    @pytest.mark.parametrize(
        ("upgrade", "maintain", "expected"),
        [
            ("95", "0", FINAL_STRETCH),
            ("80", "100", EXCELLENT_PACE),
            ("60", "100", GOOD_PROGRESS),
            ("59.99", "100", TIER_SECURED),
            ("0", "80", ALMOST_MAINTAINING),
            ("0", "50", ACCELERATE),
            ("0", "30", INTENSIFY),
            ("0", "29.99", MUST_FOCUS),
        ],
    )
    def test_ladder(self, upgrade: str, maintain: str, expected) -> None:
        assert MotivationLabeler().label(Decimal(upgrade), Decimal(maintain)) == expected

    def test_kinds(self) -> None:
        assert FINAL_STRETCH.kind == "success"
        assert GOOD_PROGRESS.kind == "positive"
        assert ALMOST_MAINTAINING.kind == "caution"
        assert INTENSIFY.kind == "alert"
        assert MUST_FOCUS.kind == "urgent"


# ---------------------------------------------------------------------------
# Segmentation info
# ---------------------------------------------------------------------------


class TestGetSegmentationInfo:
    def test_mid_tier_reseller(self, engine: SegmentationEngine) -> None:
        info = _info(engine, "15000")

        assert info.current_tier == "Ouro"
        assert info.next_tier == "Platina"
        assert info.tier_maintain_floor == Decimal("9000.00")
        assert info.tier_upgrade_floor == Decimal("20000.00")
        assert info.cycle_maintain_target == Decimal("720.00")
        assert info.cycle_upgrade_target == Decimal("1600.00")
        assert info.progress_maintain == Decimal("100.00")
        assert info.progress_upgrade == Decimal("75.00")
        assert info.shortfall_maintain == Decimal("0.00")
        assert info.shortfall_upgrade == Decimal("5000.00")
        assert info.motivation_code == GOOD_PROGRESS.code
        assert info.motivation == GOOD_PROGRESS.message
        assert info.color == TIERS["Ouro"].color
        assert info.at_risk is False
        assert info.fallback_tier is None

    def test_lowest_tier_has_no_maintain_progress(self, engine: SegmentationEngine) -> None:
        info = _info(engine, "1000")

        assert info.current_tier == "Iniciante"
        assert info.progress_maintain == Decimal("0.00")
        assert info.shortfall_maintain == Decimal("0.00")
        assert info.progress_upgrade == Decimal("33.33")
        assert info.motivation_code == MUST_FOCUS.code
        assert info.at_risk is False

    def test_close_to_upgrade(self, engine: SegmentationEngine) -> None:
        assert _info(engine, "2500").motivation_code == EXCELLENT_PACE.code
        assert _info(engine, "2900").motivation_code == FINAL_STRETCH.code

    def test_top_tier(self, engine: SegmentationEngine) -> None:
        info = _info(engine, "200000")

        assert info.current_tier == "Diamante"
        assert info.next_tier is None
        assert info.tier_upgrade_floor is None
        assert info.cycle_upgrade_target is None
        assert info.progress_upgrade == Decimal("0.00")
        assert info.shortfall_upgrade is None
        assert info.progress_maintain == Decimal("100.00")
        assert info.motivation_code == TIER_SECURED.code

    def test_very_large_total(self, engine: SegmentationEngine) -> None:
        info = _info(engine, "1E+27")

        assert info.current_tier == "Diamante"
        assert info.total_amount == Decimal("1E+27")
        assert info.progress_maintain == Decimal("100.00")
        assert info.shortfall_maintain == Decimal("0.00")

    def test_missing_cycle_weighs_zero(self, engine: SegmentationEngine) -> None:
        info = _info(engine, "15000", cycle="12/2030")

        assert info.cycle_maintain_target == Decimal("0.00")
        assert info.cycle_upgrade_target == Decimal("0.00")

    def test_progress_stays_within_bounds(self, engine: SegmentationEngine) -> None:
        for total in ("-500", "0", "2999.99", "3000", "129999.99", "999999"):
            info = _info(engine, total)
            assert Decimal("0") <= info.progress_maintain <= Decimal("100")
            assert Decimal("0") <= info.progress_upgrade <= Decimal("100")

    def test_outputs_are_rounded_to_cents(self, engine: SegmentationEngine) -> None:
        info = engine.get_segmentation_info(
            Decimal("3333.333"), {"01/2026": Decimal("12.5")}, "01/2026"
        )

        assert info.total_amount == Decimal("3333.33")
        assert info.cycle_maintain_target == Decimal("375.00")
        assert info.cycle_upgrade_target == Decimal("1125.00")
        assert info.progress_upgrade == Decimal("37.04")
        assert info.shortfall_upgrade == Decimal("5666.67")


class TestCumulativeRepresentativeness:
    def test_sums_up_to_current_cycle(self) -> None:
        assert cumulative_representativeness(DEFAULT_REPRESENTATIVENESS_WEIGHTS, "03/2026") == Decimal("30")

    def test_sorts_cycle_keys(self) -> None:
        weights = {"02/2026": 20, "01/2026": 5, "03/2026": 75}

        assert cumulative_representativeness(weights, "02/2026") == Decimal("25")

    def test_unknown_cycle_sums_everything(self) -> None:
        assert cumulative_representativeness(DEFAULT_REPRESENTATIVENESS_WEIGHTS, "13/2030") == sum(
            DEFAULT_REPRESENTATIVENESS_WEIGHTS.values()
        )
