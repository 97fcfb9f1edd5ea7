"""
tests/test_kpi_service.py

Pytest unit tests for KPIService.

All tests are pure Python: no file system, no I/O, in-memory inputs only.
Every assertion is deterministic: given the same inputs, the same
output must be produced every time.

Coverage
--------
- Sector total and reseller count
- Near-upgrade count at the 80 percent boundary
- At-risk count against the configured threshold
- Empty sector edge case
- SectorKPIs structure contract
- Statelessness across multiple calls
"""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

import pytest

from app.domain.dashboard_config import DEFAULT_REPRESENTATIVENESS_WEIGHTS
from app.domain.dashboard_view import ClassifiedReseller, SectorKPIs
from app.domain.sales_record import ResellerAggregate
from app.services.kpi_service import KPIService
from segmentation.engine import SegmentationEngine


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def svc() -> KPIService:
    """Fresh KPIService instance for each test."""
    return KPIService()


def _classified(code: str, total: str) -> ClassifiedReseller:
    amount = Decimal(total)
    return ClassifiedReseller(
        aggregate=ResellerAggregate(reseller_code=code, reseller_name=code, total_amount=amount),
        tier=SegmentationEngine().get_segmentation_info(
            amount, DEFAULT_REPRESENTATIVENESS_WEIGHTS, "01/2026"
        ),
    )


def _with_progress(reseller: ClassifiedReseller, *, maintain: str) -> ClassifiedReseller:
    return replace(reseller, tier=replace(reseller.tier, progress_maintain=Decimal(maintain)))


# ---------------------------------------------------------------------------
# SectorKPIs contract
# ---------------------------------------------------------------------------


class TestSectorKPIsContract:
    def test_is_frozen(self) -> None:
        kpis = SectorKPIs(
            sector_total=Decimal("0"), reseller_count=0, count_near_upgrade=0, count_at_risk=0
        )
        with pytest.raises((AttributeError, TypeError)):
            kpis.reseller_count = 3  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Calculation
# ---------------------------------------------------------------------------


class TestCalculateSectorKPIs:
    def test_totals_and_counts(self, svc: KPIService) -> None:
        resellers = [_classified("R1", "1000.50"), _classified("R2", "15000"), _classified("R3", "2500")]

        kpis = svc.calculate_sector_kpis(resellers, risk_percent_threshold=30)

        assert kpis.sector_total == Decimal("18500.50")
        assert kpis.reseller_count == 3

    def test_near_upgrade_boundary(self, svc: KPIService) -> None:
        # 2400 / 2999.99 rounds to 80.00 percent; 2350 stays below.
        resellers = [_classified("R1", "2400"), _classified("R2", "2350")]

        kpis = svc.calculate_sector_kpis(resellers, risk_percent_threshold=30)

        assert kpis.count_near_upgrade == 1

    def test_at_risk_uses_configured_threshold(self, svc: KPIService) -> None:
        base = _classified("R1", "5000")
        resellers = [
            _with_progress(base, maintain="10"),
            _with_progress(base, maintain="29.99"),
            _with_progress(base, maintain="30"),
            _with_progress(base, maintain="100"),
        ]

        assert svc.calculate_sector_kpis(resellers, risk_percent_threshold=30).count_at_risk == 2
        assert svc.calculate_sector_kpis(resellers, risk_percent_threshold=50).count_at_risk == 3
        assert svc.calculate_sector_kpis(resellers, risk_percent_threshold=0).count_at_risk == 0

    def test_lowest_tier_counts_as_at_risk(self, svc: KPIService) -> None:
        # Iniciante has no maintain floor, so its maintain progress is 0.
        kpis = svc.calculate_sector_kpis([_classified("R1", "100")], risk_percent_threshold=30)

        assert kpis.count_at_risk == 1

    def test_empty_sector(self, svc: KPIService) -> None:
        kpis = svc.calculate_sector_kpis([], risk_percent_threshold=30)

        assert kpis.sector_total == Decimal("0")
        assert kpis.reseller_count == 0
        assert kpis.count_near_upgrade == 0
        assert kpis.count_at_risk == 0

    def test_is_stateless(self, svc: KPIService) -> None:
        resellers = [_classified("R1", "15000")]

        first = svc.calculate_sector_kpis(resellers, risk_percent_threshold=30)
        second = svc.calculate_sector_kpis(resellers, risk_percent_threshold=30)

        assert first == second
