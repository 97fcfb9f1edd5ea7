"""
app/services/kpi_service.py

Deterministic sector KPI calculation.

All calculation functions operate on already classified resellers.
No I/O lives inside the calculation layer.

Formulas
--------
Sector Total       = sum of reseller total_amount
Reseller Count     = number of resellers with at least one sale
Near Upgrade       = resellers with progress_upgrade >= 80
At Risk (KPI)      = resellers with progress_maintain < risk_percent_threshold

The KPI at-risk count uses the configured threshold and is independent of
the per-reseller ``at_risk`` flag, which uses a fixed 80 percent.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Sequence

from app.domain.dashboard_view import ClassifiedReseller, SectorKPIs
from segmentation.amounts import to_decimal

logger = logging.getLogger(__name__)

NEAR_UPGRADE_PROGRESS_PERCENT = Decimal("80")


class KPIService:
    """
    Stateless sector KPI engine.

    Usage::

        service = KPIService()
        kpis = service.calculate_sector_kpis(classified, risk_percent_threshold=30)
        print(kpis.count_at_risk)
    """

    def calculate_sector_kpis(
        self,
        resellers: Sequence[ClassifiedReseller],
        *,
        risk_percent_threshold: int | Decimal,
    ) -> SectorKPIs:
        """
        Compute sector KPIs for the classified resellers of one sector.

        Parameters
        ----------
        resellers:
            Reseller aggregates with their TierInfo attached.
        risk_percent_threshold:
            Maintain-progress percentage below which a reseller counts as
            at risk for the KPI.

        Returns
        -------
        SectorKPIs
            Zero counts and a zero total for an empty sector (valid state).
        """
        threshold = to_decimal(risk_percent_threshold)
        sector_total = sum(
            (reseller.aggregate.total_amount for reseller in resellers), Decimal("0")
        )
        near_upgrade = sum(
            1
            for reseller in resellers
            if reseller.tier.progress_upgrade >= NEAR_UPGRADE_PROGRESS_PERCENT
        )
        at_risk = sum(
            1 for reseller in resellers if reseller.tier.progress_maintain < threshold
        )
        logger.debug(
            "Sector KPIs computed resellers=%d near_upgrade=%d at_risk=%d",
            len(resellers),
            near_upgrade,
            at_risk,
        )
        return SectorKPIs(
            sector_total=sector_total,
            reseller_count=len(resellers),
            count_near_upgrade=near_upgrade,
            count_at_risk=at_risk,
        )
