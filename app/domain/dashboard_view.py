"""
app/domain/dashboard_view.py

Read models returned by the dashboard service.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from app.domain.dashboard_config import DashboardConfig
from app.domain.sales_record import ComparisonResult, ResellerAggregate
from segmentation.engine import TierInfo


@dataclass(frozen=True)
class ClassifiedReseller:
    """
    A reseller aggregate with its tier classification attached.
    """

    aggregate: ResellerAggregate
    tier: TierInfo


@dataclass(frozen=True)
class SectorKPIs:
    """
    Sector-level indicators over the classified resellers.
    """

    sector_total: Decimal
    reseller_count: int
    count_near_upgrade: int
    count_at_risk: int


@dataclass(frozen=True)
class DashboardView:
    """
    Everything the dashboard needs for one sector of the active snapshot.
    """

    sector_id: str
    sector_label: str
    config: DashboardConfig
    cumulative_representativeness: Decimal
    kpis: SectorKPIs
    resellers: tuple[ClassifiedReseller, ...]
    comparison: ComparisonResult | None


@dataclass(frozen=True)
class ResellerView:
    """
    One reseller of a sector with the configuration it was classified under.
    """

    sector_id: str
    sector_label: str
    config: DashboardConfig
    reseller: ClassifiedReseller
