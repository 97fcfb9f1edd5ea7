"""
app/schemas/dashboard.py

Response schemas for sector dashboard, reseller and sector catalog
endpoints. Monetary and percent values are exposed as floats rounded to
cents by the services that produce them.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from app.domain.dashboard_view import ClassifiedReseller, DashboardView, ResellerView, SectorKPIs
from app.domain.sales_record import ComparisonResult
from segmentation.engine import TierInfo


def _as_float(value: Decimal | None) -> float | None:
    return float(value) if value is not None else None


class SectorResponse(BaseModel):
    code: str
    label: str


class TierInfoResponse(BaseModel):
    """
    API response model for one reseller's tier classification.
    """

    total_amount: float
    current_tier: str
    color: str
    next_tier: str | None = None
    tier_maintain_floor: float
    tier_upgrade_floor: float | None = None
    cycle_maintain_target: float
    cycle_upgrade_target: float | None = None
    progress_maintain: float = Field(..., ge=0, le=100)
    progress_upgrade: float = Field(..., ge=0, le=100)
    shortfall_maintain: float
    shortfall_upgrade: float | None = None
    at_risk: bool
    fallback_tier: str | None = None
    motivation: str
    motivation_code: str
    motivation_kind: str

    @classmethod
    def from_domain(cls, tier: TierInfo) -> "TierInfoResponse":
        return cls(
            total_amount=float(tier.total_amount),
            current_tier=tier.current_tier,
            color=tier.color,
            next_tier=tier.next_tier,
            tier_maintain_floor=float(tier.tier_maintain_floor),
            tier_upgrade_floor=_as_float(tier.tier_upgrade_floor),
            cycle_maintain_target=float(tier.cycle_maintain_target),
            cycle_upgrade_target=_as_float(tier.cycle_upgrade_target),
            progress_maintain=float(tier.progress_maintain),
            progress_upgrade=float(tier.progress_upgrade),
            shortfall_maintain=float(tier.shortfall_maintain),
            shortfall_upgrade=_as_float(tier.shortfall_upgrade),
            at_risk=tier.at_risk,
            fallback_tier=tier.fallback_tier,
            motivation=tier.motivation,
            motivation_code=tier.motivation_code,
            motivation_kind=tier.motivation_kind,
        )


class ResellerResponse(BaseModel):
    reseller_code: str
    reseller_name: str
    total_amount: float
    totals_by_cycle: dict[str, float] = Field(default_factory=dict)
    item_count: int = Field(..., ge=0)
    line_count: int = Field(..., ge=0)
    tier: TierInfoResponse

    @classmethod
    def from_domain(cls, reseller: ClassifiedReseller) -> "ResellerResponse":
        aggregate = reseller.aggregate
        return cls(
            reseller_code=aggregate.reseller_code,
            reseller_name=aggregate.reseller_name,
            total_amount=float(aggregate.total_amount),
            totals_by_cycle={
                cycle: float(amount) for cycle, amount in aggregate.totals_by_cycle.items()
            },
            item_count=aggregate.item_count,
            line_count=aggregate.line_count,
            tier=TierInfoResponse.from_domain(reseller.tier),
        )


class SectorKPIsResponse(BaseModel):
    sector_total: float
    reseller_count: int = Field(..., ge=0)
    count_near_upgrade: int = Field(..., ge=0)
    count_at_risk: int = Field(..., ge=0)

    @classmethod
    def from_domain(cls, kpis: SectorKPIs) -> "SectorKPIsResponse":
        return cls(
            sector_total=float(kpis.sector_total),
            reseller_count=kpis.reseller_count,
            count_near_upgrade=kpis.count_near_upgrade,
            count_at_risk=kpis.count_at_risk,
        )


class ComparisonRowResponse(BaseModel):
    reseller_code: str
    reseller_name: str
    total_morning: float
    total_afternoon: float
    delta: float
    grew_today: bool


class ComparisonResponse(BaseModel):
    """
    API response model for the morning vs afternoon comparison.
    """

    sector_total_morning: float
    sector_total_afternoon: float
    sector_delta: float
    per_reseller: list[ComparisonRowResponse] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, comparison: ComparisonResult) -> "ComparisonResponse":
        return cls(
            sector_total_morning=float(comparison.sector_total_morning),
            sector_total_afternoon=float(comparison.sector_total_afternoon),
            sector_delta=float(comparison.sector_delta),
            per_reseller=[
                ComparisonRowResponse(
                    reseller_code=row.reseller_code,
                    reseller_name=row.reseller_name,
                    total_morning=float(row.total_morning),
                    total_afternoon=float(row.total_afternoon),
                    delta=float(row.delta),
                    grew_today=row.grew_today,
                )
                for row in comparison.per_reseller
            ],
        )


class AppliedConfigResponse(BaseModel):
    """
    Configuration echo attached to dashboard responses.
    """

    current_cycle: str
    active_snapshot_slot: str
    risk_percent_threshold: int
    representativeness_weights: dict[str, float] = Field(default_factory=dict)
    cumulative_representativeness: float | None = None


class DashboardResponse(BaseModel):
    sector_id: str
    sector_label: str
    config: AppliedConfigResponse
    kpis: SectorKPIsResponse
    resellers: list[ResellerResponse] = Field(default_factory=list)
    comparison: ComparisonResponse | None = None

    @classmethod
    def from_domain(cls, view: DashboardView) -> "DashboardResponse":
        return cls(
            sector_id=view.sector_id,
            sector_label=view.sector_label,
            config=AppliedConfigResponse(
                current_cycle=view.config.current_cycle,
                active_snapshot_slot=view.config.active_snapshot_slot,
                risk_percent_threshold=view.config.risk_percent_threshold,
                representativeness_weights={
                    cycle: float(weight)
                    for cycle, weight in view.config.representativeness_weights.items()
                },
                cumulative_representativeness=float(view.cumulative_representativeness),
            ),
            kpis=SectorKPIsResponse.from_domain(view.kpis),
            resellers=[ResellerResponse.from_domain(reseller) for reseller in view.resellers],
            comparison=(
                ComparisonResponse.from_domain(view.comparison)
                if view.comparison is not None
                else None
            ),
        )


class ResellerDetailResponse(BaseModel):
    sector_id: str
    sector_label: str
    current_cycle: str
    active_snapshot_slot: str
    reseller: ResellerResponse

    @classmethod
    def from_domain(cls, view: ResellerView) -> "ResellerDetailResponse":
        return cls(
            sector_id=view.sector_id,
            sector_label=view.sector_label,
            current_cycle=view.config.current_cycle,
            active_snapshot_slot=view.config.active_snapshot_slot,
            reseller=ResellerResponse.from_domain(view.reseller),
        )
