"""
app/domain/sales_record.py

Domain models for snapshot records, per-sector aggregates and
snapshot comparisons.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

SALE_KIND = "venda"


@dataclass(frozen=True)
class NormalizedRecord:
    """
    One snapshot transaction line after header mapping and normalization.

    Records reaching downstream stages always carry a ``sector_code`` and a
    non-empty ``reseller_code``.
    """

    sector_label: str
    sector_code: str | None
    reseller_code: str
    reseller_name: str
    billing_cycle: str
    product_code: str
    product_name: str
    item_quantity: int
    amount: Decimal
    kind: str

    @property
    def is_sale(self) -> bool:
        return self.kind == SALE_KIND


@dataclass(frozen=True)
class ResellerAggregate:
    """
    Sales totals of one reseller within one sector.

    ``line_count`` counts contributing transaction lines, not distinct
    products.
    """

    reseller_code: str
    reseller_name: str
    total_amount: Decimal
    totals_by_cycle: dict[str, Decimal] = field(default_factory=dict)
    item_count: int = 0
    line_count: int = 0


@dataclass(frozen=True)
class SectorAggregate:
    """
    Per-reseller totals for one sector, in first-seen reseller order.
    """

    sector_id: str
    sector_label: str
    resellers: tuple[ResellerAggregate, ...]
    sector_total: Decimal

    def find_reseller(self, reseller_code: str) -> ResellerAggregate | None:
        for reseller in self.resellers:
            if reseller.reseller_code == reseller_code:
                return reseller
        return None


@dataclass(frozen=True)
class ComparisonRow:
    """
    Morning vs afternoon totals of one reseller.
    """

    reseller_code: str
    reseller_name: str
    total_morning: Decimal
    total_afternoon: Decimal
    delta: Decimal

    @property
    def grew_today(self) -> bool:
        return self.delta > 0


@dataclass(frozen=True)
class ComparisonResult:
    """
    Sector-level and per-reseller deltas between two snapshots.

    ``per_reseller`` is sorted by ``delta`` descending.
    """

    sector_total_morning: Decimal
    sector_total_afternoon: Decimal
    sector_delta: Decimal
    per_reseller: tuple[ComparisonRow, ...]
