"""
app/services/aggregation_service.py

Per-sector aggregation of normalized snapshot records.

Sector selection is permissive. A record belongs to the queried sector
when any of these holds:

    1. its resolved ``sector_code`` equals the query;
    2. the query is a case-insensitive substring of its raw sector label;
    3. the query is purely numeric and the raw label resolves, through the
       canonical table, to that code.

Only sale records (``kind == "venda"``) contribute to totals. Amounts are
summed exactly and rounded to cents once per reseller, at the end.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable

from app.domain.sales_record import NormalizedRecord, ResellerAggregate, SectorAggregate
from sectors.base import BaseSectorResolver
from sectors.resolver import get_sector_resolver
from segmentation.amounts import round_money

logger = logging.getLogger(__name__)


class _ResellerAccumulator:
    __slots__ = ("reseller_code", "reseller_name", "total", "by_cycle", "items", "lines")

    def __init__(self, reseller_code: str, reseller_name: str) -> None:
        self.reseller_code = reseller_code
        self.reseller_name = reseller_name
        self.total = Decimal("0")
        self.by_cycle: dict[str, Decimal] = {}
        self.items = 0
        self.lines = 0

    def add(self, record: NormalizedRecord) -> None:
        self.total += record.amount
        self.items += record.item_quantity
        self.lines += 1
        if record.billing_cycle:
            self.by_cycle[record.billing_cycle] = (
                self.by_cycle.get(record.billing_cycle, Decimal("0")) + record.amount
            )

    def build(self) -> ResellerAggregate:
        return ResellerAggregate(
            reseller_code=self.reseller_code,
            reseller_name=self.reseller_name,
            total_amount=round_money(self.total),
            totals_by_cycle=dict(self.by_cycle),
            item_count=self.items,
            line_count=self.lines,
        )


class AggregationService:
    """
    Groups normalized records by reseller within one sector.

    Stateless apart from the sector resolver; safe to share across requests.
    """

    def __init__(self, *, sector_resolver: BaseSectorResolver | None = None) -> None:
        self._sector_resolver = sector_resolver or get_sector_resolver()

    def matches_sector(self, record: NormalizedRecord, sector_query: str) -> bool:
        if record.sector_code == sector_query:
            return True
        if sector_query.lower() in record.sector_label.lower():
            return True
        if sector_query.isdigit():
            return self._sector_resolver.find_sector_code(record.sector_label) == sector_query
        return False

    def aggregate(
        self,
        records: Iterable[NormalizedRecord],
        sector_query: str,
    ) -> SectorAggregate | None:
        """
        Aggregate sale totals per reseller for the queried sector.

        Returns ``None`` when no record matches the sector query. A sector
        whose matching records are all non-sales yields an aggregate with
        no resellers.
        """

        query = (sector_query or "").strip()
        if not query:
            return None

        matched = [record for record in records if self.matches_sector(record, query)]
        if not matched:
            logger.debug("No records matched sector query=%r", query)
            return None

        accumulators: dict[str, _ResellerAccumulator] = {}
        for record in matched:
            if not record.is_sale:
                continue
            accumulator = accumulators.get(record.reseller_code)
            if accumulator is None:
                accumulator = _ResellerAccumulator(record.reseller_code, record.reseller_name)
                accumulators[record.reseller_code] = accumulator
            accumulator.add(record)

        resellers = tuple(accumulator.build() for accumulator in accumulators.values())
        return SectorAggregate(
            sector_id=query,
            sector_label=matched[0].sector_label,
            resellers=resellers,
            sector_total=sum((reseller.total_amount for reseller in resellers), Decimal("0")),
        )
