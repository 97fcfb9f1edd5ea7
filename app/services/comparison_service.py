"""
app/services/comparison_service.py

Morning vs afternoon snapshot comparison for one sector.

The join is anchored on the afternoon snapshot: resellers present only
in the morning snapshot are not reported.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable

from app.domain.sales_record import ComparisonResult, ComparisonRow, NormalizedRecord
from app.services.aggregation_service import AggregationService

logger = logging.getLogger(__name__)


class ComparisonService:
    """
    Aggregates two snapshots independently and subtracts them.
    """

    def __init__(self, *, aggregator: AggregationService | None = None) -> None:
        self._aggregator = aggregator or AggregationService()

    def compare(
        self,
        morning_records: Iterable[NormalizedRecord],
        afternoon_records: Iterable[NormalizedRecord],
        sector_query: str,
    ) -> ComparisonResult | None:
        """
        Compute per-reseller and sector deltas, largest delta first.

        Returns ``None`` when either snapshot has no aggregate for the sector.
        """

        morning = self._aggregator.aggregate(morning_records, sector_query)
        afternoon = self._aggregator.aggregate(afternoon_records, sector_query)
        if morning is None or afternoon is None:
            logger.debug(
                "Comparison skipped sector=%r morning_found=%s afternoon_found=%s",
                sector_query,
                morning is not None,
                afternoon is not None,
            )
            return None

        morning_totals = {
            reseller.reseller_code: reseller.total_amount for reseller in morning.resellers
        }

        rows = [
            ComparisonRow(
                reseller_code=reseller.reseller_code,
                reseller_name=reseller.reseller_name,
                total_morning=morning_totals.get(reseller.reseller_code, Decimal("0")),
                total_afternoon=reseller.total_amount,
                delta=reseller.total_amount
                - morning_totals.get(reseller.reseller_code, Decimal("0")),
            )
            for reseller in afternoon.resellers
        ]
        rows.sort(key=lambda row: row.delta, reverse=True)

        return ComparisonResult(
            sector_total_morning=morning.sector_total,
            sector_total_afternoon=afternoon.sector_total,
            sector_delta=afternoon.sector_total - morning.sector_total,
            per_reseller=tuple(rows),
        )
