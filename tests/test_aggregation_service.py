"""
tests/test_aggregation_service.py

Pytest unit tests for AggregationService and ComparisonService.

All tests are pure Python: records are built in memory.

Coverage
--------
- Totals summed exactly and rounded once per reseller
- Non-sale records excluded from totals
- The three sector query forms (code, label substring, numeric table lookup)
- First-seen reseller order, per-cycle subtotals, line and item counts
- Unknown and blank sector queries
- Afternoon-anchored comparison sorted by delta
"""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

import pytest

from app.repositories.snapshot_repository import SnapshotRepository
from app.services.aggregation_service import AggregationService
from app.services.comparison_service import ComparisonService
from app.services.snapshot_loader import SnapshotLoader


@pytest.fixture()
def svc() -> AggregationService:
    return AggregationService()


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------


class TestAggregate:
    def test_sums_sales_per_reseller(self, svc: AggregationService, record) -> None:
        records = [
            record("R1", "100.25"),
            record("R1", "50.25"),
            record("R1", "999", kind="devolucao"),
        ]

        aggregate = svc.aggregate(records, "14246")

        assert aggregate is not None
        assert len(aggregate.resellers) == 1
        assert aggregate.resellers[0].total_amount == Decimal("150.50")
        assert aggregate.resellers[0].line_count == 2
        assert aggregate.sector_total == Decimal("150.50")

    def test_rounds_once_at_the_end(self, svc: AggregationService, record) -> None:
        records = [record("R1", "0.004"), record("R1", "0.004")]

        aggregate = svc.aggregate(records, "14246")

        assert aggregate.resellers[0].total_amount == Decimal("0.01")

    def test_keeps_first_seen_order(self, svc: AggregationService, record) -> None:
        records = [record("R2", "1"), record("R1", "5"), record("R2", "1")]

        aggregate = svc.aggregate(records, "14246")

        assert [r.reseller_code for r in aggregate.resellers] == ["R2", "R1"]

    def test_counts_items_lines_and_cycles(self, svc: AggregationService, record) -> None:
        records = [
            record("R1", "10", item_quantity=3, billing_cycle="01/2026"),
            record("R1", "20", item_quantity=2, billing_cycle="02/2026"),
            record("R1", "5", item_quantity=1, billing_cycle="02/2026"),
        ]

        reseller = svc.aggregate(records, "14246").resellers[0]

        assert reseller.item_count == 6
        assert reseller.line_count == 3
        assert reseller.totals_by_cycle == {"01/2026": Decimal("10"), "02/2026": Decimal("25")}

    def test_matches_label_substring_case_insensitively(
        self, svc: AggregationService, record
    ) -> None:
        records = [
            record("R1", "10"),
            record("R2", "10", sector_label="PRATA / Palmeira / Igaci /", sector_code="1260"),
        ]

        aggregate = svc.aggregate(records, "penedo")

        assert [r.reseller_code for r in aggregate.resellers] == ["R1"]
        assert aggregate.sector_label == "OURO / Penedo /"
        assert aggregate.sector_id == "penedo"

    def test_numeric_query_resolves_raw_label_through_table(
        self, svc: AggregationService, record
    ) -> None:
        # Label stamped with a leading number resolves to 13706 on load,
        # while the table maps the same label to 19699.
        label = "13706 - ALCINA MARIA - SETOR DEVOLUÇÃO"
        records = [record("R1", "10", sector_label=label, sector_code="13706")]

        assert svc.aggregate(records, "19699") is not None
        assert svc.aggregate(records, "13706") is not None

    def test_sector_with_only_non_sales(self, svc: AggregationService, record) -> None:
        aggregate = svc.aggregate([record("R1", "10", kind="bonificacao")], "14246")

        assert aggregate is not None
        assert aggregate.resellers == ()
        assert aggregate.sector_total == Decimal("0")

    @pytest.mark.parametrize("query", ["99999", "", "   "])
    def test_unknown_or_blank_query(self, svc: AggregationService, record, query: str) -> None:
        assert svc.aggregate([record("R1", "10")], query) is None

    def test_find_reseller(self, svc: AggregationService, record) -> None:
        aggregate = svc.aggregate([record("R1", "10"), record("R2", "20")], "14246")

        assert aggregate.find_reseller("R2").total_amount == Decimal("20.00")
        assert aggregate.find_reseller("R3") is None

    def test_out_of_range_amount_cell_counts_as_zero(
        self, svc: AggregationService, tmp_path: Path, snapshot
    ) -> None:
        loader = SnapshotLoader(repository=SnapshotRepository(tmp_path))
        records, summary = loader.parse(
            snapshot(
                "OURO / Penedo /;R1;Ana;01/2026;P1;Prod;1;1E+30;Venda",
                "OURO / Penedo /;R1;Ana;01/2026;P2;Prod;1;10,00;Venda",
            )
        )

        aggregate = svc.aggregate(records, "14246")

        assert aggregate.resellers[0].total_amount == Decimal("10.00")
        assert aggregate.sector_total == Decimal("10.00")
        assert any("out of range" in diagnostic.message for diagnostic in summary.diagnostics)

    def test_large_totals_round_to_cents(self, svc: AggregationService, record) -> None:
        records = [record("R1", "9E+25"), record("R1", "9E+25")]

        aggregate = svc.aggregate(records, "14246")

        assert aggregate.resellers[0].total_amount == Decimal("1.8E+26")
        assert aggregate.sector_total == Decimal("1.8E+26")


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------


class TestCompare:
    def test_deltas_sorted_descending(self, record) -> None:
        morning = [record("R1", "100"), record("R2", "300"), record("R3", "40")]
        afternoon = [
            record("R1", "150"),
            record("R2", "300"),
            record("R4", "80"),
        ]

        result = ComparisonService().compare(morning, afternoon, "14246")

        assert result is not None
        assert [(row.reseller_code, row.delta) for row in result.per_reseller] == [
            ("R4", Decimal("80.00")),
            ("R1", Decimal("50.00")),
            ("R2", Decimal("0.00")),
        ]
        assert result.per_reseller[0].total_morning == Decimal("0")
        assert result.per_reseller[0].grew_today
        assert not result.per_reseller[2].grew_today

    def test_morning_only_resellers_are_excluded(self, record) -> None:
        result = ComparisonService().compare(
            [record("R1", "10"), record("R3", "40")],
            [record("R1", "10")],
            "14246",
        )

        assert [row.reseller_code for row in result.per_reseller] == ["R1"]
        assert result.sector_total_morning == Decimal("50.00")
        assert result.sector_total_afternoon == Decimal("10.00")
        assert result.sector_delta == Decimal("-40.00")

    def test_missing_sector_in_either_snapshot(self, record) -> None:
        service = ComparisonService()
        other = record("R1", "10", sector_label="PRATA / Palmeira / Igaci /", sector_code="1260")

        assert service.compare([other], [record("R1", "10")], "14246") is None
        assert service.compare([record("R1", "10")], [other], "14246") is None
