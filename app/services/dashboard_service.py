"""
app/services/dashboard_service.py

Dashboard pipeline orchestrator.

Wires SnapshotLoader → AggregationService → SegmentationEngine →
KPIService (and ComparisonService when both snapshots exist) into one
read-only call per request. No business rules live here; every layer
retains its own responsibility:

    SnapshotLoader       – file reading, parsing, per-slot caching
    AggregationService   – sector selection and per-reseller totals
    SegmentationEngine   – tier classification and progress metrics
    KPIService           – sector indicators
    ComparisonService    – morning vs afternoon deltas

Failure contract
----------------
- Active snapshot missing        → SnapshotNotFoundError
- Sector query matches nothing   → SectorNotFoundError
- Reseller absent from sector    → ResellerNotFoundError
- Comparison failure             → logged at WARNING; ``comparison`` is None
"""

from __future__ import annotations

import logging
from functools import lru_cache

from app.config import get_snapshot_settings
from app.domain.dashboard_config import DashboardConfig, SnapshotSlot
from app.domain.dashboard_view import ClassifiedReseller, DashboardView, ResellerView
from app.domain.sales_record import ComparisonResult, ResellerAggregate, SectorAggregate
from app.repositories.dashboard_config_repository import DashboardConfigRepository
from app.services.aggregation_service import AggregationService
from app.services.comparison_service import ComparisonService
from app.services.kpi_service import KPIService
from app.services.snapshot_loader import SnapshotLoader, get_snapshot_loader
from segmentation.engine import SegmentationEngine, cumulative_representativeness

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class SectorNotFoundError(LookupError):
    """
    Raised when the sector query matches no sale in the active snapshot.
    """


class ResellerNotFoundError(LookupError):
    """
    Raised when a reseller code is not part of the resolved sector.
    """


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


class DashboardService:
    """
    Builds sector dashboards and reseller details from the active snapshot.
    """

    def __init__(
        self,
        *,
        loader: SnapshotLoader,
        config_repository: DashboardConfigRepository,
        aggregator: AggregationService | None = None,
        engine: SegmentationEngine | None = None,
        kpi_service: KPIService | None = None,
        comparison_service: ComparisonService | None = None,
    ) -> None:
        self._loader = loader
        self._config_repository = config_repository
        self._aggregator = aggregator or AggregationService()
        self._engine = engine or SegmentationEngine()
        self._kpi_service = kpi_service or KPIService()
        self._comparison_service = comparison_service or ComparisonService(
            aggregator=self._aggregator
        )

    def build_dashboard(self, sector_query: str) -> DashboardView:
        """
        Classify every reseller of the queried sector in the active snapshot.
        """

        config = self._config_repository.get()
        aggregate = self._load_sector(config, sector_query)
        if not aggregate.resellers:
            raise SectorNotFoundError(f"No sales found for sector {sector_query!r}.")

        classified = tuple(self._classify(reseller, config) for reseller in aggregate.resellers)
        kpis = self._kpi_service.calculate_sector_kpis(
            classified,
            risk_percent_threshold=config.risk_percent_threshold,
        )
        logger.info(
            "Dashboard built sector=%r slot=%s resellers=%d",
            aggregate.sector_id,
            config.active_snapshot_slot,
            kpis.reseller_count,
        )
        return DashboardView(
            sector_id=aggregate.sector_id,
            sector_label=aggregate.sector_label,
            config=config,
            cumulative_representativeness=cumulative_representativeness(
                config.representativeness_weights, config.current_cycle
            ),
            kpis=kpis,
            resellers=classified,
            comparison=self._compare(sector_query),
        )

    def get_reseller(self, sector_query: str, reseller_code: str) -> ResellerView:
        """
        Classify one reseller of the queried sector in the active snapshot.
        """

        config = self._config_repository.get()
        aggregate = self._load_sector(config, sector_query)
        reseller = aggregate.find_reseller(reseller_code.strip())
        if reseller is None:
            raise ResellerNotFoundError(
                f"Reseller {reseller_code!r} not found in sector {sector_query!r}."
            )
        return ResellerView(
            sector_id=aggregate.sector_id,
            sector_label=aggregate.sector_label,
            config=config,
            reseller=self._classify(reseller, config),
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _load_sector(self, config: DashboardConfig, sector_query: str) -> SectorAggregate:
        records = self._loader.load(config.active_snapshot_slot)
        aggregate = self._aggregator.aggregate(records, sector_query)
        if aggregate is None:
            raise SectorNotFoundError(f"No data found for sector {sector_query!r}.")
        return aggregate

    def _classify(self, reseller: ResellerAggregate, config: DashboardConfig) -> ClassifiedReseller:
        return ClassifiedReseller(
            aggregate=reseller,
            tier=self._engine.get_segmentation_info(
                reseller.total_amount,
                config.representativeness_weights,
                config.current_cycle,
            ),
        )

    def _compare(self, sector_query: str) -> ComparisonResult | None:
        repository = self._loader.repository
        if not (
            repository.exists(SnapshotSlot.MORNING) and repository.exists(SnapshotSlot.AFTERNOON)
        ):
            return None
        try:
            return self._comparison_service.compare(
                self._loader.load(SnapshotSlot.MORNING),
                self._loader.load(SnapshotSlot.AFTERNOON),
                sector_query,
            )
        except Exception as exc:  # noqa: BLE001
            logger.warning("Snapshot comparison failed sector=%r: %s", sector_query, exc)
            return None


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_dashboard_config_repository() -> DashboardConfigRepository:
    """
    Build and cache the config repository on the configured data directory.
    """

    return DashboardConfigRepository(get_snapshot_settings().data_dir)


@lru_cache(maxsize=1)
def get_dashboard_service() -> DashboardService:
    """
    Build and cache the dashboard service with env-driven settings.
    """

    return DashboardService(
        loader=get_snapshot_loader(),
        config_repository=get_dashboard_config_repository(),
    )
