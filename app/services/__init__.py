"""
app/services package marker.
"""

from app.services.aggregation_service import AggregationService
from app.services.comparison_service import ComparisonService
from app.services.dashboard_service import (
    DashboardService,
    ResellerNotFoundError,
    SectorNotFoundError,
    get_dashboard_service,
)
from app.services.kpi_service import KPIService
from app.services.snapshot_cache import SnapshotCache, get_snapshot_cache
from app.services.snapshot_loader import SnapshotFormatError, SnapshotLoader, get_snapshot_loader

__all__ = [
    "AggregationService",
    "ComparisonService",
    "DashboardService",
    "get_dashboard_service",
    "KPIService",
    "ResellerNotFoundError",
    "SectorNotFoundError",
    "SnapshotCache",
    "get_snapshot_cache",
    "SnapshotFormatError",
    "SnapshotLoader",
    "get_snapshot_loader",
]
