"""
app/domain package marker.
"""

from app.domain.dashboard_config import (
    ALLOWED_SNAPSHOT_SLOTS,
    DashboardConfig,
    InvalidSnapshotSlotError,
    SnapshotSlot,
    validate_slot,
)
from app.domain.sales_record import (
    SALE_KIND,
    ComparisonResult,
    ComparisonRow,
    NormalizedRecord,
    ResellerAggregate,
    SectorAggregate,
)

__all__ = [
    "ALLOWED_SNAPSHOT_SLOTS",
    "ComparisonResult",
    "ComparisonRow",
    "DashboardConfig",
    "InvalidSnapshotSlotError",
    "NormalizedRecord",
    "ResellerAggregate",
    "SALE_KIND",
    "SectorAggregate",
    "SnapshotSlot",
    "validate_slot",
]
