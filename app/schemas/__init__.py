"""
app/schemas package marker.
"""

from app.schemas.admin import (
    DashboardConfigResponse,
    DashboardConfigUpdateRequest,
    SnapshotInfoResponse,
    SnapshotUploadResponse,
)
from app.schemas.dashboard import (
    ComparisonResponse,
    DashboardResponse,
    ResellerDetailResponse,
    ResellerResponse,
    SectorResponse,
    TierInfoResponse,
)
from app.schemas.health import HealthResponse

__all__ = [
    "ComparisonResponse",
    "DashboardConfigResponse",
    "DashboardConfigUpdateRequest",
    "DashboardResponse",
    "HealthResponse",
    "ResellerDetailResponse",
    "ResellerResponse",
    "SectorResponse",
    "SnapshotInfoResponse",
    "SnapshotUploadResponse",
    "TierInfoResponse",
]
