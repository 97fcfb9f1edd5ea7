"""
app/schemas/admin.py

Request and response schemas for dashboard administration endpoints.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.dashboard_config import DashboardConfig
from app.repositories.snapshot_repository import SnapshotFileInfo


class SnapshotInfoResponse(BaseModel):
    slot: str
    exists: bool
    size_bytes: int | None = None
    modified_at: datetime | None = None

    @classmethod
    def from_domain(cls, slot: str, info: SnapshotFileInfo | None) -> "SnapshotInfoResponse":
        if info is None:
            return cls(slot=slot, exists=False)
        return cls(
            slot=info.slot,
            exists=True,
            size_bytes=info.size_bytes,
            modified_at=info.modified_at,
        )


class DashboardConfigResponse(BaseModel):
    """
    API response model for the stored dashboard configuration.
    """

    current_cycle: str
    active_snapshot_slot: str
    representativeness_weights: dict[str, float] = Field(default_factory=dict)
    risk_percent_threshold: int
    snapshots: list[SnapshotInfoResponse] = Field(default_factory=list)

    @classmethod
    def from_domain(
        cls,
        config: DashboardConfig,
        snapshots: list[SnapshotInfoResponse],
    ) -> "DashboardConfigResponse":
        return cls(
            current_cycle=config.current_cycle,
            active_snapshot_slot=config.active_snapshot_slot,
            representativeness_weights={
                cycle: float(weight) for cycle, weight in config.representativeness_weights.items()
            },
            risk_percent_threshold=config.risk_percent_threshold,
            snapshots=snapshots,
        )


class DashboardConfigUpdateRequest(BaseModel):
    """
    Partial config update; omitted or null fields keep their stored value.

    Field values are validated by the config repository so stored and
    submitted configs follow the same rules.
    """

    model_config = ConfigDict(extra="forbid")

    current_cycle: str | None = None
    active_snapshot_slot: str | None = None
    representativeness_weights: dict[str, float] | None = None
    risk_percent_threshold: int | None = None


class SnapshotUploadResponse(BaseModel):
    slot: str
    size_bytes: int = Field(..., ge=0)
    modified_at: datetime
