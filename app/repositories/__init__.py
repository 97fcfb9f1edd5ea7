"""
app/repositories package marker.
"""

from app.repositories.dashboard_config_repository import DashboardConfigRepository
from app.repositories.errors import (
    DashboardConfigError,
    SnapshotNotFoundError,
    SnapshotRepositoryError,
    SnapshotStorageError,
    SnapshotTooLargeError,
)
from app.repositories.snapshot_repository import SnapshotFileInfo, SnapshotRepository

__all__ = [
    "DashboardConfigError",
    "DashboardConfigRepository",
    "SnapshotFileInfo",
    "SnapshotNotFoundError",
    "SnapshotRepository",
    "SnapshotRepositoryError",
    "SnapshotStorageError",
    "SnapshotTooLargeError",
]
