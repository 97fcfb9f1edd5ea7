"""
Repository-layer exceptions for snapshot and config storage.
"""

from __future__ import annotations


class SnapshotRepositoryError(Exception):
    """Base exception for snapshot storage failures."""


class SnapshotNotFoundError(SnapshotRepositoryError, LookupError):
    """Raised when no snapshot file exists for a slot."""


class SnapshotTooLargeError(SnapshotRepositoryError):
    """Raised when an uploaded snapshot exceeds the configured size limit."""


class SnapshotStorageError(SnapshotRepositoryError):
    """Raised when writing a snapshot file fails."""


class DashboardConfigError(ValueError):
    """Raised when a dashboard config update is invalid."""
