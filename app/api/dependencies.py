"""
app/api/dependencies.py

Shared FastAPI dependencies for request validation and service wiring.
"""

from __future__ import annotations

from fastapi import File, HTTPException, UploadFile, status

from app.repositories.dashboard_config_repository import DashboardConfigRepository
from app.services.dashboard_service import (
    DashboardService,
    get_dashboard_config_repository,
    get_dashboard_service,
)
from app.services.snapshot_loader import SnapshotLoader, get_snapshot_loader
from sectors.catalog import SECTOR_CATALOG, SectorEntry

CSV_CONTENT_TYPES = {
    "text/csv",
    "application/csv",
    "application/vnd.ms-excel",
}


def get_csv_upload(file: UploadFile = File(...)) -> UploadFile:
    """
    Validate that the uploaded file is a CSV by extension or MIME type.
    """

    filename = (file.filename or "").strip().lower()
    content_type = (file.content_type or "").strip().lower()

    is_csv_filename = filename.endswith(".csv")
    is_csv_content_type = content_type in CSV_CONTENT_TYPES

    if not is_csv_filename and not is_csv_content_type:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "invalid_file_type", "message": "Only CSV files are allowed."},
        )

    return file


def get_sector_catalog() -> tuple[SectorEntry, ...]:
    return SECTOR_CATALOG


def get_loader() -> SnapshotLoader:
    return get_snapshot_loader()


def get_config_repository() -> DashboardConfigRepository:
    return get_dashboard_config_repository()


def get_dashboard() -> DashboardService:
    return get_dashboard_service()
