"""
app/api/routers/admin_router.py

Dashboard configuration and snapshot upload HTTP endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, UploadFile, status

from app.api.dependencies import get_config_repository, get_csv_upload, get_loader
from app.domain.dashboard_config import (
    ALLOWED_SNAPSHOT_SLOTS,
    InvalidSnapshotSlotError,
    validate_slot,
)
from app.logging_utils import log_event
from app.repositories.dashboard_config_repository import DashboardConfigRepository
from app.repositories.errors import (
    DashboardConfigError,
    SnapshotStorageError,
    SnapshotTooLargeError,
)
from app.schemas.admin import (
    DashboardConfigResponse,
    DashboardConfigUpdateRequest,
    SnapshotInfoResponse,
    SnapshotUploadResponse,
)
from app.services.snapshot_loader import SnapshotLoader

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"])


def _snapshot_infos(loader: SnapshotLoader) -> list[SnapshotInfoResponse]:
    return [
        SnapshotInfoResponse.from_domain(slot, loader.repository.info(slot))
        for slot in ALLOWED_SNAPSHOT_SLOTS
    ]


@router.get("/config", response_model=DashboardConfigResponse)
def get_config(
    config_repository: DashboardConfigRepository = Depends(get_config_repository),
    loader: SnapshotLoader = Depends(get_loader),
) -> DashboardConfigResponse:
    """
    Return the stored dashboard config and the state of both snapshot slots.
    """

    return DashboardConfigResponse.from_domain(config_repository.get(), _snapshot_infos(loader))


@router.put("/config", response_model=DashboardConfigResponse)
def update_config(
    body: DashboardConfigUpdateRequest,
    config_repository: DashboardConfigRepository = Depends(get_config_repository),
    loader: SnapshotLoader = Depends(get_loader),
) -> DashboardConfigResponse:
    """
    Apply a partial config update.

    Raises HTTP 400 when a field value is rejected.
    """

    try:
        config = config_repository.update(body.model_dump(exclude_none=True))
    except DashboardConfigError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "invalid_config", "message": str(exc)},
        ) from exc

    return DashboardConfigResponse.from_domain(config, _snapshot_infos(loader))


@router.post("/upload", response_model=SnapshotUploadResponse)
def upload_snapshot(
    slot: str = Query(..., description="Snapshot slot: morning or afternoon"),
    file: UploadFile = Depends(get_csv_upload),
    loader: SnapshotLoader = Depends(get_loader),
) -> SnapshotUploadResponse:
    """
    Store one snapshot extract in the given slot, replacing the previous file.
    """

    try:
        slot = validate_slot(slot)
        info = loader.repository.save(slot, file.file)
    except InvalidSnapshotSlotError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "invalid_slot", "message": str(exc)},
        ) from exc
    except SnapshotTooLargeError as exc:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail={"error": "file_too_large", "message": str(exc)},
        ) from exc
    except SnapshotStorageError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "storage_failed", "message": "Unable to store the snapshot file."},
        ) from exc
    finally:
        file.file.close()

    loader.cache.invalidate(slot)
    log_event(
        logger,
        logging.INFO,
        "snapshot_uploaded",
        slot=slot,
        filename=file.filename,
        size_bytes=info.size_bytes,
    )
    return SnapshotUploadResponse(
        slot=info.slot,
        size_bytes=info.size_bytes,
        modified_at=info.modified_at,
    )
