"""
app/api/routers/dashboard_router.py

Sector dashboard and reseller detail HTTP endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.api.dependencies import get_dashboard
from app.repositories.errors import SnapshotNotFoundError
from app.schemas.dashboard import DashboardResponse, ResellerDetailResponse
from app.services.dashboard_service import (
    DashboardService,
    ResellerNotFoundError,
    SectorNotFoundError,
)
from app.services.snapshot_loader import SnapshotFormatError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["dashboard"])


def _error(status_code: int, error: str, message: str) -> HTTPException:
    return HTTPException(status_code=status_code, detail={"error": error, "message": message})


@router.get("/dashboard", response_model=DashboardResponse)
def get_sector_dashboard(
    sector_id: str = Query(..., min_length=1, description="Sector code or label fragment"),
    dashboard_service: DashboardService = Depends(get_dashboard),
) -> DashboardResponse:
    """
    Classify every reseller of one sector in the active snapshot.

    Raises HTTP 404 when no snapshot was uploaded yet or the sector has no sales.
    """

    try:
        view = dashboard_service.build_dashboard(sector_id)
    except SnapshotNotFoundError as exc:
        raise _error(status.HTTP_404_NOT_FOUND, "snapshot_not_found", "No data available yet.") from exc
    except SectorNotFoundError as exc:
        raise _error(status.HTTP_404_NOT_FOUND, "sector_not_found", str(exc)) from exc
    except SnapshotFormatError as exc:
        logger.error("Active snapshot unreadable sector=%r: %s", sector_id, exc)
        raise _error(status.HTTP_422_UNPROCESSABLE_ENTITY, "invalid_snapshot", str(exc)) from exc

    return DashboardResponse.from_domain(view)


@router.get("/resellers/{reseller_code}", response_model=ResellerDetailResponse)
def get_reseller_detail(
    reseller_code: str,
    sector_id: str = Query(..., min_length=1, description="Sector code or label fragment"),
    dashboard_service: DashboardService = Depends(get_dashboard),
) -> ResellerDetailResponse:
    """
    Return one reseller's totals and tier classification.
    """

    try:
        view = dashboard_service.get_reseller(sector_id, reseller_code)
    except SnapshotNotFoundError as exc:
        raise _error(status.HTTP_404_NOT_FOUND, "snapshot_not_found", "No data available yet.") from exc
    except SectorNotFoundError as exc:
        raise _error(status.HTTP_404_NOT_FOUND, "sector_not_found", str(exc)) from exc
    except ResellerNotFoundError as exc:
        raise _error(status.HTTP_404_NOT_FOUND, "reseller_not_found", str(exc)) from exc
    except SnapshotFormatError as exc:
        logger.error("Active snapshot unreadable sector=%r: %s", sector_id, exc)
        raise _error(status.HTTP_422_UNPROCESSABLE_ENTITY, "invalid_snapshot", str(exc)) from exc

    return ResellerDetailResponse.from_domain(view)
