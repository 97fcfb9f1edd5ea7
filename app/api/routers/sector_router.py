"""
app/api/routers/sector_router.py

Canonical sector catalog endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.dependencies import get_sector_catalog
from app.schemas.dashboard import SectorResponse
from sectors.catalog import SectorEntry

router = APIRouter(prefix="/api", tags=["sectors"])


@router.get("/sectors", response_model=list[SectorResponse])
def list_sectors(
    catalog: tuple[SectorEntry, ...] = Depends(get_sector_catalog),
) -> list[SectorResponse]:
    """
    List the canonical sectors in catalog order.
    """

    return [SectorResponse(code=entry.code, label=entry.label) for entry in catalog]
