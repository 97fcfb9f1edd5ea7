"""
app/api/routers package marker.
"""

from app.api.routers.admin_router import router as admin_router
from app.api.routers.dashboard_router import router as dashboard_router
from app.api.routers.sector_router import router as sector_router

__all__ = [
    "admin_router",
    "dashboard_router",
    "sector_router",
]
