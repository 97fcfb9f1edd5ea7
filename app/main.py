from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from datetime import datetime, timezone

from fastapi import FastAPI

from app.config import get_logging_settings, get_snapshot_settings
from app.schemas.health import HealthResponse

SERVICE_NAME = "supervision-games"


def _configure_logging() -> None:
    """
    Configure root logging once for the API process.
    """

    log_level = get_logging_settings().level
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Make sure the snapshot data directory exists before serving traffic."""
    settings = get_snapshot_settings()
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    logging.getLogger(__name__).info(
        "Snapshot storage ready data_dir=%s max_upload_bytes=%d",
        settings.data_dir,
        settings.max_upload_bytes,
    )
    yield


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.
    """

    _configure_logging()

    application = FastAPI(
        title="Supervision Games API",
        version="1.0.0",
        lifespan=_lifespan,
    )

    from app.api.routers import admin_router, dashboard_router, sector_router

    application.include_router(sector_router)
    application.include_router(dashboard_router)
    application.include_router(admin_router)

    @application.get("/health")
    def healthcheck() -> HealthResponse:
        return HealthResponse(
            status="ok",
            service=SERVICE_NAME,
            timestamp=datetime.now(tz=timezone.utc),
        )

    return application


app = create_app()
