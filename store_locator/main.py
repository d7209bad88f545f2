"""Store Locator — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from store_locator.adapters.persistence.database import engine
from store_locator.config import settings
from store_locator.domain.value_objects.enums import BootstrapStatus
from store_locator.infrastructure.api.routes_health import router as health_router
from store_locator.infrastructure.api.routes_stores import router as stores_router
from store_locator.tools.seed_db import seed

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Seed an empty catalog once before serving, dispose the pool on shutdown."""
    try:
        report = await seed(Path(settings.stores_data_path))
        if report.status == BootstrapStatus.FAILED:
            logger.warning("Catalog bootstrap failed, serving existing catalog: %s", report.error.message)
        else:
            logger.info("Catalog bootstrap: %s (%d stores seeded)", report.status.value, report.seeded)
    except Exception as e:
        # Serve anyway; an empty catalog shows up as degraded in /api/health
        logger.warning("Catalog bootstrap skipped, database not available on startup: %s", e)
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Store Locator",
        description="Nearest-store search and store details over a PostGIS catalog",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(health_router, prefix="/api")
    app.include_router(stores_router, prefix="/api")

    return app


app = create_app()
