"""Health check endpoint."""

from fastapi import APIRouter, Depends

from store_locator.application.ports.store_repo import StoreRepository
from store_locator.domain.errors import DomainError
from store_locator.infrastructure.api.dependencies import get_store_repo

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(store_repo: StoreRepository = Depends(get_store_repo)):
    """Check database connectivity and report the catalog size.

    An empty catalog is reported as degraded: it usually means the startup
    seed failed.
    """
    count = await store_repo.count()
    if isinstance(count, DomainError):
        db_status, stores = f"error: {count.message}", None
    else:
        db_status, stores = "connected", count

    return {
        "status": "ok" if db_status == "connected" and stores else "degraded",
        "database": db_status,
        "stores": stores,
        "service": "Store Locator",
    }
