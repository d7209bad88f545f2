"""Store endpoints — nearest-store search and store details."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from store_locator.application.use_cases.resolve_stores import (
    StoreResolutionService,
    StoreResponse,
)
from store_locator.config import settings
from store_locator.domain.errors import DomainError
from store_locator.infrastructure.api.dependencies import get_resolution_service
from store_locator.infrastructure.api.errors import error_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/stores", tags=["stores"])

NEAREST_MAX_AGE = 30 * 60
DETAILS_MAX_AGE = 24 * 60 * 60


@router.get("/nearest")
async def find_nearest_stores(
    request: Request,
    latitude: float,
    longitude: float,
    limit: int = settings.default_nearest_limit,
    service: StoreResolutionService = Depends(get_resolution_service),
):
    """Return the closest stores to a point, nearest first."""
    logger.info(
        "Finding nearest stores at coordinates: lat=%s, lng=%s, limit=%s",
        latitude, longitude, limit,
    )
    result = await service.find_nearest_stores(latitude, longitude, limit)
    if isinstance(result, DomainError):
        return error_response(result, request.url.path)

    return JSONResponse(
        content=[_serialize_store(s) for s in result],
        headers={"Cache-Control": f"max-age={NEAREST_MAX_AGE}"},
    )


@router.get("/{store_id}")
async def get_store_details(
    store_id: int,
    request: Request,
    service: StoreResolutionService = Depends(get_resolution_service),
):
    """Return one store by id (distance fields are zero)."""
    logger.info("Fetching details for store with ID: %s", store_id)
    result = await service.get_store_details(store_id)
    if isinstance(result, DomainError):
        return error_response(result, request.url.path)

    return JSONResponse(
        content=_serialize_store(result),
        headers={"Cache-Control": f"max-age={DETAILS_MAX_AGE}"},
    )


def _serialize_store(s: StoreResponse) -> dict:
    return {
        "storeId": s.store_id,
        "name": s.name,
        "address": s.address,
        "city": s.city,
        "postalCode": s.postal_code,
        "latitude": s.latitude,
        "longitude": s.longitude,
        "distanceInKm": s.distance_in_km,
        "distanceInMeters": s.distance_in_meters,
        "openingHours": s.opening_hours,
        "closingHours": s.closing_hours,
        "isCollectionPoint": s.is_collection_point,
        "lastUpdated": s.last_updated.isoformat(),
    }
