"""StoreResolutionService: nearest-store and store-detail queries."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from store_locator.application.ports.store_repo import StoreRepository
from store_locator.application.response_cache import ResponseCache
from store_locator.domain.entities.store import StoreWithDistance
from store_locator.domain.errors import DomainError
from store_locator.domain.policies.validation import (
    validate_nearest_query,
    validate_store_id,
)


@dataclass(frozen=True)
class StoreResponse:
    """Flat, serializable view of one store, optionally with distance."""

    store_id: int
    name: str
    address: str
    city: str
    postal_code: str
    latitude: float
    longitude: float
    distance_in_km: float
    distance_in_meters: int
    opening_hours: str
    closing_hours: str
    is_collection_point: bool
    last_updated: datetime


def to_store_response(item: StoreWithDistance) -> StoreResponse:
    store = item.store
    return StoreResponse(
        store_id=store.id,
        name=store.name,
        address=store.address.formatted(),
        city=store.address.city,
        postal_code=store.address.postal_code,
        latitude=store.coordinates.latitude,
        longitude=store.coordinates.longitude,
        distance_in_km=item.distance_in_km,
        distance_in_meters=item.distance_in_meters,
        opening_hours=store.opening_hours.open,
        closing_hours=store.opening_hours.close,
        is_collection_point=store.is_collection_point,
        last_updated=datetime.now(timezone.utc),
    )


class StoreResolutionService:
    """Answers nearest-store and store-detail queries with read-through caching.

    Repository errors are relayed unchanged and never cached.
    """

    def __init__(
        self,
        store_repo: StoreRepository,
        cache: ResponseCache,
        logger: logging.Logger | None = None,
    ):
        self._stores = store_repo
        self._cache = cache
        self._log = logger or logging.getLogger(__name__)

    async def find_nearest_stores(
        self, latitude: float, longitude: float, limit: int
    ) -> list[StoreResponse] | DomainError:
        self._log.info("Finding %d nearest stores to (%s, %s)", limit, latitude, longitude)

        validated = validate_nearest_query(latitude, longitude, limit)
        if isinstance(validated, DomainError):
            return validated
        coordinates, limit = validated

        cache_key = ("nearest", coordinates.latitude, coordinates.longitude, limit)
        cached = self._cache.get(cache_key)
        if cached is not None:
            self._log.debug("Cache hit for %s", cache_key)
            return list(cached)

        found = await self._stores.find_nearest(coordinates, limit)
        if isinstance(found, DomainError):
            return found

        responses = tuple(to_store_response(item) for item in found)
        self._cache.set(cache_key, responses)
        return list(responses)

    async def get_store_details(self, store_id: int) -> StoreResponse | DomainError:
        self._log.info("Getting details for store %s", store_id)

        validated = validate_store_id(store_id)
        if isinstance(validated, DomainError):
            return validated

        cache_key = ("store", validated)
        cached = self._cache.get(cache_key)
        if cached is not None:
            self._log.debug("Cache hit for %s", cache_key)
            return cached

        store = await self._stores.find_by_id(validated)
        if isinstance(store, DomainError):
            return store

        response = to_store_response(StoreWithDistance.at_origin(store))
        self._cache.set(cache_key, response)
        return response
