"""SQLAlchemy/PostGIS repository implementation of the store catalog port."""

from __future__ import annotations

import logging

from sqlalchemy import Float, Select, false, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from store_locator.adapters.persistence.models import StoreModel
from store_locator.application.ports.store_repo import StoreRepository
from store_locator.domain.entities.store import Store, StoreWithDistance
from store_locator.domain.errors import DataAccessError, ResourceNotFound
from store_locator.domain.policies.distance import with_distance
from store_locator.domain.value_objects.address import Address, OpeningHours
from store_locator.domain.value_objects.geo_coordinates import GeoCoordinates

# ─── Mappers ─────────────────────────────────────────────────────────


def _store_to_domain(m: StoreModel) -> Store:
    return Store(
        id=m.id,
        name=m.name,
        address=Address(
            street=m.street,
            street2=m.street2,
            street3=m.street3,
            city=m.city,
            postal_code=m.postal_code,
        ),
        coordinates=GeoCoordinates(latitude=m.latitude, longitude=m.longitude),
        opening_hours=OpeningHours(open=m.today_open, close=m.today_close),
        location_type=m.location_type,
        is_collection_point=m.collection_point,
    )


def _store_to_model(store: Store) -> StoreModel:
    return StoreModel(
        id=store.id,
        name=store.name,
        street=store.address.street,
        street2=store.address.street2,
        street3=store.address.street3,
        city=store.address.city,
        postal_code=store.address.postal_code,
        latitude=store.coordinates.latitude,
        longitude=store.coordinates.longitude,
        today_open=store.opening_hours.open,
        today_close=store.opening_hours.close,
        location_type=store.location_type,
        collection_point=store.is_collection_point,
    )


# ─── Queries ─────────────────────────────────────────────────────────


def nearest_stores_statement(coordinates: GeoCoordinates, limit: int) -> Select:
    """KNN query over the GiST index on ``stores.location``.

    Rows are ordered by the ``<->`` geography operator (great-circle distance
    on the sphere) and the reported distance uses the same sphere metric, so
    distances come back non-decreasing.
    """
    query_point = func.geography(
        func.ST_SetSRID(
            func.ST_MakePoint(coordinates.longitude, coordinates.latitude), 4326
        )
    )
    distance = func.ST_Distance(StoreModel.location, query_point, false()).label(
        "distance"
    )
    return (
        select(StoreModel, distance)
        .order_by(StoreModel.location.op("<->", return_type=Float)(query_point))
        .limit(limit)
    )


# ─── Repository ──────────────────────────────────────────────────────


class SqlStoreRepository(StoreRepository):
    def __init__(self, session: AsyncSession, logger: logging.Logger | None = None):
        self._s = session
        self._log = logger or logging.getLogger(__name__)

    async def count(self) -> int | DataAccessError:
        try:
            return await self._s.scalar(select(func.count()).select_from(StoreModel))
        except Exception as e:
            self._log.exception("Error counting stores")
            return DataAccessError(message="Failed to count stores in database", cause=e)

    async def find_by_id(
        self, store_id: int
    ) -> Store | ResourceNotFound | DataAccessError:
        try:
            m = await self._s.get(StoreModel, store_id)
            store = _store_to_domain(m) if m else None
        except Exception as e:
            self._log.exception("Error finding store by id %s", store_id)
            return DataAccessError(message="Failed to retrieve store from database", cause=e)

        if store is None:
            return ResourceNotFound(
                message=f"Store with ID {store_id} not found",
                resource_type="Store",
                identifier=str(store_id),
            )
        return store

    async def find_nearest(
        self, coordinates: GeoCoordinates, limit: int
    ) -> list[StoreWithDistance] | DataAccessError:
        try:
            result = await self._s.execute(nearest_stores_statement(coordinates, limit))
            return [with_distance(_store_to_domain(m), distance) for m, distance in result.all()]
        except Exception as e:
            self._log.exception("Error finding nearest stores")
            return DataAccessError(
                message="Failed to retrieve stores from database", cause=e
            )

    async def save_all(self, stores: list[Store]) -> list[Store] | DataAccessError:
        try:
            models = [_store_to_model(s) for s in stores]
            self._s.add_all(models)
            await self._s.flush()
            saved = [_store_to_domain(m) for m in models]
            await self._s.commit()
            return saved
        except Exception as e:
            self._log.exception("Error saving stores")
            await self._s.rollback()
            return DataAccessError(message="Failed to save stores to database", cause=e)
