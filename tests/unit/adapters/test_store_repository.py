"""Tests for SqlStoreRepository with a fake async session (no database)."""

from __future__ import annotations

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import OperationalError

from store_locator.adapters.persistence.models import StoreModel
from store_locator.adapters.persistence.repositories import (
    SqlStoreRepository,
    nearest_stores_statement,
)
from store_locator.domain.errors import DataAccessError, ResourceNotFound
from store_locator.domain.value_objects.geo_coordinates import GeoCoordinates

# ─── Fake sessions ──────────────────────────────────────────────────


class FakeResult:
    def __init__(self, rows):
        self._rows = rows

    def all(self):
        return list(self._rows)


class FakeSession:
    def __init__(self, rows=None, count=0, by_id=None):
        self._rows = rows or []
        self._count = count
        self._by_id = by_id or {}
        self.added: list = []
        self.statements: list = []
        self.committed = False
        self.rolled_back = False

    async def scalar(self, stmt):
        return self._count

    async def get(self, model, ident):
        return self._by_id.get(ident)

    async def execute(self, stmt):
        self.statements.append(stmt)
        return FakeResult(self._rows)

    def add_all(self, models):
        self.added.extend(models)

    async def flush(self):
        pass

    async def commit(self):
        self.committed = True

    async def rollback(self):
        self.rolled_back = True


class BrokenSession(FakeSession):
    def _fail(self):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    async def scalar(self, stmt):
        self._fail()

    async def get(self, model, ident):
        self._fail()

    async def execute(self, stmt):
        self._fail()

    async def flush(self):
        self._fail()


def _model(store_id=33249, latitude=52.361945, longitude=4.891016) -> StoreModel:
    return StoreModel(
        id=store_id,
        name="Amsterdam Vijzelstraat",
        street="Vijzelstraat",
        street2="139",
        street3=None,
        city="Amsterdam",
        postal_code="1017 PT",
        latitude=latitude,
        longitude=longitude,
        today_open="08:00",
        today_close="22:00",
        location_type="Supermarkt",
        collection_point=True,
    )


# ─── Query shape ────────────────────────────────────────────────────


def test_nearest_statement_uses_spatial_index_and_limit():
    stmt = nearest_stores_statement(GeoCoordinates(52.09, 5.12), 5)
    sql = str(stmt.compile(dialect=postgresql.dialect()))

    assert "ST_Distance(stores.location, geography(ST_SetSRID(ST_MakePoint(" in sql
    assert "ORDER BY stores.location <-> geography(" in sql
    assert "LIMIT" in sql


def test_nearest_statement_binds_longitude_before_latitude():
    stmt = nearest_stores_statement(GeoCoordinates(52.09, 5.12), 3)
    params = stmt.compile(dialect=postgresql.dialect()).params
    values = list(params.values())
    assert values.index(5.12) < values.index(52.09)
    assert 3 in values


# ─── Success paths ──────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_count():
    assert await SqlStoreRepository(FakeSession(count=7)).count() == 7


@pytest.mark.asyncio
async def test_find_by_id_maps_row():
    repo = SqlStoreRepository(FakeSession(by_id={33249: _model()}))

    store = await repo.find_by_id(33249)

    assert store.id == 33249
    assert store.address.formatted() == "Vijzelstraat 139"
    assert store.coordinates == GeoCoordinates(52.361945, 4.891016)
    assert store.opening_hours.close == "22:00"
    assert store.is_collection_point is True


@pytest.mark.asyncio
async def test_find_by_id_not_found():
    result = await SqlStoreRepository(FakeSession()).find_by_id(42)

    assert isinstance(result, ResourceNotFound)
    assert result.resource_type == "Store"
    assert result.identifier == "42"
    assert result.message == "Store with ID 42 not found"


@pytest.mark.asyncio
async def test_find_nearest_normalizes_distances():
    rows = [(_model(1), 2500.0), (_model(2), 4321.9)]
    session = FakeSession(rows=rows)

    result = await SqlStoreRepository(session).find_nearest(GeoCoordinates(52.09, 5.12), 2)

    assert [r.store.id for r in result] == [1, 2]
    assert (result[0].distance_in_km, result[0].distance_in_meters) == (2.5, 2500)
    assert (result[1].distance_in_km, result[1].distance_in_meters) == (4.32, 4321)
    assert len(session.statements) == 1


@pytest.mark.asyncio
async def test_save_all_commits(three_stores):
    session = FakeSession()

    saved = await SqlStoreRepository(session).save_all(three_stores)

    assert [s.id for s in saved] == [1, 2, 3]
    assert [m.latitude for m in session.added] == [s.coordinates.latitude for s in three_stores]
    assert session.committed is True


# ─── Failure paths ──────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_count_failure_becomes_data_access_error():
    result = await SqlStoreRepository(BrokenSession()).count()
    assert isinstance(result, DataAccessError)
    assert isinstance(result.cause, OperationalError)


@pytest.mark.asyncio
async def test_find_by_id_failure_becomes_data_access_error():
    result = await SqlStoreRepository(BrokenSession()).find_by_id(1)
    assert isinstance(result, DataAccessError)
    assert result.message == "Failed to retrieve store from database"


@pytest.mark.asyncio
async def test_find_nearest_failure_becomes_data_access_error():
    result = await SqlStoreRepository(BrokenSession()).find_nearest(GeoCoordinates(0, 0), 5)
    assert isinstance(result, DataAccessError)


@pytest.mark.asyncio
async def test_corrupt_row_becomes_data_access_error():
    session = FakeSession(rows=[(_model(latitude=123.0), 10.0)])
    result = await SqlStoreRepository(session).find_nearest(GeoCoordinates(0, 0), 5)
    assert isinstance(result, DataAccessError)
    assert isinstance(result.cause, ValueError)


@pytest.mark.asyncio
async def test_save_all_failure_rolls_back(three_stores):
    session = BrokenSession()

    result = await SqlStoreRepository(session).save_all(three_stores)

    assert isinstance(result, DataAccessError)
    assert session.rolled_back is True
    assert session.committed is False
