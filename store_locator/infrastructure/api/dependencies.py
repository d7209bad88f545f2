"""Wires adapters into use cases for FastAPI routes."""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from store_locator.adapters.persistence.database import get_session
from store_locator.adapters.persistence.repositories import SqlStoreRepository
from store_locator.application.response_cache import ResponseCache
from store_locator.application.use_cases.resolve_stores import StoreResolutionService
from store_locator.config import settings

# Shared across requests; repositories are per-session
_response_cache = ResponseCache(
    max_entries=settings.cache_max_entries,
    ttl_seconds=settings.cache_ttl_seconds or None,
)


def get_response_cache() -> ResponseCache:
    return _response_cache


def get_store_repo(session: AsyncSession = Depends(get_session)) -> SqlStoreRepository:
    return SqlStoreRepository(session)


def get_resolution_service(
    store_repo: SqlStoreRepository = Depends(get_store_repo),
    cache: ResponseCache = Depends(get_response_cache),
) -> StoreResolutionService:
    return StoreResolutionService(store_repo=store_repo, cache=cache)
