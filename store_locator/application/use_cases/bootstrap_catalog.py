"""CatalogBootstrapper — seed an empty catalog from the static dataset."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from store_locator.application.ports.store_repo import StoreRepository
from store_locator.application.ports.store_source import StoreSource
from store_locator.domain.errors import DomainError
from store_locator.domain.value_objects.enums import BootstrapStatus


@dataclass(frozen=True)
class BootstrapReport:
    status: BootstrapStatus
    seeded: int = 0
    error: DomainError | None = None


class CatalogBootstrapper:
    """Runs once at startup, before traffic is served.

    Seeding is presence-gated: an empty catalog is loaded in full, a
    populated one is left untouched. Failures are logged and reported but
    never raised, so startup continues with whatever catalog exists.
    """

    def __init__(
        self,
        store_repo: StoreRepository,
        source: StoreSource,
        logger: logging.Logger | None = None,
    ):
        self._stores = store_repo
        self._source = source
        self._log = logger or logging.getLogger(__name__)

    async def run(self) -> BootstrapReport:
        count = await self._stores.count()
        if isinstance(count, DomainError):
            self._log.error("Failed to check store count: %s", count.message)
            return BootstrapReport(status=BootstrapStatus.FAILED, error=count)

        if count > 0:
            self._log.info("Found %d stores, skipping initialization", count)
            return BootstrapReport(status=BootstrapStatus.SKIPPED)

        self._log.info("No stores found in database, loading seed dataset")
        stores = self._source.load_stores()
        if isinstance(stores, DomainError):
            self._log.error("Failed to load stores: %s", stores.message)
            return BootstrapReport(status=BootstrapStatus.FAILED, error=stores)

        saved = await self._stores.save_all(stores)
        if isinstance(saved, DomainError):
            self._log.error("Failed to save stores: %s", saved.message)
            return BootstrapReport(status=BootstrapStatus.FAILED, error=saved)

        self._log.info("Successfully loaded %d stores", len(saved))
        return BootstrapReport(status=BootstrapStatus.SEEDED, seeded=len(saved))
