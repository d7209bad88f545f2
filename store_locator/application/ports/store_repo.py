"""Port interface for the spatial store catalog.

Implementations never raise past this boundary: backing-store faults come
back as DataAccessError values.
"""

from abc import ABC, abstractmethod

from store_locator.domain.entities.store import Store, StoreWithDistance
from store_locator.domain.errors import DataAccessError, ResourceNotFound
from store_locator.domain.value_objects.geo_coordinates import GeoCoordinates


class StoreRepository(ABC):
    @abstractmethod
    async def count(self) -> int | DataAccessError:
        ...

    @abstractmethod
    async def find_by_id(
        self, store_id: int
    ) -> Store | ResourceNotFound | DataAccessError:
        ...

    @abstractmethod
    async def find_nearest(
        self, coordinates: GeoCoordinates, limit: int
    ) -> list[StoreWithDistance] | DataAccessError:
        """Return up to ``limit`` stores ordered by ascending geodesic distance.

        Ordering is computed by the backing store's spatial index.
        """
        ...

    @abstractmethod
    async def save_all(self, stores: list[Store]) -> list[Store] | DataAccessError:
        """Persist all stores in one unit of work (all or nothing)."""
        ...
