"""Store entity — a physical shop location in the catalog."""

from dataclasses import dataclass

from store_locator.domain.value_objects.address import Address, OpeningHours
from store_locator.domain.value_objects.geo_coordinates import GeoCoordinates


@dataclass(frozen=True)
class Store:
    id: int | None
    name: str
    address: Address
    coordinates: GeoCoordinates
    opening_hours: OpeningHours
    location_type: str
    is_collection_point: bool


@dataclass(frozen=True)
class StoreWithDistance:
    """A store paired with its distance from a query point."""

    store: Store
    distance_in_km: float
    distance_in_meters: int

    @classmethod
    def at_origin(cls, store: Store) -> "StoreWithDistance":
        """Wrap a store fetched by id rather than by proximity."""
        return cls(store=store, distance_in_km=0.0, distance_in_meters=0)
