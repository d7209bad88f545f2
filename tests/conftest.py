"""Pytest configuration and shared fixtures."""

import pytest

from store_locator.domain.entities.store import Store
from store_locator.domain.value_objects.address import Address, OpeningHours
from store_locator.domain.value_objects.geo_coordinates import GeoCoordinates


def make_store(
    store_id: int = 33249,
    name: str = "Amsterdam Vijzelstraat",
    latitude: float = 52.361945,
    longitude: float = 4.891016,
    city: str = "Amsterdam",
) -> Store:
    return Store(
        id=store_id,
        name=name,
        address=Address(
            street="Vijzelstraat", street2="139", city=city, postal_code="1017 PT"
        ),
        coordinates=GeoCoordinates(latitude=latitude, longitude=longitude),
        opening_hours=OpeningHours(open="08:00", close="22:00"),
        location_type="Supermarkt",
        is_collection_point=True,
    )


@pytest.fixture
def store_factory():
    return make_store


@pytest.fixture
def three_stores() -> list[Store]:
    """Amsterdam, Utrecht and Rotterdam city-centre stores."""
    return [
        make_store(store_id=1, name="Amsterdam", latitude=52.361945, longitude=4.891016),
        make_store(store_id=2, name="Utrecht", latitude=52.092770, longitude=5.113432, city="Utrecht"),
        make_store(store_id=3, name="Rotterdam", latitude=51.918990, longitude=4.474540, city="Rotterdam"),
    ]
