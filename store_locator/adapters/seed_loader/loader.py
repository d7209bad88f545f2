"""JSON seed loader — reads the static store dataset into domain stores."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

from store_locator.application.ports.store_source import StoreSource
from store_locator.domain.entities.store import Store
from store_locator.domain.errors import UnexpectedError
from store_locator.domain.policies.validation import MAX_STORE_ID
from store_locator.domain.value_objects.address import Address, OpeningHours
from store_locator.domain.value_objects.geo_coordinates import GeoCoordinates


class StoreRecord(BaseModel):
    """One record of the dataset, keyed as in the published stores file."""

    model_config = ConfigDict(extra="ignore")

    city: str
    postalCode: str
    street: str
    street2: str | None = None
    street3: str | None = None
    addressName: str
    longitude: str
    latitude: str
    complexNumber: str
    todayOpen: str
    todayClose: str
    locationType: str
    collectionPoint: bool

    @field_validator("complexNumber")
    @classmethod
    def check_store_id(cls, value: str) -> str:
        # ASCII digits only, so "-5" and "1_000" are rejected
        if not (value.isascii() and value.isdigit()) or not 0 < int(value) <= MAX_STORE_ID:
            raise ValueError(f"complexNumber must be a store id between 1 and {MAX_STORE_ID}")
        return value

    def to_domain(self) -> Store:
        return Store(
            id=int(self.complexNumber),
            name=self.addressName,
            address=Address(
                street=self.street,
                street2=self.street2,
                street3=self.street3,
                city=self.city,
                postal_code=self.postalCode,
            ),
            coordinates=GeoCoordinates.from_strings(self.latitude, self.longitude),
            opening_hours=OpeningHours(open=self.todayOpen, close=self.todayClose),
            location_type=self.locationType,
            is_collection_point=self.collectionPoint,
        )


class StoresDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    stores: list[StoreRecord]


def parse_stores(raw: str) -> list[Store]:
    """Parse a ``{"stores": [...]}`` document.

    Raises:
        pydantic.ValidationError / ValueError: on any malformed record.
    """
    document = StoresDocument.model_validate(json.loads(raw))
    return [record.to_domain() for record in document.stores]


class JsonStoreSource(StoreSource):
    def __init__(self, path: str | Path, logger: logging.Logger | None = None):
        self._path = Path(path)
        self._log = logger or logging.getLogger(__name__)

    def load_stores(self) -> list[Store] | UnexpectedError:
        try:
            self._log.info("Loading stores from %s", self._path)
            stores = parse_stores(self._path.read_text(encoding="utf-8"))
        except Exception as e:
            self._log.exception("Failed to load stores from %s", self._path)
            return UnexpectedError(
                message=f"Failed to load stores from JSON: {e}",
                cause=e,
            )

        self._log.info("Successfully parsed %d stores from %s", len(stores), self._path.name)
        return stores
