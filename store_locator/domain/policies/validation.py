"""Request parameter validation, run before any cache or database access."""

from __future__ import annotations

from store_locator.domain.errors import ValidationError
from store_locator.domain.value_objects.geo_coordinates import GeoCoordinates

MIN_LIMIT = 1
MAX_LIMIT = 20

# Store ids are stored as BIGINT
MAX_STORE_ID = 2**63 - 1


def validate_nearest_query(
    latitude: float,
    longitude: float,
    limit: int,
) -> tuple[GeoCoordinates, int] | ValidationError:
    """Validate a nearest-stores query.

    Checks run in the order latitude, longitude, limit and stop at the first
    violation.

    Returns:
        ``(coordinates, limit)`` on success, otherwise a ValidationError
        naming the rejected field and value.
    """
    # Comparisons are written so that NaN fails them.
    if not -90 <= latitude <= 90:
        return ValidationError(
            message="Latitude must be between -90 and 90",
            field="coordinates",
            invalid_value=latitude,
        )
    if not -180 <= longitude <= 180:
        return ValidationError(
            message="Longitude must be between -180 and 180",
            field="coordinates",
            invalid_value=longitude,
        )
    if not MIN_LIMIT <= limit <= MAX_LIMIT:
        return ValidationError(
            message=f"Limit must be between {MIN_LIMIT} and {MAX_LIMIT}",
            field="limit",
            invalid_value=limit,
        )
    return GeoCoordinates(latitude=latitude, longitude=longitude), limit


def validate_store_id(store_id: int) -> int | ValidationError:
    if store_id <= 0:
        return ValidationError(
            message="Store ID must be positive",
            field="storeId",
            invalid_value=store_id,
        )
    if store_id > MAX_STORE_ID:
        return ValidationError(
            message=f"Store ID must not exceed {MAX_STORE_ID}",
            field="storeId",
            invalid_value=store_id,
        )
    return store_id
