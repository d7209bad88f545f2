"""Distance normalization — raw spatial-index meters to km / whole meters."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from store_locator.domain.entities.store import Store, StoreWithDistance

_KM_QUANTUM = Decimal("0.01")


def normalize_distance(raw_meters: float) -> tuple[float, int]:
    """Convert a raw distance in meters into ``(km, meters)``.

    Kilometers are rounded half-up to two decimals on the decimal value of
    the input (2505.0 m gives 2.51 km, never banker's rounding). Meters are
    truncated toward zero.
    """
    km = (Decimal(repr(float(raw_meters))) / 1000).quantize(
        _KM_QUANTUM, rounding=ROUND_HALF_UP
    )
    return float(km), int(raw_meters)


def with_distance(store: Store, raw_meters: float) -> StoreWithDistance:
    km, meters = normalize_distance(raw_meters)
    return StoreWithDistance(store=store, distance_in_km=km, distance_in_meters=meters)
