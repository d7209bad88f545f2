"""Great-circle distance for in-memory repository fakes.

Production ranking happens in PostGIS; fakes only need the same ordering.
"""

import math

EARTH_RADIUS_M = 6_371_008.8


def haversine_m(a, b) -> float:
    """Distance in meters between two GeoCoordinates."""
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    dlat = math.radians(b.latitude - a.latitude)
    dlon = math.radians(b.longitude - a.longitude)

    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    return 2 * EARTH_RADIUS_M * math.asin(math.sqrt(h))
