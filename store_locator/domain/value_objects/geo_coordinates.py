"""Immutable, range-checked (lat, lon) pair."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoCoordinates:
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90 <= self.latitude <= 90:
            raise ValueError("Latitude must be between -90 and 90")
        if not -180 <= self.longitude <= 180:
            raise ValueError("Longitude must be between -180 and 180")

    @classmethod
    def from_strings(cls, latitude: str, longitude: str) -> "GeoCoordinates":
        """Parse decimal-string coordinates as found in the seed dataset."""
        try:
            lat = float(latitude)
            lon = float(longitude)
        except (TypeError, ValueError) as e:
            raise ValueError(
                f"Invalid coordinate format: lat={latitude}, lon={longitude}"
            ) from e
        return cls(latitude=lat, longitude=lon)
