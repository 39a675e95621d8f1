"""Location domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """A point on the map together with the place it belongs to."""

    latitude: float
    longitude: float
    city: str
    country: str
