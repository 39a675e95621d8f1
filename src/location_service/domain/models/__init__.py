"""Domain models for geospatial lookups."""

from location_service.domain.models.coordinates import Coordinates
from location_service.domain.models.location import Location

__all__ = [
    "Coordinates",
    "Location",
]
