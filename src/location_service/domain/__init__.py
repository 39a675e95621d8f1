"""Domain layer - value objects and ports."""

from location_service.domain.models import Coordinates, Location
from location_service.domain.ports import (
    PositionProvider,
    PositionUnavailableError,
    ReverseGeocoder,
)

__all__ = [
    "Coordinates",
    "Location",
    "PositionProvider",
    "PositionUnavailableError",
    "ReverseGeocoder",
]
