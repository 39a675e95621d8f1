"""Ports (interfaces) for the ports-and-adapters architecture."""

from location_service.domain.ports.position_provider import (
    PositionProvider,
    PositionUnavailableError,
)
from location_service.domain.ports.reverse_geocoder import ReverseGeocoder

__all__ = [
    "PositionProvider",
    "PositionUnavailableError",
    "ReverseGeocoder",
]
