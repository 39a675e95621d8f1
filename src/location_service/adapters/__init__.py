"""Adapters layer - external system integrations."""

from location_service.adapters.config import AppConfig
from location_service.adapters.geocoding import StaticReverseGeocoder
from location_service.adapters.geolocation import (
    IpPositionProvider,
    StaticPositionProvider,
)

__all__ = [
    "AppConfig",
    "IpPositionProvider",
    "StaticPositionProvider",
    "StaticReverseGeocoder",
]
