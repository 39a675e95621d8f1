"""Position provider adapters."""

from location_service.adapters.geolocation.ip_position_provider import IpPositionProvider
from location_service.adapters.geolocation.static_position_provider import (
    StaticPositionProvider,
)

__all__ = [
    "IpPositionProvider",
    "StaticPositionProvider",
]
