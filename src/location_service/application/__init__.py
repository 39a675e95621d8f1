"""Application layer - use cases built on the domain ports."""

from location_service.application.services import (
    LocationService,
    calculate_distance,
    generate_geohash,
    get_location_from_geohash,
    get_mock_cities,
)

__all__ = [
    "LocationService",
    "calculate_distance",
    "generate_geohash",
    "get_location_from_geohash",
    "get_mock_cities",
]
