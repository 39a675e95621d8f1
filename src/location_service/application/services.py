"""Application services (use cases) for location lookups and geo math."""

import asyncio
import logging
import math
from typing import TYPE_CHECKING

import geolib.geohash as geohash

from location_service.domain.models import Coordinates, Location
from location_service.domain.ports.position_provider import PositionUnavailableError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from location_service.domain.ports import PositionProvider, ReverseGeocoder

EARTH_RADIUS_KM = 6371.0
DEFAULT_GEOHASH_PRECISION = 5
DEFAULT_POSITION_TIMEOUT_SECONDS = 10.0

MOCK_CITIES: tuple[Location, ...] = (
    Location(latitude=37.7749, longitude=-122.4194, city="San Francisco", country="USA"),
    Location(latitude=40.7128, longitude=-74.0060, city="New York", country="USA"),
    Location(latitude=34.0522, longitude=-118.2437, city="Los Angeles", country="USA"),
    Location(latitude=51.5074, longitude=-0.1278, city="London", country="UK"),
    Location(latitude=48.8566, longitude=2.3522, city="Paris", country="France"),
)


def generate_geohash(
    latitude: float, longitude: float, precision: int = DEFAULT_GEOHASH_PRECISION
) -> str:
    """Encode a latitude/longitude pair as a geohash of `precision` characters.

    Coordinates are not range-checked; whatever the encoder makes of
    out-of-range input is returned as is.
    """
    return geohash.encode(latitude, longitude, precision)


def get_location_from_geohash(value: str) -> Coordinates:
    """Decode a geohash to the centre point of its cell.

    Errors raised by the decoder for malformed input are propagated.
    """
    latitude, longitude = geohash.decode(value)
    return Coordinates(latitude=float(latitude), longitude=float(longitude))


def calculate_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance in kilometres between two lat/lng pairs."""
    phi1, phi2 = map(math.radians, (lat1, lat2))
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def get_mock_cities() -> tuple[Location, ...]:
    """Return the fixed list of sample cities."""
    return MOCK_CITIES


class LocationService:
    """Service for resolving the current location and doing geo math.

    The position provider is optional: without one the host is treated as
    having no geolocation capability and every lookup yields None.
    """

    generate_geohash = staticmethod(generate_geohash)
    get_location_from_geohash = staticmethod(get_location_from_geohash)
    calculate_distance = staticmethod(calculate_distance)
    get_mock_cities = staticmethod(get_mock_cities)

    def __init__(
        self,
        position_provider: "PositionProvider | None",
        reverse_geocoder: "ReverseGeocoder",
        timeout_seconds: float = DEFAULT_POSITION_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize with a position source, a reverse geocoder and a timeout."""
        self._position_provider = position_provider
        self._reverse_geocoder = reverse_geocoder
        self._timeout_seconds = timeout_seconds

    async def get_current_location(self) -> Location | None:
        """Get the current location, or None if it cannot be determined.

        Missing capability, provider errors and timeouts all collapse to None.
        """
        if self._position_provider is None:
            logger.debug("No position provider configured")
            return None

        try:
            coordinates = await asyncio.wait_for(
                self._position_provider.get_current_position(),
                timeout=self._timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.warning(f"Position request timed out after {self._timeout_seconds}s")
            return None
        except PositionUnavailableError as e:
            logger.warning(f"Position unavailable: {e}")
            return None

        place = await self._reverse_geocoder.reverse(coordinates)
        if place is None:
            logger.warning(
                f"No place found for ({coordinates.latitude}, {coordinates.longitude})"
            )
            return None

        city, country = place
        logger.debug(
            f"Resolved ({coordinates.latitude}, {coordinates.longitude}) to {city}, {country}"
        )
        return Location(
            latitude=coordinates.latitude,
            longitude=coordinates.longitude,
            city=city,
            country=country,
        )
