"""Static reverse geocoder adapter."""

from location_service.domain.models.coordinates import Coordinates
from location_service.domain.ports.reverse_geocoder import ReverseGeocoder


class StaticReverseGeocoder(ReverseGeocoder):
    """Reverse geocoder that reports the same place for every position.

    Stands in for a real reverse-geocoding service.
    """

    def __init__(self, city: str = "San Francisco", country: str = "USA") -> None:
        """Initialize with the place to report."""
        self._city = city
        self._country = country

    async def reverse(self, coordinates: Coordinates) -> tuple[str, str] | None:
        """Return the configured (city, country), whatever the coordinates."""
        return self._city, self._country
