"""Reverse geocoder port."""

from typing import Protocol

from location_service.domain.models.coordinates import Coordinates


class ReverseGeocoder(Protocol):
    """Port for resolving coordinates to a (city, country) pair."""

    async def reverse(self, coordinates: Coordinates) -> tuple[str, str] | None:
        """Return (city, country) for the coordinates, or None if unknown."""
        ...
