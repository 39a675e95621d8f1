"""Position provider port."""

from typing import Protocol

from location_service.domain.models.coordinates import Coordinates


class PositionUnavailableError(Exception):
    """Raised when a provider cannot determine the current position."""


class PositionProvider(Protocol):
    """Port for requesting the device's current position."""

    async def get_current_position(self) -> Coordinates:
        """Return the current position.

        Raises:
            PositionUnavailableError: If the position cannot be determined,
                e.g. because permission was denied or the source is unreachable.
        """
        ...
