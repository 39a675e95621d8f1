"""Static position provider adapter."""

from location_service.domain.models.coordinates import Coordinates
from location_service.domain.ports.position_provider import PositionProvider


class StaticPositionProvider(PositionProvider):
    """Position provider that always reports the same coordinates."""

    def __init__(self, latitude: float, longitude: float) -> None:
        self._coordinates = Coordinates(latitude=latitude, longitude=longitude)

    async def get_current_position(self) -> Coordinates:
        return self._coordinates
