"""IP geolocation position provider adapter."""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from location_service.adapters.api_request_logger import log_api_request
from location_service.domain.models.coordinates import Coordinates
from location_service.domain.ports.position_provider import (
    PositionProvider,
    PositionUnavailableError,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

DEFAULT_IP_GEOLOCATION_URL = "https://ipapi.co/json/"
REQUEST_HEADERS = {
    "accept": "application/json",
    "user-agent": "location-service/0.1",
}


class IpPositionProvider(PositionProvider):
    """Looks up the host's approximate position from its public IP address.

    Expects the endpoint to answer with a JSON object carrying numeric
    `latitude` and `longitude` keys (ipapi.co style).
    """

    def __init__(
        self,
        session: "ClientSession | None" = None,
        url: str = DEFAULT_IP_GEOLOCATION_URL,
    ) -> None:
        """Initialize with optional aiohttp session and endpoint URL."""
        self._session = session
        self._url = url

    async def get_current_position(self) -> Coordinates:
        """Fetch the current position from the IP geolocation endpoint."""
        log_api_request("GET", self._url, headers=REQUEST_HEADERS)
        try:
            if self._session is not None:
                return await self._fetch(self._session)
            async with aiohttp.ClientSession() as session:
                return await self._fetch(session)
        except aiohttp.ClientError as e:
            raise PositionUnavailableError(f"IP geolocation request failed: {e}") from e

    async def _fetch(self, session: "ClientSession") -> Coordinates:
        async with session.get(self._url, headers=REQUEST_HEADERS) as response:
            return await self._handle_response(response)

    async def _handle_response(self, response: "ClientResponse") -> Coordinates:
        if response.status != 200:
            response_text = await response.text()
            logger.warning(
                f"IP geolocation API returned status {response.status}: {response_text[:200]}"
            )
            raise PositionUnavailableError(f"IP geolocation returned status {response.status}")

        try:
            data = await response.json()
        except ValueError as e:
            raise PositionUnavailableError("IP geolocation payload is not valid JSON") from e
        return self._parse_coordinates(data)

    @staticmethod
    def _parse_coordinates(data: Any) -> Coordinates:
        """Extract coordinates from the endpoint's JSON payload."""
        if not isinstance(data, dict):
            raise PositionUnavailableError("IP geolocation payload is not an object")

        latitude = data.get("latitude")
        longitude = data.get("longitude")
        if isinstance(latitude, bool) or isinstance(longitude, bool):
            raise PositionUnavailableError("IP geolocation payload has no coordinates")
        if not isinstance(latitude, int | float) or not isinstance(longitude, int | float):
            reason = data.get("reason") or "missing latitude/longitude"
            raise PositionUnavailableError(f"IP geolocation payload has no coordinates: {reason}")

        return Coordinates(latitude=float(latitude), longitude=float(longitude))
