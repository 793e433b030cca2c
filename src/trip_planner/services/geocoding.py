from __future__ import annotations

import logging
from typing import Any

import httpx
from django.conf import settings

from trip_planner.exceptions import (
    ExternalServiceError,
    MalformedResponseError,
    TripPlannerError,
)
from trip_planner.services.types import GeoPoint

logger = logging.getLogger(__name__)


class ReverseGeocodingClient:
    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.url = settings.REVERSE_GEOCODING_URL
        self.timeout = settings.GEOCODING_TIMEOUT_SECONDS
        self.user_agent = settings.GEOCODING_USER_AGENT
        self.transport = transport

    async def reverse(self, point: GeoPoint) -> str:
        params = {
            "format": "json",
            "lat": point.latitude,
            "lon": point.longitude,
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(
                    self.url,
                    params=params,
                    headers={
                        "Accept": "application/json",
                        "User-Agent": self.user_agent,
                    },
                )
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise ExternalServiceError("Reverse geocoding request failed") from exc
        except ValueError as exc:
            raise MalformedResponseError("Reverse geocoding response is not valid JSON") from exc

        return self._parse_display_name(payload)

    @staticmethod
    def _parse_display_name(payload: Any) -> str:
        if not isinstance(payload, dict):
            raise MalformedResponseError("Unexpected reverse geocoding response")

        # Nominatim answers {"error": "Unable to geocode"} for points it cannot place.
        display_name = payload.get("display_name")
        if not display_name:
            return ""
        return str(display_name)


async def resolve_place_name(client: ReverseGeocodingClient, point: GeoPoint) -> str:
    try:
        return await client.reverse(point)
    except TripPlannerError:
        logger.warning("Could not resolve place name for %s", point, exc_info=True)
        return ""
