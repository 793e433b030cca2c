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
from trip_planner.services.types import GeoPoint, RouteData

logger = logging.getLogger(__name__)

METERS_PER_KILOMETER = 1000.0


class DirectionsClient:
    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.url = settings.DIRECTIONS_URL
        self.api_key = settings.DIRECTIONS_API_KEY
        self.timeout = settings.DIRECTIONS_TIMEOUT_SECONDS
        self.transport = transport

    async def route(self, origin: GeoPoint, destination: GeoPoint) -> RouteData:
        body = {
            "coordinates": [
                [origin.longitude, origin.latitude],
                [destination.longitude, destination.latitude],
            ]
        }
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    self.url,
                    json=body,
                    headers={
                        "Authorization": self.api_key,
                        "Content-Type": "application/json",
                    },
                )
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise ExternalServiceError("Directions request failed") from exc
        except ValueError as exc:
            raise MalformedResponseError("Directions response is not valid JSON") from exc

        return self._parse_response(payload)

    @staticmethod
    def _parse_response(payload: Any) -> RouteData:
        try:
            feature = payload["features"][0]
            coordinates = feature["geometry"]["coordinates"]
            summary = feature["properties"].get("summary") or {}
            path = [(float(coord[1]), float(coord[0])) for coord in coordinates]
            distance_meters = float(summary.get("distance", 0.0))
        except (KeyError, IndexError, TypeError, ValueError, AttributeError) as exc:
            raise MalformedResponseError("Unexpected directions response") from exc

        return RouteData(path=path, distance_km=distance_meters / METERS_PER_KILOMETER)


async def resolve_route(
    client: DirectionsClient, origin: GeoPoint, destination: GeoPoint
) -> RouteData:
    try:
        return await client.route(origin, destination)
    except TripPlannerError:
        logger.warning("Could not fetch route to %s", destination, exc_info=True)
        return RouteData.empty()
