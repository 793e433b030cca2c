from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from django.conf import settings

from trip_planner.services.state import TripState
from trip_planner.services.types import GeoPoint


@dataclass(slots=True, frozen=True)
class MapDisplay:
    origin: GeoPoint
    zoom: int
    tile_url: str
    attribution: str

    @classmethod
    def from_settings(cls) -> MapDisplay:
        return cls(
            origin=GeoPoint(
                latitude=float(settings.TRIP_ORIGIN_LATITUDE),
                longitude=float(settings.TRIP_ORIGIN_LONGITUDE),
            ),
            zoom=int(settings.MAP_ZOOM),
            tile_url=settings.MAP_TILE_URL,
            attribution=settings.MAP_TILE_ATTRIBUTION,
        )

    def options(self) -> dict[str, Any]:
        # Clicks pick the destination, so every zoom gesture except the buttons is off.
        return {
            "center": [self.origin.latitude, self.origin.longitude],
            "zoom": self.zoom,
            "scrollWheelZoom": False,
            "doubleClickZoom": False,
            "touchZoom": False,
            "boxZoom": False,
            "zoomControl": True,
            "dragging": True,
        }

    def layers(self, state: TripState | None = None) -> dict[str, Any]:
        markers = [_marker("origin", self.origin)]
        polyline = None
        if state is not None:
            if state.destination is not None:
                markers.append(_marker("destination", state.destination))
            if not state.route.is_empty:
                polyline = [[lat, lng] for lat, lng in state.route.path]
        return {"markers": markers, "polyline": polyline}

    def config(self, state: TripState | None = None) -> dict[str, Any]:
        return {
            "options": self.options(),
            "tiles": {"url": self.tile_url, "attribution": self.attribution},
            **self.layers(state),
        }


def _marker(kind: str, point: GeoPoint) -> dict[str, Any]:
    return {"kind": kind, "position": [point.latitude, point.longitude]}
