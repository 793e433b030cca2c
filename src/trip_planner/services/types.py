from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class GeoPoint:
    latitude: float
    longitude: float


@dataclass(slots=True, frozen=True)
class RouteData:
    path: list[tuple[float, float]]
    distance_km: float

    @classmethod
    def empty(cls) -> RouteData:
        return cls(path=[], distance_km=0.0)

    @property
    def is_empty(self) -> bool:
        return not self.path


@dataclass(slots=True, frozen=True)
class FuelParameters:
    fuel_per_km: float = 0.0
    price_per_liter: float = 0.0
    num_trips: int = 1


@dataclass(slots=True, frozen=True)
class TripEstimate:
    distance_km: float
    round_trip_distance_km: float
    fuel_per_round_trip: float
    cost_per_round_trip: float
    total_fuel_used: float
    total_cost: float


@dataclass(slots=True, frozen=True)
class DestinationTicket:
    """Tag carried by a lookup so its result can be matched to the click that issued it."""

    revision: int
    destination: GeoPoint | None
