from __future__ import annotations

from dataclasses import asdict, dataclass

from django.conf import settings

from trip_planner.services.state import TripState
from trip_planner.services.types import GeoPoint


@dataclass(slots=True, frozen=True)
class ResultsPanel:
    currency: str
    num_trips: int
    distance_km: str
    round_trip_distance_km: str
    fuel_per_round_trip: str
    cost_per_round_trip: str
    total_fuel_used: str
    total_cost: str
    destination_label: str

    def as_dict(self) -> dict[str, str | int]:
        return asdict(self)


def build_results_panel(state: TripState, currency: str | None = None) -> ResultsPanel | None:
    if state.destination is None:
        return None

    estimate = state.estimate
    return ResultsPanel(
        currency=currency or settings.CURRENCY_CODE,
        num_trips=state.fuel.num_trips,
        distance_km=f"{estimate.distance_km:.2f}",
        round_trip_distance_km=f"{estimate.round_trip_distance_km:.2f}",
        fuel_per_round_trip=f"{estimate.fuel_per_round_trip:.2f}",
        cost_per_round_trip=f"{estimate.cost_per_round_trip:.2f}",
        total_fuel_used=f"{estimate.total_fuel_used:.2f}",
        total_cost=f"{estimate.total_cost:.2f}",
        destination_label=state.place_name or format_coordinates(state.destination),
    )


def format_coordinates(point: GeoPoint) -> str:
    return f"{point.latitude:.5f}, {point.longitude:.5f}"
