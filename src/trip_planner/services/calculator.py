from __future__ import annotations

import math
from typing import Any

from trip_planner.services.types import FuelParameters, TripEstimate


def estimate_trip(distance_km: float, fuel: FuelParameters) -> TripEstimate:
    round_trip_distance_km = distance_km * 2
    fuel_per_round_trip = round_trip_distance_km * fuel.fuel_per_km
    total_fuel_used = fuel_per_round_trip * fuel.num_trips
    return TripEstimate(
        distance_km=distance_km,
        round_trip_distance_km=round_trip_distance_km,
        fuel_per_round_trip=fuel_per_round_trip,
        cost_per_round_trip=fuel_per_round_trip * fuel.price_per_liter,
        total_fuel_used=total_fuel_used,
        total_cost=total_fuel_used * fuel.price_per_liter,
    )


def parse_decimal_input(raw: Any) -> float:
    """Read a form value as a float; blank or unparseable input counts as zero."""
    if raw is None or isinstance(raw, bool):
        return 0.0
    if isinstance(raw, str):
        raw = raw.strip().replace(",", ".")
        if not raw:
            return 0.0
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0.0
    return value if math.isfinite(value) else 0.0


def parse_trip_count_input(raw: Any) -> int:
    """Read the trip count, truncating toward zero the way an integer parse does."""
    return int(parse_decimal_input(raw))
