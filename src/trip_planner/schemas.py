from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from trip_planner.services.calculator import parse_decimal_input, parse_trip_count_input
from trip_planner.services.types import FuelParameters, GeoPoint


def wrap_longitude(value: Any) -> Any:
    """Fold a longitude from a repeated copy of the world back into [-180, 180]."""
    try:
        longitude = float(value)
    except (TypeError, ValueError):
        return value
    if not math.isfinite(longitude) or -180.0 <= longitude <= 180.0:
        return longitude
    return (longitude + 180.0) % 360.0 - 180.0


class Coordinate(BaseModel):
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)

    @field_validator("longitude", mode="before")
    @classmethod
    def wrap_longitude_field(cls, value: Any) -> Any:
        return wrap_longitude(value)

    @classmethod
    def from_point(cls, point: GeoPoint) -> Coordinate:
        return cls(latitude=point.latitude, longitude=point.longitude)

    def to_point(self) -> GeoPoint:
        return GeoPoint(latitude=self.latitude, longitude=self.longitude)


class FuelParametersInput(BaseModel):
    """Raw form values; blank or non-numeric entries read as zero, negatives pass through."""

    fuel_per_km: float = 0.0
    price_per_liter: float = 0.0
    num_trips: int = 1

    @field_validator("fuel_per_km", "price_per_liter", mode="before")
    @classmethod
    def parse_decimal_fields(cls, value: Any) -> float:
        return parse_decimal_input(value)

    @field_validator("num_trips", mode="before")
    @classmethod
    def parse_trip_count_field(cls, value: Any) -> int:
        return parse_trip_count_input(value)

    def to_parameters(self) -> FuelParameters:
        return FuelParameters(
            fuel_per_km=self.fuel_per_km,
            price_per_liter=self.price_per_liter,
            num_trips=self.num_trips,
        )


class RouteRequest(Coordinate):
    model_config = ConfigDict(extra="forbid")


class EstimateRequest(FuelParametersInput):
    model_config = ConfigDict(extra="forbid")

    destination: Coordinate | None = None
    distance_km: float = Field(default=0.0, ge=0.0)
    place_name: str = Field(default="", max_length=500)


class TripRequest(FuelParametersInput):
    model_config = ConfigDict(extra="forbid")

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)

    @field_validator("longitude", mode="before")
    @classmethod
    def wrap_longitude_field(cls, value: Any) -> Any:
        return wrap_longitude(value)

    def destination(self) -> GeoPoint:
        return GeoPoint(latitude=self.latitude, longitude=self.longitude)


class RouteResponse(BaseModel):
    destination: Coordinate
    path: list[tuple[float, float]]
    distance_km: float


class PlaceNameResponse(BaseModel):
    destination: Coordinate
    place_name: str
