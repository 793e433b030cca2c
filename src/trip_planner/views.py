from __future__ import annotations

import json
from typing import Any

from django.conf import settings
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import render
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST
from pydantic import ValidationError

from trip_planner.schemas import (
    Coordinate,
    EstimateRequest,
    PlaceNameResponse,
    RouteRequest,
    RouteResponse,
    TripRequest,
)
from trip_planner.services.directions import DirectionsClient, resolve_route
from trip_planner.services.geocoding import ReverseGeocodingClient, resolve_place_name
from trip_planner.services.map_display import MapDisplay
from trip_planner.services.results import build_results_panel
from trip_planner.services.session import TripSession
from trip_planner.services.state import TripState
from trip_planner.services.types import FuelParameters, RouteData


def get_directions_client() -> DirectionsClient:
    return DirectionsClient()


def get_geocoding_client() -> ReverseGeocodingClient:
    return ReverseGeocodingClient()


@require_GET
def trip_map_view(request: HttpRequest) -> HttpResponse:
    defaults = FuelParameters()
    return render(
        request,
        "trip_planner/trip_map.html",
        {
            "map_config": MapDisplay.from_settings().config(),
            "currency": settings.CURRENCY_CODE,
            "defaults": {
                "fuel_per_km": defaults.fuel_per_km,
                "price_per_liter": defaults.price_per_liter,
                "num_trips": defaults.num_trips,
            },
        },
    )


@require_GET
def health_view(_: HttpRequest) -> HttpResponse:
    return JsonResponse({"status": "ok"})


@csrf_exempt
@require_POST
async def route_view(request: HttpRequest) -> HttpResponse:
    payload = _parse_json_payload(request)
    if isinstance(payload, JsonResponse):
        return payload

    try:
        route_request = RouteRequest.model_validate(payload)
    except ValidationError as exc:
        return _validation_error_response(exc)

    destination = route_request.to_point()
    route = await resolve_route(
        get_directions_client(), MapDisplay.from_settings().origin, destination
    )
    response = RouteResponse(
        destination=Coordinate.from_point(destination),
        path=route.path,
        distance_km=route.distance_km,
    )
    return JsonResponse(response.model_dump(mode="json"))


@require_GET
async def place_name_view(request: HttpRequest) -> HttpResponse:
    try:
        coordinate = Coordinate.model_validate(request.GET.dict())
    except ValidationError as exc:
        return _validation_error_response(exc)

    destination = coordinate.to_point()
    place_name = await resolve_place_name(get_geocoding_client(), destination)
    response = PlaceNameResponse(destination=coordinate, place_name=place_name)
    return JsonResponse(response.model_dump(mode="json"))


@csrf_exempt
@require_POST
def estimate_view(request: HttpRequest) -> HttpResponse:
    payload = _parse_json_payload(request)
    if isinstance(payload, JsonResponse):
        return payload

    try:
        estimate_request = EstimateRequest.model_validate(payload)
    except ValidationError as exc:
        return _validation_error_response(exc)

    state = TripState(
        origin=MapDisplay.from_settings().origin,
        destination=(
            estimate_request.destination.to_point() if estimate_request.destination else None
        ),
        route=RouteData(path=[], distance_km=estimate_request.distance_km),
        place_name=estimate_request.place_name,
        fuel=estimate_request.to_parameters(),
    )
    panel = build_results_panel(state)
    return JsonResponse({"results": panel.as_dict() if panel else None})


@csrf_exempt
@require_POST
async def trip_view(request: HttpRequest) -> HttpResponse:
    payload = _parse_json_payload(request)
    if isinstance(payload, JsonResponse):
        return payload

    try:
        trip_request = TripRequest.model_validate(payload)
    except ValidationError as exc:
        return _validation_error_response(exc)

    display = MapDisplay.from_settings()
    state = TripState(origin=display.origin, fuel=trip_request.to_parameters())
    session = TripSession(state, get_directions_client(), get_geocoding_client())
    session.select_destination(trip_request.destination())
    await session.settle()

    panel = build_results_panel(state)
    return JsonResponse(
        {
            "destination": Coordinate.from_point(trip_request.destination()).model_dump(),
            "route": {
                "path": [list(coord) for coord in state.route.path],
                "distance_km": state.route.distance_km,
            },
            "place_name": state.place_name,
            "results": panel.as_dict() if panel else None,
            "map": display.config(state),
        }
    )


def _parse_json_payload(request: HttpRequest) -> dict[str, Any] | JsonResponse:
    if not request.body:
        return {}

    try:
        payload = json.loads(request.body)
    except json.JSONDecodeError:
        return _error_response("invalid_json", "Request body must be valid JSON", status=400)

    if not isinstance(payload, dict):
        return _error_response("invalid_json", "JSON body must be an object", status=400)

    return payload


def _validation_error_response(exc: ValidationError) -> JsonResponse:
    return JsonResponse(
        {
            "error": {
                "code": "validation_error",
                "message": "Invalid request payload",
                "details": exc.errors(include_url=False),
            }
        },
        status=400,
    )


def _error_response(code: str, message: str, status: int) -> JsonResponse:
    return JsonResponse({"error": {"code": code, "message": message}}, status=status)
