from __future__ import annotations

import asyncio

import pytest

from trip_planner.exceptions import ExternalServiceError, MalformedResponseError
from trip_planner.services.session import TripSession
from trip_planner.services.state import TripState
from trip_planner.services.types import GeoPoint, RouteData

ORIGIN = GeoPoint(latitude=19.381, longitude=-99.493)
POINT_A = GeoPoint(latitude=20.6597, longitude=-103.3496)
POINT_B = GeoPoint(latitude=25.6866, longitude=-100.3161)


class GatedDirections:
    """Answers each destination only once its gate is opened."""

    def __init__(self, routes: dict[GeoPoint, RouteData]) -> None:
        self.routes = routes
        self.gates = {point: asyncio.Event() for point in routes}

    async def route(self, origin: GeoPoint, destination: GeoPoint) -> RouteData:
        await self.gates[destination].wait()
        return self.routes[destination]


class GatedGeocoder:
    def __init__(self, names: dict[GeoPoint, str]) -> None:
        self.names = names
        self.gates = {point: asyncio.Event() for point in names}

    async def reverse(self, point: GeoPoint) -> str:
        await self.gates[point].wait()
        return self.names[point]


class FailingDirections:
    async def route(self, origin: GeoPoint, destination: GeoPoint) -> RouteData:
        raise ExternalServiceError("Directions request failed")


class FailingGeocoder:
    async def reverse(self, point: GeoPoint) -> str:
        raise MalformedResponseError("Unexpected reverse geocoding response")


class StaticDirections:
    def __init__(self, route: RouteData) -> None:
        self._route = route

    async def route(self, origin: GeoPoint, destination: GeoPoint) -> RouteData:
        return self._route


class StaticGeocoder:
    def __init__(self, name: str) -> None:
        self.name = name

    async def reverse(self, point: GeoPoint) -> str:
        return self.name


def test_late_response_for_previous_destination_is_ignored() -> None:
    async def scenario() -> TripState:
        directions = GatedDirections(
            {
                POINT_A: RouteData(path=[(19.38, -99.49), (20.66, -103.35)], distance_km=540.0),
                POINT_B: RouteData(path=[(19.38, -99.49), (25.69, -100.32)], distance_km=900.0),
            }
        )
        geocoder = GatedGeocoder({POINT_A: "Guadalajara", POINT_B: "Monterrey"})
        session = TripSession(TripState(origin=ORIGIN), directions, geocoder)

        session.select_destination(POINT_A)
        await asyncio.sleep(0)
        session.select_destination(POINT_B)
        await asyncio.sleep(0)

        for point in (POINT_B, POINT_A):
            directions.gates[point].set()
            geocoder.gates[point].set()
            await asyncio.sleep(0)
        await session.settle()
        return session.state

    state = asyncio.run(scenario())

    assert state.destination == POINT_B
    assert state.route.distance_km == 900.0
    assert state.place_name == "Monterrey"


def test_route_failure_does_not_affect_place_name() -> None:
    async def scenario() -> TripState:
        session = TripSession(
            TripState(origin=ORIGIN), FailingDirections(), StaticGeocoder("Guadalajara")
        )
        session.select_destination(POINT_A)
        await session.settle()
        return session.state

    state = asyncio.run(scenario())

    assert state.route == RouteData.empty()
    assert state.place_name == "Guadalajara"


def test_place_name_failure_does_not_affect_route(caplog: pytest.LogCaptureFixture) -> None:
    route = RouteData(path=[(19.38, -99.49), (20.66, -103.35)], distance_km=452.3)

    async def scenario() -> TripState:
        session = TripSession(TripState(origin=ORIGIN), StaticDirections(route), FailingGeocoder())
        session.select_destination(POINT_A)
        await session.settle()
        return session.state

    with caplog.at_level("WARNING", logger="trip_planner"):
        state = asyncio.run(scenario())

    assert state.route == route
    assert state.place_name == ""
    assert "Could not resolve place name" in caplog.text


def test_clearing_destination_issues_no_lookups() -> None:
    async def scenario() -> TripSession:
        session = TripSession(
            TripState(origin=ORIGIN), FailingDirections(), FailingGeocoder()
        )
        session.select_destination(None)
        await session.settle()
        return session

    session = asyncio.run(scenario())

    assert session.state.destination is None
    assert session.state.route.is_empty
    assert session.state.revision == 1


class BrokenDirections:
    async def route(self, origin: GeoPoint, destination: GeoPoint) -> RouteData:
        raise RuntimeError("unexpected failure")


def test_unexpected_error_in_one_lookup_lets_the_other_finish(
    caplog: pytest.LogCaptureFixture,
) -> None:
    async def scenario() -> TripSession:
        session = TripSession(
            TripState(origin=ORIGIN), BrokenDirections(), StaticGeocoder("Guadalajara")
        )
        session.select_destination(POINT_A)
        await session.settle()
        return session

    with caplog.at_level("ERROR", logger="trip_planner"):
        session = asyncio.run(scenario())

    assert session.state.route.is_empty
    assert session.state.place_name == "Guadalajara"
    assert not session._tasks
    assert "Lookup failed unexpectedly" in caplog.text
