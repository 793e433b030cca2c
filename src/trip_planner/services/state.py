from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any

from trip_planner.services.calculator import estimate_trip
from trip_planner.services.types import (
    DestinationTicket,
    FuelParameters,
    GeoPoint,
    RouteData,
    TripEstimate,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TripState:
    """In-memory state of one planning session.

    Every destination change bumps ``revision`` and hands out a ticket. Route and
    place name lookups write back through ``apply_route``/``apply_place_name``
    with that ticket, and anything issued for an older destination is dropped.
    """

    origin: GeoPoint
    destination: GeoPoint | None = None
    route: RouteData = field(default_factory=RouteData.empty)
    place_name: str = ""
    fuel: FuelParameters = field(default_factory=FuelParameters)
    revision: int = 0

    def select_destination(self, destination: GeoPoint | None) -> DestinationTicket:
        self.revision += 1
        self.destination = destination
        self.route = RouteData.empty()
        self.place_name = ""
        return self.ticket()

    def ticket(self) -> DestinationTicket:
        return DestinationTicket(revision=self.revision, destination=self.destination)

    def is_current(self, ticket: DestinationTicket) -> bool:
        return ticket.revision == self.revision and ticket.destination == self.destination

    def update_fuel_parameters(self, **changes: Any) -> None:
        self.fuel = replace(self.fuel, **changes)

    def apply_route(self, ticket: DestinationTicket, route: RouteData) -> bool:
        if not self.is_current(ticket):
            logger.debug("Discarding route for superseded destination %s", ticket.destination)
            return False
        self.route = route
        return True

    def apply_place_name(self, ticket: DestinationTicket, place_name: str) -> bool:
        if not self.is_current(ticket):
            logger.debug(
                "Discarding place name for superseded destination %s", ticket.destination
            )
            return False
        self.place_name = place_name
        return True

    @property
    def estimate(self) -> TripEstimate:
        return estimate_trip(self.route.distance_km, self.fuel)
