from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any

from trip_planner.services.directions import DirectionsClient, resolve_route
from trip_planner.services.geocoding import ReverseGeocodingClient, resolve_place_name
from trip_planner.services.state import TripState
from trip_planner.services.types import DestinationTicket, GeoPoint

logger = logging.getLogger(__name__)


class TripSession:
    """Drives a ``TripState`` from map clicks on the running event loop.

    Each destination change starts two independent lookups. They finish in any
    order and write back only if their ticket is still the current one.
    """

    def __init__(
        self,
        state: TripState,
        directions_client: DirectionsClient | None = None,
        geocoding_client: ReverseGeocodingClient | None = None,
    ) -> None:
        self.state = state
        self.directions_client = directions_client or DirectionsClient()
        self.geocoding_client = geocoding_client or ReverseGeocodingClient()
        self._tasks: set[asyncio.Task[None]] = set()

    def select_destination(self, destination: GeoPoint | None) -> DestinationTicket:
        ticket = self.state.select_destination(destination)
        if destination is not None:
            self._spawn(self._load_route(ticket))
            self._spawn(self._load_place_name(ticket))
        return ticket

    async def settle(self) -> None:
        while self._tasks:
            outcomes = await asyncio.gather(*self._tasks, return_exceptions=True)
            for outcome in outcomes:
                if isinstance(outcome, Exception):
                    logger.error("Lookup failed unexpectedly", exc_info=outcome)

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> None:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _load_route(self, ticket: DestinationTicket) -> None:
        route = await resolve_route(self.directions_client, self.state.origin, ticket.destination)
        self.state.apply_route(ticket, route)

    async def _load_place_name(self, ticket: DestinationTicket) -> None:
        place_name = await resolve_place_name(self.geocoding_client, ticket.destination)
        self.state.apply_place_name(ticket, place_name)
