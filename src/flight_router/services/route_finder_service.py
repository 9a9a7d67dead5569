"""
Route Finder Service - Domain orchestrator for flight routing.

Coordinates the interaction between:
- FlightRouteProvider (current route snapshot)
- RouteFinder (algorithm adapter)
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from src.flight_router.schemas.route import CheapestRoute

if TYPE_CHECKING:
    from src.flight_router.ports.flight_route_repository import FlightRouteProvider
    from src.flight_router.ports.route_finder import RouteFinder

logger = logging.getLogger(__name__)


class RouteFinderService:
    """
    Domain service for finding the cheapest flight route.

    Orchestrates the routing process:
    1. Takes a fresh snapshot of the stored routes
    2. Delegates the search to the algorithm adapter
    3. Logs performance metrics

    Errors from the algorithm (unknown airport, unreachable destination)
    propagate unchanged. This service is stateless and thread-safe.

    Attributes:
        _route_provider: Source of the route list.
        _route_finder: Algorithm adapter for route finding.
    """

    def __init__(
        self,
        route_provider: FlightRouteProvider,
        route_finder: RouteFinder,
    ) -> None:
        """
        Initialize the route finder service.

        Args:
            route_provider: Supplies the complete route list per search.
            route_finder: Algorithm adapter (e.g., DijkstraRouteFinder).
        """
        self._route_provider = route_provider
        self._route_finder = route_finder

    def find_cheapest_route(self, origin: str, destination: str) -> CheapestRoute:
        """
        Find the cheapest route between two airports.

        Args:
            origin: Origin airport code (e.g., 'GRU').
            destination: Destination airport code (e.g., 'CDG').

        Returns:
            CheapestRoute with the airport sequence and total cost.

        Raises:
            AirportNotFoundError: If either airport is unknown.
            UnreachableDestinationError: If no path connects them.
        """
        start_time = time.perf_counter()

        # 1. Snapshot the route list
        routes = self._route_provider.get_all()
        load_time = time.perf_counter() - start_time

        logger.debug(
            "Routes loaded in %.3fms (%d routes from %s)",
            load_time * 1000,
            len(routes),
            self._route_provider.name,
        )

        # 2. Delegate to algorithm adapter
        algo_start = time.perf_counter()
        result = self._route_finder.find_cheapest_route(routes, origin, destination)
        algo_time = time.perf_counter() - algo_start

        total_time = time.perf_counter() - start_time

        logger.info(
            "Cheapest route %s -> %s: %s (cost %d) in %.3fms "
            "(load: %.3fms, algo: %.3fms)",
            origin,
            destination,
            result.route_description,
            result.total_cost,
            total_time * 1000,
            load_time * 1000,
            algo_time * 1000,
        )

        return result

    @property
    def algorithm_name(self) -> str:
        """Get name of the underlying algorithm."""
        return self._route_finder.name
