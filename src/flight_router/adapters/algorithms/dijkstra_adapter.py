"""
Dijkstra Algorithm Adapter - Bridge between architecture and algorithm.

Wraps the dijkstra module and converts its (path, cost) output to
CheapestRoute schema objects.
"""

import logging
from typing import Sequence

from src.dijkstra.alg import find_cheapest_path

from src.flight_router.ports.route_finder import RouteFinder
from src.flight_router.schemas.flight import FlightRoute
from src.flight_router.schemas.route import CheapestRoute

logger = logging.getLogger(__name__)


class DijkstraRouteFinder(RouteFinder):
    """
    Adapter for the dijkstra module.

    The adapter holds no graph between calls: every search builds its own
    adjacency map and labels from the snapshot it is given, so one
    instance can serve concurrent requests.
    """

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "Dijkstra"

    def find_cheapest_route(
        self,
        routes: Sequence[FlightRoute],
        origin: str,
        destination: str,
    ) -> CheapestRoute:
        """
        Find the cheapest route between two airports.

        Args:
            routes: Complete route snapshot.
            origin: Origin airport code.
            destination: Destination airport code.

        Returns:
            CheapestRoute with the airport sequence and total cost.

        Raises:
            AirportNotFoundError: If either airport is unknown.
            UnreachableDestinationError: If no path connects them.
        """
        path, total_cost = find_cheapest_path(routes, origin, destination)

        logger.debug(
            "Dijkstra found %s -> %s via %d airports, cost %d",
            origin,
            destination,
            len(path),
            total_cost,
        )

        return CheapestRoute.from_path(path, total_cost)
