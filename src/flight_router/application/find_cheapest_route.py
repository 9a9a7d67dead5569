"""
FindCheapestRoute Use Case - Public API for flight routing.

This module provides the main entry point for the flight routing engine.
It acts as a Facade/Factory, handling dependency initialization and
providing a clean interface for consumers.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from src.flight_router.adapters.algorithms.dijkstra_adapter import DijkstraRouteFinder
from src.flight_router.adapters.repositories.json_route_repo import (
    JsonFlightRouteRepository,
)
from src.flight_router.config import Config
from src.flight_router.ports.flight_route_repository import FlightRouteRepository
from src.flight_router.ports.route_finder import RouteFinder
from src.flight_router.schemas.flight import FlightRoute
from src.flight_router.schemas.route import CheapestRoute
from src.flight_router.services.route_finder_service import RouteFinderService

logger = logging.getLogger(__name__)


class FindCheapestRoute:
    """
    Public API for finding the cheapest flight route and managing routes.

    Example usage:
        >>> router = FindCheapestRoute(routes_file="data/flight_routes.json")
        >>> result = router.search(origin="GRU", destination="CDG")
        >>> print(f"Route: {result.route_description}, Cost: {result.total_cost}")

    Attributes:
        _repository: Route storage.
        _service: Underlying RouteFinderService.
    """

    def __init__(
        self,
        routes_file: Optional[Union[str, Path]] = None,
        repository: Optional[FlightRouteRepository] = None,
        route_finder: Optional[RouteFinder] = None,
    ) -> None:
        """
        Initialize the route finder with optional custom dependencies.

        Args:
            routes_file: JSON routes file. Defaults to Config.ROUTES_FILE.
            repository: Custom repository. If None, uses JsonFlightRouteRepository.
            route_finder: Custom algorithm. If None, uses DijkstraRouteFinder.
        """
        if repository is not None:
            self._repository = repository
        else:
            self._repository = JsonFlightRouteRepository(routes_file or Config.ROUTES_FILE)

        self._route_finder = route_finder if route_finder is not None else DijkstraRouteFinder()

        self._service = RouteFinderService(
            route_provider=self._repository,
            route_finder=self._route_finder,
        )

        logger.info(
            "FindCheapestRoute initialized with %s algorithm over %s",
            self._route_finder.name,
            self._repository.name,
        )

    def search(self, origin: str, destination: str) -> CheapestRoute:
        """
        Find the cheapest route between two airports.

        Args:
            origin: Origin airport code (e.g., 'GRU').
            destination: Destination airport code (e.g., 'CDG').

        Returns:
            CheapestRoute with route description and total cost.

        Raises:
            AirportNotFoundError: If either airport is unknown.
            UnreachableDestinationError: If no path connects them.

        Example:
            >>> router.search("GRU", "CDG").route_description
            'GRU - BRC - SCL - ORL - CDG'
        """
        return self._service.find_cheapest_route(origin=origin, destination=destination)

    def list_routes(self) -> List[FlightRoute]:
        """Return every stored route."""
        return self._repository.get_all()

    def get_route(self, route_id: int) -> FlightRoute:
        """Return one stored route by id."""
        return self._repository.get(route_id)

    def create_route(self, route: FlightRoute) -> List[FlightRoute]:
        """Store a new route and return the full route list."""
        return self._repository.create(route)

    def update_route(self, route: FlightRoute) -> FlightRoute:
        """Replace the stored route that has the same id."""
        return self._repository.update(route)

    def delete_route(self, route_id: int) -> None:
        """Remove a stored route."""
        self._repository.delete(route_id)

    def get_available_airports(self) -> frozenset[str]:
        """
        Get all airports that appear in the stored routes.

        Returns:
            Frozenset of airport codes, as origin or destination.
        """
        airports = set()
        for route in self._repository.get_all():
            airports.add(route.origin)
            airports.add(route.destination)
        return frozenset(airports)

    def has_route(self, origin: str, destination: str) -> bool:
        """
        Check if a direct route exists between two airports.

        Args:
            origin: Origin airport code.
            destination: Destination airport code.

        Returns:
            True if a direct route exists, False otherwise.
        """
        return any(
            route.origin == origin and route.destination == destination
            for route in self._repository.get_all()
        )

    @property
    def algorithm_name(self) -> str:
        """Get the name of the routing algorithm being used."""
        return self._service.algorithm_name

    def __enter__(self) -> "FindCheapestRoute":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit. The file repository holds no open handles."""
        return None
