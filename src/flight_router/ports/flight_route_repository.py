"""
Flight Route Repository port interfaces.

Defines the abstract contracts for route storage. The route finder only
needs a read-only snapshot (FlightRouteProvider); the HTTP layer manages
routes through the full FlightRouteRepository.
"""

from abc import ABC, abstractmethod
from typing import List

from src.flight_router.schemas.flight import FlightRoute


class FlightRouteRepositoryError(Exception):
    """Base exception for route storage errors."""

    pass


class FlightRouteNotFoundError(FlightRouteRepositoryError):
    """Raised when no stored route has the requested id."""

    def __init__(self, route_id: int) -> None:
        self.route_id = route_id
        super().__init__(f"FlightRoute not found with id: {route_id}")


class DuplicateFlightRouteError(FlightRouteRepositoryError):
    """Raised when creating a route whose id is already taken."""

    def __init__(self, route_id: int) -> None:
        self.route_id = route_id
        super().__init__(f"Route with id {route_id} already exists.")


class FlightRouteProvider(ABC):
    """
    Abstract interface for anything that supplies the current route list.

    Each call returns a complete, consistent snapshot; callers may assume
    the list does not change while they use it.

    Implementations:
    - JsonFlightRouteRepository: JSON file on local disk
    """

    @abstractmethod
    def get_all(self) -> List[FlightRoute]:
        """
        Return every stored route.

        Returns:
            Routes in storage order. Empty if nothing is stored.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Human-readable name of this provider.

        Returns:
            Provider identifier (e.g., "JSON file").
        """
        ...


class FlightRouteRepository(FlightRouteProvider):
    """
    Abstract interface for route storage with create/update/delete.

    Implementations:
    - JsonFlightRouteRepository: JSON file on local disk
    """

    @abstractmethod
    def get(self, route_id: int) -> FlightRoute:
        """
        Return a single route.

        Raises:
            FlightRouteNotFoundError: If no route has this id.
        """
        ...

    @abstractmethod
    def create(self, route: FlightRoute) -> List[FlightRoute]:
        """
        Store a new route.

        Returns:
            All routes, including the new one.

        Raises:
            DuplicateFlightRouteError: If the id is already taken.
        """
        ...

    @abstractmethod
    def update(self, route: FlightRoute) -> FlightRoute:
        """
        Replace the route that has the same id.

        Returns:
            The stored route.

        Raises:
            FlightRouteNotFoundError: If no route has this id.
        """
        ...

    @abstractmethod
    def delete(self, route_id: int) -> None:
        """
        Remove a route.

        Raises:
            FlightRouteNotFoundError: If no route has this id.
        """
        ...
