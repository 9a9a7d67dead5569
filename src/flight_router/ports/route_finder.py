"""
Route Finder port interface.

Defines the abstract contract for routing algorithms.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from src.flight_router.schemas.flight import FlightRoute
    from src.flight_router.schemas.route import CheapestRoute


class RouteFinder(ABC):
    """
    Abstract interface for cheapest-route algorithms.

    Algorithm adapters receive the full route snapshot and build whatever
    structure they need per call. They must not keep state between calls.

    Implementations:
    - DijkstraRouteFinder: label-setting search over non-negative costs
    """

    @abstractmethod
    def find_cheapest_route(
        self,
        routes: Sequence[FlightRoute],
        origin: str,
        destination: str,
    ) -> CheapestRoute:
        """
        Find the minimum-cost route between two airports.

        Args:
            routes: Complete route snapshot.
            origin: Origin airport code.
            destination: Destination airport code.

        Returns:
            The cheapest route and its total cost.

        Raises:
            AirportNotFoundError: If either airport is unknown.
            UnreachableDestinationError: If no path connects them.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Algorithm identifier.

        Returns:
            Human-readable algorithm name.
        """
        ...
