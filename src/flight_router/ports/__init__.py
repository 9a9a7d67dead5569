"""
Port interfaces for the Flight Router.

Ports define the abstract interfaces (ABCs) that the domain layer uses
to communicate with external systems. This follows the Ports and
Adapters (Hexagonal) architecture pattern.
"""

from src.flight_router.ports.flight_route_repository import (
    DuplicateFlightRouteError,
    FlightRouteNotFoundError,
    FlightRouteProvider,
    FlightRouteRepository,
    FlightRouteRepositoryError,
)
from src.flight_router.ports.route_finder import RouteFinder

__all__ = [
    "DuplicateFlightRouteError",
    "FlightRouteNotFoundError",
    "FlightRouteProvider",
    "FlightRouteRepository",
    "FlightRouteRepositoryError",
    "RouteFinder",
]
