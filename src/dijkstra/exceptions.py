"""
Custom exceptions for the dijkstra module.

Provides a hierarchy of exceptions for clear error handling
of cheapest-route lookups. Callers translate these into
user-facing responses; the module itself never logs or retries.
"""

from enum import Enum


class Endpoint(Enum):
    """Which end of a requested route an airport code refers to."""

    ORIGIN = "origin"
    DESTINATION = "destination"


class DijkstraError(Exception):
    """Base exception for all dijkstra module errors."""

    pass


class AirportNotFoundError(DijkstraError):
    """Raised when an airport code does not appear in the route list."""

    def __init__(self, endpoint: Endpoint, airport: str) -> None:
        self.endpoint = endpoint
        self.airport = airport
        message = f"FlightRoute not found with {endpoint.value.capitalize()}: {airport}"
        super().__init__(message)


class UnreachableDestinationError(DijkstraError):
    """Raised when both airports are known but no directed path connects them."""

    def __init__(self, origin: str, destination: str) -> None:
        self.origin = origin
        self.destination = destination
        message = f"No route found from {origin} to {destination}"
        super().__init__(message)
