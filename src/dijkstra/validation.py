"""
Input validation for the dijkstra module.

Provides validation functions that check endpoints before the search
runs, ensuring fail-fast behavior with clear error messages.
"""

from typing import Collection

from .exceptions import AirportNotFoundError, Endpoint
from .graph import Graph


def validate_origin_exists(origin: str, graph: Graph) -> None:
    """
    Validate that at least one route departs from the origin.

    Args:
        origin: Origin airport code.
        graph: Adjacency mapping built from the route list.

    Raises:
        AirportNotFoundError: If no route originates at `origin`.
    """
    if origin not in graph:
        raise AirportNotFoundError(Endpoint.ORIGIN, origin)


def validate_destination_exists(destination: str, airports: Collection[str]) -> None:
    """
    Validate that the destination appears somewhere in the route list.

    Args:
        destination: Destination airport code.
        airports: Every airport labelled for the search.

    Raises:
        AirportNotFoundError: If `destination` is not a known airport.
    """
    if destination not in airports:
        raise AirportNotFoundError(Endpoint.DESTINATION, destination)


def validate_cheapest_path_inputs(
    graph: Graph,
    airports: Collection[str],
    origin: str,
    destination: str,
) -> None:
    """
    Validate both endpoints of a cheapest-path query.

    The origin is checked first so that an unknown origin is always
    reported even when the destination is unknown too.

    Raises:
        AirportNotFoundError: If either endpoint is unknown.
    """
    validate_origin_exists(origin, graph)
    validate_destination_exists(destination, airports)
