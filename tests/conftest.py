"""Shared fixtures: the reference route network used across test modules."""

from typing import List

import pytest

from src.flight_router.schemas.flight import FlightRoute

SAMPLE_ROUTES = [
    (1, "GRU", "BRC", 10),
    (2, "BRC", "SCL", 5),
    (3, "GRU", "CDG", 75),
    (4, "GRU", "SCL", 20),
    (5, "GRU", "ORL", 56),
    (6, "ORL", "CDG", 5),
    (7, "SCL", "ORL", 20),
]


def build_routes(rows) -> List[FlightRoute]:
    """Build FlightRoute records from (id, origin, destination, cost) tuples."""
    return [
        FlightRoute(id=route_id, origin=origin, destination=destination, cost=cost)
        for route_id, origin, destination, cost in rows
    ]


@pytest.fixture
def sample_routes() -> List[FlightRoute]:
    """GRU/BRC/SCL/ORL/CDG network; GRU is never a destination."""
    return build_routes(SAMPLE_ROUTES)


@pytest.fixture
def make_routes():
    """Factory fixture turning (id, origin, destination, cost) rows into routes."""
    return build_routes
