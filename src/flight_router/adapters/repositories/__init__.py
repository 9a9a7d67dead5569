"""
Repository adapters for flight route storage.
"""

from src.flight_router.adapters.repositories.json_route_repo import (
    JsonFlightRouteRepository,
)

__all__ = [
    "JsonFlightRouteRepository",
]
