"""
Algorithm adapters for flight routing.
"""

from src.flight_router.adapters.algorithms.dijkstra_adapter import (
    DijkstraRouteFinder,
)

__all__ = [
    "DijkstraRouteFinder",
]
