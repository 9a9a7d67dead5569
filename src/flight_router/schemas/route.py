"""
Route result schema.

Defines the output contract of cheapest-route searches.
Standardizes the interface between algorithms and consumers.
"""

from dataclasses import dataclass
from typing import Sequence

from src.dijkstra.reconstruction import format_route


@dataclass(frozen=True)
class CheapestRoute:
    """
    Immutable result of a cheapest-route search.

    Attributes:
        airports: Airports in traversal order, origin first.
        total_cost: Sum of route costs along the path.
    """

    airports: tuple[str, ...]
    total_cost: int

    @property
    def route_description(self) -> str:
        """Airports joined for display, e.g. 'GRU - BRC - SCL'."""
        return format_route(self.airports)

    @property
    def origin(self) -> str:
        """First airport of the route."""
        if not self.airports:
            raise ValueError("Route has no airports")
        return self.airports[0]

    @property
    def destination(self) -> str:
        """Last airport of the route."""
        if not self.airports:
            raise ValueError("Route has no airports")
        return self.airports[-1]

    @property
    def num_stops(self) -> int:
        """Number of intermediate airports."""
        return max(len(self.airports) - 2, 0)

    @classmethod
    def from_path(cls, path: Sequence[str], total_cost: int) -> "CheapestRoute":
        """
        Factory method to create a CheapestRoute from a search result.

        Args:
            path: Airports from origin to destination.
            total_cost: Cost of the path.

        Returns:
            Validated CheapestRoute instance.
        """
        if not path:
            raise ValueError("Route must have at least one airport")
        if total_cost < 0:
            raise ValueError(f"total_cost must be >= 0, got {total_cost}")

        return cls(airports=tuple(path), total_cost=total_cost)
