from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class PathNode:
    """
    Search label for one airport.

    Each PathNode tracks:
    - The airport it labels
    - Best known cost from the origin (None while unreached)
    - The airport of the previous hop on that cheapest path
    - Whether the cost is final

    Labels are created at the start of a single search and thrown away
    when it returns.
    """
    airport: str
    total_cost: Optional[int] = None
    previous_airport: Optional[str] = None
    visited: bool = False

    @property
    def is_reached(self) -> bool:
        """True once any path from the origin has been found."""
        return self.total_cost is not None

    def offers_improvement(self, cost: int) -> bool:
        """True if `cost` beats the best known cost for this airport."""
        return self.total_cost is None or cost < self.total_cost
