from typing import Dict, List, Optional, Sequence

from .labels import PathNode

ROUTE_SEPARATOR = " - "


def reconstruct_path(nodes: Dict[str, PathNode], destination: str) -> List[str]:
    """
    Reconstruct the airport sequence ending at `destination`.

    Follows previous_airport links back to the origin, whose label has
    no predecessor.

    Returns:
        Airports ordered from origin to destination.
    """
    path: List[str] = []

    curr: Optional[str] = destination
    while curr is not None:
        path.append(curr)
        curr = nodes[curr].previous_airport

    path.reverse()

    return path


def format_route(path: Sequence[str]) -> str:
    """Human-readable route, e.g. 'GRU - BRC - SCL'."""
    return ROUTE_SEPARATOR.join(path)
