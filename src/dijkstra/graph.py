"""
Route graph construction.

The graph is a plain adjacency mapping rebuilt from the route list on
every query, so no state survives between searches.
"""

from typing import Dict, Iterable, List, Protocol, Set


class Edge(Protocol):
    """Anything with an origin, a destination and a cost is a graph edge."""

    origin: str
    destination: str
    cost: int


Graph = Dict[str, List[Edge]]


def build_graph(routes: Iterable[Edge]) -> Graph:
    """
    Group routes by origin airport.

    Edge order within each origin is preserved. Duplicate, parallel and
    self-loop edges are all kept as distinct edges.

    Args:
        routes: Directed, weighted flight connections.

    Returns:
        Mapping from airport code to its outgoing edges.
    """
    graph: Graph = {}
    for route in routes:
        graph.setdefault(route.origin, []).append(route)
    return graph


def graph_airports(graph: Graph) -> Set[str]:
    """Every airport that originates or terminates at least one edge."""
    airports = set(graph)
    for edges in graph.values():
        airports.update(edge.destination for edge in edges)
    return airports
