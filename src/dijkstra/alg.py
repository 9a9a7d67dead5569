"""
Single-criterion Dijkstra search for the cheapest route between two airports.

The search is a pure function of its inputs: the graph and every label
are built inside the call and discarded when it returns, so concurrent
searches never share state.

Ties between equally cheap unvisited airports are broken by airport code,
which makes the reported path reproducible for a given route list.
"""

import heapq
from typing import Dict, Iterable, List, Tuple

from .exceptions import UnreachableDestinationError
from .graph import Edge, Graph, build_graph, graph_airports
from .labels import PathNode
from .reconstruction import reconstruct_path
from .validation import validate_cheapest_path_inputs


def create_nodes(graph: Graph) -> Dict[str, PathNode]:
    """
    Create an unreached label for every airport in the graph.

    Airports that only ever appear as a destination still get a label so
    they can terminate a route.
    """
    return {airport: PathNode(airport) for airport in sorted(graph_airports(graph))}


def relax_edges(current: PathNode, graph: Graph, nodes: Dict[str, PathNode]) -> List[PathNode]:
    """
    Relax every outgoing edge of a finalized airport.

    Returns:
        Neighbours whose best known cost improved.
    """
    improved: List[PathNode] = []

    for edge in graph.get(current.airport, ()):
        neighbor = nodes[edge.destination]
        if neighbor.visited:
            continue

        cost = current.total_cost + edge.cost
        if neighbor.offers_improvement(cost):
            neighbor.total_cost = cost
            neighbor.previous_airport = current.airport
            improved.append(neighbor)

    return improved


def dijkstra(graph: Graph, origin: str, destination: str) -> Dict[str, PathNode]:
    """
    Label-setting search from `origin`, stopping once `destination` is final.

    Args:
        graph: Adjacency mapping from build_graph().
        origin: Origin airport code.
        destination: Destination airport code.

    Returns:
        Labels for every airport in the graph. Airports the search never
        reached keep total_cost None.

    Raises:
        AirportNotFoundError: If origin or destination is not in the graph.
    """
    nodes = create_nodes(graph)
    validate_cheapest_path_inputs(graph, nodes, origin, destination)

    nodes[origin].total_cost = 0
    pq: List[Tuple[int, str]] = [(0, origin)]

    while pq:
        curr_cost, airport = heapq.heappop(pq)
        current = nodes[airport]

        # Stale entry left behind by a later improvement
        if current.visited or curr_cost != current.total_cost:
            continue

        current.visited = True

        if airport == destination:
            break

        for neighbor in relax_edges(current, graph, nodes):
            heapq.heappush(pq, (neighbor.total_cost, neighbor.airport))

    return nodes


def find_cheapest_path(
    routes: Iterable[Edge],
    origin: str,
    destination: str,
) -> Tuple[List[str], int]:
    """
    Find the minimum-cost path between two airports.

    Args:
        routes: Complete snapshot of the route list.
        origin: Origin airport code.
        destination: Destination airport code.

    Returns:
        (path, total_cost) where path lists airports from origin to
        destination.

    Raises:
        AirportNotFoundError: If no route departs from origin, or the
            destination never appears in the route list.
        UnreachableDestinationError: If both are known but not connected.
    """
    graph = build_graph(routes)
    nodes = dijkstra(graph, origin, destination)

    target = nodes[destination]
    if not target.is_reached:
        raise UnreachableDestinationError(origin, destination)

    return reconstruct_path(nodes, destination), target.total_cost
