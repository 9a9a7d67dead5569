"""
End-to-End Integration Tests for Flight Router.

These tests run the complete stack over a real routes file:
- JsonFlightRouteRepository (JSON file to validated DataFrame)
- DijkstraRouteFinder (algorithm adapter)
- RouteFinderService (orchestration)
- FindCheapestRoute (public API)
"""

import json
import threading

import pytest

from src.dijkstra.exceptions import AirportNotFoundError, UnreachableDestinationError
from src.flight_router.application import FindCheapestRoute
from src.flight_router.schemas.flight import FlightRoute
from src.flight_router.schemas.route import CheapestRoute


@pytest.fixture
def routes_file(tmp_path, sample_routes):
    path = tmp_path / "data" / "flight_routes.json"
    path.parent.mkdir()
    path.write_text(
        json.dumps([route.to_dict() for route in sample_routes], indent=2),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def router(routes_file):
    with FindCheapestRoute(routes_file=routes_file) as router:
        yield router


class TestSearch:
    """Cheapest-route queries through the public API."""

    @pytest.mark.parametrize(
        "origin,destination,description,cost",
        [
            ("GRU", "CDG", "GRU - BRC - SCL - ORL - CDG", 40),
            ("BRC", "SCL", "BRC - SCL", 5),
            ("GRU", "ORL", "GRU - BRC - SCL - ORL", 35),
        ],
    )
    def test_known_routes(self, router, origin, destination, description, cost):
        result = router.search(origin, destination)

        assert isinstance(result, CheapestRoute)
        assert result.route_description == description
        assert result.total_cost == cost

    def test_unknown_origin(self, router):
        with pytest.raises(AirportNotFoundError, match="Origin: XXX"):
            router.search("XXX", "GRU")

    def test_unreachable(self, router):
        with pytest.raises(UnreachableDestinationError):
            router.search("BRC", "GRU")

    def test_algorithm_name(self, router):
        assert router.algorithm_name == "Dijkstra"


class TestRouteLifecycle:
    """Route management changes what searches return."""

    def test_create_then_search(self, router, routes_file):
        router.create_route(FlightRoute(id=8, origin="GRU", destination="CDG", cost=1))

        assert router.search("GRU", "CDG").route_description == "GRU - CDG"
        assert len(json.loads(routes_file.read_text(encoding="utf-8"))) == 8

    def test_update_then_search(self, router):
        router.update_route(FlightRoute(id=6, origin="ORL", destination="CDG", cost=60))

        assert router.search("GRU", "CDG").total_cost == 75

    def test_delete_then_search(self, router):
        router.delete_route(2)

        result = router.search("GRU", "CDG")

        assert result.route_description == "GRU - SCL - ORL - CDG"
        assert result.total_cost == 45

    def test_new_instance_sees_persisted_changes(self, router, routes_file):
        router.delete_route(1)

        assert FindCheapestRoute(routes_file=routes_file).get_route(2).cost == 5
        assert len(FindCheapestRoute(routes_file=routes_file).list_routes()) == 6


class TestAirports:
    """Airport helpers on the public API."""

    def test_available_airports(self, router):
        assert router.get_available_airports() == frozenset({"GRU", "BRC", "SCL", "ORL", "CDG"})

    def test_has_route(self, router):
        assert router.has_route("GRU", "BRC")
        assert not router.has_route("BRC", "GRU")


class TestEmptyStore:
    """A missing routes file behaves like an empty network."""

    def test_search_on_missing_file(self, tmp_path):
        router = FindCheapestRoute(routes_file=tmp_path / "absent.json")

        with pytest.raises(AirportNotFoundError):
            router.search("GRU", "CDG")
        assert router.list_routes() == []


class TestConcurrentSearch:
    """Searches keep working while routes are being written."""

    def test_search_during_writes(self, router, routes_file, sample_routes, make_routes):
        filler = make_routes(
            [(i, f"X{i % 40:02d}", f"Y{i % 60:02d}", 50) for i in range(100, 3100)]
        )
        routes_file.write_text(
            json.dumps([route.to_dict() for route in sample_routes + filler]),
            encoding="utf-8",
        )
        extra = FlightRoute(id=9999, origin="CDG", destination="SCL", cost=1)
        stop = threading.Event()

        def churn():
            while not stop.is_set():
                router.create_route(extra)
                router.delete_route(extra.id)

        writer = threading.Thread(target=churn)
        writer.start()
        try:
            costs = [router.search("GRU", "CDG").total_cost for _ in range(100)]
        finally:
            stop.set()
            writer.join()

        assert set(costs) == {40}


class TestContextManager:
    """FindCheapestRoute can be used in a with-block."""

    def test_enter_returns_router(self, routes_file):
        router = FindCheapestRoute(routes_file=routes_file)

        with router as entered:
            assert entered is router

    def test_exceptions_propagate(self, routes_file):
        with pytest.raises(UnreachableDestinationError):
            with FindCheapestRoute(routes_file=routes_file) as router:
                router.search("BRC", "GRU")
