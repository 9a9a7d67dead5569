"""
Tests for RouteFinderService.

Uses mock providers and finders to check orchestration: one snapshot per
search, arguments passed through, errors propagated unchanged.
"""

import logging
from unittest.mock import MagicMock

import pytest

from src.dijkstra.exceptions import AirportNotFoundError, Endpoint, UnreachableDestinationError
from src.flight_router.adapters.algorithms.dijkstra_adapter import DijkstraRouteFinder
from src.flight_router.ports.flight_route_repository import FlightRouteProvider
from src.flight_router.ports.route_finder import RouteFinder
from src.flight_router.schemas.route import CheapestRoute
from src.flight_router.services.route_finder_service import RouteFinderService


@pytest.fixture
def mock_provider(sample_routes) -> MagicMock:
    provider = MagicMock(spec=FlightRouteProvider)
    provider.get_all.return_value = sample_routes
    provider.name = "Mock Provider"
    return provider


@pytest.fixture
def mock_finder() -> MagicMock:
    finder = MagicMock(spec=RouteFinder)
    finder.find_cheapest_route.return_value = CheapestRoute.from_path(["GRU", "CDG"], 75)
    finder.name = "Mock Finder"
    return finder


class TestRouteFinderService:
    """Tests for RouteFinderService orchestration."""

    def test_passes_snapshot_and_endpoints(self, mock_provider, mock_finder, sample_routes):
        service = RouteFinderService(mock_provider, mock_finder)

        result = service.find_cheapest_route("GRU", "CDG")

        mock_finder.find_cheapest_route.assert_called_once_with(sample_routes, "GRU", "CDG")
        assert result.total_cost == 75

    def test_fresh_snapshot_per_search(self, mock_provider, mock_finder):
        service = RouteFinderService(mock_provider, mock_finder)

        service.find_cheapest_route("GRU", "CDG")
        service.find_cheapest_route("GRU", "CDG")

        assert mock_provider.get_all.call_count == 2

    def test_not_found_propagates(self, mock_provider, mock_finder):
        mock_finder.find_cheapest_route.side_effect = AirportNotFoundError(Endpoint.ORIGIN, "XXX")
        service = RouteFinderService(mock_provider, mock_finder)

        with pytest.raises(AirportNotFoundError):
            service.find_cheapest_route("XXX", "CDG")

    def test_unreachable_propagates(self, mock_provider, mock_finder):
        mock_finder.find_cheapest_route.side_effect = UnreachableDestinationError("BRC", "GRU")
        service = RouteFinderService(mock_provider, mock_finder)

        with pytest.raises(UnreachableDestinationError):
            service.find_cheapest_route("BRC", "GRU")

    def test_algorithm_name(self, mock_provider, mock_finder):
        assert RouteFinderService(mock_provider, mock_finder).algorithm_name == "Mock Finder"

    def test_logs_result(self, mock_provider, mock_finder, caplog):
        service = RouteFinderService(mock_provider, mock_finder)

        with caplog.at_level(logging.INFO):
            service.find_cheapest_route("GRU", "CDG")

        assert any("GRU - CDG" in record.getMessage() for record in caplog.records)

    def test_with_real_finder(self, mock_provider):
        service = RouteFinderService(mock_provider, DijkstraRouteFinder())

        result = service.find_cheapest_route("GRU", "CDG")

        assert result.route_description == "GRU - BRC - SCL - ORL - CDG"
        assert result.total_cost == 40
