"""
Fixtures for FastAPI endpoint tests.

Every test gets its own routes file seeded with the sample network, and
the module-level router is patched to use it.
"""

import json
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from src.flight_router.application import FindCheapestRoute


@pytest.fixture
def routes_file(tmp_path, sample_routes):
    """Routes file holding the sample network."""
    path = tmp_path / "flight_routes.json"
    path.write_text(json.dumps([route.to_dict() for route in sample_routes]), encoding="utf-8")
    return path


@pytest.fixture
def test_router(routes_file) -> FindCheapestRoute:
    return FindCheapestRoute(routes_file=routes_file)


@pytest.fixture
def client(test_router):
    """TestClient against the app with the router patched to the temp file."""
    with patch("src.fastapi.flights_api.router", test_router):
        from src.fastapi.flights_api import app

        yield TestClient(app)


@pytest.fixture
def lenient_client(test_router):
    """TestClient that turns unhandled server errors into 500 responses."""
    with patch("src.fastapi.flights_api.router", test_router):
        from src.fastapi.flights_api import app

        yield TestClient(app, raise_server_exceptions=False)
