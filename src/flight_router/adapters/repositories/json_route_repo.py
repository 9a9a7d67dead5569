"""
JSON Flight Route Repository - file-backed route storage.

Stores the route list as a JSON array of {id, origin, destination, cost}
objects. Every read loads the file afresh and validates it against
FlightRouteSchema at the boundary; writes go through the same schema
and replace the file in one step, so readers never see a partial write.
"""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import List, Union

import pandas as pd

from src.flight_router.ports.flight_route_repository import (
    DuplicateFlightRouteError,
    FlightRouteNotFoundError,
    FlightRouteRepository,
)
from src.flight_router.schemas.flight import (
    ROUTE_COLUMNS,
    FlightRoute,
    FlightRouteDataFrame,
    routes_from_df,
    routes_to_df,
    validate_routes_df,
)

logger = logging.getLogger(__name__)


class JsonFlightRouteRepository(FlightRouteRepository):
    """
    Route repository backed by a single JSON file.

    A missing or unreadable file is treated as an empty route list, so a
    fresh deployment starts with no routes instead of failing.

    Read-modify-write operations hold a lock so concurrent requests in
    the same process cannot drop each other's changes.

    Attributes:
        _path: Location of the JSON file.
        _lock: Serializes create/update/delete.
    """

    def __init__(self, routes_file: Union[str, Path]) -> None:
        """
        Initialize the repository.

        Args:
            routes_file: Path to the JSON file. Created on first write.
        """
        self._path = Path(routes_file)
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        """Provider identifier."""
        return f"JSON file ({self._path})"

    @property
    def path(self) -> Path:
        """Location of the backing file."""
        return self._path

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def get_routes_df(self) -> FlightRouteDataFrame:
        """
        Load the route table and validate it against the route schema.

        Returns:
            Validated DataFrame, empty if the file is missing or malformed.

        Raises:
            pandera.errors.SchemaError: If stored rows break the schema.
        """
        records = self._load_records()
        df = pd.DataFrame(records, columns=ROUTE_COLUMNS)
        return validate_routes_df(df)

    def get_all(self) -> List[FlightRoute]:
        """Return every stored route in file order."""
        routes = routes_from_df(self.get_routes_df())
        logger.debug("Loaded %d routes from %s", len(routes), self._path)
        return routes

    def get(self, route_id: int) -> FlightRoute:
        """Return the route with `route_id`."""
        for route in self.get_all():
            if route.id == route_id:
                return route
        raise FlightRouteNotFoundError(route_id)

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def create(self, route: FlightRoute) -> List[FlightRoute]:
        """Append a new route and return the full list."""
        with self._lock:
            routes = self.get_all()

            if any(existing.id == route.id for existing in routes):
                raise DuplicateFlightRouteError(route.id)

            routes.append(route)
            self._save(routes)

        logger.info("Created route %d: %s -> %s", route.id, route.origin, route.destination)
        return routes

    def update(self, route: FlightRoute) -> FlightRoute:
        """Replace the route with the same id; the new version moves to the end."""
        with self._lock:
            routes = self.get_all()
            existing = self._find(routes, route.id)

            routes.remove(existing)
            routes.append(route)
            self._save(routes)

        logger.info("Updated route %d", route.id)
        return route

    def delete(self, route_id: int) -> None:
        """Remove the route with `route_id`."""
        with self._lock:
            routes = self.get_all()
            existing = self._find(routes, route_id)

            routes.remove(existing)
            self._save(routes)

        logger.info("Deleted route %d", route_id)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _find(routes: List[FlightRoute], route_id: int) -> FlightRoute:
        for route in routes:
            if route.id == route_id:
                return route
        raise FlightRouteNotFoundError(route_id)

    def _load_records(self) -> List[dict]:
        """Read raw records, lower-casing keys so 'Origin' and 'origin' both work."""
        try:
            content = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("Routes file %s does not exist yet", self._path)
            return []

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.warning("Ignoring malformed routes file %s: %s", self._path, e)
            return []

        if not isinstance(data, list):
            logger.warning("Ignoring routes file %s: expected a JSON array", self._path)
            return []

        return [
            {str(key).lower(): value for key, value in record.items()}
            for record in data
            if isinstance(record, dict)
        ]

    def _save(self, routes: List[FlightRoute]) -> None:
        """Validate the full route list and atomically replace the file with it."""
        df = routes_to_df(routes)
        self._path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory as the target so os.replace stays on one filesystem
        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
        )
        os.close(fd)
        try:
            df.to_json(tmp_name, orient="records", indent=2)
            os.replace(tmp_name, self._path)
        finally:
            Path(tmp_name).unlink(missing_ok=True)

        logger.debug("Saved %d routes to %s", len(df), self._path)
