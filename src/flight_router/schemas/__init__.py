"""
Schema definitions for Flight Router.

Pandera-validated DataFrames and frozen dataclasses as the data contracts.
"""

from .flight import (
    ROUTE_COLUMNS,
    FlightRoute,
    FlightRouteDataFrame,
    FlightRouteSchema,
    routes_from_df,
    routes_to_df,
    validate_routes_df,
)
from .route import CheapestRoute

__all__ = [
    # Flight route schemas
    "ROUTE_COLUMNS",
    "FlightRoute",
    "FlightRouteSchema",
    "FlightRouteDataFrame",
    "routes_from_df",
    "routes_to_df",
    "validate_routes_df",
    # Result schemas
    "CheapestRoute",
]
