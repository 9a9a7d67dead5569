"""
Flight route schemas using Pandera.

Defines the core contract for route data flowing through the system.
Schema validation happens at layer boundaries only, not per-row.
"""

from dataclasses import dataclass
from typing import List

import pandas as pd
import pandera as pa
from pandera.typing import DataFrame, Series

# Column order used when reading and writing route tables
ROUTE_COLUMNS = ["id", "origin", "destination", "cost"]


class FlightRouteSchema(pa.DataFrameModel):
    """
    Contract for a table of directed, weighted flight connections.

    One row per route. Ids are caller-assigned and must be unique.
    Extra columns are allowed and preserved.
    """

    id: Series[int] = pa.Field(
        unique=True,
        description="Caller-assigned route identifier",
    )
    origin: Series[str] = pa.Field(
        nullable=False,
        description="Origin airport code (e.g., 'GRU')",
    )
    destination: Series[str] = pa.Field(
        nullable=False,
        description="Destination airport code",
    )
    cost: Series[int] = pa.Field(
        ge=0,
        description="Route cost in a currency-agnostic unit",
    )

    class Config:
        strict = False
        coerce = True
        name = "FlightRouteSchema"
        description = "Directed flight connections used by the route finder"


# Type alias for clarity in function signatures
FlightRouteDataFrame = DataFrame[FlightRouteSchema]


def _is_whole_number(value) -> bool:
    try:
        return float(value).is_integer()
    except (TypeError, ValueError):
        return False


# Runs on the raw table, before FlightRouteSchema coerces cost to int
WholeCostSchema = pa.DataFrameSchema(
    {
        "cost": pa.Column(
            checks=pa.Check(
                _is_whole_number,
                element_wise=True,
                error="cost must be a whole number",
            ),
        ),
    },
    strict=False,
    name="WholeCostSchema",
)


def validate_routes_df(routes_df: pd.DataFrame) -> FlightRouteDataFrame:
    """
    Validate a raw route table loaded from storage.

    Fractional costs are rejected instead of being truncated by coercion.

    Raises:
        pandera.errors.SchemaError: If any row breaks either schema.
    """
    WholeCostSchema.validate(routes_df)
    return FlightRouteSchema.validate(routes_df)


@dataclass(frozen=True)
class FlightRoute:
    """
    Immutable directed connection between two airports.

    Satisfies the dijkstra Edge protocol, so route lists can be handed
    to the search directly.
    """

    id: int
    origin: str
    destination: str
    cost: int

    def to_dict(self) -> dict:
        """Plain dict in storage column order."""
        return {
            "id": self.id,
            "origin": self.origin,
            "destination": self.destination,
            "cost": self.cost,
        }


def routes_from_df(routes_df: pd.DataFrame) -> List[FlightRoute]:
    """
    Convert a validated route table to FlightRoute records.

    Numpy scalars are unwrapped so records compare and serialize like
    plain Python values.
    """
    return [
        FlightRoute(
            id=int(row.id),
            origin=str(row.origin),
            destination=str(row.destination),
            cost=int(row.cost),
        )
        for row in routes_df[ROUTE_COLUMNS].itertuples(index=False)
    ]


def routes_to_df(routes: List[FlightRoute]) -> pd.DataFrame:
    """Build a route table from FlightRoute records, validated against the schema."""
    df = pd.DataFrame([route.to_dict() for route in routes], columns=ROUTE_COLUMNS)
    return FlightRouteSchema.validate(df)
