"""
TravelCheap HTTP API.

Exposes route management and cheapest-route queries over the flight
router, translating domain errors into status codes.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel

from src.dijkstra.exceptions import AirportNotFoundError, UnreachableDestinationError
from src.flight_router.application import FindCheapestRoute
from src.flight_router.config import Config
from src.flight_router.ports.flight_route_repository import (
    DuplicateFlightRouteError,
    FlightRouteNotFoundError,
)
from src.flight_router.schemas.flight import FlightRoute

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

ROUTES_PREFIX = "/api/v1/routes"

router = FindCheapestRoute(routes_file=Config.ROUTES_FILE)

app = FastAPI(title="TravelCheap API")

# Enable CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Pydantic Schemas (The JSON Contract) ---
# Field names are snake_case in Python and camelCase on the wire.


class CamelModel(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,  # Allows reading from dataclasses
        alias_generator=to_camel,
        populate_by_name=True,
    )


def _validate_airport_code(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValueError(f"{field_name} is required")
    if len(value) != 3:
        raise ValueError(f"{field_name} must be 3 characters long")
    return value


class CheapestRouteRequest(CamelModel):
    origin: str
    destination: str

    @field_validator("origin")
    @classmethod
    def origin_is_airport_code(cls, value: str) -> str:
        return _validate_airport_code(value, "Origin")

    @field_validator("destination")
    @classmethod
    def destination_is_airport_code(cls, value: str) -> str:
        return _validate_airport_code(value, "Destination")

    @model_validator(mode="after")
    def endpoints_differ(self) -> "CheapestRouteRequest":
        if self.origin.lower() == self.destination.lower():
            raise ValueError("Origin and Destination cannot be the same")
        return self


class FlightRouteRequest(CheapestRouteRequest):
    id: int
    cost: int = Field(description="Route cost, 1 to 100")

    @field_validator("cost")
    @classmethod
    def cost_in_range(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Cost must be greater than 0")
        if value > 100:
            raise ValueError("Cost cannot exceed 100")
        return value

    def to_route(self) -> FlightRoute:
        return FlightRoute(
            id=self.id,
            origin=self.origin,
            destination=self.destination,
            cost=self.cost,
        )


class FlightRouteResponseSchema(CamelModel):
    id: int
    origin: str
    destination: str
    cost: int


class CheapestRouteSchema(CamelModel):
    route_description: str  # Captures @property
    total_cost: int


class ValidationErrorDetail(CamelModel):
    property_name: str
    error_message: str


class ErrorResponse(CamelModel):
    status_code: int
    message: str
    details: Optional[List[ValidationErrorDetail]] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


# --- Error translation ---


def _error_response(
    status_code: int,
    message: str,
    details: Optional[List[ValidationErrorDetail]] = None,
) -> JSONResponse:
    body = ErrorResponse(status_code=status_code, message=message, details=details)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True),
    )


def _validation_details(errors: List[Dict[str, Any]]) -> List[ValidationErrorDetail]:
    details = []
    for error in errors:
        # FastAPI prefixes the location with where the value came from
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
        message = str(error.get("msg", "")).removeprefix("Value error, ")
        details.append(
            ValidationErrorDetail(property_name=".".join(loc), error_message=message)
        )
    return details


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return _error_response(
        400, "One or more validation errors occurred.", _validation_details(exc.errors())
    )


@app.exception_handler(ValidationError)
async def validation_handler(request: Request, exc: ValidationError):
    return _error_response(
        400, "One or more validation errors occurred.", _validation_details(exc.errors())
    )


@app.exception_handler(AirportNotFoundError)
@app.exception_handler(FlightRouteNotFoundError)
async def not_found_handler(request: Request, exc: Exception):
    logger.info("Not found: %s", exc)
    return _error_response(404, str(exc))


@app.exception_handler(UnreachableDestinationError)
@app.exception_handler(DuplicateFlightRouteError)
async def business_rule_handler(request: Request, exc: Exception):
    logger.info("Rejected by business rule: %s", exc)
    return _error_response(400, str(exc))


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("An unexpected error occurred.")
    return _error_response(500, "An internal error occurred.")


# --- API Endpoints ---


@app.get(
    f"{ROUTES_PREFIX}/cheapest/{{origin}}/{{destination}}",
    response_model=CheapestRouteSchema,
)
def get_cheapest_route(origin: str, destination: str):
    """Cheapest route between two airports over all stored routes."""
    query = CheapestRouteRequest(origin=origin, destination=destination)
    result = router.search(origin=query.origin, destination=query.destination)
    # Validate from attributes so the route_description @property is read
    return CheapestRouteSchema.model_validate(result)


@app.get(f"{ROUTES_PREFIX}/{{route_id}}", response_model=FlightRouteResponseSchema)
def get_route(route_id: int):
    return router.get_route(route_id)


@app.post(ROUTES_PREFIX, response_model=List[FlightRouteResponseSchema])
def create_route(request: FlightRouteRequest):
    """Create a route and return the full route list."""
    return router.create_route(request.to_route())


@app.put(ROUTES_PREFIX, response_model=FlightRouteResponseSchema)
def update_route(request: FlightRouteRequest):
    return router.update_route(request.to_route())


@app.delete(f"{ROUTES_PREFIX}/{{route_id}}")
def delete_route(route_id: int):
    router.delete_route(route_id)
    return Response(status_code=200)
