"""
Configuration module for the Flight Router.

This module handles loading environment variables and provides
centralized configuration for route storage, logging and the API.
"""

import os
from typing import List

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    """
    Application configuration class.

    Attributes:
        ROUTES_FILE: JSON file holding the stored flight routes.
        LOG_LEVEL: Root logging level name.
        CORS_ORIGINS: Origins allowed to call the API from a browser.
    """

    ROUTES_FILE: str = os.getenv("TRAVELCHEAP_ROUTES_FILE", "data/flight_routes.json")
    LOG_LEVEL: str = os.getenv("TRAVELCHEAP_LOG_LEVEL", "INFO").upper()
    CORS_ORIGINS: List[str] = _split_csv(
        os.getenv(
            "TRAVELCHEAP_CORS_ORIGINS",
            "http://localhost:3000,http://localhost:3001,"
            "http://127.0.0.1:3000,http://127.0.0.1:3001",
        )
    )
