"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    EMPTY_RESPONSE_MESSAGE,
    RENDERING_FAILED_MESSAGE,
    ROUTE_UNAVAILABLE_MESSAGE,
    ConfigurationError,
    EcoRouteError,
    EmptyResponse,
    InvalidInput,
    RenderingError,
    RouteUnavailable,
)
from .models import (
    CURRENT_LOCATION_SENTINEL,
    Citation,
    GeoLocation,
    ModelRequest,
    RouteAnswer,
    ToolParameters,
    TripRequest,
    VehicleProfile,
)

__all__ = [
    # Models
    "CURRENT_LOCATION_SENTINEL",
    "VehicleProfile",
    "GeoLocation",
    "TripRequest",
    "ToolParameters",
    "ModelRequest",
    "Citation",
    "RouteAnswer",
    # Errors
    "EMPTY_RESPONSE_MESSAGE",
    "ROUTE_UNAVAILABLE_MESSAGE",
    "RENDERING_FAILED_MESSAGE",
    "EcoRouteError",
    "InvalidInput",
    "EmptyResponse",
    "RouteUnavailable",
    "ConfigurationError",
    "RenderingError",
]
