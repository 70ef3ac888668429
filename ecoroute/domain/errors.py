"""Typed domain errors for EcoRoute.

Every failure of a route submission is one of these types. All of
them are terminal for the submission: nothing is retried and no
partial result is returned.

All errors inherit from EcoRouteError and can optionally wrap a root
cause exception for diagnostics. The cause is never part of the
message shown to the user.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

EMPTY_RESPONSE_MESSAGE = "No route suggestions found."
ROUTE_UNAVAILABLE_MESSAGE = (
    "Unable to calculate route. Please verify your API key and connection."
)
RENDERING_FAILED_MESSAGE = "Unable to display the route. Please try again."


@dataclass
class EcoRouteError(Exception):
    """Base error for the EcoRoute domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)

    @property
    def user_message(self) -> str:
        """Message that is safe to show to the end user."""
        return self.message


@dataclass
class InvalidInput(EcoRouteError):
    """The submission was rejected before any model call.

    Attributes:
        field_name: The form field that failed validation
    """

    field_name: str = ""


@dataclass
class EmptyResponse(EcoRouteError):
    """The model call succeeded but returned no candidate replies."""

    message: str = EMPTY_RESPONSE_MESSAGE


@dataclass
class RouteUnavailable(EcoRouteError):
    """The model call failed (transport, service or authentication).

    The message is fixed so that no service detail leaks to the user.
    The cause stays reachable through ``cause`` for logging only.
    """

    message: str = ROUTE_UNAVAILABLE_MESSAGE

    def __str__(self) -> str:
        return self.message


@dataclass
class ConfigurationError(EcoRouteError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None


@dataclass
class RenderingError(EcoRouteError):
    """Answer or citation rendering failed.

    Attributes:
        renderer_type: Type of renderer that failed
    """

    message: str = RENDERING_FAILED_MESSAGE
    renderer_type: str = ""
