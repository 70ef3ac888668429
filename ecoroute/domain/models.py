"""Immutable domain models for EcoRoute.

All models are frozen dataclasses with slots. They have no external
dependencies and describe one route-planning round trip: what the user
asked for, what is sent to the model, and what comes back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .errors import InvalidInput

CURRENT_LOCATION_SENTINEL = "My Current Location"
"""Origin text meaning "start from where the device is"."""


class VehicleProfile(Enum):
    """Closed set of vehicle types a route can be optimised for.

    The value is the label sent to the model.
    """

    ELECTRIC = "Electric Vehicle (EV)"
    HYBRID = "Hybrid"
    STANDARD = "Standard (Gas)"

    @property
    def short_label(self) -> str:
        """Compact label used by the form."""
        return _SHORT_LABELS[self]

    @classmethod
    def parse(cls, value: "VehicleProfile | str") -> VehicleProfile:
        """Resolve a profile from an enum, a name, a label or an alias.

        Raises:
            InvalidInput: If the value names no known profile.
        """
        if isinstance(value, cls):
            return value

        key = str(value or "").strip().lower()
        for profile in cls:
            if key in (profile.name.lower(), profile.value.lower()):
                return profile

        profile = _ALIASES.get(key)
        if profile is None:
            raise InvalidInput(
                f"Unknown vehicle type: {value!r}",
                field_name="vehicle_profile",
            )
        return profile


_SHORT_LABELS = {
    VehicleProfile.ELECTRIC: "EV",
    VehicleProfile.HYBRID: "Hybrid",
    VehicleProfile.STANDARD: "Gas",
}

_ALIASES = {
    "ev": VehicleProfile.ELECTRIC,
    "electric": VehicleProfile.ELECTRIC,
    "hybrid": VehicleProfile.HYBRID,
    "gas": VehicleProfile.STANDARD,
    "standard": VehicleProfile.STANDARD,
}


@dataclass(frozen=True, slots=True)
class GeoLocation:
    """GPS coordinates representing a geographic location."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )


@dataclass(frozen=True, slots=True)
class TripRequest:
    """A single user submission.

    Origin and destination are stored trimmed and may never be empty.

    Attributes:
        origin: Starting point, free text or the current-location sentinel
        destination: End point, free text
        vehicle_profile: Vehicle the route is optimised for
        location_bias: Device position used to bias place resolution
    """

    origin: str
    destination: str
    vehicle_profile: VehicleProfile
    location_bias: Optional[GeoLocation] = None

    def __post_init__(self) -> None:
        for name in ("origin", "destination"):
            value = (getattr(self, name) or "").strip()
            if not value:
                raise InvalidInput(f"{name.capitalize()} is required", field_name=name)
            object.__setattr__(self, name, value)

    @property
    def uses_current_location(self) -> bool:
        """Check if the origin is the current-location sentinel."""
        return self.origin == CURRENT_LOCATION_SENTINEL


@dataclass(frozen=True, slots=True)
class ToolParameters:
    """Structured hints passed next to the prompt.

    Attributes:
        maps_grounding: Whether the maps grounding tool is enabled
        location_bias: Coordinates used to prefer nearby places
    """

    maps_grounding: bool = True
    location_bias: Optional[GeoLocation] = None


@dataclass(frozen=True, slots=True)
class ModelRequest:
    """Everything the external model call needs."""

    prompt: str
    tool_parameters: ToolParameters = field(default_factory=ToolParameters)


@dataclass(frozen=True, slots=True)
class Citation:
    """A place reference the model grounded its answer on.

    Attributes:
        title: Display name of the place or page
        uri: Navigable locator (usually a Google Maps link)
        source: Which raw shape it came from ("web", "mobile" or "maps")
        place_id: Maps place identifier, when the maps shape carries one
    """

    title: str
    uri: str
    source: str = "web"
    place_id: Optional[str] = None


@dataclass(frozen=True, slots=True)
class RouteAnswer:
    """Normalized result of one successful route request.

    Attributes:
        answer_text: Model answer with its line structure preserved
        citations: Grounding citations in the order the model returned them
    """

    answer_text: str
    citations: tuple[Citation, ...] = field(default_factory=tuple)

    @property
    def has_citations(self) -> bool:
        """Check if any citation survived normalization."""
        return len(self.citations) > 0
