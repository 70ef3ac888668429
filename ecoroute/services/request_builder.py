"""Prompt construction for route requests.

Turns trip parameters into the instruction sent to the model plus the
structured tool parameters that travel next to it. Pure functions, no
validation recovery: callers validate first (see TripRequest).
"""

from __future__ import annotations

from typing import Optional

from ..domain.models import (
    GeoLocation,
    ModelRequest,
    ToolParameters,
    TripRequest,
    VehicleProfile,
)

SECTION_LABELS = ("Route Summary", "Key Stops", "Efficiency Tips")

_PROMPT_TEMPLATE = """\
Plan a comprehensive, energy-efficient route from "{origin}" to "{destination}" for a {vehicle}.

Prioritize:
1. Energy efficiency (flatter terrain, consistent speeds, less traffic).
2. Available charging stations (if EV) or eco-friendly rest stops.
3. Real-time route conditions using Google Maps data.

Structure your response clearly with:
- **{summary}**: Distance, estimated time, and why this is the efficient choice.
- **{stops}**: Specific charging stations or green businesses along the way with their specific locations.
- **{tips}**: Specific driving advice for this route (e.g. "Use regenerative braking heavily on the descent into...").

Ensure you use the Google Maps tool to find real places and accurately estimate the route context.
"""


def build_prompt(origin: str, destination: str, vehicle_profile: VehicleProfile) -> str:
    """Render the route instruction.

    The current-location sentinel is passed through as plain text; the
    model resolves it with the location bias.
    """
    summary, stops, tips = SECTION_LABELS
    return _PROMPT_TEMPLATE.format(
        origin=origin,
        destination=destination,
        vehicle=vehicle_profile.value,
        summary=summary,
        stops=stops,
        tips=tips,
    )


def build_request(
    origin: str,
    destination: str,
    vehicle_profile: VehicleProfile,
    location_bias: Optional[GeoLocation] = None,
    *,
    maps_grounding: bool = True,
) -> ModelRequest:
    """Build the prompt and tool parameters for one route request.

    Args:
        origin: Starting point (already validated).
        destination: End point (already validated).
        vehicle_profile: Vehicle the route is optimised for.
        location_bias: Device position; only ever placed in the tool
            parameters, never in the prompt.
        maps_grounding: Whether to enable the maps grounding tool.

    Returns:
        ModelRequest ready for a RouteModelPort.
    """
    return ModelRequest(
        prompt=build_prompt(origin, destination, vehicle_profile),
        tool_parameters=ToolParameters(
            maps_grounding=maps_grounding,
            location_bias=location_bias,
        ),
    )


def build_trip_request(trip: TripRequest, *, maps_grounding: bool = True) -> ModelRequest:
    """Build a ModelRequest from a validated TripRequest."""
    return build_request(
        trip.origin,
        trip.destination,
        trip.vehicle_profile,
        trip.location_bias,
        maps_grounding=maps_grounding,
    )
