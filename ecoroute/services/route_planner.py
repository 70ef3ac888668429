"""Route planner service - Main orchestrator.

One call per user submission: validate, build the request, await the
model, normalize the reply. Nothing is cached, retried or cancelled.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..domain.errors import (
    EcoRouteError,
    EmptyResponse,
    InvalidInput,
    RouteUnavailable,
)
from ..domain.models import GeoLocation, RouteAnswer, TripRequest, VehicleProfile
from ..ports.route_model import RouteModelPort
from .request_builder import build_trip_request
from .response_normalizer import normalize


@dataclass
class RoutePlannerService:
    """Main service for planning energy-efficient routes.

    This service orchestrates the full round trip:
    1. Input validation
    2. Request building
    3. Model call
    4. Reply normalization

    Attributes:
        route_model: The maps-grounded generative model
        maps_grounding: Whether requests enable the maps grounding tool
    """

    route_model: RouteModelPort
    maps_grounding: bool = True

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    async def plan(
        self,
        origin: str,
        destination: str,
        vehicle_profile: VehicleProfile | str,
        location_bias: Optional[GeoLocation] = None,
    ) -> RouteAnswer:
        """Plan a route from form input.

        Args:
            origin: Starting point, or the current-location sentinel.
            destination: End point.
            vehicle_profile: Profile enum, name, label or short alias.
            location_bias: Device position, if known.

        Returns:
            RouteAnswer with the model answer and its citations.

        Raises:
            InvalidInput: If origin, destination or vehicle is invalid.
                The model is not called.
            EmptyResponse: If the model returned no candidates.
            RouteUnavailable: If the model call failed for any reason.
        """
        trip = TripRequest(
            origin=origin,
            destination=destination,
            vehicle_profile=VehicleProfile.parse(vehicle_profile),
            location_bias=location_bias,
        )
        return await self.plan_trip(trip)

    async def plan_trip(self, trip: TripRequest) -> RouteAnswer:
        """Plan a route for an already validated TripRequest."""
        self._logger.info(
            "Starting route planning",
            extra={
                "vehicle": trip.vehicle_profile.name,
                "current_location": trip.uses_current_location,
                "location_bias": trip.location_bias is not None,
            },
        )

        request = build_trip_request(trip, maps_grounding=self.maps_grounding)

        try:
            raw_reply = await self.route_model.generate(request)
        except Exception as e:
            self._logger.error(
                "Route model call failed",
                extra={"error_type": type(e).__name__, "error": str(e)},
                exc_info=True,
            )
            raise RouteUnavailable(cause=e) from e

        answer = normalize(raw_reply)
        self._logger.info(
            "Route planned",
            extra={"citations": len(answer.citations)},
        )
        return answer

    async def plan_safe(
        self,
        origin: str,
        destination: str,
        vehicle_profile: VehicleProfile | str,
        location_bias: Optional[GeoLocation] = None,
    ) -> tuple[Optional[RouteAnswer], Optional[str]]:
        """Plan a route, returning a user-facing message instead of raising.

        Returns:
            Tuple of (RouteAnswer or None, error message or None).
        """
        try:
            answer = await self.plan(origin, destination, vehicle_profile, location_bias)
            return answer, None
        except InvalidInput as e:
            self._logger.info("Submission rejected", extra={"field": e.field_name})
            return None, e.user_message
        except EmptyResponse as e:
            self._logger.warning("Model returned no candidates")
            return None, e.user_message
        except EcoRouteError as e:
            return None, e.user_message
