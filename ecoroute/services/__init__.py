"""Services layer - Application orchestration.

Available services:
- RoutePlannerService: Validates, calls the model and normalizes the reply
- build_request / build_trip_request: Prompt and tool parameter construction
- normalize: Raw model reply to RouteAnswer
"""

from .request_builder import SECTION_LABELS, build_request, build_trip_request
from .response_normalizer import NO_DETAILS_PLACEHOLDER, normalize
from .route_planner import RoutePlannerService

__all__ = [
    "RoutePlannerService",
    "build_request",
    "build_trip_request",
    "normalize",
    "SECTION_LABELS",
    "NO_DETAILS_PLACEHOLDER",
]
