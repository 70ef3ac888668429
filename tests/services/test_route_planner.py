"""Tests for the route planner service."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from ecoroute.config import GenAIConfig
from ecoroute.adapters.genai import GeminiRouteModel
from ecoroute.domain.errors import (
    EMPTY_RESPONSE_MESSAGE,
    ROUTE_UNAVAILABLE_MESSAGE,
    ConfigurationError,
    EmptyResponse,
    InvalidInput,
    RouteUnavailable,
)
from ecoroute.domain.models import GeoLocation, ModelRequest, VehicleProfile
from ecoroute.services.route_planner import RoutePlannerService

REPLY = {
    "candidates": [
        {
            "content": {"parts": [{"text": "**Route Summary**\nTake I-5."}]},
            "grounding_metadata": {
                "grounding_chunks": [{"maps": {"title": "Harris Ranch", "uri": "https://maps/1"}}]
            },
        }
    ]
}


@pytest.fixture
def route_model():
    model = AsyncMock()
    model.generate.return_value = REPLY
    return model


@pytest.fixture
def planner(route_model):
    return RoutePlannerService(route_model=route_model)


def test_plan_returns_normalized_answer(planner, route_model):
    answer = asyncio.run(planner.plan("San Francisco", "Los Angeles", "EV"))

    assert answer.answer_text == "**Route Summary**\nTake I-5."
    assert answer.citations[0].title == "Harris Ranch"
    route_model.generate.assert_awaited_once()


def test_plan_passes_bias_and_vehicle(planner, route_model):
    bias = GeoLocation(37.77, -122.42)

    asyncio.run(planner.plan("SF", "LA", VehicleProfile.HYBRID, bias))

    (request,), _ = route_model.generate.await_args
    assert isinstance(request, ModelRequest)
    assert request.tool_parameters.location_bias == bias
    assert request.tool_parameters.maps_grounding is True
    assert VehicleProfile.HYBRID.value in request.prompt


@pytest.mark.parametrize(
    "origin, destination, vehicle",
    [
        ("SF", "", "EV"),
        ("SF", "   ", "EV"),
        ("", "LA", "EV"),
        ("SF", "LA", "rocket"),
    ],
)
def test_invalid_input_never_calls_model(planner, route_model, origin, destination, vehicle):
    with pytest.raises(InvalidInput):
        asyncio.run(planner.plan(origin, destination, vehicle))
    route_model.generate.assert_not_awaited()


@pytest.mark.parametrize(
    "failure",
    [
        ConnectionError("connection reset"),
        RuntimeError("401 UNAUTHENTICATED: API key sk-live-123 invalid"),
        TimeoutError(),
    ],
)
def test_transport_failure_becomes_route_unavailable(planner, route_model, failure):
    route_model.generate.side_effect = failure

    with pytest.raises(RouteUnavailable) as exc_info:
        asyncio.run(planner.plan("SF", "LA", "gas"))

    assert exc_info.value.user_message == ROUTE_UNAVAILABLE_MESSAGE
    assert exc_info.value.cause is failure


def test_empty_candidates_propagate(planner, route_model):
    route_model.generate.return_value = {"candidates": []}
    with pytest.raises(EmptyResponse):
        asyncio.run(planner.plan("SF", "LA", "EV"))


def test_missing_api_key_surfaces_as_route_unavailable():
    model = GeminiRouteModel(GenAIConfig(api_key=None))
    planner = RoutePlannerService(route_model=model)

    with pytest.raises(RouteUnavailable) as exc_info:
        asyncio.run(planner.plan("SF", "LA", "EV"))
    assert isinstance(exc_info.value.cause, ConfigurationError)


class TestPlanSafe:
    def test_success(self, planner):
        answer, error = asyncio.run(planner.plan_safe("SF", "LA", "EV"))
        assert error is None
        assert answer is not None

    def test_invalid_input_message(self, planner, route_model):
        answer, error = asyncio.run(planner.plan_safe("SF", "", "EV"))
        assert answer is None
        assert error == "Destination is required"
        route_model.generate.assert_not_awaited()

    def test_empty_response_message(self, planner, route_model):
        route_model.generate.return_value = {}
        answer, error = asyncio.run(planner.plan_safe("SF", "LA", "EV"))
        assert answer is None
        assert error == EMPTY_RESPONSE_MESSAGE

    def test_failure_message_does_not_leak(self, planner, route_model):
        route_model.generate.side_effect = RuntimeError("secret-token-xyz")
        answer, error = asyncio.run(planner.plan_safe("SF", "LA", "EV"))
        assert answer is None
        assert error == ROUTE_UNAVAILABLE_MESSAGE
        assert "secret-token-xyz" not in error
