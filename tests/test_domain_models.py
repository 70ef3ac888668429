"""Tests for domain models and errors."""

import pytest

from ecoroute.domain.errors import (
    ROUTE_UNAVAILABLE_MESSAGE,
    EmptyResponse,
    InvalidInput,
    RouteUnavailable,
)
from ecoroute.domain.models import (
    CURRENT_LOCATION_SENTINEL,
    GeoLocation,
    RouteAnswer,
    TripRequest,
    VehicleProfile,
)


class TestVehicleProfile:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("ev", VehicleProfile.ELECTRIC),
            ("EV", VehicleProfile.ELECTRIC),
            ("Electric Vehicle (EV)", VehicleProfile.ELECTRIC),
            ("ELECTRIC", VehicleProfile.ELECTRIC),
            ("Hybrid", VehicleProfile.HYBRID),
            ("gas", VehicleProfile.STANDARD),
            ("Standard (Gas)", VehicleProfile.STANDARD),
            (" standard ", VehicleProfile.STANDARD),
        ],
    )
    def test_parse_accepts_names_labels_and_aliases(self, value, expected):
        assert VehicleProfile.parse(value) is expected

    def test_parse_passes_enum_through(self):
        assert VehicleProfile.parse(VehicleProfile.HYBRID) is VehicleProfile.HYBRID

    @pytest.mark.parametrize("value", ["", "diesel", "truck", None])
    def test_parse_rejects_unknown(self, value):
        with pytest.raises(InvalidInput) as exc_info:
            VehicleProfile.parse(value)
        assert exc_info.value.field_name == "vehicle_profile"

    def test_short_labels(self):
        assert [p.short_label for p in VehicleProfile] == ["EV", "Hybrid", "Gas"]


class TestTripRequest:
    def test_strips_origin_and_destination(self):
        trip = TripRequest("  Paris ", " Lyon\n", VehicleProfile.ELECTRIC)
        assert trip.origin == "Paris"
        assert trip.destination == "Lyon"

    @pytest.mark.parametrize(
        "origin, destination, field_name",
        [
            ("", "Lyon", "origin"),
            ("   ", "Lyon", "origin"),
            ("Paris", "", "destination"),
            ("Paris", "\t", "destination"),
        ],
    )
    def test_rejects_empty_fields(self, origin, destination, field_name):
        with pytest.raises(InvalidInput) as exc_info:
            TripRequest(origin, destination, VehicleProfile.HYBRID)
        assert exc_info.value.field_name == field_name

    def test_is_immutable(self):
        trip = TripRequest("Paris", "Lyon", VehicleProfile.HYBRID)
        with pytest.raises(AttributeError):
            trip.origin = "Nice"  # type: ignore[misc]

    def test_uses_current_location(self):
        trip = TripRequest(CURRENT_LOCATION_SENTINEL, "Lyon", VehicleProfile.STANDARD)
        assert trip.uses_current_location
        assert not TripRequest("Paris", "Lyon", VehicleProfile.STANDARD).uses_current_location


class TestGeoLocation:
    def test_valid_coordinates(self):
        loc = GeoLocation(48.8566, 2.3522)
        assert loc.latitude == 48.8566

    @pytest.mark.parametrize("lat, lon", [(91, 0), (-91, 0), (0, 181), (0, -181)])
    def test_out_of_range(self, lat, lon):
        with pytest.raises(ValueError):
            GeoLocation(lat, lon)


def test_route_answer_has_citations():
    assert not RouteAnswer("text").has_citations


def test_route_unavailable_message_hides_cause():
    err = RouteUnavailable(cause=RuntimeError("401 invalid key sk-secret"))
    assert err.user_message == ROUTE_UNAVAILABLE_MESSAGE
    assert "sk-secret" not in err.user_message
    assert "sk-secret" not in str(err)
    assert err.cause is not None


def test_empty_response_default_message():
    assert EmptyResponse().user_message == "No route suggestions found."
