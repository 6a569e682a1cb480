# tests/test_map_service.py

import pytest

from lanka_travel.api.models import GeoPoint
from lanka_travel.api.planner import calculate_travel_times
from lanka_travel.api.services.map_service import MapService


@pytest.mark.parametrize("payload", [
    None,
    {},
    {"error": "denied"},
    {"error": "timeout"},
    {"error": "unsupported"},
    {"latitude": 95, "longitude": 80},
    {"latitude": "north", "longitude": 80},
    {"latitude": 7.0},
    "denied",
    ["denied"],
    42,
])
def test_unusable_geolocation_means_no_current_location(payload):
    assert MapService.parse_current_location(payload) is None


def test_parse_current_location():
    assert MapService.parse_current_location({"lat": 6.9, "lng": 79.8}) == GeoPoint(6.9, 79.8)
    assert MapService.parse_current_location({"latitude": 6.9, "longitude": 79.8}) == GeoPoint(6.9, 79.8)


def test_calculate_bounds(sri_lanka_trip):
    assert MapService.calculate_bounds([]) == {}
    assert MapService.calculate_bounds(sri_lanka_trip) == {
        "north": 7.2906,
        "south": 6.8667,
        "east": 81.0466,
        "west": 79.8612,
    }


def test_build_markers(sri_lanka_trip):
    travel_times = calculate_travel_times(sri_lanka_trip)
    markers = MapService.build_markers(sri_lanka_trip, travel_times)

    assert [marker["order"] for marker in markers] == [1, 2, 3]
    assert markers[0]["popup"].startswith("1. Colombo")
    assert "Travel from previous stop" not in markers[0]["popup"]
    assert "Travel from previous stop" in markers[1]["popup"]
    assert "Visit: 4h" in markers[2]["popup"]


def test_is_near_location(kandy):
    assert MapService.is_near_location(GeoPoint(7.2906, 80.6340), kandy)
    assert not MapService.is_near_location(GeoPoint(7.3, 80.6337), kandy)
    assert MapService.is_near_location(GeoPoint(7.3, 80.6337), kandy, radius_km=5)
