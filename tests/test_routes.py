# tests/test_routes.py

from unittest.mock import patch

import pytest

from conftest import make_stops


def _stops(trip):
    return [stop.to_dict() for stop in trip]


def test_health(client):
    response = client.get("/travel/health")
    assert response.status_code == 200
    assert response.get_json()["status"] == "ok"


def test_config_without_maps_key(client, monkeypatch):
    monkeypatch.delenv("GOOGLE_MAPS_API_KEY", raising=False)
    response = client.get("/travel/api/config")
    assert response.status_code == 500


def test_config_with_maps_key(client, monkeypatch):
    monkeypatch.setenv("GOOGLE_MAPS_API_KEY", "maps-key")
    data = client.get("/travel/api/config").get_json()
    assert data["google_maps_api_key"] == "maps-key"
    assert data["planner"]["unlock_radius_km"] == 0.5


def test_stateless_plan(client, sri_lanka_trip):
    response = client.post("/travel/api/plan", json={
        "stops": _stops(sri_lanka_trip),
        "current_location": {"error": "denied"},
    })
    assert response.status_code == 200
    data = response.get_json()
    assert set(data["travel_times"]) == {"colombo-kandy", "kandy-ella"}
    assert data["summary"]["total_visit_time"] == 660
    assert data["summary"]["travel_from_current"] is None


def test_plan_rejects_bad_stops(client):
    response = client.post("/travel/api/plan", json={"stops": [{"id": "a"}]})
    assert response.status_code == 400
    assert "error" in response.get_json()


def test_plan_ignores_non_object_current_location(client, sri_lanka_trip):
    response = client.post("/travel/api/plan", json={
        "stops": _stops(sri_lanka_trip),
        "current_location": "denied",
    })
    assert response.status_code == 200
    assert response.get_json()["summary"]["travel_from_current"] is None


@pytest.mark.parametrize("field, value", [
    ("category", 5),
    ("region", ["Western"]),
])
def test_plan_rejects_non_text_stop_fields(client, kandy, field, value):
    stop = dict(kandy.to_dict(), **{field: value})
    response = client.post("/travel/api/plan", json={"stops": [stop]})
    assert response.status_code == 400
    assert field in response.get_json()["error"]


def test_plan_rejects_colliding_leg_keys(client):
    stops = [stop.to_dict() for stop in make_stops(["city"] * 4)]
    for stop, stop_id in zip(stops, ["a", "b-c", "a-b", "c"]):
        stop["id"] = stop_id
    response = client.post("/travel/api/plan", json={"stops": stops})
    assert response.status_code == 400
    assert "a-b-c" in response.get_json()["error"]


def test_plan_requires_json_object(client):
    response = client.post("/travel/api/plan", data="nope", content_type="text/plain")
    assert response.status_code == 400


def test_trip_session_flow(client, sri_lanka_trip):
    colombo, kandy, ella = _stops(sri_lanka_trip)

    assert client.put("/travel/api/trip", json={"stops": [colombo, kandy]}).status_code == 200
    response = client.post("/travel/api/trip/stops", json=ella)
    assert response.status_code == 201
    assert len(response.get_json()["stops"]) == 3

    data = client.post("/travel/api/trip/reorder", json={"order": ["kandy", "ella", "colombo"]}).get_json()
    assert list(data["travel_times"]) == ["kandy-ella", "ella-colombo"]

    data = client.post("/travel/api/trip/current-location",
                       json={"latitude": 7.2906, "longitude": 80.6337}).get_json()
    assert data["summary"]["travel_from_current"] == 0

    data = client.delete("/travel/api/trip/current-location").get_json()
    assert data["summary"]["travel_from_current"] is None

    data = client.delete("/travel/api/trip/stops/ella").get_json()
    assert [stop["id"] for stop in data["stops"]] == ["kandy", "colombo"]

    assert client.delete("/travel/api/trip/stops/ella").status_code == 404

    data = client.delete("/travel/api/trip").get_json()
    assert data["stops"] == []


def test_location_details(client, kandy):
    data = client.post("/travel/api/locations/details", json=kandy.to_dict()).get_json()
    assert data["planned_visit_minutes"] == 120
    assert data["best_time_to_visit"] == "Year-round (avoid midday heat)"


def test_chat(client):
    with patch("lanka_travel.api.services.chat_service.complete_chat", return_value="Try hoppers."):
        data = client.post("/travel/api/chat", json={"message": "food?"}).get_json()
    assert data == {"response": "Try hoppers.", "source": "ai"}


def test_chat_requires_message(client):
    assert client.post("/travel/api/chat", json={}).status_code == 400


def test_chat_trip_plan_requires_preferences(client):
    assert client.post("/travel/api/chat/trip-plan", json={"duration": 3}).status_code == 400


def test_format_duration_route(client):
    assert client.get("/travel/api/format-duration/90").get_json()["formatted"] == "1h 30min"
