# tests/test_websocket.py

from unittest.mock import patch

import pytest

from lanka_travel.routes.websocket import NAMESPACE


@pytest.fixture
def ws(app, socketio, client):
    ws_client = socketio.test_client(app, namespace=NAMESPACE, flask_test_client=client)
    yield ws_client
    if ws_client.is_connected(NAMESPACE):
        ws_client.disconnect(namespace=NAMESPACE)


def _events(ws_client, name):
    return [event["args"][0] for event in ws_client.get_received(NAMESPACE) if event["name"] == name]


def test_connect_sends_planner_config(ws):
    connected = _events(ws, "connected")
    assert connected[0]["status"] == "connected"
    assert "geolocation_timeout_ms" in connected[0]["planner"]


def test_update_and_reorder_stops(ws, sri_lanka_trip):
    ws.get_received(NAMESPACE)

    ws.emit("update_stops", {"stops": [stop.to_dict() for stop in sri_lanka_trip]}, namespace=NAMESPACE)
    plan = _events(ws, "trip_plan")[-1]
    assert set(plan["travel_times"]) == {"colombo-kandy", "kandy-ella"}

    ws.emit("reorder_stops", {"order": ["ella", "colombo", "kandy"]}, namespace=NAMESPACE)
    plan = _events(ws, "trip_plan")[-1]
    assert set(plan["travel_times"]) == {"ella-colombo", "colombo-kandy"}


def test_invalid_update_emits_error(ws):
    ws.get_received(NAMESPACE)
    ws.emit("update_stops", {"stops": "nope"}, namespace=NAMESPACE)
    errors = _events(ws, "error")
    assert errors[0]["event"] == "update_stops"


def test_geolocation_failure_still_plans(ws, sri_lanka_trip):
    ws.emit("update_stops", {"stops": [stop.to_dict() for stop in sri_lanka_trip]}, namespace=NAMESPACE)
    ws.get_received(NAMESPACE)

    ws.emit("current_location", {"error": "denied"}, namespace=NAMESPACE)
    plan = _events(ws, "trip_plan")[-1]
    assert plan["summary"]["travel_from_current"] is None
    assert len(plan["travel_times"]) == 2

    ws.emit("current_location", {"latitude": 6.9271, "longitude": 79.8612}, namespace=NAMESPACE)
    plan = _events(ws, "trip_plan")[-1]
    assert plan["travel_times"]["current-colombo"] == 0


def test_chat_message(ws):
    ws.get_received(NAMESPACE)
    with patch("lanka_travel.api.services.chat_service.complete_chat", return_value="Visit Galle Fort."):
        ws.emit("chat_message", {"message": "history?"}, namespace=NAMESPACE)
    response = _events(ws, "chat_response")[0]
    assert response["response"] == "Visit Galle Fort."
    assert response["source"] == "ai"


@pytest.mark.parametrize("event, payload", [
    ("update_stops", ["x"]),
    ("reorder_stops", "kandy,ella"),
    ("current_location", "denied"),
    ("chat_message", ["history?"]),
])
def test_non_object_payload_emits_error(ws, event, payload):
    ws.get_received(NAMESPACE)
    ws.emit(event, payload, namespace=NAMESPACE)
    errors = _events(ws, "error")
    assert errors == [{"message": "Event payload must be an object", "event": event}]
    assert ws.is_connected(NAMESPACE)
