# lanka_travel/routes/travel.py
"""Travel routes and blueprint configuration."""

import logging

from flask import Blueprint, jsonify, request

from lanka_travel.api.config import get_google_maps_config, get_planner_config
from lanka_travel.api.location_info import describe_location
from lanka_travel.api.models import Stop
from lanka_travel.api.planner import format_duration
from lanka_travel.api.services.chat_service import ChatService
from lanka_travel.api.services.map_service import MapService
from lanka_travel.api.services.trip_service import TripService

logger = logging.getLogger(__name__)


def _json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    return data


def create_travel_blueprint():
    """Create and configure the travel blueprint.

    Returns:
        Configured Flask Blueprint
    """
    travel_bp = Blueprint("travel", __name__, url_prefix="/travel")

    @travel_bp.errorhandler(ValueError)
    def handle_value_error(e):
        return jsonify({"error": str(e)}), 400

    @travel_bp.errorhandler(KeyError)
    def handle_key_error(e):
        return jsonify({"error": f"Stop not found: {e.args[0]}"}), 404

    @travel_bp.route("/api/config")
    def api_config():
        """Return map and planner configuration for the frontend."""
        config = get_google_maps_config()

        if config.get("api_key"):
            return jsonify({
                "auth_type": "api_key",
                "google_maps_api_key": config["api_key"],
                "google_maps_client_id": config.get("client_id", ""),
                "planner": get_planner_config(),
            })
        else:
            return jsonify({
                "error": "No Google Maps API key configured"
            }), 500

    @travel_bp.route("/api/plan", methods=["POST"])
    def api_plan():
        """Plan an itinerary without touching the session."""
        data = _json_body()
        stops = TripService.parse_stops(data.get("stops", []))
        current = MapService.parse_current_location(data.get("current_location"))
        return jsonify(TripService.build_plan(stops, current))

    @travel_bp.route("/api/trip", methods=["GET", "PUT", "DELETE"])
    def api_trip():
        """Retrieve, replace or clear the trip in the session."""
        if request.method == "PUT":
            TripService.set_stops(_json_body().get("stops", []))
        elif request.method == "DELETE":
            TripService.clear_session()
        return jsonify(TripService.compute_plan())

    @travel_bp.route("/api/trip/stops", methods=["POST"])
    def api_add_stop():
        TripService.add_stop(_json_body())
        return jsonify(TripService.compute_plan()), 201

    @travel_bp.route("/api/trip/stops/<stop_id>", methods=["DELETE"])
    def api_remove_stop(stop_id):
        TripService.remove_stop(stop_id)
        return jsonify(TripService.compute_plan())

    @travel_bp.route("/api/trip/reorder", methods=["POST"])
    def api_reorder():
        TripService.reorder_stops(_json_body().get("order"))
        return jsonify(TripService.compute_plan())

    @travel_bp.route("/api/trip/current-location", methods=["POST", "DELETE"])
    def api_current_location():
        """Record the device position or forget it.

        A geolocation error in the body is not a request error: the trip is
        simply planned without the current-location leg.
        """
        if request.method == "POST":
            TripService.set_current_location(_json_body())
        else:
            TripService.clear_current_location()
        return jsonify(TripService.compute_plan())

    @travel_bp.route("/api/locations/details", methods=["POST"])
    def api_location_details():
        return jsonify(describe_location(Stop.from_dict(_json_body())))

    @travel_bp.route("/api/chat", methods=["POST"])
    def api_chat():
        """Answer a travel question."""
        return jsonify(ChatService.reply(_json_body().get("message")))

    @travel_bp.route("/api/chat/trip-plan", methods=["POST"])
    def api_chat_trip_plan():
        """Generate an AI itinerary from trip preferences."""
        return jsonify(ChatService.plan_trip(_json_body()))

    @travel_bp.route("/api/format-duration/<int:minutes>")
    def api_format_duration(minutes):
        return jsonify({"minutes": minutes, "formatted": format_duration(minutes)})

    @travel_bp.route("/health")
    def health():
        """Health check endpoint."""
        return jsonify({"status": "ok", "service": "travel", **TripService.get_session_info()})

    return travel_bp


# Export for backward compatibility
__all__ = ['create_travel_blueprint']
