# lanka_travel/api/services/map_service.py
"""Service layer for map-related operations."""

import logging
from typing import Any, Dict, List, Optional, Sequence

from lanka_travel.api.config import get_planner_config
from lanka_travel.api.distance import distance_km
from lanka_travel.api.models import GeoPoint, Stop, TravelTimeMap
from lanka_travel.api.planner import format_duration, leg_key, visit_minutes

logger = logging.getLogger(__name__)

# Browser geolocation failures; any of them means "no current location"
GEOLOCATION_ERRORS = ("denied", "timeout", "unavailable", "unsupported")


class MapService:
    """Handles map markers, bounds and position checks."""

    @staticmethod
    def validate_coordinates(lat: float, lng: float) -> bool:
        """Validate that coordinates are within valid ranges.

        Args:
            lat: Latitude
            lng: Longitude

        Returns:
            True if valid, False otherwise
        """
        return -90 <= lat <= 90 and -180 <= lng <= 180

    @staticmethod
    def parse_current_location(payload: Optional[Dict[str, Any]]) -> Optional[GeoPoint]:
        """Turn a client geolocation report into a point.

        The report is either ``{"latitude": .., "longitude": ..}`` (``lat``/``lng``
        also accepted) or ``{"error": "denied"|"timeout"|...}``. Errors and
        unusable coordinates are logged and collapse to None so planning can
        go ahead without the current-location leg.

        Args:
            payload: Geolocation report from the client, may be None

        Returns:
            GeoPoint or None if no usable position was reported
        """
        if not payload:
            return None
        if not isinstance(payload, dict):
            logger.warning(f"Ignoring current location that is not an object: {payload!r}")
            return None

        error = payload.get("error")
        if error:
            if error not in GEOLOCATION_ERRORS:
                logger.warning(f"Unrecognised geolocation error '{error}'")
            logger.warning(f"Geolocation unavailable ({error}); planning without current location")
            return None

        try:
            point = GeoPoint.from_dict(payload)
        except ValueError as e:
            logger.warning(f"Ignoring malformed current location: {e}")
            return None

        if not MapService.validate_coordinates(point.latitude, point.longitude):
            logger.warning(f"Ignoring out-of-range current location {point}")
            return None
        return point

    @staticmethod
    def calculate_bounds(stops: Sequence[Stop]) -> Dict[str, float]:
        """Calculate bounding box for all stops.

        Args:
            stops: Ordered itinerary stops

        Returns:
            Dictionary with north, south, east, west bounds
        """
        if not stops:
            return {}

        lats = [stop.latitude for stop in stops]
        lngs = [stop.longitude for stop in stops]

        return {
            'north': max(lats),
            'south': min(lats),
            'east': max(lngs),
            'west': min(lngs)
        }

    @staticmethod
    def format_popup(stop: Stop, order: int, travel_minutes: Optional[int] = None) -> str:
        """Format the popup text shown for a stop marker."""
        lines = [f"{order}. {stop.name}", f"{stop.region_label} · {stop.category_key.title()}"]
        lines.append(f"Visit: {format_duration(visit_minutes(stop.category))}")
        if travel_minutes is not None:
            lines.append(f"Travel from previous stop: {format_duration(travel_minutes)}")
        return "\n".join(lines)

    @staticmethod
    def build_markers(stops: Sequence[Stop], travel_times: TravelTimeMap) -> List[Dict[str, Any]]:
        """Build marker payloads for the map, one per stop in itinerary order.

        Args:
            stops: Ordered itinerary stops
            travel_times: Leg key to minutes map for the same stops

        Returns:
            List of marker dictionaries with position and popup content
        """
        markers = []
        for index, stop in enumerate(stops):
            incoming = None
            if index > 0:
                incoming = travel_times.get(leg_key(stops[index - 1], stop))
            markers.append({
                "id": stop.id,
                "order": index + 1,
                "lat": stop.latitude,
                "lng": stop.longitude,
                "popup": MapService.format_popup(stop, index + 1, incoming),
            })
        return markers

    @staticmethod
    def is_near_location(user_point: GeoPoint, stop: Stop, radius_km: Optional[float] = None) -> bool:
        """Check whether the user is close enough to a stop to unlock it.

        Args:
            user_point: Device position
            stop: Location to check
            radius_km: Unlock radius, defaults to the configured radius

        Returns:
            True if the user is within the radius
        """
        if radius_km is None:
            radius_km = get_planner_config()["unlock_radius_km"]
        distance = distance_km(user_point, stop.point)
        logger.debug(f"Distance to '{stop.name}': {distance:.3f} km")
        return distance <= radius_km


# Export for use in other modules
__all__ = ['MapService']
