# lanka_travel/api/services/trip_service.py
"""Service layer for the working trip itinerary and its duration plan."""

import logging
from typing import Any, Dict, List, Optional, Sequence

from flask import session

from lanka_travel.api.geocoding import enhance_stops_with_geocoding
from lanka_travel.api.models import GeoPoint, Stop
from lanka_travel.api.planner import current_leg_key, format_duration, leg_key, plan_itinerary
from lanka_travel.api.services.map_service import MapService

logger = logging.getLogger(__name__)

MAX_STOPS = 50

STOPS_KEY = 'trip_stops'
CURRENT_LOCATION_KEY = 'trip_current_location'


class TripService:
    """Keeps the trip being planned in the Flask session and plans it."""

    @staticmethod
    def parse_stops(payload: Any) -> List[Stop]:
        """Validate a list of stop payloads and build Stop objects.

        Stops without coordinates are geocoded by name first.

        Args:
            payload: List of stop dictionaries from the client

        Returns:
            Ordered list of stops

        Raises:
            ValueError: If the payload is not a list, too long, has
                duplicate or colliding ids, or contains an invalid stop
        """
        if not isinstance(payload, list):
            raise ValueError("Stops must be a list")
        if len(payload) > MAX_STOPS:
            raise ValueError(f"A trip can have at most {MAX_STOPS} stops")

        enhance_stops_with_geocoding(payload)
        stops = [Stop.from_dict(item) for item in payload]

        ids = [stop.id for stop in stops]
        if len(set(ids)) != len(ids):
            raise ValueError("Stop ids must be unique within a trip")
        TripService.check_leg_keys(stops)
        return stops

    @staticmethod
    def check_leg_keys(stops: Sequence[Stop]) -> None:
        """Make sure every leg of the itinerary gets its own travel-time key.

        Ids containing "-" can join into the same key, e.g. "a" then "b-c"
        and "a-b" then "c" both give "a-b-c".

        Raises:
            ValueError: If two legs would share a key
        """
        if not stops:
            return
        keys = [current_leg_key(stops[0])]
        keys.extend(leg_key(a, b) for a, b in zip(stops, stops[1:]))
        seen = set()
        for key in keys:
            if key in seen:
                raise ValueError(f"Stop ids produce the same leg '{key}' twice; rename a stop")
            seen.add(key)

    @staticmethod
    def build_plan(stops: Sequence[Stop], current_location: Optional[GeoPoint] = None) -> Dict[str, Any]:
        """Plan an itinerary and shape the result for the client.

        Args:
            stops: Ordered stops
            current_location: Device position, if known

        Returns:
            Dictionary with travel times, summary, formatted figures and map data
        """
        travel_times, summary = plan_itinerary(stops, current_location)

        formatted = {
            'total_travel_time': format_duration(summary.total_travel_time),
            'total_visit_time': format_duration(summary.total_visit_time),
            'total_duration': format_duration(summary.total_duration),
            'travel_from_current': (
                format_duration(summary.travel_from_current)
                if summary.travel_from_current is not None else None
            ),
            'legs': {key: format_duration(minutes) for key, minutes in travel_times.items()},
            'days': [format_duration(day.duration) for day in summary.daily_breakdown],
        }

        return {
            'stops': [stop.to_dict() for stop in stops],
            'current_location': current_location.to_dict() if current_location else None,
            'travel_times': travel_times,
            'summary': summary.to_dict(),
            'formatted': formatted,
            'markers': MapService.build_markers(stops, travel_times),
            'bounds': MapService.calculate_bounds(stops),
        }

    @staticmethod
    def get_stops() -> List[Stop]:
        """Get the stops stored in the session, in itinerary order."""
        return [Stop(**data) for data in session.get(STOPS_KEY, [])]

    @staticmethod
    def get_current_location() -> Optional[GeoPoint]:
        data = session.get(CURRENT_LOCATION_KEY)
        return GeoPoint(**data) if data else None

    @staticmethod
    def _store_stops(stops: Sequence[Stop]) -> None:
        TripService.check_leg_keys(stops)
        session[STOPS_KEY] = [stop.to_dict() for stop in stops]
        session.modified = True

    @staticmethod
    def set_stops(payload: Any) -> List[Stop]:
        """Replace the whole itinerary."""
        stops = TripService.parse_stops(payload)
        TripService._store_stops(stops)
        logger.info(f"Stored itinerary with {len(stops)} stops")
        return stops

    @staticmethod
    def add_stop(payload: Dict[str, Any]) -> List[Stop]:
        """Append a stop to the end of the itinerary.

        Raises:
            ValueError: If the stop is invalid, already in the trip or the
                trip is full
        """
        stop = TripService.parse_stops([payload])[0]
        stops = TripService.get_stops()

        if any(existing.id == stop.id for existing in stops):
            raise ValueError(f"'{stop.name}' is already in the trip")
        if len(stops) >= MAX_STOPS:
            raise ValueError(f"A trip can have at most {MAX_STOPS} stops")

        stops.append(stop)
        TripService._store_stops(stops)
        logger.info(f"Added '{stop.name}' as stop {len(stops)}")
        return stops

    @staticmethod
    def remove_stop(stop_id: str) -> List[Stop]:
        """Remove a stop by id.

        Raises:
            KeyError: If the stop is not in the trip
        """
        stops = TripService.get_stops()
        remaining = [stop for stop in stops if stop.id != stop_id]
        if len(remaining) == len(stops):
            raise KeyError(stop_id)

        TripService._store_stops(remaining)
        logger.info(f"Removed stop {stop_id}, {len(remaining)} left")
        return remaining

    @staticmethod
    def reorder_stops(ordered_ids: Any) -> List[Stop]:
        """Reorder the itinerary to follow ``ordered_ids``.

        Raises:
            ValueError: If the ids are not a permutation of the current stops
        """
        stops = TripService.get_stops()
        if not isinstance(ordered_ids, list):
            raise ValueError("Order must be a list of stop ids")

        ordered_ids = [str(stop_id) for stop_id in ordered_ids]
        by_id = {stop.id: stop for stop in stops}
        if sorted(ordered_ids) != sorted(by_id):
            raise ValueError("Order must list every stop in the trip exactly once")

        reordered = [by_id[stop_id] for stop_id in ordered_ids]
        TripService._store_stops(reordered)
        logger.debug(f"Reordered stops: {ordered_ids}")
        return reordered

    @staticmethod
    def set_current_location(payload: Optional[Dict[str, Any]]) -> Optional[GeoPoint]:
        """Record the device position; failed geolocation clears it."""
        point = MapService.parse_current_location(payload)
        if point is None:
            TripService.clear_current_location()
            return None

        session[CURRENT_LOCATION_KEY] = point.to_dict()
        session.modified = True
        logger.debug(f"Stored current location {point}")
        return point

    @staticmethod
    def clear_current_location() -> None:
        session.pop(CURRENT_LOCATION_KEY, None)
        session.modified = True

    @staticmethod
    def compute_plan() -> Dict[str, Any]:
        """Plan the itinerary currently held in the session."""
        return TripService.build_plan(TripService.get_stops(), TripService.get_current_location())

    @staticmethod
    def get_session_info() -> Dict[str, Any]:
        """Get current session information."""
        return {
            'stop_count': len(session.get(STOPS_KEY, [])),
            'has_current_location': CURRENT_LOCATION_KEY in session,
        }

    @staticmethod
    def clear_session() -> None:
        """Clear trip data from session."""
        for key in (STOPS_KEY, CURRENT_LOCATION_KEY):
            session.pop(key, None)
        session.modified = True
        logger.debug("Cleared trip from session")


__all__ = ['TripService']
