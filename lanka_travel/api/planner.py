"""Itinerary duration planning.

Turns an ordered list of stops (and optionally the traveller's current
position) into per-leg travel times, visit and travel totals, and a
day-by-day grouping capped at eight hours of activity per day.
Everything here is pure; results are rebuilt from scratch on each call.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from lanka_travel.api.distance import distance_km
from lanka_travel.api.models import (
    DEFAULT_CATEGORY,
    DayPlan,
    DurationSummary,
    GeoPoint,
    Stop,
    TravelTimeMap,
)
from lanka_travel.api.travel_time import travel_minutes

logger = logging.getLogger(__name__)

CURRENT_LOCATION_REGION = "Current Location"
CURRENT_LEG_PREFIX = "current-"
MAX_DAILY_MINUTES = 8 * 60

# Estimated minutes spent at a stop, by lower-cased category
VISIT_MINUTES = {
    "temple": 90,
    "beach": 180,
    "mountain": 240,
    "city": 300,
    "park": 150,
    "museum": 120,
    "waterfall": 120,
    "historical": 90,
    "cultural": 120,
    "adventure": 300,
    "wildlife": 180,
    DEFAULT_CATEGORY: 120,
}


def visit_minutes(category: Optional[str]) -> int:
    """Return the estimated visit time for a category, defaulting to "other"."""
    key = (category or DEFAULT_CATEGORY).lower()
    return VISIT_MINUTES.get(key, VISIT_MINUTES[DEFAULT_CATEGORY])


def current_leg_key(stop: Stop) -> str:
    return f"{CURRENT_LEG_PREFIX}{stop.id}"


def leg_key(from_stop: Stop, to_stop: Stop) -> str:
    return f"{from_stop.id}-{to_stop.id}"


def calculate_travel_times(
    stops: Sequence[Stop],
    current_location: Optional[GeoPoint] = None,
) -> TravelTimeMap:
    """Estimate minutes for every leg of the itinerary.

    Returns one entry per consecutive pair of stops plus, when a current
    location is known and there is at least one stop, a ``current-<id>``
    entry for the way to the first stop.
    """
    travel_times: TravelTimeMap = {}

    if current_location is not None and stops:
        first = stops[0]
        distance = distance_km(current_location, first.point)
        travel_times[current_leg_key(first)] = travel_minutes(
            distance, CURRENT_LOCATION_REGION, first.region_label
        )

    for from_stop, to_stop in zip(stops, stops[1:]):
        distance = distance_km(from_stop.point, to_stop.point)
        travel_times[leg_key(from_stop, to_stop)] = travel_minutes(
            distance, from_stop.region_label, to_stop.region_label
        )

    logger.debug("Calculated %d travel legs for %d stops", len(travel_times), len(stops))
    return travel_times


def create_daily_breakdown(
    stops: Sequence[Stop],
    travel_times: TravelTimeMap,
) -> list[DayPlan]:
    """Greedily pack stops into days of at most ``MAX_DAILY_MINUTES``.

    A stop is never split: a stop whose visit alone exceeds the cap still
    gets a day of its own. The leg into the first stop of a new day is not
    counted towards either day.
    """
    breakdown: list[DayPlan] = []
    day = 1
    day_minutes = 0
    day_stops: list[str] = []

    for index, stop in enumerate(stops):
        visit_time = visit_minutes(stop.category)
        travel_time = 0
        if index > 0:
            travel_time = travel_times.get(leg_key(stops[index - 1], stop), 0)
        leg_total = visit_time + travel_time

        if day_minutes + leg_total > MAX_DAILY_MINUTES and day_stops:
            breakdown.append(DayPlan(day=day, stop_names=day_stops, duration=day_minutes))
            day += 1
            day_minutes = visit_time
            day_stops = [stop.name]
        else:
            day_minutes += leg_total
            day_stops.append(stop.name)

    if day_stops:
        breakdown.append(DayPlan(day=day, stop_names=day_stops, duration=day_minutes))

    return breakdown


def calculate_total_trip_duration(
    stops: Sequence[Stop],
    travel_times: TravelTimeMap,
    current_location: Optional[GeoPoint] = None,
) -> DurationSummary:
    """Aggregate travel and visit time and split the trip into days."""
    total_travel_time = 0
    travel_from_current = None

    if current_location is not None:
        travel_from_current = 0
        if stops:
            travel_from_current = travel_times.get(current_leg_key(stops[0]), 0)
            total_travel_time += travel_from_current

    for key, minutes in travel_times.items():
        if not key.startswith(CURRENT_LEG_PREFIX):
            total_travel_time += minutes

    total_visit_time = sum(visit_minutes(stop.category) for stop in stops)

    return DurationSummary(
        total_travel_time=total_travel_time,
        total_visit_time=total_visit_time,
        total_duration=total_travel_time + total_visit_time,
        travel_from_current=travel_from_current,
        daily_breakdown=create_daily_breakdown(stops, travel_times),
    )


def plan_itinerary(
    stops: Sequence[Stop],
    current_location: Optional[GeoPoint] = None,
) -> Tuple[TravelTimeMap, DurationSummary]:
    """Compute the travel-time map and duration summary in one call."""
    travel_times = calculate_travel_times(stops, current_location)
    summary = calculate_total_trip_duration(stops, travel_times, current_location)
    logger.info(
        "Planned %d stops over %d day(s): %d min total",
        len(stops), len(summary.daily_breakdown), summary.total_duration,
    )
    return travel_times, summary


def format_duration(minutes: int) -> str:
    """Render minutes as "45min", "2h" or "1h 30min"."""
    if minutes < 60:
        return f"{minutes}min"

    hours, remaining = divmod(minutes, 60)
    if remaining == 0:
        return f"{hours}h"
    return f"{hours}h {remaining}min"


__all__ = [
    "VISIT_MINUTES",
    "MAX_DAILY_MINUTES",
    "visit_minutes",
    "calculate_travel_times",
    "calculate_total_trip_duration",
    "create_daily_breakdown",
    "plan_itinerary",
    "format_duration",
]
