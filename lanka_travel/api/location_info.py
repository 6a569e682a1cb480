# lanka_travel/api/location_info.py
"""Display details for a single location: visit time, season and tips."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from lanka_travel.api.models import DEFAULT_CATEGORY, Stop
from lanka_travel.api.planner import format_duration, visit_minutes

VISIT_TIME_RANGES = {
    "temple": "1-2 hours",
    "beach": "2-4 hours",
    "mountain": "3-6 hours",
    "city": "4-8 hours",
    "park": "2-4 hours",
    "museum": "1-3 hours",
    "waterfall": "2-3 hours",
    "historical": "1-2 hours",
    "cultural": "2-3 hours",
    "adventure": "4-8 hours",
    "wildlife": "3-5 hours",
}
DEFAULT_VISIT_RANGE = "2-3 hours"

BEST_SEASONS = {
    "beach": "December to March (dry season)",
    "mountain": "December to March (clear weather)",
    "temple": "Year-round (early morning recommended)",
    "cultural": "Year-round (avoid midday heat)",
    "wildlife": "December to March (animals more active)",
}
DEFAULT_SEASON = "Year-round (check weather)"

LOCATION_TIPS = {
    "temple": [
        "Dress modestly (cover shoulders and knees)",
        "Remove shoes before entering",
        "Maintain silence and respect",
        "Early morning visits are less crowded",
    ],
    "beach": [
        "Bring sunscreen and stay hydrated",
        "Best visited early morning or late afternoon",
        "Check tide times for swimming",
        "Respect local customs",
    ],
    "mountain": [
        "Start early to avoid afternoon heat",
        "Bring layers for temperature changes",
        "Carry water and snacks",
        "Check weather conditions",
    ],
    "cultural": [
        "Learn about local customs beforehand",
        "Dress respectfully",
        "Consider hiring a local guide",
        "Allow plenty of time to explore",
    ],
}
DEFAULT_TIPS = [
    "Bring water and stay hydrated",
    "Check opening hours",
    "Respect local customs",
    "Plan for travel time",
]


def _key(category: Optional[str]) -> str:
    return (category or DEFAULT_CATEGORY).lower()


def visit_time_range(category: Optional[str]) -> str:
    return VISIT_TIME_RANGES.get(_key(category), DEFAULT_VISIT_RANGE)


def best_time_to_visit(category: Optional[str], region: Optional[str] = None) -> str:
    # Seasons are island-wide; region is accepted for callers but not used
    return BEST_SEASONS.get(_key(category), DEFAULT_SEASON)


def location_tips(category: Optional[str]) -> List[str]:
    return list(LOCATION_TIPS.get(_key(category), DEFAULT_TIPS))


def describe_location(stop: Stop) -> Dict[str, Any]:
    """Collect everything the location detail view shows for a stop."""
    minutes = visit_minutes(stop.category)
    return {
        "id": stop.id,
        "name": stop.name,
        "region": stop.region_label,
        "category": stop.category_key,
        "estimated_visit_time": visit_time_range(stop.category),
        "planned_visit_minutes": minutes,
        "planned_visit_formatted": format_duration(minutes),
        "best_time_to_visit": best_time_to_visit(stop.category, stop.region),
        "tips": location_tips(stop.category),
    }


__all__ = [
    "visit_time_range",
    "best_time_to_visit",
    "location_tips",
    "describe_location",
]
