"""Shared data structures for itinerary planning.

Stops, points and the duration summary are plain dataclasses so the
estimator, the services and the route layer share a single definition
and convert to JSON the same way.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

UNKNOWN_REGION = "Unknown"
DEFAULT_CATEGORY = "other"


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair in degrees."""

    latitude: float
    longitude: float

    def to_dict(self) -> dict:
        return {"latitude": self.latitude, "longitude": self.longitude}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeoPoint":
        """Build a point from ``latitude``/``longitude`` or ``lat``/``lng`` keys.

        Raises:
            ValueError: If either coordinate is missing or not numeric
        """
        lat = _first_present(data, "latitude", "lat")
        lng = _first_present(data, "longitude", "lng", "lon")
        return cls(latitude=_to_float(lat, "latitude"), longitude=_to_float(lng, "longitude"))


@dataclass
class Stop:
    """A single stop on a trip itinerary."""

    id: str
    name: str  # e.g. "Temple of the Tooth"
    latitude: float
    longitude: float
    region: Optional[str] = None  # province label, e.g. "Central"
    category: Optional[str] = None  # e.g. "temple"

    @property
    def point(self) -> GeoPoint:
        return GeoPoint(self.latitude, self.longitude)

    @property
    def region_label(self) -> str:
        return self.region or UNKNOWN_REGION

    @property
    def category_key(self) -> str:
        return (self.category or DEFAULT_CATEGORY).lower()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "region": self.region,
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Stop":
        """Build a stop from a client or storage payload.

        Raises:
            ValueError: If id, name or coordinates are missing or invalid,
                or region/category is given but is not a string
        """
        if not isinstance(data, dict):
            raise ValueError("Stop must be an object")

        stop_id = data.get("id")
        if stop_id is None or str(stop_id) == "":
            raise ValueError("Stop is missing an id")

        name = data.get("name")
        if not name or not isinstance(name, str):
            raise ValueError(f"Stop {stop_id} is missing a name")

        point = GeoPoint.from_dict(data)
        return cls(
            id=str(stop_id),
            name=name,
            latitude=point.latitude,
            longitude=point.longitude,
            region=_optional_text(data, "region"),
            category=_optional_text(data, "category"),
        )


@dataclass
class DayPlan:
    """One day of a trip produced by the daily breakdown."""

    day: int  # 1-based day index within the trip
    stop_names: list[str] = field(default_factory=list)
    duration: int = 0  # minutes

    def to_dict(self) -> dict:
        return {
            "day": self.day,
            "stop_names": list(self.stop_names),
            "duration": self.duration,
        }


@dataclass
class DurationSummary:
    """Aggregate travel, visit and daily figures for an itinerary."""

    total_travel_time: int = 0
    total_visit_time: int = 0
    total_duration: int = 0
    travel_from_current: Optional[int] = None
    daily_breakdown: list[DayPlan] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "total_travel_time": self.total_travel_time,
            "total_visit_time": self.total_visit_time,
            "total_duration": self.total_duration,
            "travel_from_current": self.travel_from_current,
            "daily_breakdown": [day.to_dict() for day in self.daily_breakdown],
        }


# Leg key -> estimated minutes, e.g. {"current-a": 12, "a-b": 95}
TravelTimeMap = Dict[str, int]


def _first_present(data: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def _optional_text(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ValueError(f"Stop {key} must be a string")
    return value


def _to_float(value: Any, label: str) -> float:
    if value is None or isinstance(value, bool):
        raise ValueError(f"Missing or invalid {label}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Missing or invalid {label}") from None
