# lanka_travel/api/geocoding.py
from __future__ import annotations

import logging
import time
from functools import lru_cache
from typing import Any, Dict, List

import googlemaps

from lanka_travel.api.config import get_google_maps_config

logger = logging.getLogger(__name__)

DEFAULT_REGION_HINT = "Sri Lanka"

_gmaps: googlemaps.Client | None = None


def _get_client() -> googlemaps.Client | None:
    """Return a cached googlemaps.Client instance, or None without a key."""
    global _gmaps
    if _gmaps is None:
        cfg = get_google_maps_config()
        api_key = cfg.get("api_key", "")
        if not api_key:
            logger.error("No Google Maps API key found in config")
            return None
        try:
            logger.info(f"Initializing Google Maps client with key: {api_key[:6]}...")
            _gmaps = googlemaps.Client(key=api_key)
        except ValueError as e:
            logger.error(f"Failed to initialize Google Maps client: {e}")
            return None
    return _gmaps


@lru_cache(maxsize=1000)
def get_coordinates_for_place(place: str) -> tuple[float, float] | None:
    """Resolve a free-text place name to (lat, lng) or None if not found."""
    client = _get_client()
    if client is None:
        logger.error("No Google Maps client available")
        return None

    try:
        logger.debug(f"Geocoding place: {place}")
        results = client.geocode(place, language="en", region="lk")
    except (googlemaps.exceptions.ApiError,
            googlemaps.exceptions.HTTPError,
            googlemaps.exceptions.Timeout,
            googlemaps.exceptions.TransportError) as e:
        logger.error(f"Geocoding error for '{place}': {e}")
        return None

    if not results:
        logger.warning(f"No results found for place: {place}")
        return None

    loc = results[0]["geometry"]["location"]
    logger.debug(f"Geocoded {place} to {loc['lat']}, {loc['lng']}")
    return loc["lat"], loc["lng"]


def _has_coordinates(stop: Dict[str, Any]) -> bool:
    lat = stop.get("latitude", stop.get("lat"))
    lng = stop.get("longitude", stop.get("lng"))
    return lat is not None and lng is not None and lat != "null" and lng != "null"


def enhance_stops_with_geocoding(
    stops: List[Dict[str, Any]],
    region_hint: str = DEFAULT_REGION_HINT,
) -> List[Dict[str, Any]]:
    """
    Fill in ``latitude`` / ``longitude`` for stop payloads that lack them.

    * Stops that already carry coordinates are left untouched.
    * The region hint (and the stop's own region, when present) is appended
      to the query so "Temple of the Tooth" resolves to Kandy.
    * Failed look-ups are logged and skipped; the stop keeps no coordinates
      and is rejected later when it is turned into a ``Stop``.

    Returns the **same list object** for convenience.
    """
    start_time = time.time()
    looked_up = 0

    for stop in stops:
        if not isinstance(stop, dict) or _has_coordinates(stop):
            continue
        name, region = stop.get("name"), stop.get("region")
        if not name or not isinstance(name, str):
            continue

        parts = [name]
        if isinstance(region, str) and region and region != "Unknown":
            parts.append(region)
        if region_hint:
            parts.append(region_hint)

        looked_up += 1
        coords = get_coordinates_for_place(", ".join(parts))
        if coords:
            stop["latitude"], stop["longitude"] = coords
        else:
            logger.warning(f"Failed to geocode '{name}'")

    if looked_up:
        duration = time.time() - start_time
        logger.info(f"Geocoded {looked_up} stops in {duration:.2f}s")

    return stops


# Re-export for clean imports elsewhere
__all__ = [
    "get_coordinates_for_place",
    "enhance_stops_with_geocoding",
]
