"""Heuristic road travel time between Sri Lankan regions.

Region labels are province or district names taken straight from the
location records. They are matched case-sensitively against fixed sets;
any label outside the sets (including "Unknown" and "Current Location")
travels at the default speed.
"""

import logging
import math

logger = logging.getLogger(__name__)

URBAN = "urban"
MOUNTAINOUS = "mountainous"
COASTAL = "coastal"

REGION_CLASSES = {
    URBAN: frozenset({"Western", "Colombo", "Gampaha"}),
    MOUNTAINOUS: frozenset({"Central", "Uva", "Kandy", "Nuwara Eliya"}),
    COASTAL: frozenset({"Southern", "Eastern", "Northern"}),
}

# Average speeds in km/h
DEFAULT_SPEED = 40
URBAN_SPEED = 25
MOUNTAIN_SPEED = 30
COASTAL_SPEED = 50
MIXED_TERRAIN_SPEED = 35


def classify_region(region):
    """Return the road class of a region label, or None if unclassified."""
    for region_class, members in REGION_CLASSES.items():
        if region in members:
            return region_class
    return None


def average_speed(region_from, region_to):
    """Pick the average speed for a leg; the first matching rule wins."""
    class_from = classify_region(region_from)
    class_to = classify_region(region_to)
    classes = {class_from, class_to}

    if URBAN in classes:
        return URBAN_SPEED
    if class_from == MOUNTAINOUS and class_to == MOUNTAINOUS:
        return MOUNTAIN_SPEED
    if class_from == COASTAL and class_to == COASTAL:
        return COASTAL_SPEED
    if classes == {MOUNTAINOUS, COASTAL}:
        return MIXED_TERRAIN_SPEED
    return DEFAULT_SPEED


def buffer_multiplier(distance_km):
    """Inflation for breaks and congestion, growing with distance."""
    if distance_km > 100:
        return 1.3
    if distance_km > 50:
        return 1.2
    return 1.1


def round_half_up(value):
    """Round to the nearest integer with halves going up."""
    return int(math.floor(value + 0.5))


def travel_minutes(distance_km, region_from, region_to):
    """Estimate driving minutes for a leg of ``distance_km`` between two regions."""
    speed = average_speed(region_from, region_to)
    raw_minutes = round_half_up(distance_km / speed * 60)
    minutes = round_half_up(raw_minutes * buffer_multiplier(distance_km))
    logger.debug(
        "Leg %.1f km %s -> %s at %d km/h: %d min",
        distance_km, region_from, region_to, speed, minutes,
    )
    return minutes


__all__ = [
    "classify_region",
    "average_speed",
    "buffer_multiplier",
    "travel_minutes",
    "round_half_up",
]
