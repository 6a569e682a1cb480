# tests/test_location_info.py

from lanka_travel.api.location_info import (
    best_time_to_visit,
    describe_location,
    location_tips,
    visit_time_range,
)
from lanka_travel.api.models import Stop


def test_visit_time_range():
    assert visit_time_range("Temple") == "1-2 hours"
    assert visit_time_range("adventure") == "4-8 hours"
    assert visit_time_range("market") == "2-3 hours"
    assert visit_time_range(None) == "2-3 hours"


def test_best_time_to_visit():
    assert best_time_to_visit("beach", "Southern") == "December to March (dry season)"
    assert best_time_to_visit("beach", "Eastern") == "December to March (dry season)"
    assert best_time_to_visit("museum", "Western") == "Year-round (check weather)"


def test_location_tips_returns_a_copy():
    tips = location_tips("temple")
    assert "Remove shoes before entering" in tips
    tips.clear()
    assert location_tips("temple")


def test_location_tips_default():
    assert location_tips(None) == [
        "Bring water and stay hydrated",
        "Check opening hours",
        "Respect local customs",
        "Plan for travel time",
    ]


def test_describe_location():
    stop = Stop(id="t", name="Temple of the Tooth", latitude=7.2936, longitude=80.6413,
                region="Central", category="Temple")
    details = describe_location(stop)
    assert details["planned_visit_minutes"] == 90
    assert details["planned_visit_formatted"] == "1h 30min"
    assert details["estimated_visit_time"] == "1-2 hours"
    assert details["best_time_to_visit"] == "Year-round (early morning recommended)"
    assert details["category"] == "temple"
