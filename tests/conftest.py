# tests/conftest.py

import pytest

from lanka_travel.api.models import Stop


@pytest.fixture
def colombo():
    return Stop(id="colombo", name="Colombo", latitude=6.9271, longitude=79.8612,
                region="Western", category="City")


@pytest.fixture
def kandy():
    return Stop(id="kandy", name="Kandy", latitude=7.2906, longitude=80.6337,
                region="Central", category="Cultural")


@pytest.fixture
def ella():
    return Stop(id="ella", name="Ella", latitude=6.8667, longitude=81.0466,
                region="Uva", category="mountain")


@pytest.fixture
def sri_lanka_trip(colombo, kandy, ella):
    return [colombo, kandy, ella]


def make_stops(categories, latitude=7.0, longitude=80.0, region="Central"):
    """Stops sharing one position, so every leg takes zero minutes."""
    return [
        Stop(id=f"s{i}", name=f"Stop {i}", latitude=latitude, longitude=longitude,
             region=region, category=category)
        for i, category in enumerate(categories)
    ]


@pytest.fixture
def app_and_socketio(monkeypatch):
    monkeypatch.setenv("FLASK_SECRET_KEY", "test-secret")
    from main import create_app
    return create_app({"TESTING": True})


@pytest.fixture
def app(app_and_socketio):
    return app_and_socketio[0]


@pytest.fixture
def socketio(app_and_socketio):
    return app_and_socketio[1]


@pytest.fixture
def client(app):
    return app.test_client()
