"""
Pytest configuration for Urban Travel Health API tests.

Registers custom markers and provides shared fixtures.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock, Mock

import pytest
import requests
from fastapi.testclient import TestClient

from api.routes.dependencies import get_advisor, get_fetcher
from config.settings import Settings, get_settings
from data.fetcher import TravelDataFetcher
from main import app
from models.advisor import TravelAdvisor
from models.readings import AirQualityReading, Coordinates, TrafficReading


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "api: marks tests that go through the HTTP layer"
    )


def make_response(payload, status_code=200):
    """Build a stand-in for requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    else:
        response.raise_for_status.return_value = None
    return response


def make_completion(content):
    """Build a stand-in for an OpenAI chat completion."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
    )


@pytest.fixture
def fake_settings():
    """Settings with fake credentials, independent of the environment."""
    return Settings(
        AQICN_TOKEN="test-waqi-token",
        TOMTOM_API_KEY="test-tomtom-key",
        OPENAI_API_KEY="test-openai-key",
        REQUEST_TIMEOUT=5.0,
    )


@pytest.fixture
def stub_fetcher():
    """Fetcher returning Kuala Lumpur with AQI 100 and half-speed traffic."""
    fetcher = Mock(spec=TravelDataFetcher)
    fetcher.geocode_location.return_value = Coordinates(lat=3.139, lon=101.6869)
    fetcher.fetch_conditions.return_value = (
        AirQualityReading(aqi=100),
        TrafficReading(current_speed=25.0, free_flow_speed=50.0),
    )
    fetcher.search_places.return_value = []
    return fetcher


@pytest.fixture
def stub_advisor():
    advisor = Mock(spec=TravelAdvisor)
    advisor.get_advice.return_value = "Take the train and avoid the ring road."
    return advisor


@pytest.fixture
def client(fake_settings, stub_fetcher, stub_advisor):
    """TestClient wired to fake settings and stubbed collaborators."""
    app.dependency_overrides[get_settings] = lambda: fake_settings
    app.dependency_overrides[get_fetcher] = lambda: stub_fetcher
    app.dependency_overrides[get_advisor] = lambda: stub_advisor
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def openai_client():
    client = MagicMock()
    client.chat.completions.create.return_value = make_completion("Wear a mask.")
    return client
