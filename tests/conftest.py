"""Pytest fixtures for activity suitability tests.

This module provides test fixtures that ensure:
1. No external API calls are made (weather and geocoding providers are fakes)
2. Isolated test environment with controlled configuration
"""

import asyncio
import os
from typing import Any

import pytest

# Set test environment BEFORE importing application modules
os.environ.setdefault("DEBUG", "true")

from activity_suitability.models.location import Coordinates, LocationMetadata, Place
from activity_suitability.models.weather import WeatherSnapshot
from activity_suitability.providers.base import (
    GeocodingProvider,
    ProviderError,
    WeatherProvider,
)


# =============================================================================
# Test Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Reset settings cache before each test to ensure clean state."""
    from activity_suitability.config import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Fake Providers
# =============================================================================


class FakeWeatherProvider(WeatherProvider):
    """Weather provider returning canned raw fields."""

    name = "fake-weather"
    base_url = "http://weather.invalid"

    def __init__(
        self,
        raw: dict[str, Any] | None = None,
        error: Exception | None = None,
        delay: float = 0.0,
    ):
        super().__init__()
        self.raw = raw if raw is not None else {"temp_c": 20.0, "wind_mps": 2.0}
        self.error = error
        self.delay = delay
        self.calls: list[tuple[Coordinates, bool]] = []
        self.completed = 0
        self.closed = False

    async def get_conditions(
        self,
        coordinates: Coordinates,
        include_marine: bool = False,
    ) -> dict[str, Any]:
        self.calls.append((coordinates, include_marine))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        self.completed += 1
        return dict(self.raw)

    async def aclose(self) -> None:
        self.closed = True


class FakeGeocoder(GeocodingProvider):
    """Geocoder returning a canned place payload."""

    name = "fake-geocoder"
    base_url = "http://geocoder.invalid"

    def __init__(
        self,
        place: dict[str, Any] | None = None,
        error: Exception | None = None,
        delay: float = 0.0,
    ):
        super().__init__()
        self.place = place
        self.error = error
        self.delay = delay
        self.calls: list[Coordinates] = []
        self.completed = 0
        self.closed = False

    async def reverse(self, coordinates: Coordinates) -> dict[str, Any] | None:
        self.calls.append(coordinates)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        self.completed += 1
        return self.place

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def provider_error() -> ProviderError:
    """A typical upstream failure."""
    return ProviderError("API request failed: 503", provider="fake", status_code=503)


# =============================================================================
# Places and Payloads
# =============================================================================


@pytest.fixture
def rockaway_place() -> Place:
    """Rockaway Beach, tagged as a surf spot."""
    return Place.from_coordinates(40.5795, -73.8370, "Rockaway Beach", tags=["surf-spot"])


@pytest.fixture
def gore_place() -> Place:
    """Gore Mountain ski area."""
    return Place.from_coordinates(43.6543, -74.0074, "Gore Mountain")


@pytest.fixture
def beach_payload() -> dict[str, Any]:
    """Nominatim reverse result for a beach."""
    return {
        "place_id": 1,
        "class": "natural",
        "type": "beach",
        "name": "Rockaway Beach",
        "display_name": "Rockaway Beach, Queens, New York, United States",
        "address": {
            "natural": "Rockaway Beach",
            "suburb": "Queens",
            "state": "New York",
            "country_code": "us",
        },
        "extratags": {"surface": "sand"},
    }


@pytest.fixture
def ski_area_payload() -> dict[str, Any]:
    """Nominatim reverse result for a ski area."""
    return {
        "place_id": 2,
        "class": "landuse",
        "type": "winter_sports",
        "name": "Gore Mountain",
        "display_name": "Gore Mountain, Town of Johnsburg, Warren County, New York, United States",
        "address": {
            "leisure": "Gore Mountain",
            "county": "Warren County",
            "state": "New York",
            "country_code": "us",
        },
        "extratags": {},
    }


@pytest.fixture
def city_park_payload() -> dict[str, Any]:
    """Nominatim reverse result for a park inside a city suburb."""
    return {
        "place_id": 3,
        "class": "leisure",
        "type": "park",
        "name": "Forest Park",
        "display_name": "Forest Park, Queens, New York, United States",
        "address": {
            "leisure": "Forest Park",
            "suburb": "Queens",
            "state": "New York",
            "country_code": "us",
        },
        "extratags": {},
    }


@pytest.fixture
def downtown_payload() -> dict[str, Any]:
    """Nominatim reverse result for a downtown street."""
    return {
        "place_id": 4,
        "class": "highway",
        "type": "residential",
        "name": "West 34th Street",
        "display_name": "West 34th Street, Manhattan, New York, United States",
        "address": {
            "road": "West 34th Street",
            "city": "New York",
            "state": "New York",
            "country_code": "us",
        },
        "extratags": {},
    }


# =============================================================================
# Engine Inputs
# =============================================================================


def build_location(**flags: Any) -> LocationMetadata:
    """Build LocationMetadata with every flag False unless overridden."""
    values: dict[str, Any] = {
        "name": "Test Spot",
        "is_coastal": False,
        "has_large_water_nearby": False,
        "is_park": False,
        "is_urban": False,
        "snow_friendly": False,
        "surf_friendly": False,
    }
    values.update(flags)
    return LocationMetadata(**values)


def build_weather(**fields: Any) -> WeatherSnapshot:
    """Build a mild, calm, dry WeatherSnapshot unless overridden."""
    values: dict[str, Any] = {"temp_c": 20.0, "wind_kph": 10.0, "precip_mm": 0.0}
    values.update(fields)
    return WeatherSnapshot(**values)


@pytest.fixture
def ocean_location() -> LocationMetadata:
    """A coastal location with ocean access."""
    return build_location(name="Rockaway Beach", is_coastal=True, has_large_water_nearby=True)


@pytest.fixture
def inland_location() -> LocationMetadata:
    """An inland location with no notable features."""
    return build_location(name="Inland Field")


@pytest.fixture
def resort_location() -> LocationMetadata:
    """A known ski resort."""
    return build_location(name="Gore Mountain", snow_friendly=True)


@pytest.fixture
def park_location() -> LocationMetadata:
    """A park inside a city."""
    return build_location(name="Forest Park", is_park=True, is_urban=True)


@pytest.fixture
def urban_location() -> LocationMetadata:
    """A built-up area that is not a park."""
    return build_location(name="Midtown", is_urban=True)


@pytest.fixture
def surf_weather() -> WeatherSnapshot:
    """Clean head-high surf on a warm, light-wind day."""
    return build_weather(
        temp_c=22.0,
        wind_kph=3.0,
        wave_height_m=1.2,
        swell_period_s=12.0,
        weather_code=0,
    )


@pytest.fixture
def powder_weather() -> WeatherSnapshot:
    """Cold, calm powder day with good visibility."""
    return build_weather(
        temp_c=-5.0,
        wind_kph=2.0,
        snowfall_cm=20.0,
        snow_depth_cm=120.0,
        visibility_m=5000.0,
        weather_code=73,
    )


@pytest.fixture
def hiking_weather() -> WeatherSnapshot:
    """Mild, dry, calm day."""
    return build_weather(
        temp_c=16.0,
        apparent_temp_c=16.0,
        wind_kph=8.0,
        precip_prob=5.0,
        soil_moisture_top_layer=0.2,
        weather_code=1,
    )


@pytest.fixture
def make_location():
    """Factory for LocationMetadata with selected flags set."""
    return build_location


@pytest.fixture
def make_weather():
    """Factory for WeatherSnapshot with selected fields overridden."""
    return build_weather


@pytest.fixture
def fake_weather():
    """Factory for fake weather providers."""
    return FakeWeatherProvider


@pytest.fixture
def fake_geocoder():
    """Factory for fake geocoders."""
    return FakeGeocoder
