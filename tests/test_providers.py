"""Tests for upstream providers, using httpx.MockTransport (no network)."""

import httpx
import pytest

from activity_suitability.models.location import Coordinates
from activity_suitability.providers import (
    NominatimGeocoder,
    OpenMeteoProvider,
    ProviderError,
    RateLimitError,
)

ROCKAWAY = Coordinates(latitude=40.5795, longitude=-73.837)

FORECAST_BODY = {
    "latitude": 40.58,
    "longitude": -73.84,
    "current": {
        "time": "2024-07-01T12:00",
        "interval": 900,
        "temperature_2m": 24.1,
        "apparent_temperature": 25.3,
        "precipitation": 0.0,
        "precipitation_probability": 10,
        "weather_code": 1,
        "wind_speed_10m": 3.2,
        "wind_gusts_10m": 6.5,
        "wind_direction_10m": 200,
        "snowfall": 0.0,
        "snow_depth": 0.0,
        "visibility": 24140.0,
        "soil_moisture_0_to_1cm": None,
    },
}

MARINE_BODY = {
    "current": {
        "time": "2024-07-01T12:00",
        "wave_height": 1.3,
        "swell_wave_period": 10.5,
    },
}


def make_client(handler) -> httpx.AsyncClient:
    """Build an AsyncClient served by a handler function."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestOpenMeteoProvider:
    """Tests for the Open-Meteo provider."""

    @pytest.mark.asyncio
    async def test_forecast_fields(self):
        """Test the forecast request and the field mapping."""
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json=FORECAST_BODY)

        async with make_client(handler) as client:
            provider = OpenMeteoProvider(client=client)
            raw = await provider.get_conditions(ROCKAWAY)

        assert len(requests) == 1
        params = requests[0].url.params
        assert requests[0].url.host == "api.open-meteo.com"
        assert params["latitude"] == "40.5795"
        assert params["wind_speed_unit"] == "ms"
        assert "temperature_2m" in params["current"]
        assert "soil_moisture_0_to_1cm" in params["current"]

        assert raw["temp_c"] == 24.1
        assert raw["apparent_temp_c"] == 25.3
        assert raw["wind_mps"] == 3.2
        assert raw["gust_mps"] == 6.5
        assert raw["snow_depth_m"] == 0.0
        assert raw["visibility_m"] == 24140.0
        assert "soil_moisture_top_layer" not in raw
        assert "wave_height_m" not in raw

    @pytest.mark.asyncio
    async def test_marine_fields(self):
        """Test marine data is requested and merged for surfing."""
        hosts: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            hosts.append(request.url.host)
            if request.url.host == "marine-api.open-meteo.com":
                return httpx.Response(200, json=MARINE_BODY)
            return httpx.Response(200, json=FORECAST_BODY)

        async with make_client(handler) as client:
            provider = OpenMeteoProvider(client=client)
            raw = await provider.get_conditions(ROCKAWAY, include_marine=True)

        assert sorted(hosts) == ["api.open-meteo.com", "marine-api.open-meteo.com"]
        assert raw["wave_height_m"] == 1.3
        assert raw["swell_period_s"] == 10.5
        assert raw["temp_c"] == 24.1

    @pytest.mark.asyncio
    async def test_marine_failure_leaves_fields_out(self):
        """Test inland coordinates without marine data still succeed."""

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.host == "marine-api.open-meteo.com":
                return httpx.Response(400, json={"error": True, "reason": "No data"})
            return httpx.Response(200, json=FORECAST_BODY)

        async with make_client(handler) as client:
            provider = OpenMeteoProvider(client=client)
            raw = await provider.get_conditions(ROCKAWAY, include_marine=True)

        assert raw["temp_c"] == 24.1
        assert "wave_height_m" not in raw

    @pytest.mark.asyncio
    async def test_server_error(self):
        """Test HTTP errors become ProviderError."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="boom")

        async with make_client(handler) as client:
            provider = OpenMeteoProvider(client=client)
            with pytest.raises(ProviderError) as exc_info:
                await provider.get_conditions(ROCKAWAY)

        assert exc_info.value.status_code == 500
        assert exc_info.value.provider == "open-meteo"
        assert exc_info.value.response_body == "boom"

    @pytest.mark.asyncio
    async def test_rate_limited(self):
        """Test 429 responses raise RateLimitError."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(429, headers={"Retry-After": "30"})

        async with make_client(handler) as client:
            provider = OpenMeteoProvider(client=client)
            with pytest.raises(RateLimitError) as exc_info:
                await provider.get_conditions(ROCKAWAY)

        assert exc_info.value.retry_after == 30

    @pytest.mark.asyncio
    async def test_missing_temperature(self):
        """Test a response without temperature is an error."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"current": {"wind_speed_10m": 2.0}})

        async with make_client(handler) as client:
            provider = OpenMeteoProvider(client=client)
            with pytest.raises(ProviderError, match="temperature"):
                await provider.get_conditions(ROCKAWAY)

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        """Test unparseable bodies are an error."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>")

        async with make_client(handler) as client:
            provider = OpenMeteoProvider(client=client)
            with pytest.raises(ProviderError, match="Failed to parse"):
                await provider.get_conditions(ROCKAWAY)

    @pytest.mark.asyncio
    async def test_injected_client_not_closed(self):
        """Test the provider leaves an injected client open."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=FORECAST_BODY)

        async with make_client(handler) as client:
            async with OpenMeteoProvider(client=client) as provider:
                await provider.get_conditions(ROCKAWAY)
            assert client.is_closed is False


class TestNominatimGeocoder:
    """Tests for the Nominatim geocoder."""

    @pytest.mark.asyncio
    async def test_reverse(self, beach_payload):
        """Test the reverse request parameters and headers."""
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json=beach_payload)

        async with make_client(handler) as client:
            geocoder = NominatimGeocoder(user_agent="suitability-tests/1.0", client=client)
            place = await geocoder.reverse(ROCKAWAY)

        assert place == beach_payload
        request = requests[0]
        assert request.url.path == "/reverse"
        assert request.url.params["zoom"] == "14"
        assert request.url.params["addressdetails"] == "1"
        assert request.url.params["extratags"] == "1"
        assert request.url.params["format"] == "json"
        assert request.headers["User-Agent"] == "suitability-tests/1.0"

    @pytest.mark.asyncio
    async def test_unable_to_geocode(self):
        """Test Nominatim's error body means no place data."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"error": "Unable to geocode"})

        async with make_client(handler) as client:
            geocoder = NominatimGeocoder(client=client)
            assert await geocoder.reverse(ROCKAWAY) is None

    @pytest.mark.asyncio
    async def test_server_error(self):
        """Test HTTP errors raise."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503)

        async with make_client(handler) as client:
            geocoder = NominatimGeocoder(client=client)
            with pytest.raises(ProviderError):
                await geocoder.reverse(ROCKAWAY)

    @pytest.mark.asyncio
    async def test_unexpected_body(self):
        """Test a non-object body raises."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=[])

        async with make_client(handler) as client:
            geocoder = NominatimGeocoder(client=client)
            with pytest.raises(ProviderError, match="Unexpected response type"):
                await geocoder.reverse(ROCKAWAY)

    @pytest.mark.asyncio
    async def test_custom_base_url(self):
        """Test a self-hosted instance URL is used."""
        hosts: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            hosts.append(request.url.host)
            return httpx.Response(200, json={"error": "Unable to geocode"})

        async with make_client(handler) as client:
            geocoder = NominatimGeocoder(base_url="http://nominatim.local/", client=client)
            await geocoder.reverse(ROCKAWAY)

        assert hosts == ["nominatim.local"]
