"""Open-Meteo weather provider.

## API Documentation Summary
Source: https://open-meteo.com/en/docs
Source: https://open-meteo.com/en/docs/marine-weather-api

## Endpoints
- Forecast: https://api.open-meteo.com/v1/forecast
- Marine: https://marine-api.open-meteo.com/v1/marine
- Full URL example:
  https://api.open-meteo.com/v1/forecast?latitude=40.58&longitude=-73.81&current=temperature_2m,wind_speed_10m&wind_speed_unit=ms

## Authentication
- No API key required for non-commercial use

## Response Format
```json
{
  "latitude": 40.58,
  "longitude": -73.81,
  "current_units": {"temperature_2m": "°C", "wind_speed_10m": "m/s"},
  "current": {
    "time": "2024-07-01T12:00",
    "interval": 900,
    "temperature_2m": 24.1,
    "wind_speed_10m": 3.2
  }
}
```

## Field Mapping
| Open-Meteo | Raw field | Unit |
|------------|-----------|------|
| temperature_2m | temp_c | °C |
| apparent_temperature | apparent_temp_c | °C |
| precipitation | precip_mm | mm |
| precipitation_probability | precip_prob | % |
| weather_code | weather_code | WMO |
| wind_speed_10m | wind_mps | m/s |
| wind_gusts_10m | gust_mps | m/s |
| wind_direction_10m | wind_dir_deg | ° |
| snowfall | snowfall_cm | cm |
| snow_depth | snow_depth_m | m |
| visibility | visibility_m | m |
| soil_moisture_0_to_1cm | soil_moisture_top_layer | m³/m³ |
| wave_height (marine) | wave_height_m | m |
| swell_wave_period (marine) | swell_period_s | s |

Marine data only exists over the sea. The marine endpoint answers inland
coordinates with an error or with nulls, so a failed marine request just
leaves the marine fields out.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from activity_suitability.models.location import Coordinates
from activity_suitability.providers.base import ProviderError, WeatherProvider

logger = logging.getLogger(__name__)

CURRENT_FIELDS: dict[str, str] = {
    "temperature_2m": "temp_c",
    "apparent_temperature": "apparent_temp_c",
    "precipitation": "precip_mm",
    "precipitation_probability": "precip_prob",
    "weather_code": "weather_code",
    "wind_speed_10m": "wind_mps",
    "wind_gusts_10m": "gust_mps",
    "wind_direction_10m": "wind_dir_deg",
    "snowfall": "snowfall_cm",
    "snow_depth": "snow_depth_m",
    "visibility": "visibility_m",
    "soil_moisture_0_to_1cm": "soil_moisture_top_layer",
}

MARINE_FIELDS: dict[str, str] = {
    "wave_height": "wave_height_m",
    "swell_wave_period": "swell_period_s",
}


def _translate_current(
    data: Any,
    fields: dict[str, str],
) -> dict[str, Any]:
    """Pick the mapped, non-null values out of a 'current' block."""
    current = data.get("current") if isinstance(data, dict) else None
    if not isinstance(current, dict):
        return {}
    return {
        raw_key: current[api_key]
        for api_key, raw_key in fields.items()
        if current.get(api_key) is not None
    }


class OpenMeteoProvider(WeatherProvider):
    """Open-Meteo current conditions provider.

    Example:
        ```python
        async with OpenMeteoProvider() as provider:
            raw = await provider.get_conditions(
                Coordinates(latitude=40.58, longitude=-73.81),
                include_marine=True,
            )
            snapshot = normalize_weather(raw)
        ```
    """

    name = "open-meteo"
    base_url = "https://api.open-meteo.com/v1/forecast"

    def __init__(
        self,
        forecast_url: str | None = None,
        marine_url: str | None = None,
        user_agent: str | None = None,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize Open-Meteo provider.

        Args:
            forecast_url: Forecast endpoint (defaults to the public API)
            marine_url: Marine endpoint (defaults to the public API)
            user_agent: User-Agent string for requests
            timeout: Request timeout in seconds
            client: Pre-built HTTP client
        """
        super().__init__(user_agent=user_agent, timeout=timeout, client=client)
        self.base_url = forecast_url or self.base_url
        self.marine_url = marine_url or "https://marine-api.open-meteo.com/v1/marine"

    @staticmethod
    def _location_params(coordinates: Coordinates) -> dict[str, Any]:
        return {
            "latitude": round(coordinates.latitude, 4),
            "longitude": round(coordinates.longitude, 4),
            "timezone": "auto",
        }

    async def _get_forecast(self, coordinates: Coordinates) -> dict[str, Any]:
        params = {
            **self._location_params(coordinates),
            "current": ",".join(CURRENT_FIELDS),
            "wind_speed_unit": "ms",
        }
        data = await self._get_json(self.base_url, params=params)
        raw = _translate_current(data, CURRENT_FIELDS)
        if "temp_c" not in raw:
            raise ProviderError(
                "Response is missing current temperature",
                provider=self.name,
            )
        return raw

    async def _get_marine(self, coordinates: Coordinates) -> dict[str, Any]:
        params = {
            **self._location_params(coordinates),
            "current": ",".join(MARINE_FIELDS),
        }
        try:
            data = await self._get_json(self.marine_url, params=params)
        except ProviderError as e:
            logger.info(f"No marine data for {coordinates}: {e}")
            return {}
        return _translate_current(data, MARINE_FIELDS)

    async def get_conditions(
        self,
        coordinates: Coordinates,
        include_marine: bool = False,
    ) -> dict[str, Any]:
        """Get current conditions from Open-Meteo.

        Args:
            coordinates: Location (lat/lon), rounded to 4 decimal places
            include_marine: Also request wave height and swell period

        Returns:
            Raw weather fields for the normalizer

        Raises:
            ProviderError: If the forecast request fails or lacks temperature
        """
        if not include_marine:
            return await self._get_forecast(coordinates)

        raw, marine = await asyncio.gather(
            self._get_forecast(coordinates),
            self._get_marine(coordinates),
        )
        logger.debug(f"Marine fields for {coordinates}: {sorted(marine) or 'none'}")
        return {**raw, **marine}
