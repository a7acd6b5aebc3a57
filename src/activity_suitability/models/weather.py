"""Weather snapshot model and WMO weather code helpers.

## Canonical Units
- Temperature: Celsius (°C)
- Wind and gust speed: kilometers per hour (km/h)
- Precipitation: millimeters (mm); probability in percent (0-100)
- Snowfall and snow depth: centimeters (cm)
- Visibility: meters (m)
- Soil moisture: volumetric fraction of the top layer (0-1)
- Wave height: meters (m); swell period: seconds (s)
- Wind direction: degrees (0-359, where 0=N, 90=E)

## WMO Weather Codes (subset used by Open-Meteo)
| Code | Meaning |
|------|---------|
| 0 | Clear sky |
| 1-3 | Mainly clear, partly cloudy, overcast |
| 45, 48 | Fog, depositing rime fog |
| 51-57 | Drizzle (light to dense, freezing) |
| 61-67 | Rain (slight to heavy, freezing) |
| 71-77 | Snow fall, snow grains |
| 80-82 | Rain showers |
| 85, 86 | Snow showers |
| 95-99 | Thunderstorm (with or without hail) |
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Drizzle and rain band, including the freezing variants
RAIN_CODE_MIN = 51
RAIN_CODE_MAX = 67
THUNDERSTORM_CODE_MIN = 95


def is_drizzle_or_rain(code: int | None) -> bool:
    """Check if a WMO code is in the drizzle/rain band (51-67)."""
    return code is not None and RAIN_CODE_MIN <= code <= RAIN_CODE_MAX


def is_thunderstorm(code: int | None) -> bool:
    """Check if a WMO code reports a thunderstorm (95 and above)."""
    return code is not None and code >= THUNDERSTORM_CODE_MIN


def describe_weather_code(code: int | None) -> str:
    """Get a short description for a WMO weather code."""
    if code is None or code < 0:
        return "Unknown"
    if code == 0:
        return "Clear sky"
    if code <= 3:
        return "Partly cloudy"
    if code <= 48:
        return "Foggy"
    if code <= 67:
        return "Rainy"
    if code <= 77:
        return "Snowy"
    if code <= 82:
        return "Rain showers"
    if code <= 86:
        return "Snow showers"
    if code <= 99:
        return "Thunderstorm"
    return "Unknown"


class WeatherSnapshot(BaseModel):
    """Current conditions at a location, in canonical units.

    Only temperature, wind and precipitation are guaranteed. Everything else
    is optional because sources genuinely lack it (marine fields only exist
    near the sea, snow fields only where the model carries them). Scoring
    code must check optional fields for None rather than assume a value.
    """

    model_config = ConfigDict(frozen=True)

    # Required
    temp_c: float = Field(..., description="Air temperature in Celsius")
    wind_kph: float = Field(..., ge=0, description="Wind speed in km/h")
    precip_mm: float = Field(..., ge=0, description="Precipitation in mm")

    # Optional atmosphere
    apparent_temp_c: float | None = Field(
        default=None, description="Feels-like temperature in Celsius"
    )
    gust_kph: float | None = Field(default=None, ge=0, description="Wind gusts in km/h")
    precip_prob: float | None = Field(
        default=None, ge=0, le=100, description="Probability of precipitation (%)"
    )
    weather_code: int | None = Field(default=None, description="WMO weather code")
    visibility_m: float | None = Field(default=None, ge=0, description="Visibility in meters")
    wind_dir_deg: float | None = Field(
        default=None, ge=0, le=360, description="Wind direction in degrees (0=N, 90=E)"
    )

    # Optional snow
    snowfall_cm: float | None = Field(default=None, ge=0, description="Fresh snowfall in cm")
    snow_depth_cm: float | None = Field(default=None, ge=0, description="Snow base depth in cm")

    # Optional ground
    soil_moisture_top_layer: float | None = Field(
        default=None, ge=0, le=1, description="Top-layer soil moisture (0-1)"
    )

    # Optional marine
    wave_height_m: float | None = Field(default=None, ge=0, description="Wave height in meters")
    swell_period_s: float | None = Field(
        default=None, ge=0, description="Swell period in seconds"
    )

    @property
    def feels_like_c(self) -> float:
        """Apparent temperature when known, otherwise air temperature."""
        return self.apparent_temp_c if self.apparent_temp_c is not None else self.temp_c

    @property
    def has_marine_data(self) -> bool:
        """Check if both marine fields are present."""
        return self.wave_height_m is not None and self.swell_period_s is not None

    def describe(self) -> str:
        """Get a description of the current weather code."""
        return describe_weather_code(self.weather_code)
