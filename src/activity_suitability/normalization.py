"""Weather normalizer.

Converts raw provider fields into a `WeatherSnapshot` in canonical units.

## Accepted Fields
| Key | Unit | Notes |
|-----|------|-------|
| temp_c | °C | required |
| wind_kph / wind_mps | km/h / m/s | km/h wins; calm (0) when both missing |
| gust_kph / gust_mps | km/h / m/s | km/h wins; absent when both missing |
| precip_mm | mm | 0 when missing |
| snow_depth_cm / snow_depth_m | cm / m | cm wins |
| apparent_temp_c, precip_prob, weather_code, snowfall_cm, visibility_m, soil_moisture_top_layer, wave_height_m, swell_period_s, wind_dir_deg | canonical | passed through, None stays None |

Unknown keys are ignored. A missing weather code is never turned into 0,
since 0 means "clear sky" and would change which rules apply.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from activity_suitability.models.weather import WeatherSnapshot

MPS_TO_KPH = 3.6
METERS_TO_CM = 100.0

_PASS_THROUGH_FIELDS = (
    "apparent_temp_c",
    "precip_prob",
    "snowfall_cm",
    "visibility_m",
    "soil_moisture_top_layer",
    "wave_height_m",
    "swell_period_s",
    "wind_dir_deg",
)


def _number(raw: Mapping[str, Any], key: str) -> float | None:
    value = raw.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"{key} must be numeric, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{key} must be numeric, got {value!r}") from e


def _speed_kph(raw: Mapping[str, Any], kph_key: str, mps_key: str) -> float | None:
    kph = _number(raw, kph_key)
    if kph is not None:
        return kph
    mps = _number(raw, mps_key)
    if mps is not None:
        return mps * MPS_TO_KPH
    return None


def normalize_weather(raw: Mapping[str, Any]) -> WeatherSnapshot:
    """Build a WeatherSnapshot from raw provider fields.

    Args:
        raw: Field mapping as returned by a weather provider

    Returns:
        WeatherSnapshot in canonical units

    Raises:
        ValueError: If temp_c is missing or a field is not numeric
    """
    temp_c = _number(raw, "temp_c")
    if temp_c is None:
        raise ValueError("temp_c is required")

    wind_kph = _speed_kph(raw, "wind_kph", "wind_mps")
    precip_mm = _number(raw, "precip_mm")

    snow_depth_cm = _number(raw, "snow_depth_cm")
    if snow_depth_cm is None:
        snow_depth_m = _number(raw, "snow_depth_m")
        if snow_depth_m is not None:
            snow_depth_cm = snow_depth_m * METERS_TO_CM

    weather_code = _number(raw, "weather_code")

    optional = {key: _number(raw, key) for key in _PASS_THROUGH_FIELDS}

    return WeatherSnapshot(
        temp_c=temp_c,
        wind_kph=wind_kph if wind_kph is not None else 0.0,
        precip_mm=precip_mm if precip_mm is not None else 0.0,
        gust_kph=_speed_kph(raw, "gust_kph", "gust_mps"),
        snow_depth_cm=snow_depth_cm,
        weather_code=int(weather_code) if weather_code is not None else None,
        **optional,
    )
