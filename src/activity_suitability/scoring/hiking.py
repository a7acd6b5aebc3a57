"""Hiking scorer.

Hiking runs on the feels-like temperature: the apparent temperature when the
provider reports one, otherwise the air temperature.

## Feasibility
Urban locations that are not parks are capped at 4.0 (40 on the public
scale). Parks are noted as a plus and never capped.

## Hard Stops
| Condition | Internal score |
|-----------|----------------|
| Feels like > 35 °C | 1.5 |
| Feels like < -10 °C | 2.0 |
| Thunderstorm (WMO code >= 95) | 1.0 |
| Precipitation > 5 mm | 1.0 |
"""

from __future__ import annotations

from activity_suitability.models.location import LocationMetadata
from activity_suitability.models.suitability import SuitabilityResult
from activity_suitability.models.weather import WeatherSnapshot, is_thunderstorm
from activity_suitability.scoring.card import ScoreCard

URBAN_MAX_SCORE = 4.0

EXTREME_HEAT_C = 35.0
EXTREME_COLD_C = -10.0
HEAVY_PRECIP_MM = 5.0
STRONG_WIND_KPH = 40.0


def _score_temperature(card: ScoreCard, feels_like_c: float) -> None:
    if 10 <= feels_like_c <= 22:
        card.note(f"Ideal hiking temperature ({feels_like_c:.0f}°C)")
    elif 0 <= feels_like_c < 10:
        card.adjust(-1.5, f"Chilly ({feels_like_c:.0f}°C)")
    elif 22 < feels_like_c <= 30:
        card.adjust(-1.5, f"Warm ({feels_like_c:.0f}°C)")
    elif feels_like_c < 0:
        card.adjust(-3.0, f"Freezing ({feels_like_c:.0f}°C)")
    else:
        card.adjust(-3.0, f"Hot ({feels_like_c:.0f}°C)")


def _score_precipitation(card: ScoreCard, weather: WeatherSnapshot) -> None:
    prob = weather.precip_prob
    if weather.precip_mm > 2 or (prob is not None and prob > 80):
        card.adjust(-3.0, "Rain likely")
    elif prob is not None and prob > 40:
        card.adjust(-1.5, f"Chance of rain ({prob:.0f}%)")


def _score_ground(card: ScoreCard, soil_moisture: float | None) -> None:
    if soil_moisture is None:
        return
    if soil_moisture > 0.4:
        card.adjust(-2.5, "Muddy trails")
    elif soil_moisture > 0.3:
        card.adjust(-1.0, "Damp trails")


def score_hiking(location: LocationMetadata, weather: WeatherSnapshot) -> SuitabilityResult:
    """Score current hiking conditions at a location."""
    card = ScoreCard()
    if location.is_park:
        card.note("Park or nature area")
    elif location.is_urban:
        card.cap(URBAN_MAX_SCORE, "Urban area with limited trails")

    feels_like = weather.feels_like_c
    if feels_like > EXTREME_HEAT_C:
        return card.stop(1.5, f"Dangerous heat (feels like {feels_like:.0f}°C)")
    if feels_like < EXTREME_COLD_C:
        return card.stop(2.0, f"Dangerous cold (feels like {feels_like:.0f}°C)")
    if is_thunderstorm(weather.weather_code):
        return card.stop(1.0, "Thunderstorm")
    if weather.precip_mm > HEAVY_PRECIP_MM:
        return card.stop(1.0, f"Heavy rain ({weather.precip_mm:.0f} mm)")

    _score_temperature(card, feels_like)
    _score_precipitation(card, weather)
    _score_ground(card, weather.soil_moisture_top_layer)
    if weather.wind_kph > STRONG_WIND_KPH:
        card.adjust(-2.0, f"Strong wind ({weather.wind_kph:.0f} km/h)")
    return card.finish()
