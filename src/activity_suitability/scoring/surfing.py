"""Surfing scorer.

## Feasibility
Surfing needs open water. A location qualifies if it is a known surf spot,
if it is coastal with large water nearby, or if live marine data reports
real surf (waves over 0.3 m with a swell period of at least 5 s) even though
the location itself was not recognized as coastal.

## Hard Stops
| Condition | Internal score |
|-----------|----------------|
| Wind > 70 km/h | 0.5 |
| Waves > 5 m | 1.0 |

## Adjustments (from 10.0)
| Factor | Buckets |
|--------|---------|
| Wave height | missing -4; <0.3 m -5; 0.3-0.6 m -3; 0.6-2.5 m 0; 2.5-4 m -1; >4 m -3 |
| Swell period | <6 s -3; 6-9 s -1; 9-12 s +0.5; >=12 s +1 |
| Wind | <5 km/h +0.5; <=30 -0.5; <=50 -2; >50 -3 |
| Temperature | <5 °C -4; 5-10 -2.5; 10-18 -1; 18-28 0; 28-32 -0.5; 32-35 -1.5; >35 -3 |
"""

from __future__ import annotations

from activity_suitability.models.location import LocationMetadata
from activity_suitability.models.suitability import SuitabilityResult
from activity_suitability.models.weather import WeatherSnapshot
from activity_suitability.scoring.card import ScoreCard, infeasible

# Live marine readings strong enough to override the location classification
MARINE_OVERRIDE_MIN_WAVE_M = 0.3
MARINE_OVERRIDE_MIN_SWELL_S = 5.0

DANGEROUS_WIND_KPH = 70.0
DANGEROUS_WAVE_M = 5.0


def feasibility_reason(location: LocationMetadata, weather: WeatherSnapshot) -> str | None:
    """Explain why surfing is possible here, or return None if it is not."""
    if location.surf_friendly:
        return "Known surf spot"
    if location.is_oceanic:
        return "Coastal location with ocean access"
    if (
        weather.has_marine_data
        and weather.wave_height_m > MARINE_OVERRIDE_MIN_WAVE_M
        and weather.swell_period_s >= MARINE_OVERRIDE_MIN_SWELL_S
    ):
        return "Live marine data shows surfable waves"
    return None


def _score_waves(card: ScoreCard, wave_height_m: float | None) -> None:
    if wave_height_m is None:
        card.adjust(-4.0, "No live wave data")
    elif wave_height_m < 0.3:
        card.adjust(-5.0, "Flat: waves under 0.3 m")
    elif wave_height_m < 0.6:
        card.adjust(-3.0, f"Small waves ({wave_height_m:.1f} m)")
    elif wave_height_m <= 2.5:
        card.note(f"Waves in the sweet spot ({wave_height_m:.1f} m)")
    elif wave_height_m <= 4.0:
        card.adjust(-1.0, f"Big waves ({wave_height_m:.1f} m)")
    else:
        card.adjust(-3.0, f"Very large waves ({wave_height_m:.1f} m)")


def _score_swell(card: ScoreCard, swell_period_s: float | None) -> None:
    if swell_period_s is None:
        return
    if swell_period_s < 6:
        card.adjust(-3.0, f"Short-period wind swell ({swell_period_s:.0f} s)")
    elif swell_period_s < 9:
        card.adjust(-1.0, f"Moderate swell period ({swell_period_s:.0f} s)")
    elif swell_period_s < 12:
        card.adjust(0.5, f"Good swell period ({swell_period_s:.0f} s)")
    else:
        card.adjust(1.0, f"Long-period groundswell ({swell_period_s:.0f} s)")


def _score_wind(card: ScoreCard, wind_kph: float) -> None:
    if wind_kph < 5:
        card.adjust(0.5, "Glassy, near-calm wind")
    elif wind_kph <= 30:
        card.adjust(-0.5)
    elif wind_kph <= 50:
        card.adjust(-2.0, f"Strong wind ({wind_kph:.0f} km/h)")
    else:
        card.adjust(-3.0, f"Very strong wind ({wind_kph:.0f} km/h)")


def _score_temperature(card: ScoreCard, temp_c: float) -> None:
    if temp_c < 5:
        card.adjust(-4.0, f"Freezing conditions ({temp_c:.0f}°C)")
    elif temp_c < 10:
        card.adjust(-2.5, f"Cold, thick wetsuit needed ({temp_c:.0f}°C)")
    elif temp_c < 18:
        card.adjust(-1.0, f"Cool, wetsuit needed ({temp_c:.0f}°C)")
    elif temp_c <= 28:
        card.note(f"Comfortable temperature ({temp_c:.0f}°C)")
    elif temp_c <= 32:
        card.adjust(-0.5)
    elif temp_c <= 35:
        card.adjust(-1.5, f"Hot ({temp_c:.0f}°C)")
    else:
        card.adjust(-3.0, f"Extreme heat ({temp_c:.0f}°C)")


def score_surfing(location: LocationMetadata, weather: WeatherSnapshot) -> SuitabilityResult:
    """Score current surfing conditions at a location."""
    reason = feasibility_reason(location, weather)
    if reason is None:
        return infeasible("No ocean access for surfing")

    card = ScoreCard()
    card.note(reason)

    if weather.wind_kph > DANGEROUS_WIND_KPH:
        return card.stop(0.5, f"Dangerous wind ({weather.wind_kph:.0f} km/h)")
    if weather.wave_height_m is not None and weather.wave_height_m > DANGEROUS_WAVE_M:
        return card.stop(1.0, f"Dangerous surf ({weather.wave_height_m:.1f} m waves)")

    _score_waves(card, weather.wave_height_m)
    _score_swell(card, weather.swell_period_s)
    _score_wind(card, weather.wind_kph)
    _score_temperature(card, weather.temp_c)
    return card.finish()
