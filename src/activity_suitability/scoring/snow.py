"""Skiing and snowboarding scorer.

Both activities read the same snow and weather signals, so they share one
rule set and only differ in the wording of their reasons.

## Feasibility
A location that is not a known resort still gets scored, but its score is
capped at 3.0 (30 on the public scale).

## Hard Stops
| Condition | Internal score |
|-----------|----------------|
| Rain on snow (temp > 0 °C, precip > 0.5 mm, WMO code 51-67) | 1.0 |
| Gusts > 70 km/h | 0.5 |

## Adjustments (from 10.0)
| Factor | Buckets |
|--------|---------|
| Temperature | -10 to -2 °C 0; -20 to -10 or -2 to 2 -1.5; >2 -4; <-20 -2.5 |
| Fresh snowfall | >=15 cm +2; >=5 cm +1 |
| Base depth | <50 cm without fresh snow -2 |
| Wind | gusts > 40 km/h -2, else wind > 40 km/h -1.5 |
| Visibility | <500 m -4; <2000 m -1.5 |
"""

from __future__ import annotations

from activity_suitability.models.activity import Activity
from activity_suitability.models.location import LocationMetadata
from activity_suitability.models.suitability import SuitabilityResult
from activity_suitability.models.weather import WeatherSnapshot, is_drizzle_or_rain
from activity_suitability.scoring.card import ScoreCard

NON_RESORT_MAX_SCORE = 3.0

RAIN_ON_SNOW_MIN_PRECIP_MM = 0.5
DANGEROUS_GUST_KPH = 70.0
STRONG_WIND_KPH = 40.0

POWDER_DAY_CM = 15.0
FRESH_SNOW_CM = 5.0
THIN_BASE_CM = 50.0


def is_rain_on_snow(weather: WeatherSnapshot) -> bool:
    """Check for liquid rain falling above freezing."""
    return (
        weather.temp_c > 0
        and weather.precip_mm > RAIN_ON_SNOW_MIN_PRECIP_MM
        and is_drizzle_or_rain(weather.weather_code)
    )


def _score_temperature(card: ScoreCard, temp_c: float) -> None:
    if -10 <= temp_c <= -2:
        card.note(f"Ideal snow temperature ({temp_c:.0f}°C)")
    elif temp_c > 2:
        card.adjust(-4.0, f"Too warm, slushy snow ({temp_c:.0f}°C)")
    elif temp_c < -20:
        card.adjust(-2.5, f"Bitterly cold ({temp_c:.0f}°C)")
    elif temp_c < -10:
        card.adjust(-1.5, f"Very cold ({temp_c:.0f}°C)")
    else:
        card.adjust(-1.5, f"Near freezing ({temp_c:.0f}°C)")


def _score_snow(card: ScoreCard, snowfall_cm: float | None, snow_depth_cm: float | None) -> None:
    fresh = snowfall_cm is not None and snowfall_cm >= FRESH_SNOW_CM
    if snowfall_cm is not None and snowfall_cm >= POWDER_DAY_CM:
        card.adjust(2.0, f"Powder day ({snowfall_cm:.0f} cm fresh)")
    elif fresh:
        card.adjust(1.0, f"Fresh snow ({snowfall_cm:.0f} cm)")

    if snow_depth_cm is not None and snow_depth_cm < THIN_BASE_CM and not fresh:
        card.adjust(-2.0, f"Thin base ({snow_depth_cm:.0f} cm)")


def _score_wind(card: ScoreCard, weather: WeatherSnapshot) -> None:
    if weather.gust_kph is not None and weather.gust_kph > STRONG_WIND_KPH:
        card.adjust(-2.0, f"Strong gusts ({weather.gust_kph:.0f} km/h)")
    elif weather.wind_kph > STRONG_WIND_KPH:
        card.adjust(-1.5, f"Strong wind ({weather.wind_kph:.0f} km/h)")


def _score_visibility(card: ScoreCard, visibility_m: float | None) -> None:
    if visibility_m is None:
        return
    if visibility_m < 500:
        card.adjust(-4.0, "Whiteout: visibility under 500 m")
    elif visibility_m < 2000:
        card.adjust(-1.5, "Reduced visibility")
    else:
        card.note("Good visibility")


def score_snow_sport(
    activity: Activity,
    location: LocationMetadata,
    weather: WeatherSnapshot,
) -> SuitabilityResult:
    """Score current skiing or snowboarding conditions at a location."""
    card = ScoreCard()
    if not location.snow_friendly:
        card.cap(
            NON_RESORT_MAX_SCORE,
            f"Not a known resort for {activity.value}",
        )

    if is_rain_on_snow(weather):
        return card.stop(1.0, "Rain on snow")
    if weather.gust_kph is not None and weather.gust_kph > DANGEROUS_GUST_KPH:
        return card.stop(0.5, f"Dangerous gusts ({weather.gust_kph:.0f} km/h)")

    _score_temperature(card, weather.temp_c)
    _score_snow(card, weather.snowfall_cm, weather.snow_depth_cm)
    _score_wind(card, weather)
    _score_visibility(card, weather.visibility_m)
    return card.finish()


def score_skiing(location: LocationMetadata, weather: WeatherSnapshot) -> SuitabilityResult:
    """Score current skiing conditions at a location."""
    return score_snow_sport(Activity.SKIING, location, weather)


def score_snowboarding(location: LocationMetadata, weather: WeatherSnapshot) -> SuitabilityResult:
    """Score current snowboarding conditions at a location."""
    return score_snow_sport(Activity.SNOWBOARDING, location, weather)
