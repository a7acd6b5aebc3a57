"""Domain models for activity suitability scoring."""

from activity_suitability.models.activity import Activity, normalize_activity
from activity_suitability.models.location import Coordinates, LocationMetadata, Place
from activity_suitability.models.suitability import (
    SuitabilityLabel,
    SuitabilityResult,
    label_for_score,
)
from activity_suitability.models.weather import (
    WeatherSnapshot,
    describe_weather_code,
    is_drizzle_or_rain,
    is_thunderstorm,
)

__all__ = [
    # Activity
    "Activity",
    "normalize_activity",
    # Location
    "Coordinates",
    "LocationMetadata",
    "Place",
    # Suitability
    "SuitabilityLabel",
    "SuitabilityResult",
    "label_for_score",
    # Weather
    "WeatherSnapshot",
    "describe_weather_code",
    "is_drizzle_or_rain",
    "is_thunderstorm",
]
