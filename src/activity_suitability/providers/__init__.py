"""Upstream weather and geocoding providers."""

from activity_suitability.providers.base import (
    GeocodingProvider,
    HttpProvider,
    ProviderError,
    RateLimitError,
    WeatherProvider,
)
from activity_suitability.providers.nominatim import NominatimGeocoder
from activity_suitability.providers.openmeteo import OpenMeteoProvider

__all__ = [
    "GeocodingProvider",
    "HttpProvider",
    "ProviderError",
    "RateLimitError",
    "WeatherProvider",
    "NominatimGeocoder",
    "OpenMeteoProvider",
]
