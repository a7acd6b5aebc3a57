"""Suitability orchestrator.

The one path from a user's place and activity to a `SuitabilityResult`.
The CLI and the HTTP API both score through it, so scores never drift
between surfaces.

## Flow
1. Normalize the activity label (fail fast on unknown activities)
2. Fetch current weather and the reverse geocode concurrently, under one
   timeout. Marine data is only requested for surfing.
3. Normalize the weather and classify the location
4. Score with the engine

Either fetch failing cancels the other and fails the whole computation; no
partial result is ever produced. Retries happen inside the providers, not here.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from activity_suitability.classification import classify_location
from activity_suitability.config import Settings, get_settings
from activity_suitability.errors import (
    IncompleteUpstreamData,
    InvalidActivity,
    SuitabilityError,
)
from activity_suitability.models.activity import Activity, normalize_activity
from activity_suitability.models.location import Place
from activity_suitability.models.suitability import SuitabilityResult
from activity_suitability.normalization import normalize_weather
from activity_suitability.providers.base import (
    GeocodingProvider,
    WeatherProvider,
)
from activity_suitability.providers.nominatim import NominatimGeocoder
from activity_suitability.providers.openmeteo import OpenMeteoProvider
from activity_suitability.scoring import score_activity

logger = logging.getLogger(__name__)


class SuitabilityOrchestrator:
    """Fetches upstream data for a place and scores it for an activity.

    Example:
        ```python
        async with SuitabilityOrchestrator.from_settings() as orchestrator:
            place = Place.from_coordinates(40.5795, -73.837, "Rockaway Beach")
            result = await orchestrator.compute_suitability(place, "surf")
        ```
    """

    def __init__(
        self,
        weather_provider: WeatherProvider,
        geocoder: GeocodingProvider,
        timeout: float | None = None,
    ):
        """Initialize the orchestrator.

        Args:
            weather_provider: Source of current conditions
            geocoder: Source of reverse-geocoding data
            timeout: Upper bound in seconds for fetching both inputs
                     (defaults to settings.suitability_timeout_seconds)
        """
        self.weather_provider = weather_provider
        self.geocoder = geocoder
        self.timeout = timeout if timeout is not None else get_settings().suitability_timeout_seconds

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> SuitabilityOrchestrator:
        """Build an orchestrator backed by Open-Meteo and Nominatim."""
        settings = settings or get_settings()
        weather_provider = OpenMeteoProvider(
            forecast_url=settings.open_meteo_forecast_url,
            marine_url=settings.open_meteo_marine_url,
            user_agent=settings.nominatim_user_agent,
            timeout=settings.http_timeout_seconds,
        )
        geocoder = NominatimGeocoder(
            base_url=settings.nominatim_base_url,
            user_agent=settings.nominatim_user_agent,
            timeout=settings.http_timeout_seconds,
        )
        return cls(weather_provider, geocoder, timeout=settings.suitability_timeout_seconds)

    async def __aenter__(self) -> SuitabilityOrchestrator:
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close both providers."""
        await self.weather_provider.aclose()
        await self.geocoder.aclose()

    async def _fetch_weather(self, place: Place, activity: Activity) -> dict[str, Any]:
        try:
            raw = await self.weather_provider.get_conditions(
                place.coordinates,
                include_marine=activity == Activity.SURFING,
            )
        except Exception as e:
            raise IncompleteUpstreamData(
                f"Weather unavailable for {place.label()}: {e}",
                source="weather",
            ) from e
        if not raw:
            raise IncompleteUpstreamData(
                f"Weather unavailable for {place.label()}: empty response",
                source="weather",
            )
        return raw

    async def _fetch_place(self, place: Place) -> dict[str, Any] | None:
        try:
            return await self.geocoder.reverse(place.coordinates)
        except Exception as e:
            raise IncompleteUpstreamData(
                f"Location data unavailable for {place.label()}: {e}",
                source="location",
            ) from e

    async def _fetch_all(
        self,
        place: Place,
        activity: Activity,
    ) -> tuple[dict[str, Any], dict[str, Any] | None]:
        """Run both fetches together; the first failure cancels the other."""
        try:
            async with asyncio.timeout(self.timeout):
                async with asyncio.TaskGroup() as group:
                    weather_task = group.create_task(self._fetch_weather(place, activity))
                    place_task = group.create_task(self._fetch_place(place))
        except TimeoutError as e:
            raise IncompleteUpstreamData(
                f"Timed out after {self.timeout}s fetching data for {place.label()}",
                source="timeout",
            ) from e
        except ExceptionGroup as eg:
            # Both helpers only raise IncompleteUpstreamData
            raise eg.exceptions[0]
        return weather_task.result(), place_task.result()

    async def compute_suitability(
        self,
        place: Place,
        activity: Activity | str,
    ) -> SuitabilityResult:
        """Score a place for an activity using live upstream data.

        Args:
            place: Where to score
            activity: Activity, or a label such as 'surf' or 'Hiking'

        Returns:
            SuitabilityResult for the current conditions

        Raises:
            InvalidActivity: If the activity label is not recognized
            IncompleteUpstreamData: If weather or location data is unavailable
        """
        normalized = normalize_activity(activity)
        if normalized is None:
            raise InvalidActivity(str(activity))

        raw_weather, raw_place = await self._fetch_all(place, normalized)

        try:
            weather = normalize_weather(raw_weather)
        except ValueError as e:
            raise IncompleteUpstreamData(
                f"Unusable weather data for {place.label()}: {e}",
                source="weather",
            ) from e

        location = classify_location(raw_place, place.name, place.tags)
        result = score_activity(normalized, location, weather)

        logger.info(
            f"{normalized.value} at {place.label()}: "
            f"{result.score} {result.label.value} "
            f"({weather.describe()}, {weather.temp_c:.0f}°C)"
        )
        return result

    async def compute_suitability_safe(
        self,
        place: Place,
        activity: Activity | str,
    ) -> SuitabilityResult | None:
        """Like compute_suitability, but logs and returns None on any failure."""
        try:
            return await self.compute_suitability(place, activity)
        except SuitabilityError as e:
            logger.warning(f"Failed to compute suitability for {place.label()}: {e}")
            return None
        except Exception:
            logger.exception(f"Unexpected error computing suitability for {place.label()}")
            return None
