"""Base provider abstractions for upstream data.

Two kinds of upstream data feed a suitability computation:

- **Weather**: current conditions as a flat dict of raw fields, which
  `activity_suitability.normalization.normalize_weather` turns into a
  `WeatherSnapshot`.
- **Geocoding**: a reverse-geocoding payload describing what is at the
  coordinates, which `activity_suitability.classification.classify_location`
  turns into `LocationMetadata`.

Providers only fetch and reshape. Unit conversion and classification stay out
of this layer so every caller goes through the same normalizer and
classifier.

### Raw Weather Fields
Providers return any subset of the keys `normalize_weather` accepts
(`temp_c`, `wind_mps`/`wind_kph`, `precip_mm`, `weather_code`, ...). Fields
the source lacks are left out rather than filled with guesses.

## Supported Providers

### Open-Meteo (open-meteo.com)
- Endpoints: /v1/forecast and marine-api /v1/marine
- Auth: None required for basic use
- Rate limit: 10,000 requests/day (non-commercial)

### Nominatim (nominatim.openstreetmap.org)
- Endpoint: /reverse
- Auth: None, but an identifying User-Agent is required
- Rate limit: 1 request/second on the public instance
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from activity_suitability.models.location import Coordinates

logger = logging.getLogger(__name__)


class ProviderError(Exception):
    """Base exception for upstream provider errors."""

    def __init__(
        self,
        message: str,
        provider: str,
        status_code: int | None = None,
        response_body: str | None = None,
    ):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code
        self.response_body = response_body


class RateLimitError(ProviderError):
    """Raised when provider rate limit is exceeded."""

    def __init__(
        self,
        provider: str,
        retry_after: int | None = None,
        status_code: int | None = None,
    ):
        super().__init__(
            f"Rate limit exceeded for {provider}",
            provider=provider,
            status_code=status_code,
        )
        self.retry_after = retry_after


class HttpProvider:
    """Shared HTTP plumbing for upstream providers.

    Holds one `httpx.AsyncClient`, created lazily or injected (tests pass a
    client built on `httpx.MockTransport`). Transient timeouts and network
    errors are retried with exponential backoff; HTTP error statuses are not.

    Attributes:
        name: Provider name used in errors and logs
        base_url: Base URL for the API
    """

    name: str
    base_url: str

    def __init__(
        self,
        user_agent: str | None = None,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize the provider.

        Args:
            user_agent: User-Agent string for requests
            timeout: Request timeout in seconds
            client: Pre-built HTTP client (the provider will not own it)
        """
        self.user_agent = user_agent or "activity-suitability/0.1.0"
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> HttpProvider:
        """Enter async context manager."""
        self._get_client()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
            self._owns_client = True
        return self._client

    def _get_default_headers(self) -> dict[str, str]:
        """Get default headers for requests."""
        return {
            "User-Agent": self.user_agent,
            "Accept": "application/json",
        }

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type((httpx.TimeoutException, httpx.NetworkError)),
        reraise=True,
    )
    async def _fetch(
        self,
        url: str,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Fetch data from the API with retry logic.

        Args:
            url: Full URL to fetch
            params: Query parameters

        Returns:
            HTTP response

        Raises:
            ProviderError: If the API answers with an error status
            RateLimitError: If rate limit is exceeded
            httpx.HTTPError: If the request still fails after retries
        """
        client = self._get_client()
        response = await client.get(url, params=params, headers=self._get_default_headers())

        # Handle rate limiting
        if response.status_code == 429:
            retry_after = response.headers.get("Retry-After")
            raise RateLimitError(
                self.name,
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
                status_code=429,
            )

        # Handle other errors
        if response.status_code >= 400:
            raise ProviderError(
                f"API request failed: {response.status_code}",
                provider=self.name,
                status_code=response.status_code,
                response_body=response.text,
            )

        return response

    async def _get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """Fetch a URL and decode its JSON body.

        Raises:
            ProviderError: If the request fails or the body is not JSON
        """
        logger.debug(f"{self.name}: GET {url} {params or {}}")
        try:
            response = await self._fetch(url, params=params)
        except httpx.HTTPError as e:
            raise ProviderError(
                f"Request to {self.name} failed: {e}",
                provider=self.name,
            ) from e

        try:
            return response.json()
        except ValueError as e:
            raise ProviderError(
                f"Failed to parse response: {e}",
                provider=self.name,
                response_body=response.text,
            ) from e


class WeatherProvider(HttpProvider, ABC):
    """Abstract base class for current-conditions providers.

    Example:
        ```python
        class MyProvider(WeatherProvider):
            name = "my_provider"
            base_url = "https://api.example.com"

            async def get_conditions(self, coordinates, include_marine=False):
                data = await self._get_json(self.base_url, params={...})
                return {"temp_c": data["temp"], "wind_mps": data["wind"]}
        ```
    """

    @abstractmethod
    async def get_conditions(
        self,
        coordinates: Coordinates,
        include_marine: bool = False,
    ) -> dict[str, Any]:
        """Get current conditions at a location.

        Args:
            coordinates: Location coordinates
            include_marine: Also fetch wave and swell data

        Returns:
            Raw weather fields for the normalizer

        Raises:
            ProviderError: If conditions cannot be retrieved
        """
        pass


class GeocodingProvider(HttpProvider, ABC):
    """Abstract base class for reverse-geocoding providers."""

    @abstractmethod
    async def reverse(self, coordinates: Coordinates) -> dict[str, Any] | None:
        """Describe what is at a location.

        Args:
            coordinates: Location coordinates

        Returns:
            Raw place payload, or None when nothing is known there

        Raises:
            ProviderError: If the lookup fails
        """
        pass
