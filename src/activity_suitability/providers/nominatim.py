"""Nominatim reverse-geocoding provider.

## API Documentation Summary
Source: https://nominatim.org/release-docs/latest/api/Reverse/
Source: https://operations.osmfoundation.org/policies/nominatim/

## Endpoint
- Base URL: https://nominatim.openstreetmap.org
- Full URL example:
  https://nominatim.openstreetmap.org/reverse?lat=40.58&lon=-73.81&format=json&zoom=14&addressdetails=1&extratags=1

## Usage Policy
- MUST send a User-Agent identifying the application
- Max 1 request per second on the public instance

## Response Format
```json
{
  "place_id": 12345,
  "class": "natural",
  "type": "beach",
  "name": "Rockaway Beach",
  "display_name": "Rockaway Beach, Queens, New York, United States",
  "address": {"natural": "Rockaway Beach", "suburb": "Queens", "country_code": "us"},
  "extratags": {}
}
```

Coordinates with nothing to report (open ocean) return HTTP 200 with
`{"error": "Unable to geocode"}`.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from activity_suitability.models.location import Coordinates
from activity_suitability.providers.base import GeocodingProvider, ProviderError

logger = logging.getLogger(__name__)

# Zoom 14 resolves to suburbs and named features such as beaches and parks
REVERSE_ZOOM = 14


class NominatimGeocoder(GeocodingProvider):
    """Nominatim reverse geocoder.

    Example:
        ```python
        async with NominatimGeocoder(user_agent="my-app/1.0 me@example.com") as geocoder:
            place = await geocoder.reverse(Coordinates(latitude=40.58, longitude=-73.81))
        ```
    """

    name = "nominatim"
    base_url = "https://nominatim.openstreetmap.org"

    def __init__(
        self,
        base_url: str | None = None,
        user_agent: str | None = None,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize Nominatim geocoder.

        Args:
            base_url: Nominatim instance (defaults to the public one)
            user_agent: User-Agent string (REQUIRED by the usage policy).
                       Should include app name and contact info.
            timeout: Request timeout in seconds
            client: Pre-built HTTP client
        """
        super().__init__(user_agent=user_agent, timeout=timeout, client=client)
        self.base_url = (base_url or self.base_url).rstrip("/")

    async def reverse(self, coordinates: Coordinates) -> dict[str, Any] | None:
        """Reverse-geocode a location.

        Args:
            coordinates: Location coordinates

        Returns:
            Nominatim place payload, or None when Nominatim knows nothing there

        Raises:
            ProviderError: If the request fails or the body is not an object
        """
        params = {
            "lat": round(coordinates.latitude, 6),
            "lon": round(coordinates.longitude, 6),
            "format": "json",
            "zoom": REVERSE_ZOOM,
            "addressdetails": 1,
            "extratags": 1,
        }
        data = await self._get_json(f"{self.base_url}/reverse", params=params)

        if not isinstance(data, dict):
            raise ProviderError(
                f"Unexpected response type: {type(data).__name__}",
                provider=self.name,
            )
        if "error" in data:
            logger.info(f"Nominatim has no place at {coordinates}: {data['error']}")
            return None
        return data
