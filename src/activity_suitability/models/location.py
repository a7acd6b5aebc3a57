"""Location models: coordinates, user places and classified location features."""

from __future__ import annotations

import re
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Regex for parsing lat/long coordinates: "latitude,longitude"
# Supports optional +/- prefix for both values
COORDINATE_PATTERN = re.compile(
    r"^(?P<lat>[-+]?\d*\.?\d+)\s*,\s*(?P<lon>[-+]?\d*\.?\d+)$"
)


class Coordinates(BaseModel):
    """Geographic coordinates (latitude/longitude).

    Latitude:
        - Negative (-) = south of equator
        - Positive (+) = north of equator
        - Range: -90 to +90

    Longitude:
        - Negative (-) = west of prime meridian
        - Positive (+) = east of prime meridian
        - Range: -180 to +180
    """

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees")

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Parse coordinates from string format 'latitude,longitude'.

        Examples:
            '40.5795,-73.8370' -> Rockaway Beach
            '-33.8915,151.2767' -> Bondi Beach
            '+43.6543,-74.0074' -> Gore Mountain
        """
        match = COORDINATE_PATTERN.match(value.strip())
        if not match:
            raise ValueError(
                f"Invalid coordinate format: '{value}'. "
                "Expected format: 'latitude,longitude' (e.g., '40.5795,-73.8370')"
            )
        return cls(
            latitude=float(match.group("lat")),
            longitude=float(match.group("lon")),
        )

    def __str__(self) -> str:
        return f"{self.latitude},{self.longitude}"


class Place(BaseModel):
    """A user-chosen spot to score: where it is, what it is called, how it is tagged."""

    coordinates: Coordinates = Field(..., description="Where the place is")
    name: str = Field(..., min_length=1, description="Display name of the place")
    tags: list[str] = Field(
        default_factory=list,
        description="User tags such as 'surf-spot' or 'ski-resort'",
    )
    id: str | None = Field(default=None, description="Caller's identifier, for logging")

    @field_validator("tags", mode="before")
    @classmethod
    def drop_blank_tags(cls, v: list[str] | None) -> list[str]:
        """Strip tags and discard empty ones."""
        if not v:
            return []
        return [t.strip() for t in v if t and t.strip()]

    @classmethod
    def from_coordinates(
        cls,
        latitude: float,
        longitude: float,
        name: str,
        tags: list[str] | None = None,
    ) -> Self:
        """Create a Place from latitude/longitude values."""
        return cls(
            coordinates=Coordinates(latitude=latitude, longitude=longitude),
            name=name,
            tags=tags or [],
        )

    def label(self) -> str:
        """Short identifier used in log messages."""
        return self.id or f"{self.name} ({self.coordinates})"


class LocationMetadata(BaseModel):
    """Compact feature vector describing what kind of place a location is.

    Built by the location classifier; every flag is always set once
    constructed. The raw OSM category/type are kept only for diagnostics.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Display name of the location")
    country_code: str | None = Field(
        default=None, description="ISO 3166-1 alpha-2 country code (upper case)"
    )
    osm_category: str | None = Field(
        default=None, description="Raw OSM class, for diagnostics"
    )
    osm_type: str | None = Field(default=None, description="Raw OSM type, for diagnostics")

    is_coastal: bool = Field(..., description="On or next to a sea coast")
    has_large_water_nearby: bool = Field(
        ..., description="Near the sea, a lake, a reservoir or a large river"
    )
    is_park: bool = Field(..., description="Park, reserve or other nature area")
    is_urban: bool = Field(..., description="Built-up city, town or suburb")
    snow_friendly: bool = Field(
        default=False, description="Known ski or snowboard resort"
    )
    surf_friendly: bool = Field(default=False, description="Known surf spot")

    @property
    def is_oceanic(self) -> bool:
        """Coastal and next to large water: the static signal for surf feasibility."""
        return self.is_coastal and self.has_large_water_nearby
