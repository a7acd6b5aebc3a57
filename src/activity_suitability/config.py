"""Application configuration.

Configuration is loaded from environment variables using pydantic-settings.
Nothing is required: every setting has a default suitable for local use.

## Optional Environment Variables

- NOMINATIM_USER_AGENT: User-Agent sent to Nominatim (their usage policy
  requires an identifying value)
- SUITABILITY_TIMEOUT_SECONDS: Upper bound for one suitability computation
- HTTP_TIMEOUT_SECONDS: Per-request timeout for upstream providers
- LOG_LEVEL: Logging level for the CLI and API (default: INFO)
- DEBUG: Enable debug mode (default: false)

## Example .env file

```
NOMINATIM_USER_AGENT=my-suitability-app/1.0 ops@example.com
SUITABILITY_TIMEOUT_SECONDS=15
LOG_LEVEL=DEBUG
```
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Activity Suitability"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    allowed_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="CORS allowed origins",
    )

    # Weather (Open-Meteo)
    open_meteo_forecast_url: str = "https://api.open-meteo.com/v1/forecast"
    open_meteo_marine_url: str = "https://marine-api.open-meteo.com/v1/marine"

    # Geocoding (Nominatim)
    nominatim_base_url: str = "https://nominatim.openstreetmap.org"
    nominatim_user_agent: str = Field(
        default="activity-suitability/0.1.0",
        description="User-Agent for Nominatim (required by their usage policy)",
    )

    # Timeouts
    http_timeout_seconds: float = Field(default=10.0, gt=0, le=120)
    suitability_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        le=300,
        description="Upper bound for fetching all upstream data for one query",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        return str(v).upper()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded once and cached. To reload, clear the cache:
    ```python
    get_settings.cache_clear()
    ```
    """
    return Settings()
