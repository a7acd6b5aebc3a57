"""FastAPI application and routes.

This module provides the REST API for activity suitability scores.

## API Structure

- /health - Liveness check
- /api/suitability - Score a location for an activity

## Errors

- 400: Unknown activity
- 422: Invalid query parameters (e.g. latitude out of range)
- 502: Weather or location provider unavailable
"""

from activity_suitability.api.app import create_app

__all__ = ["create_app"]
