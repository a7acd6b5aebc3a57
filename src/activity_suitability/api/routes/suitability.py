"""Suitability routes.

Scores a location for an activity through the shared orchestrator.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from activity_suitability.errors import IncompleteUpstreamData, InvalidActivity
from activity_suitability.models.location import Coordinates, Place
from activity_suitability.models.suitability import SuitabilityResult
from activity_suitability.orchestrator import SuitabilityOrchestrator

router = APIRouter()


def get_orchestrator(request: Request) -> SuitabilityOrchestrator:
    """Get the orchestrator created by the application lifespan."""
    return request.app.state.orchestrator


@router.get("", response_model=SuitabilityResult)
async def get_suitability(
    lat: float = Query(..., ge=-90, le=90, description="Latitude in decimal degrees"),
    lon: float = Query(..., ge=-180, le=180, description="Longitude in decimal degrees"),
    activity: str = Query(..., description="surfing, hiking, skiing or snowboarding"),
    name: str | None = Query(default=None, description="Display name of the place"),
    tags: list[str] = Query(default=[], description="Tags such as surf-spot or ski-resort"),
    orchestrator: SuitabilityOrchestrator = Depends(get_orchestrator),
) -> SuitabilityResult:
    """Score a location for an activity using current conditions."""
    coordinates = Coordinates(latitude=lat, longitude=lon)
    place = Place(
        coordinates=coordinates,
        name=name.strip() if name and name.strip() else str(coordinates),
        tags=tags,
    )

    try:
        return await orchestrator.compute_suitability(place, activity)
    except InvalidActivity as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    except IncompleteUpstreamData as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Upstream data unavailable ({e.source})",
        ) from e
