"""Activity suitability scoring.

Scores how suitable a place is right now for surfing, hiking, skiing or
snowboarding, from live weather and what is known about the location.

## Quick Start

```python
from activity_suitability import Place, SuitabilityOrchestrator

async with SuitabilityOrchestrator.from_settings() as orchestrator:
    place = Place.from_coordinates(40.5795, -73.837, "Rockaway Beach", tags=["surf-spot"])
    result = await orchestrator.compute_suitability(place, "surf")
    print(result.score, result.label.value, result.reasons)
```

The engine can also be used directly with prepared inputs:

```python
from activity_suitability import classify_location, normalize_weather, score_activity

location = classify_location(nominatim_payload, "Gore Mountain", ["ski-resort"])
weather = normalize_weather({"temp_c": -6, "wind_mps": 2, "snowfall_cm": 18})
result = score_activity("ski", location, weather)
```
"""

from activity_suitability.classification import classify_location
from activity_suitability.errors import (
    IncompleteUpstreamData,
    InvalidActivity,
    SuitabilityError,
)
from activity_suitability.models import (
    Activity,
    Coordinates,
    LocationMetadata,
    Place,
    SuitabilityLabel,
    SuitabilityResult,
    WeatherSnapshot,
    normalize_activity,
)
from activity_suitability.normalization import normalize_weather
from activity_suitability.orchestrator import SuitabilityOrchestrator
from activity_suitability.scoring import score_activity

__version__ = "0.1.0"

__all__ = [
    "Activity",
    "Coordinates",
    "IncompleteUpstreamData",
    "InvalidActivity",
    "LocationMetadata",
    "Place",
    "SuitabilityError",
    "SuitabilityLabel",
    "SuitabilityOrchestrator",
    "SuitabilityResult",
    "WeatherSnapshot",
    "classify_location",
    "normalize_activity",
    "normalize_weather",
    "score_activity",
]
