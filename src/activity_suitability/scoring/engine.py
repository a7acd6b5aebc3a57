"""Activity suitability engine.

Every activity is scored in three stages:

1. **Gatekeeper**: can the activity happen at this location at all? It either
   rejects the location (surfing), or caps the best achievable score (snow
   sports away from resorts, hiking in built-up areas).
2. **Cliff**: safety hard stops. A dangerous condition forces a fixed low
   score and skips the rest of the evaluation.
3. **Curve**: start from a perfect 10.0 and add or deduct per factor.

The final internal score is clamped to [0, ceiling], scaled to 0-100 and
labelled. Scoring is pure: the same inputs always produce the same result.

Example:
    ```python
    result = score_activity(Activity.HIKING, location, weather)
    print(result.score, result.label.value, result.reasons)
    ```
"""

from __future__ import annotations

from collections.abc import Callable

from activity_suitability.errors import InvalidActivity
from activity_suitability.models.activity import Activity, normalize_activity
from activity_suitability.models.location import LocationMetadata
from activity_suitability.models.suitability import SuitabilityResult
from activity_suitability.models.weather import WeatherSnapshot
from activity_suitability.scoring.hiking import score_hiking
from activity_suitability.scoring.snow import score_skiing, score_snowboarding
from activity_suitability.scoring.surfing import score_surfing

Scorer = Callable[[LocationMetadata, WeatherSnapshot], SuitabilityResult]

_SCORERS: dict[Activity, Scorer] = {
    Activity.SURFING: score_surfing,
    Activity.HIKING: score_hiking,
    Activity.SKIING: score_skiing,
    Activity.SNOWBOARDING: score_snowboarding,
}


def score_activity(
    activity: Activity | str,
    location: LocationMetadata,
    weather: WeatherSnapshot,
) -> SuitabilityResult:
    """Score how suitable a location is for an activity right now.

    Args:
        activity: Activity, or a label such as 'surf' or 'Skiing'
        location: Classified location
        weather: Current conditions in canonical units

    Returns:
        SuitabilityResult with score, label and up to three reasons

    Raises:
        InvalidActivity: If a label does not name a known activity
    """
    normalized = normalize_activity(activity)
    if normalized is None:
        raise InvalidActivity(str(activity))
    return _SCORERS[normalized](location, weather)
