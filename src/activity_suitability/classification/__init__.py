"""Location classification from geocoding data, names and user tags."""

from activity_suitability.classification.location import (
    StructuredSignals,
    classify_location,
    structured_signals,
)

__all__ = [
    "StructuredSignals",
    "classify_location",
    "structured_signals",
]
