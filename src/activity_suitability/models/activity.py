"""Activity model and normalization of free-text activity labels."""

from __future__ import annotations

from enum import Enum


class Activity(str, Enum):
    """Outdoor activities the engine can score."""

    SURFING = "surfing"
    HIKING = "hiking"
    SKIING = "skiing"
    SNOWBOARDING = "snowboarding"

    @property
    def display_name(self) -> str:
        """Human-readable activity name."""
        return self.value.capitalize()

    @property
    def is_snow_sport(self) -> bool:
        """Check if the activity is scored on snow conditions."""
        return self in (Activity.SKIING, Activity.SNOWBOARDING)


# Accepted labels (lower case) for each activity
ACTIVITY_ALIASES: dict[str, Activity] = {
    "surf": Activity.SURFING,
    "surfing": Activity.SURFING,
    "hike": Activity.HIKING,
    "hiking": Activity.HIKING,
    "ski": Activity.SKIING,
    "skiing": Activity.SKIING,
    "snowboard": Activity.SNOWBOARDING,
    "snowboarding": Activity.SNOWBOARDING,
}


def normalize_activity(label: str | Activity | None) -> Activity | None:
    """Map a free-text activity label to an Activity.

    Matching is case-insensitive and ignores surrounding whitespace.
    Unrecognized labels return None; no activity is ever guessed.

    Examples:
        'surf' -> Activity.SURFING
        ' Snowboarding ' -> Activity.SNOWBOARDING
        'kayak' -> None
    """
    if isinstance(label, Activity):
        return label
    if not label:
        return None
    return ACTIVITY_ALIASES.get(label.strip().lower())
