"""Errors surfaced by suitability computations."""

from __future__ import annotations


class SuitabilityError(Exception):
    """Base exception for suitability computation errors."""


class InvalidActivity(SuitabilityError, ValueError):
    """Raised when an activity label does not name a known activity."""

    def __init__(self, label: str | None):
        super().__init__(f"Invalid activity type: {label!r}")
        self.label = label


class IncompleteUpstreamData(SuitabilityError):
    """Raised when weather or location data could not be obtained.

    Attributes:
        source: Which input was missing ("weather", "location" or "timeout")
    """

    def __init__(self, message: str, source: str):
        super().__init__(message)
        self.source = source
