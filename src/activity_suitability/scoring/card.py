"""Score accumulator shared by the per-activity scorers.

Scores are kept on an internal 0-10 scale while rules are applied and only
converted to the public 0-100 integer when the result is built.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from activity_suitability.models.suitability import SuitabilityResult

PERFECT_SCORE = 10.0
PUBLIC_SCALE = 10


def to_public_score(internal: float, max_score: float = PERFECT_SCORE) -> int:
    """Clamp an internal score to [0, max_score] and scale it to 0-100.

    Halves round up (1.25 -> 13), unlike Python's round() which rounds
    halves to even.
    """
    clamped = min(max(internal, 0.0), max_score)
    return int(math.floor(clamped * PUBLIC_SCALE + 0.5))


@dataclass
class ScoreCard:
    """Running score, ceiling and reasons for one evaluation."""

    score: float = PERFECT_SCORE
    max_score: float = PERFECT_SCORE
    reasons: list[str] = field(default_factory=list)

    def adjust(self, delta: float, reason: str | None = None) -> None:
        """Add delta to the score and record the reason, if any."""
        self.score += delta
        if reason:
            self.reasons.append(reason)

    def note(self, reason: str) -> None:
        """Record a reason without changing the score."""
        self.reasons.append(reason)

    def cap(self, max_score: float, reason: str) -> None:
        """Lower the ceiling the final score is clamped to."""
        self.max_score = min(self.max_score, max_score)
        self.reasons.append(reason)

    def finish(self) -> SuitabilityResult:
        """Clamp, scale and label the accumulated score."""
        return SuitabilityResult.from_score(
            to_public_score(self.score, self.max_score), self.reasons
        )

    def stop(self, fixed_score: float, reason: str) -> SuitabilityResult:
        """End evaluation with a fixed score, skipping remaining rules.

        The stopping reason is listed first, ahead of anything recorded so far.
        """
        return SuitabilityResult.from_score(
            to_public_score(fixed_score), [reason, *self.reasons]
        )


def infeasible(reason: str) -> SuitabilityResult:
    """Result for an activity that cannot happen at the location at all."""
    return SuitabilityResult.from_score(0, [reason])
