"""Rule-based suitability scoring for each activity."""

from activity_suitability.scoring.card import ScoreCard, to_public_score
from activity_suitability.scoring.engine import score_activity
from activity_suitability.scoring.hiking import score_hiking
from activity_suitability.scoring.snow import score_skiing, score_snowboarding
from activity_suitability.scoring.surfing import score_surfing

__all__ = [
    "ScoreCard",
    "score_activity",
    "score_hiking",
    "score_skiing",
    "score_snowboarding",
    "score_surfing",
    "to_public_score",
]
