"""Tests for activity and suitability result models."""

import pytest

from activity_suitability.models.activity import Activity, normalize_activity
from activity_suitability.models.suitability import (
    SuitabilityLabel,
    SuitabilityResult,
    dedupe_reasons,
    label_for_score,
)


class TestNormalizeActivity:
    """Tests for activity label normalization."""

    @pytest.mark.parametrize(
        "label,expected",
        [
            ("surf", Activity.SURFING),
            ("surfing", Activity.SURFING),
            ("Hike", Activity.HIKING),
            ("HIKING", Activity.HIKING),
            ("ski", Activity.SKIING),
            (" skiing ", Activity.SKIING),
            ("snowboard", Activity.SNOWBOARDING),
            ("Snowboarding", Activity.SNOWBOARDING),
        ],
    )
    def test_known_labels(self, label: str, expected: Activity):
        """Test every accepted spelling."""
        assert normalize_activity(label) == expected

    @pytest.mark.parametrize("label", ["kayak", "", "   ", "surfs", None])
    def test_unknown_labels(self, label: str | None):
        """Test that nothing is guessed for unknown labels."""
        assert normalize_activity(label) is None

    def test_activity_passes_through(self):
        """Test that an Activity is returned unchanged."""
        assert normalize_activity(Activity.HIKING) is Activity.HIKING

    def test_snow_sports(self):
        """Test snow sport grouping."""
        assert Activity.SKIING.is_snow_sport is True
        assert Activity.SNOWBOARDING.is_snow_sport is True
        assert Activity.SURFING.is_snow_sport is False
        assert Activity.SURFING.display_name == "Surfing"


class TestLabelForScore:
    """Tests for score to label thresholds."""

    @pytest.mark.parametrize(
        "score,label",
        [
            (0, SuitabilityLabel.TERRIBLE),
            (30, SuitabilityLabel.TERRIBLE),
            (31, SuitabilityLabel.OK),
            (70, SuitabilityLabel.OK),
            (71, SuitabilityLabel.GREAT),
            (100, SuitabilityLabel.GREAT),
        ],
    )
    def test_boundaries(self, score: int, label: SuitabilityLabel):
        """Test the exact bucket boundaries."""
        assert label_for_score(score) == label


class TestSuitabilityResult:
    """Tests for the SuitabilityResult model."""

    def test_from_score(self):
        """Test building a result derives the label and tidies reasons."""
        result = SuitabilityResult.from_score(55, ["a", "b", "a", "c", "d"])
        assert result.label == SuitabilityLabel.OK
        assert result.reasons == ["a", "b", "c"]

    def test_label_must_match_score(self):
        """Test that an inconsistent label is rejected."""
        with pytest.raises(ValueError, match="does not match"):
            SuitabilityResult(score=80, label=SuitabilityLabel.OK, reasons=[])

    def test_too_many_reasons(self):
        """Test that at most three reasons are allowed."""
        with pytest.raises(ValueError):
            SuitabilityResult(
                score=10, label=SuitabilityLabel.TERRIBLE, reasons=["a", "b", "c", "d"]
            )

    def test_duplicate_reasons(self):
        """Test that reasons must be distinct."""
        with pytest.raises(ValueError, match="distinct"):
            SuitabilityResult(score=10, label=SuitabilityLabel.TERRIBLE, reasons=["a", "a"])

    def test_score_range(self):
        """Test the 0-100 range."""
        with pytest.raises(ValueError):
            SuitabilityResult.from_score(101, [])
        with pytest.raises(ValueError):
            SuitabilityResult.from_score(-1, [])

    def test_serialization(self):
        """Test the JSON shape."""
        result = SuitabilityResult.from_score(85, ["Powder day (20 cm fresh)"])
        assert result.model_dump(mode="json") == {
            "score": 85,
            "label": "GREAT",
            "reasons": ["Powder day (20 cm fresh)"],
        }

    def test_dedupe_reasons_keeps_order(self):
        """Test first-occurrence order is preserved."""
        assert dedupe_reasons(["x", "y", "x", "z"], limit=5) == ["x", "y", "z"]
