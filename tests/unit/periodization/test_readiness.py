"""Tests for the readiness classifier."""

import pytest

from praxis.periodization.readiness import DEFAULT_READINESS_SCORE, analyze_readiness
from praxis.schemas.periodization import ReadinessCategory


class TestAnalyzeReadiness:
    def test_no_score_defaults_to_moderate(self):
        result = analyze_readiness(None)
        assert result.score == DEFAULT_READINESS_SCORE == 50.0
        assert result.category == ReadinessCategory.MODERATE

    @pytest.mark.parametrize(
        "score, category",
        [
            (0, ReadinessCategory.LOW),
            (39.9, ReadinessCategory.LOW),
            (40, ReadinessCategory.MODERATE),
            (69.9, ReadinessCategory.MODERATE),
            (70, ReadinessCategory.HIGH),
            (100, ReadinessCategory.HIGH),
        ],
    )
    def test_thresholds(self, score, category):
        assert analyze_readiness(score).category == category

    def test_score_is_kept(self):
        assert analyze_readiness(82).score == 82
