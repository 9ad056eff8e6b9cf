"""Readiness classifier: recovery score → low / moderate / high."""

from __future__ import annotations

from typing import Optional

from praxis.schemas.periodization import ReadinessAnalysis, ReadinessCategory

DEFAULT_READINESS_SCORE = 50.0

_THRESHOLDS: list[tuple[ReadinessCategory, float, float]] = [(ReadinessCategory.LOW, 0.0, 40.0),
                                                             (ReadinessCategory.MODERATE, 40.0, 70.0),
                                                             (ReadinessCategory.HIGH, 70.0, float("inf")), ]


def _label_readiness(score: float) -> ReadinessCategory:
    for category, low, high in _THRESHOLDS:
        if low <= score < high:
            return category
    return ReadinessCategory.LOW


def analyze_readiness(recovery_score: Optional[float]) -> ReadinessAnalysis:
    """Classify a recovery score.  No score yet ⇒ 50 / moderate."""
    if recovery_score is None:
        return ReadinessAnalysis(score=DEFAULT_READINESS_SCORE, category=ReadinessCategory.MODERATE)
    return ReadinessAnalysis(score=recovery_score, category=_label_readiness(recovery_score))
