"""
Weight progression.

Recommends the starting working weight of a main lift from the last time
it was performed:

* last RPE more than 1 below target → +5 %
* last RPE more than 1 above target → −5 %
* recovery < 40 → −5 %, recovery > 85 → +2.5 %

The result is floored at the minimum plate-loadable weight and rounded to
the nearest 2.5.
"""

from __future__ import annotations

from typing import Optional, Sequence

from praxis.core.config import settings
from praxis.core.numbers import round_to_increment
from praxis.schemas.workout import ExerciseHistoryEntry

EASY_MULTIPLIER = 1.05
HARD_MULTIPLIER = 0.95
LOW_RECOVERY_MULTIPLIER = 0.95
HIGH_RECOVERY_MULTIPLIER = 1.025


def latest_entry(history: Sequence[ExerciseHistoryEntry]) -> Optional[ExerciseHistoryEntry]:
    if not history:
        return None
    return max(history, key=lambda e: (e.date, e.session_id))


def get_recommended_weight(target_rpe: Optional[float], recovery_score: Optional[float],
                           history: Sequence[ExerciseHistoryEntry], min_weight: float = settings.AUTOREG_MIN_WEIGHT,
                           increment: float = settings.AUTOREG_ROUNDING_INCREMENT, ) -> Optional[float]:
    """Recommended starting weight for an exercise, or ``None`` without history."""
    last = latest_entry(history)
    if last is None:
        return None

    weight = last.weight
    if target_rpe is not None:
        deviation = last.rpe - target_rpe
        if deviation < -1:
            weight *= EASY_MULTIPLIER
        elif deviation > 1:
            weight *= HARD_MULTIPLIER

    if recovery_score is not None:
        if recovery_score < 40:
            weight *= LOW_RECOVERY_MULTIPLIER
        elif recovery_score > 85:
            weight *= HIGH_RECOVERY_MULTIPLIER

    return round_to_increment(max(min_weight, weight), increment)
