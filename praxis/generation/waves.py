"""
Wave loading tables for the main lift.

The main lift undulates over a 3-day wave keyed by ``day_index % 3``::

    heavy     RPE 8    80 % 1RM
    moderate  RPE 7.5  75 % 1RM
    volume    RPE 7    70 % 1RM

Sets × reps come from the athlete's experience level and the wave.  These
are the *base* numbers; weekly-structure targets, deload and fatigue
protection are layered on top by :mod:`praxis.generation.strength`.
"""

from __future__ import annotations

from typing import NamedTuple, Optional

from praxis.core.numbers import round_to_increment
from praxis.schemas.plan import SetPrescription
from praxis.schemas.preferences import ExperienceLevel

WEIGHT_INCREMENT = 2.5


class IntensityWave(NamedTuple):
    wave: str
    rpe: float
    percent: float


class RepScheme(NamedTuple):
    sets: int
    reps: int


WAVES: list[IntensityWave] = [IntensityWave("heavy", 8.0, 0.80), IntensityWave("moderate", 7.5, 0.75),
                              IntensityWave("volume", 7.0, 0.70), ]

REP_SCHEMES: dict[ExperienceLevel, dict[str, RepScheme]] = {
    ExperienceLevel.BEGINNER: {"heavy": RepScheme(3, 5), "moderate": RepScheme(3, 8), "volume": RepScheme(3, 10)},
    ExperienceLevel.INTERMEDIATE: {"heavy": RepScheme(4, 5), "moderate": RepScheme(4, 6),
                                   "volume": RepScheme(4, 8)},
    ExperienceLevel.ADVANCED: {"heavy": RepScheme(5, 3), "moderate": RepScheme(5, 5), "volume": RepScheme(4, 8)},
}


def get_intensity_wave(day_index: int) -> IntensityWave:
    return WAVES[day_index % len(WAVES)]


def get_rep_scheme(experience_level: ExperienceLevel, wave: str) -> RepScheme:
    return REP_SCHEMES[ExperienceLevel(experience_level)][wave]


def build_strength_sets(sets: int, reps: int, rpe: float, percent: float,
                        one_rm: Optional[float]) -> list[SetPrescription]:
    """Straight sets; target weight is filled in only when a 1RM is known."""
    target_weight = None
    if one_rm:
        target_weight = round_to_increment(one_rm * percent, WEIGHT_INCREMENT) or None
    return [SetPrescription(target_reps=reps, target_rpe=rpe, target_percent_1rm=percent, target_weight=target_weight)
            for _ in range(sets)]
