"""
Strength (main lift) block generator.

Selection — progressive fallback
--------------------------------

1. exact movement pattern, ``strength`` tag, equipment satisfied,
   narrowed to the athlete's difficulty when that leaves candidates;
2. the same filters against a biomechanical fallback list
   (squat ↔ hinge / lunge, horizontal ↔ vertical push, …);
3. any strength-tagged, equipment-satisfied exercise;
4. nothing → a block with ``strength_main=None`` (not an error).

Among tied candidates the pick is ``candidates[day_index % len]`` over
catalog order, so a given day index always yields the same lift for the
same equipment / experience combination.

Prescription layering
---------------------

Base sets / reps / RPE / %1RM come from :mod:`praxis.generation.waves`.
A :class:`WeeklyDayStructure` then applies, in order and each bounded:
volume target, intensity target, hard deload, fatigue protection, and
the block-type reinforcement nudges.
"""

from __future__ import annotations

import logging
from typing import NamedTuple, Optional

from praxis.catalog.catalog import find_exercises
from praxis.catalog.exercise import ExerciseProfile
from praxis.core.numbers import clamp
from praxis.generation.waves import build_strength_sets, get_intensity_wave, get_rep_scheme
from praxis.schemas.periodization import BlockType, MovementPattern, TargetLevel, WeeklyDayStructure
from praxis.schemas.plan import StrengthBlock, StrengthPrescription, new_id
from praxis.schemas.preferences import ExperienceLevel, StrengthNumbers

logger = logging.getLogger(__name__)

NO_EXERCISE_TITLE = "No Strength Exercise Available"
NO_STRENGTH_TITLE = "No Strength Block"

FALLBACK_PATTERNS: dict[MovementPattern, list[MovementPattern]] = {
    MovementPattern.SQUAT: [MovementPattern.HINGE, MovementPattern.LUNGE],
    MovementPattern.HINGE: [MovementPattern.SQUAT, MovementPattern.LUNGE],
    MovementPattern.HORIZONTAL_PUSH: [MovementPattern.VERTICAL_PUSH],
    MovementPattern.VERTICAL_PUSH: [MovementPattern.HORIZONTAL_PUSH],
    MovementPattern.HORIZONTAL_PULL: [MovementPattern.VERTICAL_PULL, MovementPattern.HINGE],
    MovementPattern.VERTICAL_PULL: [MovementPattern.HORIZONTAL_PULL, MovementPattern.HINGE],
}
DEFAULT_FALLBACK: list[MovementPattern] = [MovementPattern.SQUAT, MovementPattern.HINGE]

# exercise id -> StrengthNumbers field
ONE_RM_SOURCES: dict[str, str] = {
    "back_squat": "squat_1rm",
    "front_squat": "squat_1rm",
    "bench_press": "bench_1rm",
    "db_bench_press": "bench_1rm",
    "deadlift": "deadlift_1rm",
    "sumo_deadlift": "deadlift_1rm",
    "romanian_deadlift": "deadlift_1rm",
    "overhead_press": "press_1rm",
}


class StrengthTargets(NamedTuple):
    sets: int
    rpe: float
    percent: float


# ======================================================================
# Selection
# ======================================================================


def _candidates(pattern: Optional[MovementPattern], equipment_ids: list[str],
                experience_level: ExperienceLevel, ) -> list[ExerciseProfile]:
    candidates = find_exercises(pattern=pattern, equipment_ids=equipment_ids, tag="strength")
    preferred = [c for c in candidates if c.difficulty == experience_level]
    return preferred or candidates


def select_strength_exercise(pattern: MovementPattern, day_index: int, equipment_ids: list[str],
                             experience_level: ExperienceLevel, ) -> Optional[ExerciseProfile]:
    for candidate_pattern in [pattern, *FALLBACK_PATTERNS.get(pattern, DEFAULT_FALLBACK)]:
        candidates = _candidates(candidate_pattern, equipment_ids, experience_level)
        if candidates:
            if candidate_pattern != pattern:
                logger.debug("No %s lift available, falling back to %s", pattern.value, candidate_pattern.value)
            return candidates[day_index % len(candidates)]

    candidates = _candidates(None, equipment_ids, experience_level)
    if candidates:
        logger.debug("No %s lift or fallback available, using any strength exercise", pattern.value)
        return candidates[day_index % len(candidates)]
    return None


def one_rm_for_exercise(exercise_id: str, strength_numbers: Optional[StrengthNumbers]) -> Optional[float]:
    field = ONE_RM_SOURCES.get(exercise_id)
    if field is None or strength_numbers is None:
        return None
    return getattr(strength_numbers, field)


# ======================================================================
# Prescription adjustments
# ======================================================================


def _shift_intensity(rpe: float, percent: float, direction: int) -> tuple[float, float]:
    if direction < 0:
        return max(5.0, rpe - 1), max(0.5, percent - 0.05)
    return min(10.0, rpe + 1), min(1.0, percent + 0.05)


def apply_weekly_adjustments(base: StrengthTargets, day: Optional[WeeklyDayStructure]) -> StrengthTargets:
    """Layer the weekly-structure rules on the wave's base numbers."""
    if day is None:
        return base

    sets, rpe, percent = base
    volume, intensity = day.volume_target, day.intensity_target
    deload = day.block_type == BlockType.DELOAD
    protected = day.fatigue_protected

    if volume == TargetLevel.LOW:
        sets = max(2, sets - min(2, sets - 2))
    elif volume == TargetLevel.HIGH:
        sets = min(6, sets + 1)

    if intensity == TargetLevel.LOW:
        rpe, percent = _shift_intensity(rpe, percent, -1)
        if volume == TargetLevel.LOW:
            rpe, percent = _shift_intensity(rpe, percent, -1)
    elif intensity == TargetLevel.HIGH:
        rpe, percent = _shift_intensity(rpe, percent, +1)

    if deload:
        sets = 2
        rpe = clamp(rpe, 5.0, 6.0)
        percent = clamp(percent - 0.10, 0.5, 0.7)

    if protected:
        sets = int(clamp(sets, 2, 3))
        rpe = clamp(rpe, 5.0, 6.0)
        percent = clamp(percent - 0.10, 0.5, 0.65)
    elif deload:
        if sets > 2:
            sets -= 1
        if rpe > 6:
            rpe = max(5.0, rpe - 1)
        if percent > 0.7:
            percent -= 0.05
    elif day.block_type == BlockType.INTENSIFICATION and intensity == TargetLevel.HIGH and rpe < 9:
        rpe += 1
        percent = min(1.0, percent + 0.03)
    elif day.block_type == BlockType.ACCUMULATION and volume == TargetLevel.HIGH and sets < 5:
        sets += 1

    return StrengthTargets(sets, rpe, round(percent, 3))


# ======================================================================
# Public entry point
# ======================================================================


def generate_strength_block(pattern: MovementPattern, day_index: int, equipment_ids: list[str],
                            experience_level: ExperienceLevel,
                            strength_numbers: Optional[StrengthNumbers] = None,
                            weekly_day: Optional[WeeklyDayStructure] = None, ) -> StrengthBlock:
    if pattern == MovementPattern.ENGINE:
        return StrengthBlock(id=new_id("no-strength"), title=NO_STRENGTH_TITLE, movement_pattern=pattern,
                             strength_main=None, estimated_duration_minutes=0, )

    lift = select_strength_exercise(pattern, day_index, equipment_ids, experience_level)
    if lift is None:
        logger.debug("No strength exercise available for equipment %s", equipment_ids)
        return StrengthBlock(id=new_id("no-strength"), title=NO_EXERCISE_TITLE, movement_pattern=pattern,
                             strength_main=None, estimated_duration_minutes=0, )

    wave = get_intensity_wave(day_index)
    scheme = get_rep_scheme(experience_level, wave.wave)
    targets = apply_weekly_adjustments(StrengthTargets(scheme.sets, wave.rpe, wave.percent), weekly_day)
    one_rm = one_rm_for_exercise(lift.exercise_id, strength_numbers)

    logger.debug("Main lift %s (%s wave): %dx%d @ RPE %.1f / %.0f%%", lift.exercise_id, wave.wave, targets.sets,
                 scheme.reps, targets.rpe, targets.percent * 100)

    main = StrengthPrescription(exercise_id=lift.exercise_id,
                                sets=build_strength_sets(targets.sets, scheme.reps, targets.rpe, targets.percent,
                                                         one_rm),
                                wave=wave.wave, rpe=targets.rpe, percent=targets.percent, one_rm_used=one_rm, )
    return StrengthBlock(id=new_id("strength-main"), title=f"Main Lift – {lift.display_name}",
                         movement_pattern=lift.movement_pattern, strength_main=main,
                         estimated_duration_minutes=25 + targets.sets * 2, )
