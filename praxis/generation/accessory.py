"""Accessory block: two complementary, accessory-tagged exercises."""

from __future__ import annotations

import logging
from typing import Optional

from praxis.catalog.catalog import find_exercises
from praxis.catalog.exercise import ExerciseProfile
from praxis.schemas.periodization import MovementPattern
from praxis.schemas.plan import AccessoryBlock, AccessoryPrescription, SetPrescription, new_id
from praxis.schemas.preferences import ExperienceLevel

logger = logging.getLogger(__name__)

MAX_ACCESSORIES = 2
ACCESSORY_RPE = 7.0

COMPLEMENTS: dict[MovementPattern, list[MovementPattern]] = {
    MovementPattern.SQUAT: [MovementPattern.LUNGE, MovementPattern.HINGE, MovementPattern.CORE],
    MovementPattern.HINGE: [MovementPattern.LUNGE, MovementPattern.HORIZONTAL_PULL, MovementPattern.CORE],
    MovementPattern.LUNGE: [MovementPattern.SQUAT, MovementPattern.HINGE, MovementPattern.CORE],
    MovementPattern.HORIZONTAL_PUSH: [MovementPattern.HORIZONTAL_PULL, MovementPattern.VERTICAL_PUSH,
                                      MovementPattern.CORE],
    MovementPattern.VERTICAL_PUSH: [MovementPattern.VERTICAL_PULL, MovementPattern.HORIZONTAL_PUSH,
                                    MovementPattern.CORE],
    MovementPattern.HORIZONTAL_PULL: [MovementPattern.VERTICAL_PULL, MovementPattern.HORIZONTAL_PUSH,
                                      MovementPattern.CORE],
    MovementPattern.VERTICAL_PULL: [MovementPattern.HORIZONTAL_PULL, MovementPattern.VERTICAL_PUSH,
                                    MovementPattern.CORE],
}
DEFAULT_COMPLEMENTS: list[MovementPattern] = [MovementPattern.CORE, MovementPattern.CARRY]

# (sets, reps)
VOLUME_BY_EXPERIENCE: dict[ExperienceLevel, tuple[int, int]] = {ExperienceLevel.BEGINNER: (2, 12),
                                                                 ExperienceLevel.INTERMEDIATE: (3, 10),
                                                                 ExperienceLevel.ADVANCED: (3, 12), }

_RANK = {ExperienceLevel.BEGINNER: 0, ExperienceLevel.INTERMEDIATE: 1, ExperienceLevel.ADVANCED: 2}


def select_accessories(main_pattern: Optional[MovementPattern], main_lift_id: Optional[str], day_index: int,
                       equipment_ids: list[str], experience_level: ExperienceLevel, ) -> list[ExerciseProfile]:
    chosen: list[ExerciseProfile] = []
    patterns = COMPLEMENTS.get(main_pattern, DEFAULT_COMPLEMENTS) if main_pattern else DEFAULT_COMPLEMENTS
    for pattern in patterns:
        if len(chosen) == MAX_ACCESSORIES:
            break
        candidates = [c for c in find_exercises(pattern=pattern, equipment_ids=equipment_ids, tag="accessory") if
                      c.exercise_id != main_lift_id and c not in chosen and
                      _RANK[c.difficulty] <= _RANK[ExperienceLevel(experience_level)]]
        if candidates:
            chosen.append(candidates[day_index % len(candidates)])
    return chosen


def generate_accessory_block(main_pattern: Optional[MovementPattern], main_lift_id: Optional[str], day_index: int,
                             equipment_ids: list[str],
                             experience_level: ExperienceLevel, ) -> Optional[AccessoryBlock]:
    exercises = select_accessories(main_pattern, main_lift_id, day_index, equipment_ids, experience_level)
    if not exercises:
        logger.debug("No accessory exercise available")
        return None

    sets, reps = VOLUME_BY_EXPERIENCE[ExperienceLevel(experience_level)]
    prescriptions = [AccessoryPrescription(exercise_id=e.exercise_id,
                                           sets=[SetPrescription(target_reps=reps, target_rpe=ACCESSORY_RPE) for _ in
                                                 range(sets)], ) for e in exercises]
    return AccessoryBlock(id=new_id("accessory"), title="Accessory Work", accessory=prescriptions,
                          estimated_duration_minutes=15, )
