"""
Daily workout generator.

Expands one day of the weekly structure (or, without one, the athlete's
goal alone) into a :class:`WorkoutPlanDay`.  Block order is fixed::

    warmup → strength → accessory → conditioning → cooldown

* the strength block is always emitted, with a ``None`` prescription when
  no exercise fits (or on a conditioning-only day);
* the accessory block needs a main lift and a non-protected day;
* conditioning follows the weekly conditioning target, or the goal's
  day-of-week heuristic when there is no weekly structure.

Given the same preferences, date, day index and weekly day, the output is
identical apart from entity ids.
"""

from __future__ import annotations

import datetime
import logging
from typing import Optional

from praxis.core.config import settings
from praxis.generation.accessory import generate_accessory_block
from praxis.generation.conditioning import generate_conditioning_block, should_include_conditioning
from praxis.generation.strength import generate_strength_block
from praxis.generation.warmup import generate_cooldown_block, generate_warmup_block
from praxis.schemas.periodization import MovementPattern, WeeklyDayStructure
from praxis.schemas.plan import WorkoutBlock, WorkoutPlanDay
from praxis.schemas.preferences import TrainingGoal, UserPreferences

logger = logging.getLogger(__name__)

# Main pattern rotation when no weekly structure is available.
PATTERN_ROTATION: list[MovementPattern] = [MovementPattern.SQUAT, MovementPattern.HORIZONTAL_PUSH,
                                           MovementPattern.HINGE, MovementPattern.HORIZONTAL_PULL, ]


def determine_focus_tags(goal: TrainingGoal, has_strength: bool) -> list[str]:
    tags = ["strength"] if has_strength else []
    if goal == TrainingGoal.CONDITIONING:
        tags.append("engine")
    elif goal == TrainingGoal.HYBRID:
        tags.extend(["hybrid", "engine"])
    elif goal == TrainingGoal.STRENGTH:
        tags.append("strength")
    else:
        tags.append("general")
    return list(dict.fromkeys(tags))


def generate_daily_workout(preferences: UserPreferences, date: datetime.date, day_index: int,
                           weekly_day: Optional[WeeklyDayStructure] = None,
                           user_id: str = settings.DEFAULT_USER_ID, ) -> WorkoutPlanDay:
    if weekly_day is not None:
        pattern = weekly_day.main_movement_pattern
    else:
        pattern = PATTERN_ROTATION[day_index % len(PATTERN_ROTATION)]

    equipment = list(preferences.equipment_ids)
    blocks: list[WorkoutBlock] = [generate_warmup_block(pattern)]

    strength = generate_strength_block(pattern, day_index, equipment, preferences.experience_level,
                                       preferences.strength_numbers, weekly_day, )
    blocks.append(strength)

    protected = weekly_day is not None and weekly_day.fatigue_protected
    if strength.strength_main is not None and not protected:
        accessory = generate_accessory_block(strength.movement_pattern, strength.strength_main.exercise_id,
                                             day_index, equipment, preferences.experience_level, )
        if accessory is not None:
            blocks.append(accessory)
    elif protected:
        logger.debug("Skipping accessory block on fatigue-protected day %s", date.isoformat())

    if should_include_conditioning(preferences.goal, day_index, weekly_day):
        blocks.append(generate_conditioning_block(preferences.goal, equipment, weekly_day))

    blocks.append(generate_cooldown_block(pattern))

    return WorkoutPlanDay(user_id=user_id, date=date, day_index=day_index,
                          focus_tags=determine_focus_tags(preferences.goal, strength.strength_main is not None),
                          blocks=blocks, estimated_duration_minutes=sum(b.estimated_duration_minutes for b in blocks),
                          adjusted_for_readiness=weekly_day is not None,
                          block_type=weekly_day.block_type if weekly_day is not None else None, )
