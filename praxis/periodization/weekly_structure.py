"""
Weekly structure builder.

Assembles the skeleton of one ISO week: for each training day a main
movement pattern, a volume / intensity target, a conditioning target and a
fatigue-protection flag.

Pipeline
--------

1. **Base targets** from readiness (low → low, moderate → medium,
   high → high), then biased by block type: deload steps both down,
   accumulation steps volume up and caps intensity at medium,
   intensification steps intensity up and caps volume at medium.
2. **Pattern order**: press / hinge / squat / pull sorted by fatigue
   ascending, patterns at fatigue ≥ 80 pushed to the back.  More than 4
   training days add a conditioning ("engine") day, more than 5 add a
   hybrid upper day.  At most 6 days are generated.
3. **Per-day rules**: fatigue ≥ 60 forces low volume, ≥ 75 low intensity,
   ≥ 80 marks the day protected (light conditioning, no repeat in the
   week).  Block-type nudges spread the load across the week; fresh
   patterns (< 30) may be boosted on high-readiness weeks.
4. **Anti-repetition**: two consecutive days with the same pattern cannot
   both be high volume.
5. **Week-level override**: deload with an ACWR spike forces every day to
   low / low.

Three numeric spaces are used here and never mixed: 0–100 pattern
fatigue (thresholds 30 / 60 / 75 / 80), the raw ACWR ratio (zone only),
and readiness 0–100 (category only).
"""

from __future__ import annotations

import datetime
import logging
from typing import NamedTuple, Optional

from praxis.periodization.patterns import fatigue_key_for_pattern
from praxis.schemas.periodization import (AcwrZone, BlockType, ConditioningTarget, FatigueAnalysis, MovementPattern,
                                          ReadinessAnalysis, ReadinessCategory, TargetLevel, WeeklyDayStructure,
                                          WeeklyStructure, WeeklyStructureMetadata, )

logger = logging.getLogger(__name__)

# ======================================================================
# Configuration
# ======================================================================

MAX_GENERATED_DAYS = 6

FORCE_LOW_VOLUME_AT = 60.0
FORCE_LOW_INTENSITY_AT = 75.0
PROTECTED_AT = 80.0
FRESH_BELOW = 30.0

# Days of an accumulation week that keep high volume; later days step down.
ACCUMULATION_HIGH_VOLUME_DAYS = 4
# Days of an intensification week that keep high intensity.
INTENSIFICATION_HIGH_INTENSITY_DAYS = 2

_LEVELS: list[TargetLevel] = [TargetLevel.LOW, TargetLevel.MEDIUM, TargetLevel.HIGH]

_READINESS_TO_LEVEL: dict[ReadinessCategory, TargetLevel] = {ReadinessCategory.LOW: TargetLevel.LOW,
                                                             ReadinessCategory.MODERATE: TargetLevel.MEDIUM,
                                                             ReadinessCategory.HIGH: TargetLevel.HIGH, }

_READINESS_TO_CONDITIONING: dict[ReadinessCategory, ConditioningTarget] = {
    ReadinessCategory.LOW: ConditioningTarget.LIGHT,
    ReadinessCategory.MODERATE: ConditioningTarget.MIXED,
    ReadinessCategory.HIGH: ConditioningTarget.INTENSITY, }


class DaySlot(NamedTuple):
    pattern: MovementPattern
    label: str


CORE_SLOTS: list[DaySlot] = [DaySlot(MovementPattern.HORIZONTAL_PUSH, "Bench"), DaySlot(MovementPattern.HINGE, "Deadlift"),
                             DaySlot(MovementPattern.SQUAT, "Squat"), DaySlot(MovementPattern.HORIZONTAL_PULL, "Pull"), ]
ENGINE_SLOT = DaySlot(MovementPattern.ENGINE, "Conditioning")
HYBRID_SLOT = DaySlot(MovementPattern.VERTICAL_PUSH, "Hybrid")


# ======================================================================
# Helpers
# ======================================================================


def week_start_for(day: datetime.date) -> datetime.date:
    """Monday of the ISO week containing ``day``."""
    return day - datetime.timedelta(days=day.weekday())


def day_of_week(day: datetime.date) -> int:
    """0 = Sunday … 6 = Saturday."""
    return day.isoweekday() % 7


def _step(level: TargetLevel, delta: int) -> TargetLevel:
    index = max(0, min(len(_LEVELS) - 1, _LEVELS.index(level) + delta))
    return _LEVELS[index]


def _cap(level: TargetLevel, ceiling: TargetLevel) -> TargetLevel:
    return _LEVELS[min(_LEVELS.index(level), _LEVELS.index(ceiling))]


def _slot_fatigue(slot: DaySlot, fatigue: FatigueAnalysis) -> float:
    return fatigue.pattern_fatigue(fatigue_key_for_pattern(slot.pattern))


def base_targets(readiness: ReadinessAnalysis,
                 block_type: BlockType) -> tuple[TargetLevel, TargetLevel, ConditioningTarget]:
    """Week-wide volume / intensity / conditioning targets before per-day rules."""
    volume = _READINESS_TO_LEVEL[readiness.category]
    intensity = _READINESS_TO_LEVEL[readiness.category]
    conditioning = _READINESS_TO_CONDITIONING[readiness.category]

    if block_type == BlockType.DELOAD:
        volume = _step(volume, -1)
        intensity = _step(intensity, -1)
    elif block_type == BlockType.ACCUMULATION:
        volume = _step(volume, +1)
        intensity = _cap(intensity, TargetLevel.MEDIUM)
    elif block_type == BlockType.INTENSIFICATION:
        intensity = _step(intensity, +1)
        volume = _cap(volume, TargetLevel.MEDIUM)
    return volume, intensity, conditioning


def order_slots(fatigue: FatigueAnalysis, training_days_per_week: int) -> list[DaySlot]:
    """Core patterns fatigue-ascending with protected ones last, plus extra days."""
    ordered = sorted(CORE_SLOTS, key=lambda s: (_slot_fatigue(s, fatigue) >= PROTECTED_AT, _slot_fatigue(s, fatigue)))
    if training_days_per_week > 4:
        ordered.append(ENGINE_SLOT)
    if training_days_per_week > 5:
        ordered.append(HYBRID_SLOT)
    return ordered


def _assign_slots(ordered: list[DaySlot], day_count: int, fatigue: FatigueAnalysis) -> list[DaySlot]:
    assigned: list[DaySlot] = []
    for index in range(day_count):
        slot = ordered[index % len(ordered)]
        if _slot_fatigue(slot, fatigue) >= PROTECTED_AT and slot in assigned:
            slot = _substitute(slot, assigned, fatigue)
        assigned.append(slot)
    return assigned


def _substitute(slot: DaySlot, assigned: list[DaySlot], fatigue: FatigueAnalysis) -> DaySlot:
    unprotected = [s for s in CORE_SLOTS if _slot_fatigue(s, fatigue) < PROTECTED_AT]
    for candidate in unprotected:
        if candidate not in assigned:
            return candidate
    if unprotected:
        return unprotected[0]
    # Everything is protected: a repeat cannot be avoided, fall back to a conditioning day.
    return ENGINE_SLOT


class _DayTargets(NamedTuple):
    volume: TargetLevel
    intensity: TargetLevel
    conditioning: ConditioningTarget
    protected: bool


def _adjust_for_fatigue(pattern_fatigue: float, slot: DaySlot, day_index: int, base_volume: TargetLevel,
                        base_intensity: TargetLevel, base_conditioning: ConditioningTarget, block_type: BlockType,
                        readiness: ReadinessAnalysis, ) -> _DayTargets:
    volume, intensity = base_volume, base_intensity
    protected = pattern_fatigue >= PROTECTED_AT

    if pattern_fatigue >= FORCE_LOW_VOLUME_AT:
        volume = TargetLevel.LOW
    if pattern_fatigue >= FORCE_LOW_INTENSITY_AT:
        intensity = TargetLevel.LOW

    # Block-type nudges
    if block_type == BlockType.ACCUMULATION and not protected:
        if base_volume == TargetLevel.HIGH and pattern_fatigue < FORCE_LOW_VOLUME_AT:
            volume = TargetLevel.HIGH if day_index < ACCUMULATION_HIGH_VOLUME_DAYS else TargetLevel.MEDIUM
        intensity = _cap(intensity, TargetLevel.MEDIUM)
    elif block_type == BlockType.INTENSIFICATION and not protected:
        if base_intensity == TargetLevel.HIGH and pattern_fatigue < FORCE_LOW_INTENSITY_AT:
            intensity = TargetLevel.HIGH if day_index < INTENSIFICATION_HIGH_INTENSITY_DAYS else TargetLevel.MEDIUM
        volume = _cap(volume, TargetLevel.MEDIUM)
    elif block_type == BlockType.DELOAD:
        if protected or pattern_fatigue >= FORCE_LOW_VOLUME_AT:
            volume = TargetLevel.LOW
        elif day_index == 0 and base_volume == TargetLevel.MEDIUM:
            volume = TargetLevel.MEDIUM
        else:
            volume = TargetLevel.LOW
        intensity = TargetLevel.LOW

    # Fatigue floors win over the nudges
    if pattern_fatigue >= FORCE_LOW_VOLUME_AT:
        volume = TargetLevel.LOW
    if pattern_fatigue >= FORCE_LOW_INTENSITY_AT:
        intensity = TargetLevel.LOW

    fresh = (pattern_fatigue < FRESH_BELOW and readiness.category == ReadinessCategory.HIGH and
             block_type != BlockType.DELOAD and not protected)
    if fresh:
        if block_type == BlockType.ACCUMULATION and volume == TargetLevel.MEDIUM:
            volume = TargetLevel.HIGH
        elif block_type == BlockType.INTENSIFICATION and intensity == TargetLevel.MEDIUM:
            intensity = TargetLevel.HIGH

    conditioning = ConditioningTarget.INTENSITY if slot.pattern == MovementPattern.ENGINE else base_conditioning
    if protected:
        conditioning = ConditioningTarget.LIGHT

    return _DayTargets(volume, intensity, conditioning, protected)


def _break_repetition(days: list[WeeklyDayStructure]) -> list[WeeklyDayStructure]:
    result: list[WeeklyDayStructure] = []
    for day in days:
        previous = result[-1] if result else None
        if (previous is not None and previous.main_movement_pattern == day.main_movement_pattern and
                previous.volume_target == TargetLevel.HIGH and day.volume_target == TargetLevel.HIGH):
            day = day.model_copy(update={"volume_target": TargetLevel.MEDIUM})
        result.append(day)
    return result


def _conservative_override(days: list[WeeklyDayStructure]) -> list[WeeklyDayStructure]:
    result = []
    for day in days:
        conditioning = (ConditioningTarget.MIXED if day.conditioning_target == ConditioningTarget.INTENSITY else
                        ConditioningTarget.LIGHT)
        result.append(day.model_copy(update={"volume_target": TargetLevel.LOW, "intensity_target": TargetLevel.LOW,
                                             "conditioning_target": conditioning, }))
    return result


# ======================================================================
# Public entry point
# ======================================================================


def build_weekly_structure(readiness: ReadinessAnalysis, fatigue: FatigueAnalysis, training_days_per_week: int,
                           block_type: BlockType, week_start: Optional[datetime.date] = None, ) -> WeeklyStructure:
    """Build the :class:`WeeklyStructure` for one ISO week.

    ``week_start`` defaults to the current week; any date is normalized to
    its Monday.
    """
    monday = week_start_for(week_start or datetime.date.today())
    base_volume, base_intensity, base_conditioning = base_targets(readiness, block_type)

    day_count = max(0, min(training_days_per_week, MAX_GENERATED_DAYS))
    slots = _assign_slots(order_slots(fatigue, training_days_per_week), day_count, fatigue)

    days: list[WeeklyDayStructure] = []
    for index, slot in enumerate(slots):
        date = monday + datetime.timedelta(days=index)
        pattern_fatigue = _slot_fatigue(slot, fatigue)
        targets = _adjust_for_fatigue(pattern_fatigue, slot, index, base_volume, base_intensity, base_conditioning,
                                      block_type, readiness, )
        days.append(WeeklyDayStructure(date=date, day_of_week=day_of_week(date), main_movement_pattern=slot.pattern,
                                       main_lift_category=slot.label, volume_target=targets.volume,
                                       intensity_target=targets.intensity, conditioning_target=targets.conditioning,
                                       block_type=block_type, fatigue_protected=targets.protected, ))

    days = _break_repetition(days)

    if block_type == BlockType.DELOAD and fatigue.acwr_zone == AcwrZone.HIGH:
        logger.debug("Deload week with ACWR spike: forcing every day to low volume / low intensity")
        days = _conservative_override(days)

    for day in days:
        logger.debug("%s %-16s vol=%s int=%s cond=%s protected=%s", day.date.isoformat(),
                     day.main_movement_pattern.value, day.volume_target.value, day.intensity_target.value,
                     day.conditioning_target.value, day.fatigue_protected)

    return WeeklyStructure(week_start=monday, days=days, block_type=block_type,
                           metadata=WeeklyStructureMetadata(readiness=readiness, fatigue=fatigue,
                                                            training_days_per_week=training_days_per_week, ), )
