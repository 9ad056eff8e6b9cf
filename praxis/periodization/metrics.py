"""
Workout metrics.

Converts a finished live session into a :class:`WorkoutRecord` plus the
per-set progression entries of its main lifts.

* block volume   = Σ weight × prescribed reps over completed, loaded sets
* block avg RPE  = mean RPE of completed sets (1 decimal)
* block avg rest = mean rest of completed sets with a rest time (whole s)
* density        = total volume / duration (volume per minute, 1 decimal)
* intensity      = (avg RPE / 10, or 0.5 without RPE) × density × 100
"""

from __future__ import annotations

import datetime
import uuid
from typing import Optional, Sequence

from praxis.core.numbers import round_half_up
from praxis.periodization.patterns import fatigue_key_for_pattern
from praxis.schemas.plan import AccessoryBlock, StrengthBlock, WorkoutBlock
from praxis.schemas.session import LiveSessionState, SessionSet
from praxis.schemas.workout import CompletedBlock, ExerciseHistoryEntry, SetLog, WorkoutBlockType, WorkoutRecord


def calculate_block_volume(sets: Sequence[SessionSet | SetLog], prescribed_reps: Optional[int]) -> float:
    reps = prescribed_reps or 0
    return sum(s.weight * reps for s in sets if s.completed and s.weight is not None and s.weight > 0)


def calculate_block_avg_rpe(sets: Sequence[SessionSet | SetLog]) -> Optional[float]:
    values = [s.rpe for s in sets if s.completed and s.rpe is not None]
    if not values:
        return None
    return round_half_up(sum(values) / len(values), 1)


def calculate_block_avg_rest(sets: Sequence[SessionSet | SetLog]) -> Optional[float]:
    values = [s.rest_time_ms / 1000 for s in sets if s.completed and s.rest_time_ms]
    if not values:
        return None
    return round_half_up(sum(values) / len(values))


def calculate_workout_totals(blocks: Sequence[CompletedBlock]) -> tuple[float, Optional[float], Optional[float]]:
    """``(total_volume, avg_rpe, avg_rest_sec)``: averages are means of block averages."""
    total_volume = sum(b.volume for b in blocks)
    rpes = [b.avg_rpe for b in blocks if b.avg_rpe is not None]
    rests = [b.avg_rest_sec for b in blocks if b.avg_rest_sec is not None]
    avg_rpe = round_half_up(sum(rpes) / len(rpes), 1) if rpes else None
    avg_rest = round_half_up(sum(rests) / len(rests)) if rests else None
    return total_volume, avg_rpe, avg_rest


def calculate_density_score(total_volume: float, duration_min: float) -> float:
    if duration_min <= 0:
        return 0.0
    return round_half_up(total_volume / duration_min, 1)


def calculate_intensity_score(total_volume: float, duration_min: float, avg_rpe: Optional[float]) -> float:
    if duration_min <= 0:
        return 0.0
    rpe_factor = avg_rpe / 10 if avg_rpe else 0.5
    return round_half_up(rpe_factor * (total_volume / duration_min) * 100)


# ======================================================================
# Session → record
# ======================================================================


def _prescription(block: WorkoutBlock) -> tuple[int, Optional[int], Optional[float]]:
    if isinstance(block, StrengthBlock) and block.strength_main is not None:
        sets = block.strength_main.sets
        return len(sets), sets[0].target_reps, sets[0].target_rpe
    if isinstance(block, AccessoryBlock) and block.accessory:
        sets = block.accessory[0].sets
        return len(sets), sets[0].target_reps, None
    return 0, None, None


def _completed_block(block: WorkoutBlock, sets: list[SessionSet]) -> CompletedBlock:
    prescribed_sets, prescribed_reps, target_rpe = _prescription(block)
    pattern = None
    if isinstance(block, StrengthBlock) and block.movement_pattern is not None:
        pattern = fatigue_key_for_pattern(block.movement_pattern)
    logs = [SetLog(completed=s.completed, weight=s.weight, rpe=s.rpe, rest_time_ms=s.rest_time_ms) for s in sets]
    return CompletedBlock(block_id=block.id, title=block.title, type=WorkoutBlockType(block.type),
                          movement_pattern=pattern, prescribed_sets=prescribed_sets, prescribed_reps=prescribed_reps,
                          target_rpe=target_rpe, sets=logs, volume=calculate_block_volume(sets, prescribed_reps),
                          avg_rpe=calculate_block_avg_rpe(sets), avg_rest_sec=calculate_block_avg_rest(sets), )


def build_workout_record(state: LiveSessionState, end_time: int, record_date: datetime.date,
                         record_id: Optional[str] = None, ) -> tuple[WorkoutRecord, list[ExerciseHistoryEntry]]:
    """Build the immutable record of a finished session and its progression entries."""
    duration_min = round_half_up(max(0, end_time - state.start_time) / 60000)
    blocks = [_completed_block(block, state.completed_sets.get(block.id, [])) for block in state.blocks]
    total_volume, avg_rpe, avg_rest = calculate_workout_totals(blocks)

    record = WorkoutRecord(id=record_id or f"workout-{uuid.uuid4().hex[:12]}", plan_day_id=state.plan_day_id,
                           date=record_date, start_time=state.start_time, end_time=end_time,
                           duration_min=duration_min, blocks=blocks, total_volume=total_volume, avg_rpe=avg_rpe,
                           avg_rest_sec=avg_rest, density_score=calculate_density_score(total_volume, duration_min),
                           intensity_score=calculate_intensity_score(total_volume, duration_min, avg_rpe), )

    entries: list[ExerciseHistoryEntry] = []
    for block, summary in zip(state.blocks, blocks):
        if not isinstance(block, StrengthBlock) or block.strength_main is None:
            continue
        reps = summary.prescribed_reps or 0
        for s in summary.sets:
            if s.completed and s.weight is not None and s.weight > 0 and s.rpe is not None:
                entries.append(ExerciseHistoryEntry(date=record.date, exercise_id=block.strength_main.exercise_id,
                                                    block_id=block.id, session_id=record.id, weight=s.weight,
                                                    reps=reps, sets=1, rpe=s.rpe, volume=s.weight * reps, ))
    return record, entries
