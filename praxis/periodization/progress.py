"""
Progress analytics.

Read-only summaries of the workout history and of the main-lift
progression entries, for progress charts.

Workout level
-------------

* **7-day volume trend** — total volume of the last 7 days (``as_of``
  included) against the 7 days before.  Within ±5 % of the previous week is
  ``same``; fewer than two workouts, or an empty window, is ``same`` too.
* **averages** — mean workout RPE (1 decimal) and rest (whole seconds) over
  workouts that logged one, mean intensity score (whole) and density score
  (1 decimal) over all workouts.
* **pattern / block volume** — per-workout volume of one fatigue key or of
  one block title (case-insensitive, first match per workout), oldest
  first, last 10 workouts that trained it.

Exercise level
--------------

Entries are grouped by ``session_id``; a session takes the date of its
first entry.  The 10 most recent sessions are charted oldest first: mean
weight and mean RPE (1 decimal), summed volume (whole).
"""

from __future__ import annotations

import datetime
from typing import Callable, Sequence

from praxis.catalog.catalog import get_exercise, list_exercises
from praxis.core.numbers import round_half_up
from praxis.periodization.patterns import FATIGUE_KEYS, classify_block, fatigue_key_for_pattern
from praxis.schemas.periodization import MovementPattern
from praxis.schemas.progress import ProgressSummary, TrendPoint, VolumePoint, VolumeTrend
from praxis.schemas.workout import ExerciseHistoryEntry, WorkoutRecord

TREND_WINDOW_DAYS = 7
SAME_VOLUME_THRESHOLD = 0.05
TREND_LENGTH = 10

# ======================================================================
# Workout history
# ======================================================================


def volume_trend(workouts: Sequence[WorkoutRecord], as_of: datetime.date | None = None) -> VolumeTrend:
    if len(workouts) < 2:
        return VolumeTrend.SAME

    as_of = as_of or datetime.date.today()
    recent_start = as_of - datetime.timedelta(days=TREND_WINDOW_DAYS - 1)
    previous_start = recent_start - datetime.timedelta(days=TREND_WINDOW_DAYS)

    recent = [w.total_volume for w in workouts if recent_start <= w.date <= as_of]
    previous = [w.total_volume for w in workouts if previous_start <= w.date < recent_start]
    if not recent or not previous:
        return VolumeTrend.SAME

    recent_volume, previous_volume = sum(recent), sum(previous)
    threshold = previous_volume * SAME_VOLUME_THRESHOLD
    if recent_volume > previous_volume + threshold:
        return VolumeTrend.HIGHER
    if recent_volume < previous_volume - threshold:
        return VolumeTrend.LOWER
    return VolumeTrend.SAME


def average_rpe(workouts: Sequence[WorkoutRecord]) -> float | None:
    values = [w.avg_rpe for w in workouts if w.avg_rpe is not None]
    if not values:
        return None
    return round_half_up(sum(values) / len(values), 1)


def average_rest_sec(workouts: Sequence[WorkoutRecord]) -> float | None:
    values = [w.avg_rest_sec for w in workouts if w.avg_rest_sec is not None]
    if not values:
        return None
    return round_half_up(sum(values) / len(values))


def average_intensity_score(workouts: Sequence[WorkoutRecord]) -> float:
    if not workouts:
        return 0.0
    return round_half_up(sum(w.intensity_score for w in workouts) / len(workouts))


def average_density_score(workouts: Sequence[WorkoutRecord]) -> float:
    if not workouts:
        return 0.0
    return round_half_up(sum(w.density_score for w in workouts) / len(workouts), 1)


def _chronological(workouts: Sequence[WorkoutRecord]) -> list[WorkoutRecord]:
    return sorted(workouts, key=lambda w: (w.date, w.start_time))


def pattern_volume_trend(workouts: Sequence[WorkoutRecord], pattern: MovementPattern | str) -> list[VolumePoint]:
    """Volume of every workout that trained ``pattern``, using the canonical block classifier."""
    key = fatigue_key_for_pattern(pattern)
    if key is None:
        return []

    points = []
    for workout in _chronological(workouts):
        volume = sum(b.volume for b in workout.blocks if classify_block(b) == key)
        if volume > 0:
            points.append(VolumePoint(date=workout.date, volume=volume, start_time=workout.start_time))
    return points[-TREND_LENGTH:]


def block_volume_trend(workouts: Sequence[WorkoutRecord], block_title: str) -> list[VolumePoint]:
    wanted = block_title.lower()
    points = []
    for workout in _chronological(workouts):
        block = next((b for b in workout.blocks if b.title.lower() == wanted), None)
        if block is not None:
            points.append(VolumePoint(date=workout.date, volume=block.volume, start_time=workout.start_time))
    return points[-TREND_LENGTH:]


def summarize_progress(workouts: Sequence[WorkoutRecord], as_of: datetime.date | None = None) -> ProgressSummary:
    return ProgressSummary(workouts=len(workouts), volume_trend=volume_trend(workouts, as_of),
                           avg_rpe=average_rpe(workouts), avg_rest_sec=average_rest_sec(workouts),
                           avg_intensity_score=average_intensity_score(workouts),
                           avg_density_score=average_density_score(workouts),
                           pattern_volume={key: pattern_volume_trend(workouts, key) for key in FATIGUE_KEYS}, )


# ======================================================================
# Exercise history
# ======================================================================


def exercise_name(exercise_id: str) -> str:
    profile = get_exercise(exercise_id)
    return profile.display_name if profile else exercise_id


def unique_exercises(entries: Sequence[ExerciseHistoryEntry]) -> list[str]:
    """Sorted display names of the logged exercises (the id when not in the catalog)."""
    return sorted({exercise_name(e.exercise_id) for e in entries})


def newest_first(entries: Sequence[ExerciseHistoryEntry]) -> list[ExerciseHistoryEntry]:
    return sorted(entries, key=lambda e: (e.date, e.session_id), reverse=True)


def exercise_history(entries: Sequence[ExerciseHistoryEntry], name: str) -> list[ExerciseHistoryEntry]:
    """Entries of the catalog exercise called ``name``, newest first."""
    profile = next((p for p in list_exercises() if p.display_name == name), None)
    if profile is None:
        return []
    return newest_first([e for e in entries if e.exercise_id == profile.exercise_id])


def date_label(date: datetime.date, as_of: datetime.date | None = None) -> str:
    as_of = as_of or datetime.date.today()
    if date == as_of:
        return "Today"
    if date == as_of - datetime.timedelta(days=1):
        return "Yesterday"
    if date > as_of - datetime.timedelta(days=TREND_WINDOW_DAYS):
        return date.strftime("%a")
    return f"{date.strftime('%b')} {date.day}"


def _recent_sessions(entries: Sequence[ExerciseHistoryEntry]) -> list[list[ExerciseHistoryEntry]]:
    sessions: dict[str, list[ExerciseHistoryEntry]] = {}
    for entry in entries:
        sessions.setdefault(entry.session_id, []).append(entry)
    newest = sorted(sessions.values(), key=lambda s: s[0].date, reverse=True)[:TREND_LENGTH]
    return newest[::-1]


def _session_trend(entries: Sequence[ExerciseHistoryEntry], value: Callable[[list[ExerciseHistoryEntry]], float],
                   as_of: datetime.date | None, ) -> list[TrendPoint]:
    return [TrendPoint(date=s[0].date, label=date_label(s[0].date, as_of), value=value(s))
            for s in _recent_sessions(entries)]


def weight_trend(entries: Sequence[ExerciseHistoryEntry], as_of: datetime.date | None = None) -> list[TrendPoint]:
    return _session_trend(entries, lambda s: round_half_up(sum(e.weight for e in s) / len(s), 1), as_of)


def rpe_trend(entries: Sequence[ExerciseHistoryEntry], as_of: datetime.date | None = None) -> list[TrendPoint]:
    return _session_trend(entries, lambda s: round_half_up(sum(e.rpe for e in s) / len(s), 1), as_of)


def volume_trend_for_exercise(entries: Sequence[ExerciseHistoryEntry],
                              as_of: datetime.date | None = None) -> list[TrendPoint]:
    return _session_trend(entries, lambda s: round_half_up(sum(e.volume for e in s)), as_of)
