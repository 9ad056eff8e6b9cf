"""
Recovery / load analytics.

Turns the workout history into a single 0–100 **recovery score**
(100 = fully fresh) plus the fatigue breakdown behind it.

Components (all 0–100, higher = more fatigue)
---------------------------------------------

1. **ACWR fatigue score** — acute load (last 7 days, linear weights 8→2)
   over chronic load (days 7–34, exponential decay ``exp(-d/7)``), ratio
   clamped to [0.5, 2.5] and rescaled to 0–100.  A chronic load below 1 is
   "no baseline" and scores 0.
2. **Movement-pattern fatigue** — per squat / hinge / push / pull, the
   three most recent workouts that trained the pattern.
3. **Intensity fatigue** — RPE and density of the three most recent
   workouts.
4. **Rest fatigue** — average rest between completed sets of the three
   most recent workouts; 60 s → 0, 180 s → 100.

Combination::

    recovery = 100 − (0.3·acwr + 0.3·avg_pattern + 0.2·intensity + 0.2·rest)

Loads are normalized against an assumed maximum weekly volume of 50 000.
Every function takes an explicit ``as_of`` date where the window depends on
"today", so results are reproducible.

All functions are pure: the history is read, never mutated.
"""

from __future__ import annotations

import datetime
import logging
import math
from typing import Iterable, Sequence

from praxis.core.numbers import clamp, round_half_up
from praxis.periodization.patterns import FATIGUE_KEYS, classify_block
from praxis.schemas.recovery import PatternFatigue, RecoveryBreakdown, RecoveryScore
from praxis.schemas.workout import WorkoutRecord

logger = logging.getLogger(__name__)

# ======================================================================
# Constants
# ======================================================================

MAX_VOLUME = 50_000.0
ACUTE_WINDOW_DAYS = 7
CHRONIC_WINDOW: tuple[int, int] = (7, 34)
CHRONIC_DECAY_DAYS = 7.0
RECENT_WORKOUTS = 3
PATTERN_VOLUME_REFERENCE = 10_000.0
REST_FATIGUE_RANGE: tuple[float, float] = (60.0, 180.0)

_WEIGHTS: dict[str, float] = {"acwr": 0.3, "pattern": 0.3, "intensity": 0.2, "rest": 0.2}


# ======================================================================
# Helpers
# ======================================================================


def _days_ago(record: WorkoutRecord, as_of: datetime.date) -> int:
    return (as_of - record.date).days


def _normalize_volume(mean_volume: float) -> float:
    return clamp(mean_volume / MAX_VOLUME * 100, 0.0, 100.0)


def _weighted_mean(pairs: Iterable[tuple[float, float]]) -> float | None:
    total = 0.0
    weight_sum = 0.0
    for value, weight in pairs:
        total += value * weight
        weight_sum += weight
    if weight_sum <= 0:
        return None
    return total / weight_sum


def most_recent(history: Sequence[WorkoutRecord], limit: int | None = RECENT_WORKOUTS) -> list[WorkoutRecord]:
    """History sorted newest first (date, then start time), optionally truncated."""
    ordered = sorted(history, key=lambda r: (r.date, r.start_time), reverse=True)
    return ordered if limit is None else ordered[:limit]


# ======================================================================
# Acute / chronic load
# ======================================================================


def calculate_acute_load(history: Sequence[WorkoutRecord], as_of: datetime.date | None = None) -> float:
    """Linearly weighted mean volume of the last 7 days (today weighs 8, 6 days ago 2)."""
    as_of = as_of or datetime.date.today()
    pairs = []
    for record in history:
        days = _days_ago(record, as_of)
        if 0 <= days < ACUTE_WINDOW_DAYS:
            pairs.append((record.total_volume, float(8 - days)))
    mean = _weighted_mean(pairs)
    return 0.0 if mean is None else _normalize_volume(mean)


def calculate_chronic_load(history: Sequence[WorkoutRecord], as_of: datetime.date | None = None) -> float:
    """Exponentially decayed mean volume of days 7–34 ago (acute window excluded)."""
    as_of = as_of or datetime.date.today()
    start, end = CHRONIC_WINDOW
    pairs = []
    for record in history:
        days = _days_ago(record, as_of)
        if start <= days <= end:
            pairs.append((record.total_volume, math.exp(-days / CHRONIC_DECAY_DAYS)))
    mean = _weighted_mean(pairs)
    return 0.0 if mean is None else _normalize_volume(mean)


def calculate_acwr(acute: float, chronic: float) -> float:
    """ACWR *fatigue score* (0–100).  0.5 → 0, 1.0 → 25, 2.5 → 100."""
    if chronic < 1:
        return 0.0
    ratio = clamp(acute / chronic, 0.5, 2.5)
    return clamp((ratio - 0.5) / 2.0 * 100, 0.0, 100.0)


# ======================================================================
# Pattern / intensity / rest fatigue
# ======================================================================


def _pattern_volume(record: WorkoutRecord, key: str) -> tuple[bool, float]:
    found = False
    volume = 0.0
    for block in record.blocks:
        if classify_block(block) == key:
            found = True
            volume += block.volume
    return found, volume


def calculate_movement_pattern_fatigue(history: Sequence[WorkoutRecord]) -> PatternFatigue:
    scores: dict[str, float] = {}
    ordered = most_recent(history, limit=None)
    for key in FATIGUE_KEYS:
        per_workout = []
        for record in ordered:
            found, volume = _pattern_volume(record, key)
            if not found:
                continue
            volume_score = min(50.0, volume / PATTERN_VOLUME_REFERENCE * 50)
            per_workout.append(volume_score + record.intensity_score / 100 * 50)
            if len(per_workout) == RECENT_WORKOUTS:
                break
        scores[key] = clamp(sum(per_workout) / len(per_workout), 0.0, 100.0) if per_workout else 0.0

    average = sum(scores.values()) / len(FATIGUE_KEYS)
    return PatternFatigue(average=average, **scores)


def calculate_intensity_fatigue(history: Sequence[WorkoutRecord]) -> float:
    recent = most_recent(history)
    if not recent:
        return 0.0
    total = 0.0
    for record in recent:
        rpe_part = (record.avg_rpe or 0.0) / 10 * 50
        density_part = record.density_score / 100 * 50
        total += rpe_part + density_part
    return clamp(total / len(recent), 0.0, 100.0)


def calculate_rest_fatigue(history: Sequence[WorkoutRecord]) -> float:
    rests = [s.rest_time_ms / 1000 for record in most_recent(history) for block in record.blocks for s in block.sets if
             s.completed and s.rest_time_ms is not None]
    if not rests:
        return 0.0
    avg_rest = sum(rests) / len(rests)
    low, high = REST_FATIGUE_RANGE
    return clamp((avg_rest - low) / (high - low) * 100, 0.0, 100.0)


# ======================================================================
# Public entry point
# ======================================================================


def calculate_recovery_score(history: Sequence[WorkoutRecord], as_of: datetime.date | None = None) -> RecoveryScore:
    """Combine all fatigue components into a 0–100 recovery score.

    An empty history is a fully fresh athlete: score 100, zero breakdown.
    """
    if not history:
        return RecoveryScore(score=100, breakdown=RecoveryBreakdown())

    as_of = as_of or datetime.date.today()
    acwr = calculate_acwr(calculate_acute_load(history, as_of), calculate_chronic_load(history, as_of))
    patterns = calculate_movement_pattern_fatigue(history)
    intensity = calculate_intensity_fatigue(history)
    rest = calculate_rest_fatigue(history)

    fatigue = (_WEIGHTS["acwr"] * acwr + _WEIGHTS["pattern"] * patterns.average + _WEIGHTS["intensity"] * intensity +
               _WEIGHTS["rest"] * rest)
    score = int(clamp(round_half_up(100 - fatigue), 0, 100))

    logger.debug("Recovery score %s (acwr=%.1f pattern=%.1f intensity=%.1f rest=%.1f)", score, acwr,
                 patterns.average, intensity, rest)
    return RecoveryScore(score=score,
                         breakdown=RecoveryBreakdown(acwr=acwr, movement_pattern_fatigue=patterns,
                                                     intensity_fatigue=intensity, rest_fatigue=rest, ), )
