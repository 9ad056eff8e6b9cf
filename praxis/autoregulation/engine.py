"""
Auto-regulation engine.

Recommends the load of the *next* set from the set just completed.

Algorithm
---------

1. No usable weight → ``next_weight=None`` with an explanatory reason.
2. **Recovery bias** (percent), first match wins:

   =====================================  =========
   recovery ≤ 40                          −5
   recovery ≥ 85 and intensification      +2.5
   recovery ≥ 85 and accumulation         +1.25
   deload week (any recovery)             −5
   otherwise                              0
   =====================================  =========

3. **Difficulty bias**: an explicit flag wins (too easy +2.5, too hard −5);
   otherwise RPE − target RPE: ≤ −2 → +2.5, ≥ +2 → −5, ≤ −1 → +1.25,
   ≥ +1 → −2.5.  Bounded to [−max decrease, +max increase].
4. Total bias = recovery + difficulty, bounded the same way.
5. ``base × (1 + bias/100)``; a final set may rise at most 2.5 %; a deload
   week never rises above the base weight.
6. Floor at the minimum weight, round to the increment.

Every recommendation is either ``None`` or a multiple of the increment at
or above the floor, and in a deload week it never exceeds the base weight.
The reps of the next set are never changed.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from pydantic import BaseModel, Field

from praxis.core.config import settings
from praxis.core.numbers import clamp
from praxis.schemas.autoregulation import (AutoRegContext, AutoRegFlags, AutoRegRecommendation, Difficulty,
                                           SetPerformance, )
from praxis.schemas.periodization import BlockType

logger = logging.getLogger(__name__)

# ======================================================================
# Configuration
# ======================================================================

HIGH_RECOVERY_AT = 85
LOW_RECOVERY_AT = 40
FINAL_SET_MAX_INCREASE_PERCENT = 2.5
SUGGESTION_EPSILON = 0.1

# RPE deviation (actual − target) → percent bias, first match wins.
_RPE_DEVIATION_BIAS: list[tuple[str, float, float]] = [("le", -2.0, 2.5), ("ge", 2.0, -5.0), ("le", -1.0, 1.25),
                                                       ("ge", 1.0, -2.5), ]

_FLAG_BIAS: dict[Difficulty, float] = {Difficulty.TOO_EASY: 2.5, Difficulty.TOO_HARD: -5.0,
                                       Difficulty.ON_TARGET: 0.0, }


class AutoRegRules(BaseModel):
    """Bounds of the auto-regulation engine, injectable for testing."""

    max_increase_percent: float = Field(settings.AUTOREG_MAX_INCREASE_PERCENT, ge=0)
    max_decrease_percent: float = Field(settings.AUTOREG_MAX_DECREASE_PERCENT, ge=0)
    high_recovery_boost: float = Field(settings.AUTOREG_HIGH_RECOVERY_BOOST, ge=0)
    low_recovery_reduction: float = Field(settings.AUTOREG_LOW_RECOVERY_REDUCTION, ge=0)
    min_weight: float = Field(settings.AUTOREG_MIN_WEIGHT, ge=0)
    rounding_increment: float = Field(settings.AUTOREG_ROUNDING_INCREMENT, gt=0)


# Singleton default rules
DEFAULT_RULES = AutoRegRules()


# ======================================================================
# Biases
# ======================================================================


def derive_difficulty(rpe: Optional[float], target_rpe: Optional[float]) -> Difficulty:
    """Difficulty from RPE vs. target; missing data counts as on target."""
    if rpe is None or target_rpe is None:
        return Difficulty.ON_TARGET
    deviation = rpe - target_rpe
    if deviation <= -2:
        return Difficulty.TOO_EASY
    if deviation >= 2:
        return Difficulty.TOO_HARD
    return Difficulty.ON_TARGET


def _bound(bias: float, rules: AutoRegRules) -> float:
    return clamp(bias, -rules.max_decrease_percent, rules.max_increase_percent)


def recovery_bias(context: AutoRegContext, rules: AutoRegRules = DEFAULT_RULES) -> float:
    score = context.recovery_score
    if score is not None and score <= LOW_RECOVERY_AT:
        return -rules.low_recovery_reduction
    if score is not None and score >= HIGH_RECOVERY_AT:
        if context.block_type == BlockType.INTENSIFICATION:
            return rules.high_recovery_boost
        if context.block_type == BlockType.ACCUMULATION:
            return rules.high_recovery_boost / 2
    if context.block_type == BlockType.DELOAD:
        return -rules.low_recovery_reduction
    return 0.0


def difficulty_bias(performance: SetPerformance, context: AutoRegContext,
                    rules: AutoRegRules = DEFAULT_RULES) -> float:
    if performance.difficulty is not None:
        return _bound(_FLAG_BIAS[performance.difficulty], rules)
    if performance.rpe is None or context.target_rpe is None:
        return 0.0
    deviation = performance.rpe - context.target_rpe
    for op, threshold, bias in _RPE_DEVIATION_BIAS:
        if (op == "le" and deviation <= threshold) or (op == "ge" and deviation >= threshold):
            return _bound(bias, rules)
    return 0.0


# ======================================================================
# Weight
# ======================================================================


def _round_up_to(value: float, increment: float) -> float:
    return round(math.ceil(value / increment - 1e-9) * increment, 6)


def _round_down_to(value: float, increment: float) -> float:
    return round(math.floor(value / increment + 1e-9) * increment, 6)


def _round_nearest(value: float, increment: float) -> float:
    return round(math.floor(value / increment + 0.5) * increment, 6)


def _format_reason(performance: SetPerformance, context: AutoRegContext, difficulty: Difficulty, total: float,
                   next_weight: Optional[float], ) -> str:
    parts = [f"Weight: {performance.weight:g}"]
    if performance.rpe is not None:
        target = f" (target {context.target_rpe:g})" if context.target_rpe is not None else ""
        parts.append(f"RPE: {performance.rpe:g}{target}")
    parts.append(f"Difficulty: {difficulty.value}")
    if context.recovery_score is not None:
        parts.append(f"Recovery: {context.recovery_score:g}")
    if context.block_type is not None:
        parts.append(f"Block: {context.block_type.value}")
    parts.append(f"Adjustment: {total:+.2f}%")
    parts.append(f"→ Suggested: {next_weight:g}" if next_weight is not None else "→ No suggestion")
    return " | ".join(parts)


def recommend_next_set(performance: SetPerformance, context: AutoRegContext,
                       rules: AutoRegRules = DEFAULT_RULES) -> AutoRegRecommendation:
    """Bounded load recommendation for the set after ``performance``."""
    base = performance.weight
    if base is None or base <= 0:
        return AutoRegRecommendation(next_weight=None, reason="Insufficient data: no weight recorded for this set")

    difficulty = performance.difficulty or derive_difficulty(performance.rpe, context.target_rpe)
    rec_bias = recovery_bias(context, rules)
    diff_bias = difficulty_bias(performance, context, rules)
    total = _bound(rec_bias + diff_bias, rules)
    deload = context.block_type == BlockType.DELOAD

    adjusted = base * (1 + total / 100)
    if context.is_final_set and total > 0:
        adjusted = min(adjusted, base * (1 + FINAL_SET_MAX_INCREASE_PERCENT / 100))
    if deload and total > 0:
        adjusted = base

    increment = rules.rounding_increment
    next_weight: Optional[float] = _round_nearest(max(rules.min_weight, adjusted), increment)
    if next_weight < rules.min_weight:
        next_weight = _round_up_to(rules.min_weight, increment)

    reason_override = None
    if deload and next_weight > base:
        next_weight = _round_down_to(base, increment)
        if next_weight < rules.min_weight:
            next_weight = None
            reason_override = "Deload: base weight is below the minimum load, no increase allowed"

    score = context.recovery_score
    flags = AutoRegFlags(performance_boost=total > 0 and (score or 0) >= HIGH_RECOVERY_AT,
                         fatigue_detected=total < 0 and difficulty == Difficulty.TOO_HARD,
                         auto_deload_suggested=(score is not None and score < LOW_RECOVERY_AT) or (
                                 deload and total < 0), )

    reason = _format_reason(performance, context, difficulty, total, next_weight)
    if reason_override:
        reason = f"{reason} | {reason_override}"
    logger.debug("Auto-reg: %s", reason)

    return AutoRegRecommendation(next_weight=next_weight, next_reps=None, reason=reason, flags=flags,
                                 recovery_bias=rec_bias, difficulty_bias=diff_bias, total_bias=total, )


def should_suggest(current_weight: Optional[float], recommendation: AutoRegRecommendation) -> bool:
    """Only surface a suggestion that actually changes the next set's weight."""
    if recommendation.next_weight is None or recommendation.next_weight <= 0:
        return False
    return current_weight is None or abs(current_weight - recommendation.next_weight) > SUGGESTION_EPSILON
