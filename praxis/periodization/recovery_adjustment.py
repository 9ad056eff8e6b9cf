"""
Session-start recovery adjustment.

Same-day correction of a generated workout, based on the recovery score at
the moment the athlete presses "start".  Bands are mutually exclusive:

=============  ==========  =====================================================
score          level       change to every strength main lift
=============  ==========  =====================================================
< 40           under       drop the last set (≥ 1 kept), target RPE −2
[40, 70)       moderate    target RPE −1
[70, 80]       moderate    none ("Normal recovery")
> 80           high        add a back-off set (RPE last − 2), then RPE +1
=============  ==========  =====================================================

Target RPE always stays within [5, 10].  The input blocks are never
modified: adjusted blocks are rebuilt with ``model_copy(update=...)``, so
the canonical plan day keeps its original prescription.
"""

from __future__ import annotations

from typing import Callable, Sequence

from praxis.core.numbers import clamp
from praxis.schemas.plan import SetPrescription, StrengthBlock, WorkoutBlock
from praxis.schemas.session import AdjustmentMetadata

MIN_RPE = 5.0
MAX_RPE = 10.0

LOW_RECOVERY_BELOW = 40
MODERATE_RECOVERY_BELOW = 70
HIGH_RECOVERY_ABOVE = 80

SetsTransform = Callable[[list[SetPrescription]], list[SetPrescription]]


def _shift_rpe(sets: list[SetPrescription], delta: float) -> list[SetPrescription]:
    shifted = []
    for s in sets:
        if s.target_rpe is None:
            shifted.append(s.model_copy())
        else:
            shifted.append(s.model_copy(update={"target_rpe": clamp(s.target_rpe + delta, MIN_RPE, MAX_RPE)}))
    return shifted


def _low_recovery(sets: list[SetPrescription]) -> list[SetPrescription]:
    kept = sets[:-1] if len(sets) > 1 else sets
    return _shift_rpe(kept, -2)


def _moderate_recovery(sets: list[SetPrescription]) -> list[SetPrescription]:
    return _shift_rpe(sets, -1)


def _high_recovery(sets: list[SetPrescription]) -> list[SetPrescription]:
    last = sets[-1]
    back_off_rpe = None if last.target_rpe is None else max(MIN_RPE, last.target_rpe - 2)
    # The top set's absolute load does not carry over to the back-off set
    back_off = last.model_copy(update={"target_rpe": back_off_rpe, "target_weight": None})
    return _shift_rpe([*sets, back_off], +1)


def _band(score: float) -> tuple[AdjustmentMetadata, SetsTransform | None]:
    if score < LOW_RECOVERY_BELOW:
        return AdjustmentMetadata(level="under", reason="Low recovery"), _low_recovery
    if score < MODERATE_RECOVERY_BELOW:
        return AdjustmentMetadata(level="moderate", reason="Moderate recovery"), _moderate_recovery
    if score > HIGH_RECOVERY_ABOVE:
        return AdjustmentMetadata(level="high", reason="High recovery — performance boost"), _high_recovery
    return AdjustmentMetadata(level="moderate", reason="Normal recovery"), None


def apply_recovery_adjustment(recovery_score: float,
                              blocks: Sequence[WorkoutBlock]) -> tuple[list[WorkoutBlock], AdjustmentMetadata]:
    """Return adjusted copies of ``blocks`` plus the adjustment metadata."""
    metadata, transform = _band(recovery_score)

    adjusted: list[WorkoutBlock] = []
    for block in blocks:
        if transform is None or not isinstance(block, StrengthBlock) or block.strength_main is None:
            adjusted.append(block.model_copy(deep=True))
            continue
        main = block.strength_main
        new_main = main.model_copy(update={"sets": transform(list(main.sets))})
        adjusted.append(block.model_copy(update={"strength_main": new_main}))
    return adjusted, metadata
