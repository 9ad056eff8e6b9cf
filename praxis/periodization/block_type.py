"""
Block-type inferrer.

Picks the week's periodization phase.  Safety overrides are evaluated in
strict priority order before the 4-week cycle:

1. ACWR zone ``high`` or raw ratio ≥ 1.2 → deload
2. readiness score < 40                  → deload
3. zone ``under`` and readiness ``high`` → accumulation on even ISO weeks,
   intensification on odd ones
4. ISO week mod 4 → accumulation, accumulation, intensification, deload
"""

from __future__ import annotations

import datetime
import logging

from praxis.schemas.periodization import (AcwrZone, BlockType, FatigueAnalysis, ReadinessAnalysis,
                                          ReadinessCategory, )

logger = logging.getLogger(__name__)

HARD_DELOAD_RATIO = 1.2
LOW_READINESS_SCORE = 40

_CYCLE: dict[int, BlockType] = {0: BlockType.ACCUMULATION, 1: BlockType.ACCUMULATION, 2: BlockType.INTENSIFICATION,
                                3: BlockType.DELOAD, }


def iso_week_number(day: datetime.date) -> int:
    return day.isocalendar()[1]


def infer_block_type(readiness: ReadinessAnalysis, fatigue: FatigueAnalysis,
                     week_start: datetime.date | None = None, ) -> BlockType:
    week = iso_week_number(week_start or datetime.date.today())

    if fatigue.acwr_zone == AcwrZone.HIGH or fatigue.acwr_value >= HARD_DELOAD_RATIO:
        logger.debug("Block type: deload (ACWR %.2f, zone %s)", fatigue.acwr_value, fatigue.acwr_zone.value)
        return BlockType.DELOAD

    if readiness.score < LOW_READINESS_SCORE:
        logger.debug("Block type: deload (readiness %.0f)", readiness.score)
        return BlockType.DELOAD

    if fatigue.acwr_zone == AcwrZone.UNDER and readiness.category == ReadinessCategory.HIGH:
        return BlockType.ACCUMULATION if week % 2 == 0 else BlockType.INTENSIFICATION

    return _CYCLE[week % 4]
