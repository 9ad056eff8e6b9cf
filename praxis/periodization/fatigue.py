"""
Fatigue analyzer.

Wraps the load analytics into one :class:`FatigueAnalysis`: per-pattern
fatigue (0–100) plus the *raw* acute:chronic ratio and its zone.

The zone works on the raw ratio, not on the 0–100 ACWR fatigue score::

    ratio < 0.8          under
    0.8 ≤ ratio ≤ 1.2    optimal
    ratio > 1.2          high

A chronic load of exactly 0 means there is no baseline yet: the ratio is
reported as 0 and the zone as optimal, so a brand-new athlete is not
flagged as under-trained.
"""

from __future__ import annotations

import datetime
import logging
import math
from typing import Sequence

from praxis.periodization.load import (calculate_acute_load, calculate_chronic_load,
                                       calculate_movement_pattern_fatigue, )
from praxis.schemas.periodization import AcwrZone, FatigueAnalysis
from praxis.schemas.workout import WorkoutRecord

logger = logging.getLogger(__name__)

ZONE_UNDER_BELOW = 0.8
ZONE_HIGH_ABOVE = 1.2


def classify_acwr_zone(value: float) -> AcwrZone:
    if not math.isfinite(value) or value <= 0:
        return AcwrZone.UNDER
    if value < ZONE_UNDER_BELOW:
        return AcwrZone.UNDER
    if value <= ZONE_HIGH_ABOVE:
        return AcwrZone.OPTIMAL
    return AcwrZone.HIGH


def analyze_fatigue(history: Sequence[WorkoutRecord], as_of: datetime.date | None = None) -> FatigueAnalysis:
    if not history:
        return FatigueAnalysis()

    as_of = as_of or datetime.date.today()
    patterns = calculate_movement_pattern_fatigue(history)
    acute = calculate_acute_load(history, as_of)
    chronic = calculate_chronic_load(history, as_of)

    if chronic == 0:
        value, zone = 0.0, AcwrZone.OPTIMAL
    else:
        value = acute / chronic
        zone = classify_acwr_zone(value)

    logger.debug("Fatigue: acute=%.2f chronic=%.2f ratio=%.2f zone=%s", acute, chronic, value, zone.value)
    return FatigueAnalysis(squat=patterns.squat, hinge=patterns.hinge, push=patterns.push, pull=patterns.pull,
                           acwr_zone=zone, acwr_value=value if math.isfinite(value) else 0.0, )
