"""Tests for the block-type inferrer.

Fixed Mondays pin the ISO week so the 4-week cycle is deterministic:
2026-01-05 is ISO week 2, 2026-01-12 week 3, 2026-01-19 week 4 and
2026-01-26 week 5.
"""

import datetime

import pytest

from praxis.periodization.block_type import infer_block_type, iso_week_number
from praxis.periodization.readiness import analyze_readiness
from praxis.schemas.periodization import AcwrZone, BlockType, FatigueAnalysis

WEEK_2 = datetime.date(2026, 1, 5)
WEEK_3 = datetime.date(2026, 1, 12)
WEEK_4 = datetime.date(2026, 1, 19)
WEEK_5 = datetime.date(2026, 1, 26)


class TestIsoWeek:
    @pytest.mark.parametrize("day, week", [(WEEK_2, 2), (WEEK_3, 3), (WEEK_4, 4), (WEEK_5, 5)])
    def test_week_numbers(self, day, week):
        assert iso_week_number(day) == week


class TestSafetyOverrides:
    def test_high_zone_forces_deload(self):
        fatigue = FatigueAnalysis(acwr_zone=AcwrZone.HIGH, acwr_value=1.5)
        assert infer_block_type(analyze_readiness(95), fatigue, WEEK_4) == BlockType.DELOAD

    def test_raw_ratio_forces_deload_even_if_zone_optimal(self):
        fatigue = FatigueAnalysis(acwr_zone=AcwrZone.OPTIMAL, acwr_value=1.2)
        assert infer_block_type(analyze_readiness(95), fatigue, WEEK_4) == BlockType.DELOAD

    def test_low_readiness_forces_deload(self):
        assert infer_block_type(analyze_readiness(39), FatigueAnalysis(), WEEK_4) == BlockType.DELOAD

    def test_readiness_40_is_not_a_deload(self):
        assert infer_block_type(analyze_readiness(40), FatigueAnalysis(), WEEK_4) == BlockType.ACCUMULATION

    @pytest.mark.parametrize(
        "week_start, expected",
        [(WEEK_4, BlockType.ACCUMULATION), (WEEK_5, BlockType.INTENSIFICATION), (WEEK_3, BlockType.INTENSIFICATION)],
    )
    def test_under_zone_with_high_readiness_alternates(self, week_start, expected):
        fatigue = FatigueAnalysis(acwr_zone=AcwrZone.UNDER, acwr_value=0.5)
        assert infer_block_type(analyze_readiness(85), fatigue, week_start) == expected

    def test_under_zone_with_moderate_readiness_follows_cycle(self):
        fatigue = FatigueAnalysis(acwr_zone=AcwrZone.UNDER, acwr_value=0.5)
        assert infer_block_type(analyze_readiness(55), fatigue, WEEK_3) == BlockType.DELOAD


class TestCycle:
    @pytest.mark.parametrize(
        "week_start, expected",
        [
            (WEEK_4, BlockType.ACCUMULATION),
            (WEEK_5, BlockType.ACCUMULATION),
            (WEEK_2, BlockType.INTENSIFICATION),
            (WEEK_3, BlockType.DELOAD),
        ],
    )
    def test_four_week_cycle(self, week_start, expected):
        assert infer_block_type(analyze_readiness(60), FatigueAnalysis(), week_start) == expected

    def test_any_day_of_the_week_gives_same_result(self):
        readiness, fatigue = analyze_readiness(60), FatigueAnalysis()
        thursday = WEEK_3 + datetime.timedelta(days=3)
        assert infer_block_type(readiness, fatigue, thursday) == infer_block_type(readiness, fatigue, WEEK_3)
