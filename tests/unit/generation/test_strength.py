"""Tests for main-lift selection and prescription."""

import datetime

import pytest

from praxis.generation.strength import (
    NO_EXERCISE_TITLE,
    NO_STRENGTH_TITLE,
    StrengthTargets,
    apply_weekly_adjustments,
    generate_strength_block,
    one_rm_for_exercise,
    select_strength_exercise,
)
from praxis.generation.waves import build_strength_sets, get_intensity_wave, get_rep_scheme
from praxis.schemas.periodization import (
    BlockType,
    ConditioningTarget,
    MovementPattern,
    TargetLevel,
    WeeklyDayStructure,
)
from praxis.schemas.preferences import ExperienceLevel, StrengthNumbers

BARBELL = ["barbell", "plates", "bench"]
INT = ExperienceLevel.INTERMEDIATE
HEAVY = StrengthTargets(4, 8.0, 0.80)


def _make_day(volume: TargetLevel = TargetLevel.MEDIUM, intensity: TargetLevel = TargetLevel.MEDIUM,
              block_type: BlockType = BlockType.ACCUMULATION, protected: bool = False,
              pattern: MovementPattern = MovementPattern.SQUAT) -> WeeklyDayStructure:
    return WeeklyDayStructure(
        date=datetime.date(2026, 1, 19),
        day_of_week=1,
        main_movement_pattern=pattern,
        main_lift_category="Squat",
        volume_target=volume,
        intensity_target=intensity,
        conditioning_target=ConditioningTarget.MIXED,
        block_type=block_type,
        fatigue_protected=protected,
    )


# ======================================================================
# Waves
# ======================================================================


class TestWaves:
    @pytest.mark.parametrize("day_index, wave", [(0, "heavy"), (1, "moderate"), (2, "volume"), (3, "heavy")])
    def test_three_day_wave(self, day_index, wave):
        assert get_intensity_wave(day_index).wave == wave

    @pytest.mark.parametrize(
        "level, wave, sets, reps",
        [
            (ExperienceLevel.BEGINNER, "heavy", 3, 5),
            (ExperienceLevel.INTERMEDIATE, "moderate", 4, 6),
            (ExperienceLevel.ADVANCED, "heavy", 5, 3),
        ],
    )
    def test_rep_schemes(self, level, wave, sets, reps):
        assert get_rep_scheme(level, wave) == (sets, reps)

    def test_target_weight_only_with_one_rm(self):
        assert build_strength_sets(3, 5, 8, 0.8, None)[0].target_weight is None
        assert build_strength_sets(3, 5, 8, 0.8, 140)[0].target_weight == 112.5


# ======================================================================
# Selection
# ======================================================================


class TestSelectStrengthExercise:
    @pytest.mark.parametrize(
        "pattern, day_index, expected",
        [
            (MovementPattern.SQUAT, 0, "back_squat"),
            (MovementPattern.HORIZONTAL_PUSH, 0, "bench_press"),
            (MovementPattern.HINGE, 0, "deadlift"),
            (MovementPattern.HINGE, 1, "romanian_deadlift"),
            (MovementPattern.HORIZONTAL_PULL, 3, "barbell_row"),
            (MovementPattern.VERTICAL_PUSH, 5, "overhead_press"),
        ],
    )
    def test_barbell_intermediate(self, pattern, day_index, expected):
        assert select_strength_exercise(pattern, day_index, BARBELL, INT).exercise_id == expected

    def test_falls_back_to_related_pattern(self):
        lift = select_strength_exercise(MovementPattern.VERTICAL_PULL, 0, BARBELL, INT)
        assert lift.movement_pattern == MovementPattern.HORIZONTAL_PULL

    def test_difficulty_only_narrows_when_possible(self):
        lift = select_strength_exercise(MovementPattern.HORIZONTAL_PUSH, 0, ["dumbbells"], INT)
        assert lift.exercise_id == "db_bench_press"

    def test_nothing_available(self):
        assert select_strength_exercise(MovementPattern.SQUAT, 0, [], INT) is None

    def test_deterministic(self):
        picks = {select_strength_exercise(MovementPattern.HINGE, 4, BARBELL, INT).exercise_id for _ in range(5)}
        assert len(picks) == 1


class TestOneRm:
    def test_mapped_lift(self):
        assert one_rm_for_exercise("front_squat", StrengthNumbers(squat_1rm=150)) == 150

    def test_unmapped_lift(self):
        assert one_rm_for_exercise("barbell_row", StrengthNumbers(squat_1rm=150)) is None

    def test_no_numbers(self):
        assert one_rm_for_exercise("back_squat", None) is None


# ======================================================================
# Weekly adjustments
# ======================================================================


class TestApplyWeeklyAdjustments:
    def test_no_weekly_day(self):
        assert apply_weekly_adjustments(HEAVY, None) == HEAVY

    def test_medium_targets_unchanged(self):
        assert apply_weekly_adjustments(HEAVY, _make_day()) == HEAVY

    def test_accumulation_high_volume(self):
        assert apply_weekly_adjustments(HEAVY, _make_day(volume=TargetLevel.HIGH)) == (5, 8.0, 0.8)

    def test_deload_low_low(self):
        sets, rpe, percent = apply_weekly_adjustments(
            HEAVY, _make_day(TargetLevel.LOW, TargetLevel.LOW, BlockType.DELOAD)
        )
        assert sets == 2
        assert 5.0 <= rpe <= 6.0
        assert percent == pytest.approx(0.6)

    def test_protected_day(self):
        sets, rpe, percent = apply_weekly_adjustments(
            HEAVY, _make_day(TargetLevel.LOW, TargetLevel.LOW, protected=True)
        )
        assert 2 <= sets <= 3
        assert 5.0 <= rpe <= 6.0
        assert percent <= 0.65

    def test_intensification_high_intensity(self):
        day = _make_day(intensity=TargetLevel.HIGH, block_type=BlockType.INTENSIFICATION)
        assert apply_weekly_adjustments(HEAVY, day) == (4, 9.0, 0.85)
        sets, rpe, percent = apply_weekly_adjustments(StrengthTargets(4, 7.0, 0.70), day)
        assert (sets, rpe) == (4, 9.0)
        assert percent == pytest.approx(0.78)


# ======================================================================
# Block
# ======================================================================


class TestGenerateStrengthBlock:
    def test_engine_day_has_no_main_lift(self):
        block = generate_strength_block(MovementPattern.ENGINE, 4, BARBELL, INT)
        assert block.strength_main is None
        assert block.title == NO_STRENGTH_TITLE

    def test_no_equipment_sentinel(self):
        block = generate_strength_block(MovementPattern.SQUAT, 0, [], INT)
        assert block.strength_main is None
        assert block.title == NO_EXERCISE_TITLE

    def test_heavy_day_prescription(self):
        block = generate_strength_block(MovementPattern.SQUAT, 0, BARBELL, INT, StrengthNumbers(squat_1rm=140))
        main = block.strength_main
        assert block.title == "Main Lift – Back Squat"
        assert block.movement_pattern == MovementPattern.SQUAT
        assert main.wave == "heavy"
        assert len(main.sets) == 4
        assert all(s.target_reps == 5 and s.target_rpe == 8.0 for s in main.sets)
        assert main.one_rm_used == 140
        assert main.sets[0].target_weight == 112.5

    def test_deload_day(self):
        day = _make_day(TargetLevel.LOW, TargetLevel.LOW, BlockType.DELOAD)
        main = generate_strength_block(MovementPattern.SQUAT, 0, BARBELL, INT, weekly_day=day).strength_main
        assert len(main.sets) == 2
        assert 5.0 <= main.rpe <= 6.0
