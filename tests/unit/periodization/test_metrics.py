"""Tests for the workout metrics and the session → record conversion."""

import datetime

import pytest

from praxis.periodization.metrics import (
    build_workout_record,
    calculate_block_avg_rest,
    calculate_block_avg_rpe,
    calculate_block_volume,
    calculate_density_score,
    calculate_intensity_score,
    calculate_workout_totals,
)
from praxis.schemas.periodization import MovementPattern
from praxis.schemas.plan import (
    AccessoryBlock,
    AccessoryPrescription,
    CooldownBlock,
    SetPrescription,
    StrengthBlock,
    StrengthPrescription,
)
from praxis.schemas.session import LiveSessionState, SessionSet
from praxis.schemas.workout import CompletedBlock, WorkoutBlockType

PLAN_DATE = datetime.date(2026, 3, 2)


# ======================================================================
# Helpers
# ======================================================================


def _make_state(sets: list[SessionSet], pattern: MovementPattern = MovementPattern.SQUAT) -> LiveSessionState:
    strength = StrengthBlock(
        id="main",
        title="Main Lift – Back Squat",
        movement_pattern=pattern,
        strength_main=StrengthPrescription(
            exercise_id="back_squat",
            sets=[SetPrescription(target_reps=5, target_rpe=8) for _ in range(len(sets))],
            wave="heavy",
            rpe=8,
            percent=0.8,
        ),
    )
    accessory = AccessoryBlock(
        id="acc",
        title="Accessory Work",
        accessory=[AccessoryPrescription(exercise_id="plank", sets=[SetPrescription(target_reps=10)] * 3)],
    )
    cooldown = CooldownBlock(id="cool", title="Cooldown")
    return LiveSessionState(
        plan_day_id="plan-1",
        plan_date=PLAN_DATE,
        start_time=0,
        blocks=[strength, accessory, cooldown],
        completed_sets={"main": sets, "acc": [SessionSet() for _ in range(3)]},
    )


def _two_completed_sets() -> list[SessionSet]:
    return [
        SessionSet(completed=True, weight=100, rpe=8, rest_time_ms=120_000),
        SessionSet(completed=True, weight=100, rpe=9, rest_time_ms=180_000),
    ]


# ======================================================================
# Block metrics
# ======================================================================


class TestBlockMetrics:
    def test_volume_counts_completed_loaded_sets(self):
        sets = [SessionSet(completed=True, weight=100), SessionSet(completed=False, weight=100),
                SessionSet(completed=True)]
        assert calculate_block_volume(sets, 5) == 500

    def test_volume_without_reps(self):
        assert calculate_block_volume([SessionSet(completed=True, weight=100)], None) == 0

    def test_avg_rpe(self):
        assert calculate_block_avg_rpe(_two_completed_sets()) == 8.5
        assert calculate_block_avg_rpe([SessionSet(completed=False, rpe=9)]) is None

    def test_avg_rest(self):
        assert calculate_block_avg_rest(_two_completed_sets()) == 150
        assert calculate_block_avg_rest([SessionSet(completed=True)]) is None


class TestWorkoutMetrics:
    def test_totals_average_block_averages(self):
        blocks = [
            CompletedBlock(block_id="a", title="A", type=WorkoutBlockType.STRENGTH, volume=1000, avg_rpe=8,
                           avg_rest_sec=120),
            CompletedBlock(block_id="b", title="B", type=WorkoutBlockType.ACCESSORY, volume=500, avg_rpe=7),
            CompletedBlock(block_id="c", title="C", type=WorkoutBlockType.COOLDOWN),
        ]
        assert calculate_workout_totals(blocks) == (1500, 7.5, 120)

    @pytest.mark.parametrize("duration", [0, -5])
    def test_zero_duration(self, duration):
        assert calculate_density_score(1000, duration) == 0.0
        assert calculate_intensity_score(1000, duration, 8) == 0.0

    def test_density(self):
        assert calculate_density_score(1000, 60) == 16.7

    def test_intensity_without_rpe_uses_half(self):
        assert calculate_intensity_score(600, 60, None) == 500


# ======================================================================
# Session → record
# ======================================================================


class TestBuildWorkoutRecord:
    @pytest.fixture
    def built(self):
        return build_workout_record(_make_state(_two_completed_sets()), end_time=3_600_000,
                                    record_date=PLAN_DATE, record_id="workout-1")

    def test_record_fields(self, built):
        record, _ = built
        assert record.id == "workout-1"
        assert record.plan_day_id == "plan-1"
        assert record.date == PLAN_DATE
        assert record.duration_min == 60
        assert record.total_volume == 1000
        assert record.avg_rpe == 8.5
        assert record.avg_rest_sec == 150
        assert record.density_score == 16.7
        assert record.intensity_score == 1417

    def test_blocks_in_plan_order(self, built):
        record, _ = built
        assert [b.type for b in record.blocks] == [
            WorkoutBlockType.STRENGTH,
            WorkoutBlockType.ACCESSORY,
            WorkoutBlockType.COOLDOWN,
        ]
        strength = record.blocks[0]
        assert strength.movement_pattern == "squat"
        assert strength.prescribed_sets == 2
        assert strength.prescribed_reps == 5
        assert strength.target_rpe == 8
        assert record.blocks[2].sets == []

    def test_progression_entries(self, built):
        _, entries = built
        assert len(entries) == 2
        assert {e.exercise_id for e in entries} == {"back_squat"}
        assert [e.volume for e in entries] == [500, 500]
        assert all(e.session_id == "workout-1" for e in entries)

    def test_sets_without_rpe_produce_no_entry(self):
        sets = [SessionSet(completed=True, weight=100), SessionSet(completed=True, weight=100, rpe=8)]
        _, entries = build_workout_record(_make_state(sets), 3_600_000, PLAN_DATE)
        assert len(entries) == 1

    def test_lunge_is_tagged_as_squat(self):
        record, _ = build_workout_record(_make_state(_two_completed_sets(), MovementPattern.LUNGE), 60_000,
                                         PLAN_DATE)
        assert record.blocks[0].movement_pattern == "squat"

    def test_generated_id(self):
        record, _ = build_workout_record(_make_state([SessionSet()]), 60_000, PLAN_DATE)
        assert record.id.startswith("workout-")
        assert record.total_volume == 0
