"""Tests for the recovery / load analytics.

Pure functions over hand-built workout records; no database involved.
"""

import datetime

import pytest

from praxis.periodization.load import (
    calculate_acute_load,
    calculate_acwr,
    calculate_chronic_load,
    calculate_intensity_fatigue,
    calculate_movement_pattern_fatigue,
    calculate_recovery_score,
    calculate_rest_fatigue,
    most_recent,
)
from praxis.schemas.workout import CompletedBlock, SetLog, WorkoutBlockType, WorkoutRecord

AS_OF = datetime.date(2026, 3, 16)


# ======================================================================
# Helpers
# ======================================================================


def _make_record(
    days_ago: int,
    volume: float,
    intensity: float = 60.0,
    pattern: str | None = "squat",
    title: str = "Main Lift – Back Squat",
    rpe: float = 8.0,
    rest_ms: int | None = 120_000,
    density: float = 50.0,
    record_id: str | None = None,
) -> WorkoutRecord:
    date = AS_OF - datetime.timedelta(days=days_ago)
    start = int(datetime.datetime.combine(date, datetime.time(7, 0)).timestamp() * 1000)
    sets = [SetLog(completed=True, weight=100.0, rpe=rpe, rest_time_ms=rest_ms) for _ in range(2)]
    block = CompletedBlock(
        block_id=f"block-{days_ago}",
        title=title,
        type=WorkoutBlockType.STRENGTH,
        movement_pattern=pattern,
        prescribed_sets=2,
        prescribed_reps=5,
        target_rpe=8.0,
        sets=sets,
        volume=volume,
        avg_rpe=rpe,
    )
    return WorkoutRecord(
        id=record_id or f"workout-{days_ago}",
        plan_day_id=f"plan-{days_ago}",
        date=date,
        start_time=start,
        end_time=start + 3_600_000,
        duration_min=60,
        blocks=[block],
        total_volume=volume,
        avg_rpe=rpe,
        density_score=density,
        intensity_score=intensity,
    )


# ======================================================================
# Acute / chronic load
# ======================================================================


class TestAcuteLoad:
    def test_empty_history(self):
        assert calculate_acute_load([], AS_OF) == 0.0

    def test_single_workout_today(self):
        assert calculate_acute_load([_make_record(0, 5000)], AS_OF) == pytest.approx(10.0)

    def test_linear_weights(self):
        """Today weighs 8, six days ago weighs 2."""
        history = [_make_record(0, 5000), _make_record(6, 10000)]
        assert calculate_acute_load(history, AS_OF) == pytest.approx(12.0)

    def test_seven_days_ago_is_outside_window(self):
        assert calculate_acute_load([_make_record(7, 5000)], AS_OF) == 0.0

    def test_future_workouts_ignored(self):
        assert calculate_acute_load([_make_record(-1, 5000)], AS_OF) == 0.0

    def test_capped_at_100(self):
        assert calculate_acute_load([_make_record(0, 80000)], AS_OF) == 100.0


class TestChronicLoad:
    def test_single_workout_in_window(self):
        assert calculate_chronic_load([_make_record(10, 25000)], AS_OF) == pytest.approx(50.0)

    @pytest.mark.parametrize("days_ago", [0, 6, 35])
    def test_outside_window(self, days_ago):
        assert calculate_chronic_load([_make_record(days_ago, 25000)], AS_OF) == 0.0

    def test_recent_days_weigh_more(self):
        history = [_make_record(7, 10000), _make_record(34, 40000)]
        # exp(-1) vs exp(-34/7): the day-7 workout dominates the mean
        assert calculate_chronic_load(history, AS_OF) < 30.0


class TestCalculateAcwr:
    @pytest.mark.parametrize(
        "acute, chronic, expected",
        [
            (10.0, 0.5, 0.0),   # no baseline
            (10.0, 10.0, 25.0),
            (20.0, 10.0, 75.0),
            (100.0, 10.0, 100.0),  # ratio clamped at 2.5
            (1.0, 10.0, 0.0),   # ratio clamped at 0.5
        ],
    )
    def test_score(self, acute, chronic, expected):
        assert calculate_acwr(acute, chronic) == pytest.approx(expected)


# ======================================================================
# Fatigue components
# ======================================================================


class TestMovementPatternFatigue:
    def test_single_squat_workout(self):
        fatigue = calculate_movement_pattern_fatigue([_make_record(0, 10000, intensity=60)])
        assert fatigue.squat == pytest.approx(80.0)
        assert fatigue.hinge == 0.0
        assert fatigue.average == pytest.approx(20.0)

    def test_only_three_most_recent_count(self):
        history = [_make_record(10, 20000, intensity=100, record_id="old")]
        history += [_make_record(d, 0, intensity=0) for d in (1, 2, 3)]
        assert calculate_movement_pattern_fatigue(history).squat == 0.0

    def test_explicit_tag_beats_title(self):
        record = _make_record(0, 10000, intensity=0, pattern="hinge", title="Bench Press")
        fatigue = calculate_movement_pattern_fatigue([record])
        assert fatigue.hinge == pytest.approx(50.0)
        assert fatigue.push == 0.0

    def test_title_fallback_without_tag(self):
        record = _make_record(0, 10000, intensity=0, pattern=None, title="Romanian Deadlift")
        assert calculate_movement_pattern_fatigue([record]).hinge == pytest.approx(50.0)

    def test_clamped_to_100(self):
        record = _make_record(0, 10000, intensity=5000)
        assert calculate_movement_pattern_fatigue([record]).squat == 100.0


class TestIntensityFatigue:
    def test_empty(self):
        assert calculate_intensity_fatigue([]) == 0.0

    def test_rpe_and_density(self):
        assert calculate_intensity_fatigue([_make_record(0, 1000)]) == pytest.approx(65.0)


class TestRestFatigue:
    @pytest.mark.parametrize(
        "rest_ms, expected",
        [(60_000, 0.0), (120_000, 50.0), (180_000, 100.0), (240_000, 100.0), (30_000, 0.0)],
    )
    def test_average_rest(self, rest_ms, expected):
        assert calculate_rest_fatigue([_make_record(0, 1000, rest_ms=rest_ms)]) == pytest.approx(expected)

    def test_no_rest_recorded(self):
        assert calculate_rest_fatigue([_make_record(0, 1000, rest_ms=None)]) == 0.0


# ======================================================================
# Recovery score
# ======================================================================


class TestRecoveryScore:
    def test_empty_history_is_fresh(self):
        result = calculate_recovery_score([], AS_OF)
        assert result.score == 100
        assert result.breakdown.acwr == 0.0
        assert result.breakdown.movement_pattern_fatigue.average == 0.0

    def test_single_workout(self):
        """0.3·0 + 0.3·20 + 0.2·65 + 0.2·50 = 29 → 71."""
        result = calculate_recovery_score([_make_record(0, 10000)], AS_OF)
        assert result.score == 71
        assert result.breakdown.intensity_fatigue == pytest.approx(65.0)
        assert result.breakdown.rest_fatigue == pytest.approx(50.0)

    def test_score_in_range(self):
        history = [_make_record(d, 60000, intensity=5000, rest_ms=300_000, density=500) for d in range(20)]
        result = calculate_recovery_score(history, AS_OF)
        assert 0 <= result.score <= 100

    def test_history_not_mutated(self):
        history = [_make_record(3, 1000), _make_record(0, 2000)]
        before = [r.id for r in history]
        calculate_recovery_score(history, AS_OF)
        assert [r.id for r in history] == before


class TestMostRecent:
    def test_newest_first(self):
        history = [_make_record(5, 1), _make_record(0, 2), _make_record(2, 3)]
        assert [r.total_volume for r in most_recent(history)] == [2, 3, 1]

    def test_unlimited(self):
        history = [_make_record(d, 1) for d in range(5)]
        assert len(most_recent(history, limit=None)) == 5
