"""
Periodization QA scenarios.

A developer diagnostic: runs the engine end to end (history → fatigue →
block type → weekly structure → daily workout) on synthetic inputs and
records what it decided.  Expectations that do not hold are reported as
warnings; an exception inside a scenario is recorded as an error string on
that scenario and the remaining scenarios still run.

Scenarios
---------

A  fresh athlete, recovery 82, 5 days, no history
B  low recovery (28), 6 days: must be a conservative deload week
C  acute volume spike over a low chronic baseline: ACWR high → deload
D  very high recovery (94), 5 days
E  ten consecutive heavy hinge days: hinge volume must be held low
"""

from __future__ import annotations

import datetime
import logging
from typing import Callable, Optional, Sequence

from praxis.generation.daily import generate_daily_workout
from praxis.periodization.block_type import iso_week_number, infer_block_type
from praxis.periodization.fatigue import analyze_fatigue
from praxis.periodization.readiness import analyze_readiness
from praxis.periodization.weekly_structure import build_weekly_structure, week_start_for
from praxis.schemas.diagnostics import QAScenarioResult
from praxis.schemas.periodization import (AcwrZone, BlockType, FatigueAnalysis, MovementPattern, TargetLevel,
                                          WeeklyStructure, )
from praxis.schemas.plan import ConditioningBlock, StrengthBlock, WorkoutPlanDay
from praxis.schemas.preferences import ExperienceLevel, TrainingGoal, UserPreferences
from praxis.schemas.workout import CompletedBlock, SetLog, WorkoutBlockType, WorkoutRecord

logger = logging.getLogger(__name__)

QA_PREFERENCES = UserPreferences(goal=TrainingGoal.HYBRID, experience_level=ExperienceLevel.INTERMEDIATE,
                                 equipment_ids=["barbell", "plates", "bench"], )

# ======================================================================
# Synthetic history
# ======================================================================

# Scenario C: chronic baseline every third day, then a week-long spike
CHRONIC_BASELINE_DAYS = [28, 25, 22, 19, 16, 13, 10, 7]
CHRONIC_BASELINE_VOLUME = 1250.0
SPIKE_VOLUMES = [3600.0, 3500.0, 3800.0, 3700.0, 3600.0, 3500.0, 3750.0]


def mock_workout_record(as_of: datetime.date, days_ago: int, volume: float, intensity: float,
                        pattern: str = "squat", ) -> WorkoutRecord:
    """A finished one-block workout ``days_ago`` days before ``as_of``."""
    date = as_of - datetime.timedelta(days=days_ago)
    start = int(datetime.datetime.combine(date, datetime.time(7, 0)).timestamp() * 1000)
    sets = [SetLog(completed=True, weight=100.0, rpe=8.0, rest_time_ms=180_000) for _ in range(4)]
    block = CompletedBlock(block_id=f"qa-block-{days_ago}", title=f"Main Lift – {pattern}",
                           type=WorkoutBlockType.STRENGTH, movement_pattern=pattern, prescribed_sets=4,
                           prescribed_reps=5, target_rpe=8.0, sets=sets, volume=volume, avg_rpe=8.0,
                           avg_rest_sec=180.0, )
    return WorkoutRecord(id=f"qa-workout-{days_ago}", plan_day_id=f"qa-plan-{days_ago}", date=date,
                         start_time=start, end_time=start + 60 * 60_000, duration_min=60, blocks=[block],
                         total_volume=volume, avg_rpe=8.0, avg_rest_sec=180.0, density_score=50.0,
                         intensity_score=intensity, )


def acwr_spike_history(as_of: datetime.date) -> list[WorkoutRecord]:
    chronic = [mock_workout_record(as_of, d, CHRONIC_BASELINE_VOLUME, 60.0) for d in CHRONIC_BASELINE_DAYS]
    acute = [mock_workout_record(as_of, d, v, 75.0) for d, v in enumerate(SPIKE_VOLUMES)]
    return chronic + acute


def hinge_overload_history(as_of: datetime.date) -> list[WorkoutRecord]:
    return [mock_workout_record(as_of, d, 6000.0, 80.0, pattern="hinge") for d in range(10)]


# ======================================================================
# Helpers
# ======================================================================


def _build_week(recovery_score: float, history: Sequence[WorkoutRecord], training_days: int,
                as_of: datetime.date, ) -> tuple[WeeklyStructure, FatigueAnalysis]:
    readiness = analyze_readiness(recovery_score)
    fatigue = analyze_fatigue(history, as_of)
    monday = week_start_for(as_of)
    block_type = infer_block_type(readiness, fatigue, monday)
    return build_weekly_structure(readiness, fatigue, training_days, block_type, monday), fatigue


def _log_week(result: QAScenarioResult, structure: WeeklyStructure, fatigue: FatigueAnalysis) -> None:
    result.logs.append(f"Week of {structure.week_start.isoformat()} (ISO week "
                       f"{iso_week_number(structure.week_start)}): block type {structure.block_type.value}")
    result.logs.append(f"Fatigue: squat={fatigue.squat:.1f} hinge={fatigue.hinge:.1f} push={fatigue.push:.1f} "
                       f"pull={fatigue.pull:.1f} ACWR={fatigue.acwr_value:.2f} ({fatigue.acwr_zone.value})")
    for day in structure.days:
        result.logs.append(f"  {day.date.isoformat()} {day.main_lift_category:<12} vol={day.volume_target.value:<6} "
                           f"int={day.intensity_target.value:<6} cond={day.conditioning_target.value:<9} "
                           f"protected={day.fatigue_protected}")
    result.metadata.update({"block_type": structure.block_type.value, "acwr_value": round(fatigue.acwr_value, 3),
                            "acwr_zone": fatigue.acwr_zone.value, "days": len(structure.days), })


def _generate_days(structure: WeeklyStructure) -> list[WorkoutPlanDay]:
    return [generate_daily_workout(QA_PREFERENCES, day.date, index, day) for index, day in enumerate(structure.days)]


def _log_workout(result: QAScenarioResult, plan_day: WorkoutPlanDay) -> None:
    result.logs.append(f"Workout {plan_day.date.isoformat()} ({plan_day.estimated_duration_minutes} min):")
    for block in plan_day.blocks:
        line = f"  [{block.type}] {block.title}"
        if isinstance(block, StrengthBlock) and block.strength_main is not None:
            main = block.strength_main
            line += f" {len(main.sets)}x{main.sets[0].target_reps} @ RPE {main.rpe:g} / {main.percent:.0%}"
        elif isinstance(block, ConditioningBlock):
            c = block.conditioning
            line += f" {c.mode} {c.target_zone} {c.rounds}x{c.work_seconds}s"
        result.logs.append(line)


def _run(scenario_id: str, title: str, description: str,
         body: Callable[[QAScenarioResult], None]) -> QAScenarioResult:
    result = QAScenarioResult(id=scenario_id, title=title, description=description)
    try:
        body(result)
    except Exception as e:
        logger.warning("QA scenario %s failed: %s", scenario_id, e)
        result.errors.append(f"Scenario {scenario_id} raised {type(e).__name__}: {e}")
    return result


# ======================================================================
# Scenarios
# ======================================================================


def scenario_a(as_of: Optional[datetime.date] = None) -> QAScenarioResult:
    as_of = as_of or datetime.date.today()

    def body(result: QAScenarioResult) -> None:
        structure, fatigue = _build_week(82, [], 5, as_of)
        _log_week(result, structure, fatigue)
        if structure.block_type == BlockType.DELOAD:
            result.warnings.append("Fresh athlete was given a deload week")
        if not any(d.volume_target == TargetLevel.HIGH or d.intensity_target == TargetLevel.HIGH
                   for d in structure.days):
            result.warnings.append("No day has a high volume or intensity target")
        if structure.days:
            _log_workout(result, generate_daily_workout(QA_PREFERENCES, structure.days[0].date, 0,
                                                        structure.days[0]))

    return _run("A", "Fresh athlete", "Recovery 82, 5 training days, no history", body)


def scenario_b(as_of: Optional[datetime.date] = None) -> QAScenarioResult:
    as_of = as_of or datetime.date.today()

    def body(result: QAScenarioResult) -> None:
        structure, fatigue = _build_week(28, [], 6, as_of)
        _log_week(result, structure, fatigue)
        if structure.block_type != BlockType.DELOAD:
            result.warnings.append(f"Expected deload, got {structure.block_type.value}")
        for day in structure.days:
            if TargetLevel.HIGH in (day.volume_target, day.intensity_target):
                result.warnings.append(f"{day.date.isoformat()} has a high target during low recovery")

        for weekly_day, plan_day in zip(structure.days, _generate_days(structure)):
            for block in plan_day.blocks:
                if isinstance(block, StrengthBlock) and block.strength_main is not None and block.strength_main.rpe > 6:
                    result.warnings.append(f"{plan_day.date.isoformat()} main lift RPE {block.strength_main.rpe:g} > 6")
                if (isinstance(block, ConditioningBlock) and block.conditioning.target_zone != "Z2" and
                        weekly_day.main_movement_pattern != MovementPattern.ENGINE):
                    result.warnings.append(f"{plan_day.date.isoformat()} conditioning at "
                                           f"{block.conditioning.target_zone}, expected Z2")

    return _run("B", "Low recovery", "Recovery 28, 6 training days: conservative deload expected", body)


def scenario_c(as_of: Optional[datetime.date] = None) -> QAScenarioResult:
    as_of = as_of or datetime.date.today()

    def body(result: QAScenarioResult) -> None:
        history = acwr_spike_history(as_of)
        result.logs.append(f"History: {len(history)} workouts, chronic baseline {CHRONIC_BASELINE_VOLUME:g}, "
                           f"acute spike avg {sum(SPIKE_VOLUMES) / len(SPIKE_VOLUMES):.0f}")
        structure, fatigue = _build_week(65, history, 5, as_of)
        _log_week(result, structure, fatigue)
        if fatigue.acwr_zone != AcwrZone.HIGH:
            result.warnings.append(f"Expected ACWR zone high, got {fatigue.acwr_zone.value} "
                                   f"({fatigue.acwr_value:.2f})")
        if structure.block_type != BlockType.DELOAD:
            result.warnings.append(f"Expected deload after ACWR spike, got {structure.block_type.value}")
        if any(d.volume_target != TargetLevel.LOW or d.intensity_target != TargetLevel.LOW for d in structure.days):
            result.warnings.append("Deload with ACWR spike left a day above low volume / intensity")

    return _run("C", "ACWR spike", "Week-long volume spike over a low chronic baseline", body)


def scenario_d(as_of: Optional[datetime.date] = None) -> QAScenarioResult:
    as_of = as_of or datetime.date.today()

    def body(result: QAScenarioResult) -> None:
        structure, fatigue = _build_week(94, [], 5, as_of)
        _log_week(result, structure, fatigue)
        cycle_deload = iso_week_number(week_start_for(as_of)) % 4 == 3
        if structure.block_type == BlockType.DELOAD and not cycle_deload:
            result.warnings.append("Very high recovery produced an unscheduled deload")
        if structure.days:
            _log_workout(result, generate_daily_workout(QA_PREFERENCES, structure.days[0].date, 0,
                                                        structure.days[0]))

    return _run("D", "Peak readiness", "Recovery 94, 5 training days", body)


def scenario_e(as_of: Optional[datetime.date] = None) -> QAScenarioResult:
    as_of = as_of or datetime.date.today()

    def body(result: QAScenarioResult) -> None:
        structure, fatigue = _build_week(70, hinge_overload_history(as_of), 5, as_of)
        _log_week(result, structure, fatigue)
        result.metadata["hinge_fatigue"] = round(fatigue.hinge, 1)
        for day in structure.days:
            if day.main_movement_pattern == MovementPattern.HINGE and day.volume_target != TargetLevel.LOW:
                result.warnings.append(f"{day.date.isoformat()} hinge day at {day.volume_target.value} volume "
                                       f"with hinge fatigue {fatigue.hinge:.0f}")

    return _run("E", "Hinge overload", "Ten consecutive heavy hinge sessions, recovery 70", body)


SCENARIOS: list[Callable[[Optional[datetime.date]], QAScenarioResult]] = [scenario_a, scenario_b, scenario_c,
                                                                          scenario_d, scenario_e, ]


def run_all_scenarios(as_of: Optional[datetime.date] = None) -> list[QAScenarioResult]:
    results = [scenario(as_of) for scenario in SCENARIOS]
    logger.info("QA: %d scenarios, %d with warnings, %d with errors", len(results),
                sum(1 for r in results if r.warnings), sum(1 for r in results if r.errors))
    return results


def format_report(results: Sequence[QAScenarioResult]) -> str:
    """Plain-text report of a QA run."""
    rule = "=" * 80
    lines = ["PERIODIZATION ENGINE QA", ""]
    for result in results:
        lines += [rule, f"SCENARIO {result.id}: {result.title}", rule, f"Description: {result.description}", ""]
        for heading, items, prefix in (("Warnings", result.warnings, "  - "), ("Errors", result.errors, "  - "),
                                       ("Logs", result.logs, "  "), ):
            if items:
                lines.append(f"{heading}:")
                lines += [prefix + item for item in items]
                lines.append("")
    lines += [rule, f"Total scenarios: {len(results)}",
              f"Scenarios with errors: {sum(1 for r in results if r.errors)}",
              f"Scenarios with warnings: {sum(1 for r in results if r.warnings)}", rule, ]
    return "\n".join(lines)
