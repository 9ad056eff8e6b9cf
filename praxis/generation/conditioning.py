"""
Conditioning block generator.

Modality follows the equipment, in priority order: rower > bike >
ski-erg > run.  Zone / work / rest / rounds scale with the goal and are
then shaped by the weekly conditioning target:

* ``light``     → one Z2 steady block,
* ``mixed``     → goal parameters unchanged,
* ``intensity`` → one zone harder (steady work turns into intervals).

A hybrid athlete's engine day gets the race-simulation (stations) variant.
"""

from __future__ import annotations

import math
from typing import NamedTuple, Optional

from praxis.schemas.periodization import ConditioningTarget, MovementPattern, WeeklyDayStructure
from praxis.schemas.plan import ConditioningBlock, ConditioningPrescription, ConditioningStation, new_id
from praxis.schemas.preferences import TrainingGoal

_MODALITY_PRIORITY: list[tuple[str, str]] = [("rower", "row"), ("bike", "bike"), ("ski_erg", "ski")]


class ConditioningParameters(NamedTuple):
    zone: int
    work_seconds: int
    rest_seconds: Optional[int]
    rounds: int


GOAL_PARAMETERS: dict[TrainingGoal, ConditioningParameters] = {
    TrainingGoal.CONDITIONING: ConditioningParameters(4, 120, 90, 6),
    TrainingGoal.HYBRID: ConditioningParameters(3, 60, 60, 8),
    TrainingGoal.STRENGTH: ConditioningParameters(3, 45, 75, 6),
    TrainingGoal.GENERAL: ConditioningParameters(2, 600, None, 1),
}
LIGHT_PARAMETERS = ConditioningParameters(2, 600, None, 1)
INTERVAL_PARAMETERS = ConditioningParameters(3, 60, 60, 8)


def select_modality(equipment_ids: list[str]) -> str:
    owned = set(equipment_ids)
    for equipment_id, modality in _MODALITY_PRIORITY:
        if equipment_id in owned:
            return modality
    return "run"


def should_include_conditioning(goal: TrainingGoal, day_index: int,
                                weekly_day: Optional[WeeklyDayStructure] = None) -> bool:
    if weekly_day is not None:
        return weekly_day.conditioning_target is not None
    if goal == TrainingGoal.CONDITIONING:
        return True
    if goal == TrainingGoal.HYBRID:
        return day_index % 2 == 0
    if goal == TrainingGoal.GENERAL:
        return day_index in (2, 5)
    return day_index == 3


def conditioning_parameters(goal: TrainingGoal, target: Optional[ConditioningTarget]) -> ConditioningParameters:
    params = GOAL_PARAMETERS.get(goal, GOAL_PARAMETERS[TrainingGoal.HYBRID])
    if target == ConditioningTarget.LIGHT:
        return LIGHT_PARAMETERS
    if target == ConditioningTarget.INTENSITY:
        if params.zone <= 2:
            return INTERVAL_PARAMETERS
        return params._replace(zone=min(5, params.zone + 1))
    return params


def _duration_minutes(params: ConditioningParameters) -> int:
    total = params.work_seconds * params.rounds + (params.rest_seconds or 0) * (params.rounds - 1)
    return math.ceil(total / 60)


def _station_block(modality: str) -> ConditioningBlock:
    stations = [ConditioningStation(name={"run": "Run", "row": "Row", "bike": "Bike", "ski": "SkiErg"}[modality],
                                    distance_m=1000),
                ConditioningStation(name="Farmer's Carry", distance_m=100),
                ConditioningStation(name="Walking Lunge", reps=20),
                ConditioningStation(name="Burpee Broad Jump", reps=10), ]
    prescription = ConditioningPrescription(mode="stations", modality=modality, work_seconds=300, rest_seconds=60,
                                            rounds=3, target_zone="Z4", stations=stations, )
    return ConditioningBlock(id=new_id("conditioning"), title="Race Simulation", conditioning=prescription,
                             estimated_duration_minutes=20, )


def generate_conditioning_block(goal: TrainingGoal, equipment_ids: list[str],
                                weekly_day: Optional[WeeklyDayStructure] = None, ) -> ConditioningBlock:
    modality = select_modality(equipment_ids)
    target = weekly_day.conditioning_target if weekly_day is not None else None

    engine_day = weekly_day is not None and weekly_day.main_movement_pattern == MovementPattern.ENGINE
    if engine_day and goal == TrainingGoal.HYBRID and target != ConditioningTarget.LIGHT:
        return _station_block(modality)

    params = conditioning_parameters(goal, target)
    mode = "steady" if params.zone <= 2 else "interval"
    prescription = ConditioningPrescription(mode=mode, modality=modality, work_seconds=params.work_seconds,
                                            rest_seconds=params.rest_seconds, rounds=params.rounds,
                                            target_zone=f"Z{params.zone}", )
    title = "Conditioning – Steady State" if mode == "steady" else "Conditioning – Intervals"
    return ConditioningBlock(id=new_id("conditioning"), title=title, conditioning=prescription,
                             estimated_duration_minutes=_duration_minutes(params), )
