"""Pydantic schemas for engine values and request/response validation."""

from praxis.schemas.autoregulation import (AutoRegContext, AutoRegFlags, AutoRegRecommendation, Difficulty,
                                           SetPerformance, SetPerformanceEvent, SetSuggestion, )
from praxis.schemas.diagnostics import QAScenarioResult
from praxis.schemas.periodization import (AcwrZone, BlockType, ConditioningTarget, FatigueAnalysis, MovementPattern,
                                          ReadinessAnalysis, ReadinessCategory, TargetLevel, WeeklyDayStructure,
                                          WeeklyStructure, WeeklyStructureMetadata, )
from praxis.schemas.plan import (AccessoryBlock, ConditioningBlock, CooldownBlock, StrengthBlock, WarmupBlock,
                                 WorkoutBlock, WorkoutPlanDay, )
from praxis.schemas.progress import ExerciseProgress, ProgressSummary, TrendPoint, VolumePoint, VolumeTrend
from praxis.schemas.preferences import (ExperienceLevel, StrengthNumbers, TrainingGoal, Units, UserPreferences,
                                        UserPreferencesUpdate, )
from praxis.schemas.recovery import PatternFatigue, RecoveryBreakdown, RecoveryResponse, RecoveryScore
from praxis.schemas.session import AdjustmentMetadata, LiveSessionState, SessionSet
from praxis.schemas.workout import CompletedBlock, ExerciseHistoryEntry, SetLog, WorkoutRecord

__all__ = [
    "AutoRegContext",
    "AutoRegFlags",
    "AutoRegRecommendation",
    "Difficulty",
    "SetPerformance",
    "SetPerformanceEvent",
    "SetSuggestion",
    "QAScenarioResult",
    "AcwrZone",
    "BlockType",
    "ConditioningTarget",
    "FatigueAnalysis",
    "MovementPattern",
    "ReadinessAnalysis",
    "ReadinessCategory",
    "TargetLevel",
    "WeeklyDayStructure",
    "WeeklyStructure",
    "WeeklyStructureMetadata",
    "AccessoryBlock",
    "ConditioningBlock",
    "CooldownBlock",
    "StrengthBlock",
    "WarmupBlock",
    "WorkoutBlock",
    "WorkoutPlanDay",
    "ExperienceLevel",
    "StrengthNumbers",
    "TrainingGoal",
    "Units",
    "UserPreferences",
    "UserPreferencesUpdate",
    "ExerciseProgress",
    "ProgressSummary",
    "TrendPoint",
    "VolumePoint",
    "VolumeTrend",
    "PatternFatigue",
    "RecoveryBreakdown",
    "RecoveryResponse",
    "RecoveryScore",
    "AdjustmentMetadata",
    "LiveSessionState",
    "SessionSet",
    "CompletedBlock",
    "ExerciseHistoryEntry",
    "SetLog",
    "WorkoutRecord",
]
