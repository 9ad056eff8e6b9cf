"""Periodization core: load analytics, readiness, fatigue, block type, weekly structure."""

from praxis.periodization.block_type import infer_block_type
from praxis.periodization.fatigue import analyze_fatigue
from praxis.periodization.load import calculate_recovery_score
from praxis.periodization.readiness import analyze_readiness
from praxis.periodization.recovery_adjustment import apply_recovery_adjustment
from praxis.periodization.weekly_structure import build_weekly_structure

__all__ = [
    "analyze_fatigue",
    "analyze_readiness",
    "apply_recovery_adjustment",
    "build_weekly_structure",
    "calculate_recovery_score",
    "infer_block_type",
]
