"""Tests for the set-by-set auto-regulation engine."""

import pytest

from praxis.autoregulation.engine import (
    AutoRegRules,
    DEFAULT_RULES,
    derive_difficulty,
    difficulty_bias,
    recommend_next_set,
    recovery_bias,
    should_suggest,
)
from praxis.schemas.autoregulation import AutoRegContext, AutoRegRecommendation, Difficulty, SetPerformance
from praxis.schemas.periodization import BlockType


def _ctx(recovery: float | None = 60, block_type: BlockType | None = None, target_rpe: float | None = 8,
         set_index: int = 0, total_sets: int = 4) -> AutoRegContext:
    return AutoRegContext(
        recovery_score=recovery,
        block_type=block_type,
        target_rpe=target_rpe,
        set_index=set_index,
        total_sets=total_sets,
        is_final_set=set_index == total_sets - 1,
    )


# ======================================================================
# Difficulty
# ======================================================================


class TestDeriveDifficulty:
    @pytest.mark.parametrize(
        "rpe, target, expected",
        [
            (6, 8, Difficulty.TOO_EASY),
            (10, 8, Difficulty.TOO_HARD),
            (9, 8, Difficulty.ON_TARGET),
            (7, 8, Difficulty.ON_TARGET),
            (None, 8, Difficulty.ON_TARGET),
            (8, None, Difficulty.ON_TARGET),
        ],
    )
    def test_thresholds(self, rpe, target, expected):
        assert derive_difficulty(rpe, target) == expected


# ======================================================================
# Biases
# ======================================================================


class TestRecoveryBias:
    @pytest.mark.parametrize(
        "recovery, block_type, expected",
        [
            (30, None, -5.0),
            (40, BlockType.INTENSIFICATION, -5.0),
            (90, BlockType.INTENSIFICATION, 2.5),
            (85, BlockType.ACCUMULATION, 1.25),
            (90, BlockType.DELOAD, -5.0),
            (60, BlockType.DELOAD, -5.0),
            (None, BlockType.DELOAD, -5.0),
            (90, None, 0.0),
            (60, BlockType.ACCUMULATION, 0.0),
            (None, None, 0.0),
        ],
    )
    def test_rules(self, recovery, block_type, expected):
        assert recovery_bias(_ctx(recovery, block_type)) == expected


class TestDifficultyBias:
    @pytest.mark.parametrize(
        "rpe, expected",
        [(5.5, 2.5), (6, 2.5), (7, 1.25), (7.5, 0.0), (8, 0.0), (9, -2.5), (10, -5.0)],
    )
    def test_rpe_deviation(self, rpe, expected):
        assert difficulty_bias(SetPerformance(weight=100, rpe=rpe), _ctx()) == expected

    @pytest.mark.parametrize(
        "difficulty, expected",
        [(Difficulty.TOO_EASY, 2.5), (Difficulty.TOO_HARD, -5.0), (Difficulty.ON_TARGET, 0.0)],
    )
    def test_explicit_flag_wins(self, difficulty, expected):
        performance = SetPerformance(weight=100, rpe=8, difficulty=difficulty)
        assert difficulty_bias(performance, _ctx()) == expected

    def test_no_rpe(self):
        assert difficulty_bias(SetPerformance(weight=100), _ctx()) == 0.0

    def test_bounded_by_rules(self):
        rules = AutoRegRules(max_decrease_percent=2)
        assert difficulty_bias(SetPerformance(weight=100, rpe=10), _ctx(), rules) == -2.0


# ======================================================================
# Recommendation
# ======================================================================


class TestRecommendNextSet:
    def test_too_hard_set(self):
        """100 @ RPE 10 against a target of 8, no block type, recovery 50."""
        rec = recommend_next_set(SetPerformance(weight=100, rpe=10), _ctx(recovery=50))
        assert rec.difficulty_bias == -5.0
        assert rec.recovery_bias == 0.0
        assert rec.total_bias == -5.0
        assert rec.next_weight == 95.0
        assert rec.next_reps is None
        assert rec.flags.fatigue_detected
        assert not rec.flags.performance_boost

    @pytest.mark.parametrize("weight", [None, 0])
    def test_no_weight(self, weight):
        rec = recommend_next_set(SetPerformance(weight=weight, rpe=8), _ctx())
        assert rec.next_weight is None
        assert "Insufficient data" in rec.reason

    def test_on_target_keeps_weight(self):
        rec = recommend_next_set(SetPerformance(weight=100, rpe=8), _ctx())
        assert rec.next_weight == 100.0
        assert rec.total_bias == 0.0

    def test_boost_on_high_recovery(self):
        rec = recommend_next_set(SetPerformance(weight=100, rpe=6), _ctx(90, BlockType.INTENSIFICATION))
        assert rec.total_bias == 5.0
        assert rec.next_weight == 105.0
        assert rec.flags.performance_boost

    def test_final_set_increase_capped(self):
        context = _ctx(90, BlockType.INTENSIFICATION, set_index=3, total_sets=4)
        rec = recommend_next_set(SetPerformance(weight=100, rpe=6), context)
        assert rec.next_weight == 102.5

    def test_total_bias_bounded(self):
        rules = AutoRegRules(max_increase_percent=1)
        rec = recommend_next_set(SetPerformance(weight=100, rpe=6), _ctx(90, BlockType.INTENSIFICATION), rules)
        assert rec.total_bias == 1.0

    def test_floor_at_min_weight(self):
        rec = recommend_next_set(SetPerformance(weight=30, rpe=8), _ctx())
        assert rec.next_weight == DEFAULT_RULES.min_weight

    def test_low_recovery_suggests_deload(self):
        rec = recommend_next_set(SetPerformance(weight=100, rpe=8), _ctx(recovery=30))
        assert rec.next_weight == 95.0
        assert rec.flags.auto_deload_suggested

    def test_rounded_to_increment(self):
        rec = recommend_next_set(SetPerformance(weight=101, rpe=9), _ctx())
        # 101 × 0.975 = 98.475 → 97.5
        assert rec.next_weight == 97.5

    def test_reason_mentions_inputs(self):
        rec = recommend_next_set(SetPerformance(weight=100, rpe=10), _ctx(recovery=50, block_type=BlockType.ACCUMULATION))
        assert "Weight: 100" in rec.reason
        assert "RPE: 10 (target 8)" in rec.reason
        assert "Block: accumulation" in rec.reason


class TestDeload:
    """Deload weeks never raise the load."""

    NO_DELOAD_PENALTY = AutoRegRules(low_recovery_reduction=0)

    def test_increase_held_at_base(self):
        rec = recommend_next_set(SetPerformance(weight=100, rpe=6), _ctx(60, BlockType.DELOAD),
                                 self.NO_DELOAD_PENALTY)
        assert rec.total_bias > 0
        assert rec.next_weight == 100.0

    def test_below_floor_gives_no_recommendation(self):
        rec = recommend_next_set(SetPerformance(weight=40, rpe=6), _ctx(60, BlockType.DELOAD),
                                 self.NO_DELOAD_PENALTY)
        assert rec.next_weight is None
        assert "Deload" in rec.reason

    @pytest.mark.parametrize("rpe", [6, 8, 10])
    def test_never_above_base(self, rpe):
        rec = recommend_next_set(SetPerformance(weight=100, rpe=rpe), _ctx(95, BlockType.DELOAD))
        assert rec.next_weight <= 100

    def test_deload_penalty_flags_auto_deload(self):
        rec = recommend_next_set(SetPerformance(weight=100, rpe=8), _ctx(60, BlockType.DELOAD))
        assert rec.next_weight == 95.0
        assert rec.flags.auto_deload_suggested


class TestShouldSuggest:
    @pytest.mark.parametrize(
        "current, next_weight, expected",
        [
            (None, 95.0, True),
            (100.0, 95.0, True),
            (95.0, 95.0, False),
            (95.05, 95.0, False),
            (100.0, None, False),
        ],
    )
    def test_only_changes(self, current, next_weight, expected):
        rec = AutoRegRecommendation(next_weight=next_weight, reason="test")
        assert should_suggest(current, rec) is expected
