"""Tests for the in-memory live session manager and the performance store.

No database: the manager is exercised directly with hand-built plan days
and a controllable clock.
"""

import datetime

import pytest
from fastapi import HTTPException

from praxis.schemas.autoregulation import Difficulty, SetPerformanceEvent, SetSuggestion
from praxis.schemas.periodization import BlockType, MovementPattern
from praxis.schemas.plan import (
    AccessoryBlock,
    AccessoryPrescription,
    CooldownBlock,
    SetPrescription,
    StrengthBlock,
    StrengthPrescription,
    WarmupBlock,
    WorkoutPlanDay,
)
from praxis.schemas.workout import ExerciseHistoryEntry
from praxis.services.live_session import LiveSessionManager
from praxis.services.performance import PerformanceStore

PLAN_DATE = datetime.date(2026, 1, 19)


# ======================================================================
# Helpers
# ======================================================================


class FakeClock:
    def __init__(self, now: int = 1_000):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


def _make_plan_day(sets: int = 3, block_type: BlockType | None = None) -> WorkoutPlanDay:
    strength = StrengthBlock(
        id="main",
        title="Main Lift – Back Squat",
        movement_pattern=MovementPattern.SQUAT,
        strength_main=StrengthPrescription(
            exercise_id="back_squat",
            sets=[SetPrescription(target_reps=5, target_rpe=8) for _ in range(sets)],
            wave="heavy",
            rpe=8,
            percent=0.8,
        ),
    )
    accessory = AccessoryBlock(
        id="acc",
        title="Accessory Work",
        accessory=[AccessoryPrescription(exercise_id="plank", sets=[SetPrescription(target_reps=10)] * 2)],
    )
    return WorkoutPlanDay(
        id="plan-1",
        user_id="local",
        date=PLAN_DATE,
        day_index=0,
        blocks=[WarmupBlock(id="warm", title="Warm-Up"), strength, accessory, CooldownBlock(id="cool", title="Cooldown")],
        block_type=block_type,
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def manager(clock):
    return LiveSessionManager(clock=clock)


@pytest.fixture
def started(manager):
    manager.start(_make_plan_day())
    return manager


def _log_hard_set(manager: LiveSessionManager, set_index: int = 0):
    manager.set_weight("main", set_index, 100)
    manager.set_rpe("main", set_index, 10)
    return manager.complete_set("main", set_index)


# ======================================================================
# Lifecycle
# ======================================================================


class TestStart:
    def test_initial_state(self, started, clock):
        state = started.state
        assert state.plan_day_id == "plan-1"
        assert state.start_time == clock.now
        assert state.current_block_index == 0
        assert len(state.completed_sets["main"]) == 3
        assert len(state.completed_sets["acc"]) == 2
        assert "warm" not in state.completed_sets

    def test_no_recovery_score_means_no_adjustment(self, started):
        assert started.state.adjustment_metadata is None
        assert started.state.blocks == started.state.original_blocks

    def test_low_recovery_adjusts_but_keeps_original(self, manager):
        state = manager.start(_make_plan_day(), recovery_score=30)
        assert state.adjustment_metadata.level == "under"
        assert len(state.blocks[1].strength_main.sets) == 2
        assert len(state.original_blocks[1].strength_main.sets) == 3
        assert len(state.completed_sets["main"]) == 2

    def test_prefilled_from_exercise_history(self, manager):
        entry = ExerciseHistoryEntry(date=PLAN_DATE - datetime.timedelta(days=7), exercise_id="back_squat",
                                     block_id="main", session_id="w0", weight=100, reps=5, rpe=8)
        state = manager.start(_make_plan_day(), recovery_score=60, exercise_history=lambda _: [entry])
        # Moderate recovery lowers the target to RPE 7; last RPE 8 is within 1
        assert [s.weight for s in state.completed_sets["main"]] == [100.0] * 3
        assert state.completed_sets["main"][0].recommended_weight == 100.0

    def test_block_type_from_plan_day(self, manager):
        assert manager.start(_make_plan_day(block_type=BlockType.DELOAD)).block_type == BlockType.DELOAD

    def test_second_start_conflicts(self, started):
        with pytest.raises(HTTPException) as exc:
            started.start(_make_plan_day())
        assert exc.value.status_code == 409

    def test_idle_manager(self, manager):
        assert not manager.active
        with pytest.raises(HTTPException) as exc:
            manager.complete_set("main", 0)
        assert exc.value.status_code == 409


class TestFinishAndCancel:
    def test_cancel_writes_nothing(self, started):
        _log_hard_set(started)
        started.cancel()
        assert started.state is None
        assert started.performance.suggestions() == []
        assert started.performance.events == []

    def test_finish_builds_record(self, started, clock):
        _log_hard_set(started)
        clock.advance(45 * 60_000)
        written = []
        record, entries = started.finish(on_record=lambda r, e: written.append((r, e)))
        assert written == [(record, entries)]
        assert record.plan_day_id == "plan-1"
        assert record.date == PLAN_DATE
        assert record.duration_min == 45
        assert record.total_volume == 500
        assert len(entries) == 1
        assert started.state is None
        assert started.performance.events == []

    def test_failed_write_keeps_session(self, started):
        def fail(record, entries):
            raise RuntimeError("disk full")

        with pytest.raises(RuntimeError):
            started.finish(on_record=fail)
        assert started.active

    def test_finish_without_session(self, manager):
        with pytest.raises(HTTPException) as exc:
            manager.finish()
        assert exc.value.status_code == 409


# ======================================================================
# Sets
# ======================================================================


class TestSetEditing:
    @pytest.mark.parametrize("cleared", [0, None])
    def test_clearing_weight_uncompletes(self, started, cleared):
        _log_hard_set(started)
        assert started.performance.get_suggestion("plan-1", "main", 1) is not None

        state = started.set_weight("main", 0, cleared)
        assert state.completed_sets["main"][0].weight is None
        assert not state.completed_sets["main"][0].completed
        assert started.performance.get_suggestion("plan-1", "main", 1) is None
        assert started.suggestions() == []

    def test_unknown_block(self, started):
        with pytest.raises(HTTPException) as exc:
            started.set_weight("nope", 0, 100)
        assert exc.value.status_code == 404

    @pytest.mark.parametrize("set_index", [-1, 3])
    def test_set_out_of_range(self, started, set_index):
        with pytest.raises(HTTPException) as exc:
            started.set_rpe("main", set_index, 8)
        assert exc.value.status_code == 422

    def test_block_without_sets(self, started):
        with pytest.raises(HTTPException) as exc:
            started.complete_set("warm", 0)
        assert exc.value.status_code == 422


class TestAutoRegulation:
    def test_hard_set_suggests_lighter_next_set(self, started):
        response = _log_hard_set(started)
        assert response.recommendation.next_weight == 95.0
        assert response.suggestion.set_index == 1
        assert response.suggestion.suggested_weight == 95.0
        assert started.suggestions() == [response.suggestion]

    def test_event_recorded(self, started):
        _log_hard_set(started)
        events = started.performance.events_for("plan-1")
        assert len(events) == 1
        assert events[0].difficulty == Difficulty.TOO_HARD
        assert events[0].recommended_weight == 95.0

    def test_weight_edit_clears_suggestion(self, started):
        _log_hard_set(started)
        started.set_weight("main", 1, 100)
        assert started.suggestions() == []

    def test_undo_clears_next_suggestion(self, started):
        _log_hard_set(started)
        started.undo_set("main", 0)
        assert started.suggestions() == []
        assert not started.state.completed_sets["main"][0].completed

    def test_complete_toggles(self, started):
        _log_hard_set(started)
        response = started.complete_set("main", 0)
        assert response.recommendation is None
        assert not response.session.completed_sets["main"][0].completed
        assert started.suggestions() == []

    def test_no_suggestion_when_weight_already_matches(self, started):
        started.set_weight("main", 1, 95)
        response = _log_hard_set(started)
        assert response.recommendation.next_weight == 95.0
        assert response.suggestion is None

    def test_final_set_has_no_suggestion(self, started):
        response = _log_hard_set(started, set_index=2)
        assert response.recommendation is not None
        assert response.suggestion is None

    def test_accessory_sets_skip_auto_regulation(self, started):
        response = started.complete_set("acc", 0)
        assert response.recommendation is None
        assert response.session.completed_sets["acc"][0].completed

    def test_engine_failure_does_not_block_completion(self, started, monkeypatch):
        def boom(*args, **kwargs):
            raise ValueError("bad input")

        monkeypatch.setattr("praxis.services.live_session.recommend_next_set", boom)
        response = _log_hard_set(started)
        assert response.recommendation is None
        assert response.session.completed_sets["main"][0].completed


# ======================================================================
# Timers and navigation
# ======================================================================


class TestRestTimer:
    def test_rest_time_recorded(self, started, clock):
        started.start_rest_timer("main", 0)
        clock.advance(90_000)
        state = started.stop_rest_timer("main", 0)
        assert state.completed_sets["main"][0].rest_time_ms == 90_000
        assert state.rest_timers == {}

    def test_completing_a_set_starts_its_timer(self, started):
        started.complete_set("acc", 1)
        assert "acc:1" in started.state.rest_timers

    def test_stop_without_start(self, started):
        state = started.stop_rest_timer("main", 0)
        assert state.completed_sets["main"][0].rest_time_ms is None


class TestNavigation:
    def test_next_block_bounded(self, started):
        for _ in range(10):
            started.next_block()
        assert started.state.current_block_index == 3

    def test_complete_block_once(self, started):
        started.complete_block("main")
        started.complete_block("main")
        assert started.state.completed_blocks == ["main"]


# ======================================================================
# Performance store
# ======================================================================


class TestPerformanceStore:
    def test_newer_suggestion_replaces_older(self, started):
        _log_hard_set(started)
        store: PerformanceStore = started.performance
        first = store.get_suggestion("plan-1", "main", 1)
        replacement = first.model_copy(update={"suggested_weight": 90.0})
        store.add_suggestion(replacement)
        assert store.suggestions("plan-1") == [replacement]

    def test_events_do_not_accumulate_across_sessions(self, manager):
        for _ in range(3):
            manager.start(_make_plan_day())
            _log_hard_set(manager)
            _log_hard_set(manager, set_index=1)
            assert len(manager.performance.events) == 2
            manager.finish()
        assert manager.performance.events == []

    def test_clear_session_keeps_other_plan_days(self):
        store = PerformanceStore()
        for plan_day_id in ("plan-1", "plan-2"):
            store.add_event(SetPerformanceEvent(plan_day_id=plan_day_id, block_id="main", set_index=0,
                                                difficulty=Difficulty.ON_TARGET))
            store.add_suggestion(SetSuggestion(plan_day_id=plan_day_id, block_id="main", set_index=1,
                                               suggested_weight=95.0, reason="Hard set"))
        store.clear_session("plan-1")
        assert [e.plan_day_id for e in store.events] == ["plan-2"]
        assert [s.plan_day_id for s in store.suggestions()] == ["plan-2"]
