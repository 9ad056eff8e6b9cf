"""Tests for the session service: plan → live session → history."""

import datetime

import pytest
from fastapi import HTTPException

from praxis.schemas.plan import StrengthBlock
from praxis.schemas.preferences import ExperienceLevel, TrainingGoal, UserPreferencesUpdate
from praxis.services.history_service import HistoryService
from praxis.services.live_session import LiveSessionManager
from praxis.services.plan_service import PlanService
from praxis.services.preferences_service import PreferencesService
from praxis.services.recovery_service import RecoveryService
from praxis.services.session_service import SessionService

MONDAY = datetime.date(2026, 1, 19)


class FakeClock:
    def __init__(self):
        self.now = 0

    def __call__(self) -> int:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def service(db_session, clock):
    PreferencesService(db_session).update(
        UserPreferencesUpdate(
            goal=TrainingGoal.HYBRID,
            experience_level=ExperienceLevel.INTERMEDIATE,
            equipment_ids=["barbell", "plates", "bench"],
        )
    )
    PlanService(db_session).generate_week(MONDAY)
    return SessionService(db_session, LiveSessionManager(clock=clock))


def _main_block(blocks) -> StrengthBlock:
    return next(b for b in blocks if isinstance(b, StrengthBlock) and b.strength_main is not None)


class TestStart:
    def test_fresh_athlete_gets_back_off_set(self, service):
        state = service.start(MONDAY)
        assert state.recovery_score == 100
        assert state.adjustment_metadata.level == "high"
        planned = _main_block(state.original_blocks).strength_main.sets
        adjusted = _main_block(state.blocks).strength_main.sets
        assert len(adjusted) == len(planned) + 1

    def test_block_type_from_plan(self, service):
        state = service.start(MONDAY)
        assert state.block_type.value == "accumulation"

    def test_no_plan_for_date(self, service):
        with pytest.raises(HTTPException) as exc:
            service.start(MONDAY + datetime.timedelta(days=6))
        assert exc.value.status_code == 404
        assert not service.manager.active


class TestFinish:
    def test_workout_lands_in_history(self, db_session, service, clock):
        state = service.start(MONDAY)
        block = _main_block(state.blocks)
        service.manager.set_weight(block.id, 0, 100)
        service.manager.set_rpe(block.id, 0, 8)
        service.manager.complete_set(block.id, 0)
        clock.now = 60 * 60_000

        record = service.finish()

        history = HistoryService(db_session)
        assert [w.id for w in history.get_workouts()] == [record.id]
        assert record.duration_min == 60
        entries = history.get_exercise_history(block.strength_main.exercise_id)
        assert [e.weight for e in entries] == [100.0]
        assert not service.manager.active

    def test_recovery_refreshed(self, db_session, service):
        state = service.start(MONDAY)
        block = _main_block(state.blocks)
        service.manager.set_weight(block.id, 0, 100)
        service.manager.set_rpe(block.id, 0, 8)
        service.manager.complete_set(block.id, 0)
        service.finish()
        assert RecoveryService(db_session).get_score(MONDAY) < 100
