"""
Live session manager.

Holds the one in-progress workout in memory.  Starting a session applies
the recovery adjustment to the plan day's blocks and prefills each main
lift with its recommended starting weight.  Completing a strength set runs
the auto-regulation engine and, when the recommendation changes the next
set's weight, stores a suggestion for it.

Only :meth:`LiveSessionManager.finish` produces a :class:`WorkoutRecord`;
:meth:`LiveSessionManager.cancel` throws the session away.
"""

import datetime
import logging
import time
from typing import Callable, Optional

from fastapi import HTTPException, status

from praxis.autoregulation.engine import (DEFAULT_RULES, AutoRegRules, derive_difficulty, recommend_next_set,
                                          should_suggest, )
from praxis.periodization.metrics import build_workout_record
from praxis.periodization.progression import get_recommended_weight
from praxis.periodization.recovery_adjustment import apply_recovery_adjustment
from praxis.schemas.autoregulation import (AutoRegContext, AutoRegRecommendation, Difficulty, SetPerformance,
                                           SetPerformanceEvent, SetSuggestion, )
from praxis.schemas.periodization import BlockType
from praxis.schemas.plan import AccessoryBlock, StrengthBlock, WorkoutBlock, WorkoutPlanDay
from praxis.schemas.session import CompleteSetResponse, LiveSessionState, SessionSet
from praxis.schemas.workout import ExerciseHistoryEntry, WorkoutRecord
from praxis.services.performance import PerformanceStore

logger = logging.getLogger(__name__)

ExerciseHistoryLookup = Callable[[str], list[ExerciseHistoryEntry]]
RecordSink = Callable[[WorkoutRecord, list[ExerciseHistoryEntry]], object]


def now_ms() -> int:
    return int(time.time() * 1000)


def _timer_key(block_id: str, set_index: int) -> str:
    return f"{block_id}:{set_index}"


class LiveSessionManager:
    """In-memory container for the active workout session."""

    def __init__(self, performance: Optional[PerformanceStore] = None, rules: AutoRegRules = DEFAULT_RULES,
                 clock: Callable[[], int] = now_ms, ):
        self.performance = performance or PerformanceStore()
        self.rules = rules
        self.clock = clock
        self.state: Optional[LiveSessionState] = None

    @property
    def active(self) -> bool:
        return self.state is not None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self, plan_day: WorkoutPlanDay, recovery_score: Optional[int] = None,
              exercise_history: Optional[ExerciseHistoryLookup] = None,
              block_type: Optional[BlockType] = None, ) -> LiveSessionState:
        if self.state is not None:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT,
                                detail=f"Session for plan day '{self.state.plan_day_id}' already in progress", )

        original = [b.model_copy(deep=True) for b in plan_day.blocks]
        if recovery_score is not None:
            blocks, metadata = apply_recovery_adjustment(recovery_score, plan_day.blocks)
        else:
            blocks, metadata = [b.model_copy(deep=True) for b in plan_day.blocks], None

        completed_sets = {}
        for block in blocks:
            sets = self._initial_sets(block, recovery_score, exercise_history)
            if sets is not None:
                completed_sets[block.id] = sets

        self.state = LiveSessionState(plan_day_id=plan_day.id, plan_date=plan_day.date, start_time=self.clock(),
                                      completed_sets=completed_sets, blocks=blocks, original_blocks=original,
                                      adjustment_metadata=metadata, recovery_score=recovery_score,
                                      block_type=block_type or plan_day.block_type, )
        logger.info("Session started for plan day %s (recovery %s, %s)", plan_day.id, recovery_score,
                    metadata.reason if metadata else "no adjustment")
        return self.state

    def finish(self, record_date: Optional[datetime.date] = None, on_record: Optional[RecordSink] = None,
               ) -> tuple[WorkoutRecord, list[ExerciseHistoryEntry]]:
        """End the session and build its record.

        ``on_record`` persists the record; the session is only discarded once
        it returns, so a failed write leaves the session in progress.
        """
        state = self.require_state()
        end_time = self.clock()
        record, entries = build_workout_record(state, end_time, record_date or state.plan_date)
        if on_record is not None:
            on_record(record, entries)
        state.end_time = end_time
        logger.info("Session %s finished: volume %.0f in %.0f min, %d auto-regulated sets", state.plan_day_id,
                    record.total_volume, record.duration_min, len(self.performance.events_for(state.plan_day_id)))
        self._reset()
        return record, entries

    def cancel(self) -> None:
        state = self.require_state()
        logger.info("Session %s cancelled", state.plan_day_id)
        self._reset()

    def require_state(self) -> LiveSessionState:
        if self.state is None:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="No session in progress", )
        return self.state

    # ------------------------------------------------------------------
    # Set editing
    # ------------------------------------------------------------------

    def set_weight(self, block_id: str, set_index: int, weight: Optional[float]) -> LiveSessionState:
        """Set a weight; 0 or ``None`` clears it and un-completes the set."""
        state = self.require_state()
        entry = self._get_set(block_id, set_index)
        if not weight:
            entry.weight = None
            entry.completed = False
            state.rest_timers.pop(_timer_key(block_id, set_index), None)
            # Un-completing also withdraws the suggestion this set produced
            self.performance.clear_suggestion_for_set(state.plan_day_id, block_id, set_index + 1)
        else:
            entry.weight = weight
        # Any manual edit supersedes the suggestion for this set
        self.performance.clear_suggestion_for_set(state.plan_day_id, block_id, set_index)
        return state

    def set_rpe(self, block_id: str, set_index: int, rpe: Optional[float]) -> LiveSessionState:
        self._get_set(block_id, set_index).rpe = rpe
        return self.require_state()

    def complete_set(self, block_id: str, set_index: int) -> CompleteSetResponse:
        """Toggle completion of a set; completing a main-lift set runs auto-regulation."""
        state = self.require_state()
        entry = self._get_set(block_id, set_index)
        if entry.completed:
            return CompleteSetResponse(session=self.undo_set(block_id, set_index))

        entry.completed = True
        self.start_rest_timer(block_id, set_index)

        recommendation, suggestion = None, None
        block = self._get_block(block_id)
        if isinstance(block, StrengthBlock) and block.strength_main is not None:
            try:
                recommendation, suggestion = self._autoregulate(state, block, set_index, entry)
            except Exception as e:
                logger.warning("Auto-regulation failed for %s set %d: %s", block_id, set_index, e)
        return CompleteSetResponse(session=state, recommendation=recommendation, suggestion=suggestion)

    def undo_set(self, block_id: str, set_index: int) -> LiveSessionState:
        state = self.require_state()
        self._get_set(block_id, set_index).completed = False
        state.rest_timers.pop(_timer_key(block_id, set_index), None)
        # The next set's suggestion was based on this one
        self.performance.clear_suggestion_for_set(state.plan_day_id, block_id, set_index + 1)
        return state

    # ------------------------------------------------------------------
    # Rest timers and navigation
    # ------------------------------------------------------------------

    def start_rest_timer(self, block_id: str, set_index: int) -> LiveSessionState:
        state = self.require_state()
        self._get_set(block_id, set_index)
        state.rest_timers[_timer_key(block_id, set_index)] = self.clock()
        return state

    def stop_rest_timer(self, block_id: str, set_index: int) -> LiveSessionState:
        state = self.require_state()
        entry = self._get_set(block_id, set_index)
        started = state.rest_timers.pop(_timer_key(block_id, set_index), None)
        if started is not None:
            entry.rest_time_ms = max(0, self.clock() - started)
        return state

    def next_block(self) -> LiveSessionState:
        state = self.require_state()
        if state.current_block_index < len(state.blocks) - 1:
            state.current_block_index += 1
        return state

    def complete_block(self, block_id: str) -> LiveSessionState:
        state = self.require_state()
        self._get_block(block_id)
        if block_id not in state.completed_blocks:
            state.completed_blocks.append(block_id)
        return state

    def suggestions(self) -> list[SetSuggestion]:
        state = self.require_state()
        return self.performance.suggestions(state.plan_day_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _reset(self) -> None:
        self.performance.clear_session(self.state.plan_day_id)
        self.state = None

    def _initial_sets(self, block: WorkoutBlock, recovery_score: Optional[int],
                      exercise_history: Optional[ExerciseHistoryLookup], ) -> Optional[list[SessionSet]]:
        if isinstance(block, StrengthBlock) and block.strength_main is not None:
            prescription = block.strength_main
            history = exercise_history(prescription.exercise_id) if exercise_history else []
            recommended = get_recommended_weight(prescription.sets[0].target_rpe, recovery_score, history,
                                                 self.rules.min_weight, self.rules.rounding_increment, )
            return [SessionSet(weight=recommended, recommended_weight=recommended) for _ in prescription.sets]
        if isinstance(block, AccessoryBlock) and block.accessory:
            return [SessionSet() for _ in block.accessory[0].sets]
        return None

    def _get_block(self, block_id: str) -> WorkoutBlock:
        for block in self.require_state().blocks:
            if block.id == block_id:
                return block
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Block '{block_id}' not found", )

    def _get_set(self, block_id: str, set_index: int) -> SessionSet:
        self._get_block(block_id)
        sets = self.require_state().completed_sets.get(block_id)
        if sets is None:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                                detail=f"Block '{block_id}' has no sets", )
        if not 0 <= set_index < len(sets):
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                                detail=f"Set index {set_index} out of range (0-{len(sets) - 1})", )
        return sets[set_index]

    def _autoregulate(self, state: LiveSessionState, block: StrengthBlock, set_index: int,
                      entry: SessionSet, ) -> tuple[AutoRegRecommendation, Optional[SetSuggestion]]:
        prescription = block.strength_main
        total_sets = len(prescription.sets)
        target = prescription.sets[min(set_index, total_sets - 1)]

        difficulty = derive_difficulty(entry.rpe, target.target_rpe)
        performance = SetPerformance(weight=entry.weight, reps=target.target_reps, rpe=entry.rpe,
                                     difficulty=difficulty if difficulty != Difficulty.ON_TARGET else None, )
        context = AutoRegContext(recovery_score=state.recovery_score, block_type=state.block_type,
                                 movement_pattern=block.movement_pattern.value if block.movement_pattern else None,
                                 set_index=set_index, total_sets=total_sets, target_rpe=target.target_rpe,
                                 is_final_set=set_index == total_sets - 1, )
        recommendation = recommend_next_set(performance, context, self.rules)

        self.performance.add_event(
            SetPerformanceEvent(plan_day_id=state.plan_day_id, block_id=block.id, set_index=set_index,
                                exercise_id=prescription.exercise_id, weight=entry.weight, reps=target.target_reps,
                                rpe=entry.rpe, target_rpe=target.target_rpe, difficulty=difficulty,
                                recovery_score=state.recovery_score, block_type=state.block_type,
                                recommended_weight=recommendation.next_weight, ))

        next_index = set_index + 1
        if next_index >= total_sets:
            return recommendation, None
        next_weight = state.completed_sets[block.id][next_index].weight
        if not should_suggest(next_weight, recommendation):
            return recommendation, None

        suggestion = SetSuggestion(plan_day_id=state.plan_day_id, block_id=block.id, set_index=next_index,
                                   suggested_weight=recommendation.next_weight, reason=recommendation.reason,
                                   flags=recommendation.flags, )
        self.performance.add_suggestion(suggestion)
        return recommendation, suggestion
