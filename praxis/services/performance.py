"""
Set performance store.

In-memory log of the sets completed during the live session and of the
load suggestions derived from them.

* events are append-only while their session runs;
* at most one suggestion exists per ``(plan_day_id, block_id, set_index)``,
  a newer one replaces the older;
* ending a session (finish or cancel) drops both its events and its
  suggestions, so the store never outgrows one session.
"""

from typing import Optional

from praxis.schemas.autoregulation import SetPerformanceEvent, SetSuggestion

SuggestionKey = tuple[str, str, int]


class PerformanceStore:
    def __init__(self):
        self.events: list[SetPerformanceEvent] = []
        self._suggestions: dict[SuggestionKey, SetSuggestion] = {}

    def add_event(self, event: SetPerformanceEvent) -> None:
        self.events.append(event)

    def add_suggestion(self, suggestion: SetSuggestion) -> None:
        self._suggestions[(suggestion.plan_day_id, suggestion.block_id, suggestion.set_index)] = suggestion

    def get_suggestion(self, plan_day_id: str, block_id: str, set_index: int) -> Optional[SetSuggestion]:
        return self._suggestions.get((plan_day_id, block_id, set_index))

    def suggestions(self, plan_day_id: Optional[str] = None) -> list[SetSuggestion]:
        return [s for s in self._suggestions.values() if plan_day_id is None or s.plan_day_id == plan_day_id]

    def events_for(self, plan_day_id: str) -> list[SetPerformanceEvent]:
        return [e for e in self.events if e.plan_day_id == plan_day_id]

    def clear_suggestion_for_set(self, plan_day_id: str, block_id: str, set_index: int) -> None:
        self._suggestions.pop((plan_day_id, block_id, set_index), None)

    def clear_session(self, plan_day_id: str) -> None:
        """Forget every event and suggestion recorded for ``plan_day_id``."""
        self.events = [e for e in self.events if e.plan_day_id != plan_day_id]
        self._suggestions = {k: s for k, s in self._suggestions.items() if s.plan_day_id != plan_day_id}
