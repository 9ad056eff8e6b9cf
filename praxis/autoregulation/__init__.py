"""Set-by-set load auto-regulation."""

from praxis.autoregulation.engine import AutoRegRules, DEFAULT_RULES, recommend_next_set, should_suggest

__all__ = ["AutoRegRules", "DEFAULT_RULES", "recommend_next_set", "should_suggest"]
