"""Developer diagnostics."""

from praxis.diagnostics.qa_scenarios import format_report, run_all_scenarios

__all__ = ["format_report", "run_all_scenarios"]
