"""Diagnostic endpoints."""

import datetime
from typing import Optional

from fastapi import APIRouter, Query

from praxis.diagnostics.qa_scenarios import run_all_scenarios
from praxis.schemas.diagnostics import QAScenarioResult

router = APIRouter()


@router.get("/qa", summary="Run the periodization QA scenarios.", response_model=list[QAScenarioResult], )
def run_qa(as_of: Optional[datetime.date] = Query(None, description="Reference date (defaults to today)")):
    return run_all_scenarios(as_of)
