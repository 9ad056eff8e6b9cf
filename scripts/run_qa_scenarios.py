"""
Periodization QA runner.

Runs the diagnostic scenarios against the engine and prints the report.
Exits non-zero when any scenario raised an error.

Usage:
    python scripts/run_qa_scenarios.py [YYYY-MM-DD]
"""

import datetime
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from praxis.core.logging import configure_logging
from praxis.diagnostics.qa_scenarios import format_report, run_all_scenarios

if __name__ == "__main__":
    configure_logging()
    as_of = datetime.date.fromisoformat(sys.argv[1]) if len(sys.argv) > 1 else None

    results = run_all_scenarios(as_of)
    print(format_report(results))
    sys.exit(1 if any(r.errors for r in results) else 0)
