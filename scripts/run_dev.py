"""
Development server launcher.

Loads .env, creates the tables and serves the API with uvicorn in reload
mode on ``HOST``:``PORT``.

Usage:
    python scripts/run_dev.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

import uvicorn

from praxis.core.config import settings
from praxis.db.init_db import init_db

if __name__ == "__main__":
    base_url = f"http://{settings.HOST}:{settings.PORT}"
    print(f"{settings.PROJECT_NAME} {settings.VERSION}")
    print(f"Database: {settings.DATABASE_URL}")
    init_db()
    print(f"API docs:  {base_url}/docs")
    print(f"QA report: {base_url}/api/v1/diagnostics/qa")

    uvicorn.run("praxis.main:app", host=settings.HOST, port=settings.PORT, reload=True,
                log_level="debug" if settings.DEBUG else "info")
