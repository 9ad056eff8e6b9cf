"""
Database initialization script.

Creates every table in the database configured by ``DATABASE_URL``.

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from praxis.core.logging import configure_logging
from praxis.db.init_db import init_db

if __name__ == "__main__":
    configure_logging()
    print("=" * 50)
    print("Praxis Database Initialization")
    print("=" * 50)

    try:
        init_db()
        print("SUCCESS: Database initialized!")
        sys.exit(0)

    except Exception as e:
        print(f"ERROR: Database initialization failed: {e}")
        sys.exit(1)
