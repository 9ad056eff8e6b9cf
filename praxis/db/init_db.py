"""
Database initialization.

Creates all tables.  Production databases should be migrated with Alembic
instead; this is the quick path for a local SQLite file.
"""

import logging

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from praxis.db.session import engine as default_engine

logger = logging.getLogger(__name__)


def init_db(engine: Engine = default_engine) -> None:
    """Create every table registered in ``praxis.db.base``."""
    import praxis.db.base  # noqa: F401

    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(engine)
    logger.info("Database initialization complete")


if __name__ == "__main__":
    init_db()
