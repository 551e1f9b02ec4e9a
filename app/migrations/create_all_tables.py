"""
Migration script to create all database tables

Run this script to create all database tables:
    python -m app.migrations.create_all_tables
"""

import logging

from app.database import Base, engine, init_db

logger = logging.getLogger(__name__)


def create_tables():
    """Create all database tables"""
    try:
        init_db()
    except Exception:
        logger.exception("Error creating tables")
        raise

    logger.info("Tables present:")
    for table in Base.metadata.sorted_tables:
        logger.info(f"   - {table.name}")
    logger.info(f"Database: {engine.url.render_as_string(hide_password=True)}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    create_tables()
