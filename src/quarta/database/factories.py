"""Database factory functions for creating record stores."""

from quarta.database.models import MEMORY_DATABASE_URL
from quarta.database.sqlalchemy_db import SQLAlchemyDatabase


def create_memory_database() -> SQLAlchemyDatabase:
    """Create a record store backed by a private in-memory SQLite database.

    Every call returns an independent store; nothing outlives the process.
    """
    db = SQLAlchemyDatabase(MEMORY_DATABASE_URL)
    db.connect()
    db.initialize_schema()
    return db
