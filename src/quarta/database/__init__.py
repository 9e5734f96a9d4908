"""Record store for quarta."""

from quarta.database.base import Database
from quarta.database.factories import create_memory_database

__all__ = ["Database", "create_memory_database"]
