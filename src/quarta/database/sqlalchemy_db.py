"""SQLAlchemy record store implementation."""

from typing import Callable, Optional, Sequence

from sqlalchemy.orm import Session

from quarta.database.base import Database
from quarta.database.models import (
    MEMORY_DATABASE_URL,
    Transaction,
    create_database_engine,
    create_session_factory,
)
from quarta.database.mappers import transaction_to_domain, transaction_to_orm
from quarta.domain.entities import Transaction as DomainTransaction
from quarta.utils.logging_setup import get_logger

logger = get_logger(__name__)


class SQLAlchemyDatabase(Database):
    """SQLAlchemy-based implementation of Database interface."""

    def __init__(self, database_url: str = MEMORY_DATABASE_URL):
        """Initialize SQLAlchemy database.

        Args:
            database_url: SQLAlchemy database URL, in-memory SQLite by default
        """
        self.database_url = database_url
        self.engine = create_database_engine(database_url)
        self.session_factory = create_session_factory(self.engine)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database and release the engine's connections.

        For the in-memory database this discards the stored records.
        """
        if self._session is not None:
            self._session.close()
            self._session = None
        self.engine.dispose()

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        # Schema is created automatically by create_database_engine
        pass

    def replace_transactions(self, transactions: Sequence[DomainTransaction]) -> None:
        """Replace the whole record set in a single commit."""
        session = self._get_session()
        try:
            session.query(Transaction).delete()
            # Positions restart at 1, so no stale instance may keep an old key.
            session.expunge_all()
            session.add_all(
                transaction_to_orm(txn, position)
                for position, txn in enumerate(transactions, start=1)
            )
            session.commit()
        except Exception:
            session.rollback()
            raise
        logger.debug("Stored %d transactions", len(transactions))

    def list_transactions(self) -> list[DomainTransaction]:
        """List all transactions in ingestion order."""
        session = self._get_session()
        rows = session.query(Transaction).order_by(Transaction.position).all()
        return [transaction_to_domain(row) for row in rows]

    def filter_transactions(
        self, predicate: Callable[[DomainTransaction], bool]
    ) -> list[DomainTransaction]:
        """List transactions matching predicate, in ingestion order."""
        return [txn for txn in self.list_transactions() if predicate(txn)]

    def count_transactions(self) -> int:
        """Return the number of stored transactions."""
        session = self._get_session()
        return session.query(Transaction).count()
