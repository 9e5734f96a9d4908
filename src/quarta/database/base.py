"""Abstract record store interface."""

from abc import ABC, abstractmethod
from typing import Callable, Sequence

# Import entities directly to avoid circular import through domain/__init__.py
from quarta.domain.entities import Transaction


class Database(ABC):
    """Abstract storage for the ingested record set.

    Records keep their ingestion order; every listing returns them in that
    order.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def replace_transactions(self, transactions: Sequence[Transaction]) -> None:
        """Replace the whole record set with the given transactions."""
        pass

    @abstractmethod
    def list_transactions(self) -> list[Transaction]:
        """List all transactions in ingestion order."""
        pass

    @abstractmethod
    def filter_transactions(
        self, predicate: Callable[[Transaction], bool]
    ) -> list[Transaction]:
        """List transactions matching predicate, in ingestion order."""
        pass

    @abstractmethod
    def count_transactions(self) -> int:
        """Return the number of stored transactions."""
        pass
