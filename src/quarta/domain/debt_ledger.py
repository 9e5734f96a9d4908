"""Debt ledger domain service."""

from dataclasses import dataclass, field
from typing import Optional

from quarta.config import DEFAULT_CURRENCY
from quarta.database.base import Database
from quarta.domain.entities import DebtDirection, DebtLedgerEntry, Transaction
from quarta.utils.amount_parser import format_amount
from quarta.utils.logging_setup import get_logger

logger = get_logger(__name__)

DEBT_TAG = "Debt"
DEBT_IN_TAG = "Debt:In"


def is_debt_tag(tags: Optional[str]) -> bool:
    """Return True for tags carrying the debt convention.

    Matches "Debt", "Debt:In" and "Debt:Out" anywhere in the tag text.
    """
    return tags is not None and DEBT_TAG in tags


def debt_direction(tags: Optional[str]) -> DebtDirection:
    """Classify a debt tag; anything not marked "Debt:In" is Out."""
    if tags is not None and DEBT_IN_TAG in tags:
        return DebtDirection.IN
    return DebtDirection.OUT


@dataclass
class _Account:
    direction: DebtDirection
    balance: float = 0.0
    related_rows: list[str] = field(default_factory=list)


class DebtLedgerService:
    """Service for per-counterparty debt balances."""

    def __init__(self, db: Database, currency: str = DEFAULT_CURRENCY):
        """Initialize debt ledger service.

        Args:
            db: Database instance
            currency: Label appended to amounts in related rows
        """
        self.db = db
        self.currency = currency

    def format_related_row(self, txn: Transaction) -> str:
        return f"{txn.date}: {format_amount(txn.amount)} {self.currency}"

    def search_debtors(self, search: str = "") -> list[DebtLedgerEntry]:
        """Build ledger entries for counterparties whose id contains search.

        Only records tagged with the debt convention count. The direction of
        a counterparty is taken from its first record and never changes.
        Records without an id are left out.

        Args:
            search: Case-insensitive substring of the counterparty id; empty
                matches every id

        Returns:
            Ledger entries sorted by id
        """
        needle = (search or "").lower()
        accounts: dict[str, _Account] = {}

        for txn in self.db.filter_transactions(lambda t: is_debt_tag(t.tags)):
            if txn.id is None or needle not in txn.id.lower():
                continue

            account = accounts.get(txn.id)
            if account is None:
                account = _Account(direction=debt_direction(txn.tags))
                accounts[txn.id] = account
            account.balance += txn.amount
            account.related_rows.append(self.format_related_row(txn))

        logger.debug("Debt search %r matched %d counterparties", search, len(accounts))
        return [
            DebtLedgerEntry(
                id=counterparty_id,
                balance=account.balance,
                direction=account.direction,
                related_rows=tuple(account.related_rows),
            )
            for counterparty_id, account in sorted(accounts.items())
        ]
