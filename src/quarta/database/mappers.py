"""Mapper functions to convert between domain models and SQLAlchemy models."""

from quarta.domain import entities as domain
from quarta.database.models import Transaction as ORMTransaction


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        date=orm_transaction.date,
        transaction=orm_transaction.transaction,
        amount=orm_transaction.amount,
        tags=orm_transaction.tags,
        id=orm_transaction.counterparty_id,
        remarks=orm_transaction.remarks,
    )


def transaction_to_orm(transaction: domain.Transaction, position: int) -> ORMTransaction:
    """Convert domain Transaction entity to a SQLAlchemy row at the given position."""
    return ORMTransaction(
        position=position,
        date=transaction.date,
        transaction=transaction.transaction,
        amount=transaction.amount,
        tags=transaction.tags,
        counterparty_id=transaction.id,
        remarks=transaction.remarks,
    )
