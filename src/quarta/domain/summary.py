"""Earned-vs-spent summary domain service."""

from typing import Sequence

from quarta.database.base import Database
from quarta.domain.entities import SummaryResult, Transaction


def summarize(transactions: Sequence[Transaction]) -> SummaryResult:
    """Total positive amounts as earned and the rest as spent.

    The savings ratio is NaN when nothing was earned.
    """
    total_earned = 0.0
    total_spent = 0.0
    for txn in transactions:
        if txn.amount > 0:
            total_earned += txn.amount
        else:
            total_spent += txn.amount

    net_income = total_earned + total_spent
    if total_earned == 0:
        ratio = float("nan")
    else:
        ratio = net_income / total_earned

    return SummaryResult(
        total_earned=total_earned,
        total_spent=total_spent,
        net_income=net_income,
        lifetime_savings_ratio=ratio,
    )


class SummaryService:
    """Service for lifetime earned-vs-spent totals."""

    def __init__(self, db: Database):
        """Initialize summary service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_total_earned_vs_spent(self) -> SummaryResult:
        """Summarize every stored transaction, with no filtering."""
        return summarize(self.db.list_transactions())
