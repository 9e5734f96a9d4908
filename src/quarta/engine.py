"""Insights engine: one record set and the analytics derived from it."""

from datetime import date
from typing import Optional

from quarta.config import load_settings
from quarta.database.base import Database
from quarta.database.factories import create_memory_database
from quarta.domain.csv_import import CSVImportService
from quarta.domain.debt_ledger import DebtLedgerService
from quarta.domain.entities import (
    DebtLedgerEntry,
    IngestionReport,
    MonthlySeries,
    PeriodStats,
    SummaryResult,
    Transaction,
)
from quarta.domain.monthly_flow import MonthlyFlowService
from quarta.domain.summary import SummaryService


class InsightsEngine:
    """Holds one ingested record set and computes dashboard analytics over it.

    Each ingestion replaces the record set wholesale. Analytics are
    recomputed on every call. An engine is meant for one caller at a time;
    concurrent use needs external locking.
    """

    def __init__(self, db: Optional[Database] = None, currency: Optional[str] = None):
        self.db = db if db is not None else create_memory_database()
        if currency is None:
            currency = load_settings().currency
        self.import_service = CSVImportService(self.db)
        self.summary_service = SummaryService(self.db)
        self.monthly_flow_service = MonthlyFlowService(self.db)
        self.debt_ledger_service = DebtLedgerService(self.db, currency=currency)

    def parse_csv(self, text: str) -> IngestionReport:
        """Ingest CSV text, replacing the current record set."""
        return self.import_service.import_text(text)

    def load_csv(self, csv_file_path: str) -> IngestionReport:
        """Ingest a CSV file, replacing the current record set."""
        return self.import_service.import_csv(csv_file_path)

    @property
    def transactions(self) -> list[Transaction]:
        return self.db.list_transactions()

    def get_total_earned_vs_spent(self) -> SummaryResult:
        return self.summary_service.get_total_earned_vs_spent()

    def get_inflows_vs_outflows(self, today: Optional[date] = None) -> MonthlySeries:
        return self.monthly_flow_service.get_inflows_vs_outflows(today=today)

    def get_period_stats(
        self, min_month: Optional[str] = None, max_month: Optional[str] = None
    ) -> PeriodStats:
        series = self.get_inflows_vs_outflows()
        return self.monthly_flow_service.get_period_stats(series, min_month, max_month)

    def search_debtors(self, search: str = "") -> list[DebtLedgerEntry]:
        return self.debt_ledger_service.search_debtors(search)

    def close(self) -> None:
        self.db.disconnect()
