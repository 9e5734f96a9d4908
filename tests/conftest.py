"""Shared pytest fixtures for quarta tests."""

import logging
from pathlib import Path

import pytest

from quarta.database.factories import create_memory_database
from quarta.domain.csv_import import CSVImportService
from quarta.domain.debt_ledger import DebtLedgerService
from quarta.domain.monthly_flow import MonthlyFlowService
from quarta.domain.summary import SummaryService
from quarta.engine import InsightsEngine
from quarta.utils import logging_setup

HEADER = "Date,Transaction,Amount,Tags,ID,Remarks\n"

SAMPLE_CSV = (
    HEADER
    + '"January 5, 2024",Salary,"₱30,000.00",Income,,\n'
    + '"January 9, 2024",Groceries,-2500,Food,,weekly\n'
    + '"March 1, 2024",Lent to Alice,-1000,Debt:Out,alice,\n'
    + '"March 15, 2024",Alice paid back,400,Debt:Out,alice,partial\n'
    + "2024-03-20,Borrowed from Bob,5000,Debt:In,bob,\n"
    + "2024-04-02T08:00:00Z,Paid Bob,-5000,Debt:In,bob,\n"
    + '"Tuesday, April 30, 2024",Rent,-8000,Housing,,\n'
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo CLI logging configuration between tests."""
    yield
    logger = logging.getLogger("quarta")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    logging_setup._CONFIGURED = False


@pytest.fixture
def temp_db():
    """Create a fresh in-memory record store for testing."""
    db = create_memory_database()
    yield db
    db.disconnect()


@pytest.fixture
def import_service(temp_db):
    """Create a CSVImportService with a temporary database."""
    return CSVImportService(temp_db)


@pytest.fixture
def summary_service(temp_db):
    """Create a SummaryService with a temporary database."""
    return SummaryService(temp_db)


@pytest.fixture
def monthly_flow_service(temp_db):
    """Create a MonthlyFlowService with a temporary database."""
    return MonthlyFlowService(temp_db)


@pytest.fixture
def debt_ledger_service(temp_db):
    """Create a DebtLedgerService with a temporary database."""
    return DebtLedgerService(temp_db, currency="PHP")


@pytest.fixture
def engine():
    """Create an InsightsEngine with its own record store."""
    engine = InsightsEngine(currency="PHP")
    yield engine
    engine.close()


@pytest.fixture
def loaded_engine(engine):
    """InsightsEngine with SAMPLE_CSV ingested."""
    engine.parse_csv(SAMPLE_CSV)
    return engine


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def write_csv(tmp_path):
    """Return a helper that writes CSV text to a file and returns its path."""

    def _write(text: str, name: str = "sheet.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_csv(write_csv):
    """Path to a file containing SAMPLE_CSV."""
    return write_csv(SAMPLE_CSV)
