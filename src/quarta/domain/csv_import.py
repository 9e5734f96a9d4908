"""CSV import domain service."""

import csv
import io
from pathlib import Path
from typing import Iterable, Optional

from quarta.database.base import Database
from quarta.domain.entities import IngestionReport, Transaction
from quarta.domain.errors import (
    IngestionError,
    MissingColumnError,
    coerced_amount,
    malformed_row,
    no_header,
    undecodable_input,
)
from quarta.utils.amount_parser import parse_amount
from quarta.utils.logging_setup import get_logger

logger = get_logger(__name__)

REQUIRED_COLUMNS = ("date", "transaction", "amount", "tags", "id", "remarks")


def resolve_columns(header: list[str]) -> dict[str, int]:
    """Map each required column name to its index in the header.

    Names are matched case-insensitively and exactly (surrounding whitespace
    ignored). The first matching column wins.

    Raises:
        MissingColumnError: If a required column is absent
    """
    normalized = [name.strip().lower() for name in header]
    indexes = {}
    for column in REQUIRED_COLUMNS:
        try:
            indexes[column] = normalized.index(column)
        except ValueError:
            raise MissingColumnError(column)
    return indexes


def _optional(value: str) -> Optional[str]:
    return value if value != "" else None


class CSVImportService:
    """Service for ingesting transaction sheets into the record store."""

    def __init__(self, db: Database):
        """Initialize CSV import service.

        Args:
            db: Database instance holding the record set
        """
        self.db = db

    def import_csv(self, csv_file_path: str) -> IngestionReport:
        """Ingest transactions from a UTF-8 CSV file.

        Raises:
            FileNotFoundError: If CSV file doesn't exist
            IngestionError: If the file is not UTF-8 or has no header row
            MissingColumnError: If a required column is absent
        """
        csv_path = Path(csv_file_path)
        if not csv_path.exists():
            raise FileNotFoundError(f"CSV file not found: {csv_file_path}")

        try:
            with open(csv_path, "r", encoding="utf-8-sig", newline="") as f:
                text = f.read()
        except UnicodeDecodeError as e:
            raise IngestionError(undecodable_input(csv_file_path, e))
        return self.import_text(text)

    def import_text(self, text: str) -> IngestionReport:
        """Ingest transactions from CSV text and replace the stored record set.

        Rows with the wrong number of fields are skipped; amounts that do not
        parse are stored as 0.0. Both are listed in the returned report. On
        a structural failure nothing is stored and the previous record set
        stays as it was.

        Args:
            text: CSV text whose header names Date, Transaction, Amount,
                Tags, ID and Remarks in any order and case

        Returns:
            IngestionReport with the stored transactions and row diagnostics

        Raises:
            IngestionError: If the text has no header row
            MissingColumnError: If a required column is absent
        """
        if text.startswith("\ufeff"):
            text = text[1:]
        reader = csv.reader(io.StringIO(text, newline=""))

        try:
            header = next(reader)
        except StopIteration:
            raise IngestionError(no_header())
        except csv.Error as e:
            raise IngestionError(f"Could not read header row: {e}")

        columns = resolve_columns(header)
        report = self._read_rows(reader, len(header), columns)

        self.db.replace_transactions(report.transactions)
        logger.info(
            "Ingested %d transactions (%d rows skipped, %d amounts defaulted)",
            report.imported,
            report.skipped,
            report.coerced,
        )
        return report

    def _read_rows(
        self, reader: Iterable[list[str]], width: int, columns: dict[str, int]
    ) -> IngestionReport:
        transactions = []
        skipped_rows = []
        coerced_amounts = []

        rows = iter(reader)
        row_num = 1  # header is row 1
        while True:
            row_num += 1
            try:
                row = next(rows)
            except StopIteration:
                break
            except csv.Error as e:
                message = f"Row {row_num}: {e}"
                logger.warning("Skipping malformed row: %s", message)
                skipped_rows.append(message)
                continue

            if not row:
                continue

            if len(row) != width:
                message = malformed_row(row_num, width, len(row))
                logger.warning("Skipping malformed row: %s", message)
                skipped_rows.append(message)
                continue

            raw_amount = row[columns["amount"]]
            try:
                amount = parse_amount(raw_amount)
            except ValueError:
                message = coerced_amount(row_num, raw_amount)
                logger.warning(message)
                coerced_amounts.append(message)
                amount = 0.0

            transactions.append(
                Transaction(
                    date=row[columns["date"]],
                    transaction=row[columns["transaction"]],
                    amount=amount,
                    tags=_optional(row[columns["tags"]]),
                    id=_optional(row[columns["id"]]),
                    remarks=_optional(row[columns["remarks"]]),
                )
            )

        return IngestionReport(
            transactions=tuple(transactions),
            skipped_rows=skipped_rows,
            coerced_amounts=coerced_amounts,
        )
