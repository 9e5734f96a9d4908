"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class DateParseError(ValidationError):
    """Date text matches none of the supported formats."""


class IngestionError(DomainError):
    """Input cannot be read as tabular transaction data."""


class MissingColumnError(IngestionError):
    """A required column is absent from the header row."""

    def __init__(self, column: str):
        super().__init__(missing_column(column))
        self.column = column


def missing_column(column: str) -> str:
    """Return message for a required column absent from the header."""
    return f"No such column: '{column}' is missing from the header row"


def no_header() -> str:
    """Return message for input without a header row."""
    return "Input has no header row"


def malformed_row(row_num: int, expected: int, actual: int) -> str:
    """Return message for a row whose field count does not match the header."""
    return f"Row {row_num}: expected {expected} fields, found {actual}"


def coerced_amount(row_num: int, raw: str) -> str:
    """Return message for an amount that was defaulted to zero."""
    return f"Row {row_num}: could not parse amount '{raw}', using 0.0"


def invalid_month(month: int) -> str:
    """Return message for a month number outside 1..12."""
    return f"Month must be between 1 and 12, got {month}"


def invalid_month_key(key: str) -> str:
    """Return message for a malformed 'Y-M' month key."""
    return f"Invalid month '{key}', expected YEAR-MONTH (e.g. 2024-1)"


def undecodable_input(path: str, error: UnicodeDecodeError) -> str:
    """Return message for a file that is not valid UTF-8."""
    return f"Could not read '{path}' as UTF-8: byte {error.start} is invalid ({error.reason})"
