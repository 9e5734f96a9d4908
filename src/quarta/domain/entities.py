"""Domain model entities for quarta.

These are pure data classes describing ingested records and the analytics
derived from them. None of them is persisted; everything except the record
set itself is recomputed on demand.
"""

from dataclasses import asdict, dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Optional

from quarta.domain.errors import ValidationError, invalid_month, invalid_month_key


@dataclass(frozen=True)
class Transaction:
    """Transaction record as ingested from a sheet.

    The date is kept as the raw text of the cell and normalized on demand.
    """

    date: str
    transaction: str
    amount: float
    tags: Optional[str] = None
    id: Optional[str] = None
    remarks: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, order=True)
class CalendarMonth:
    """A (year, month) aggregation key, ordered by year then month."""

    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValidationError(invalid_month(self.month))

    @classmethod
    def from_date(cls, value: date) -> "CalendarMonth":
        return cls(value.year, value.month)

    @classmethod
    def parse_key(cls, key: str) -> "CalendarMonth":
        """Parse a "Y-M" key such as "2024-1" or "2024-01"."""
        year_str, sep, month_str = key.strip().partition("-")
        if not sep:
            raise ValidationError(invalid_month_key(key))
        try:
            return cls(int(year_str), int(month_str))
        except ValueError:
            raise ValidationError(invalid_month_key(key))

    def next_month(self) -> "CalendarMonth":
        if self.month == 12:
            return CalendarMonth(self.year + 1, 1)
        return CalendarMonth(self.year, self.month + 1)

    @property
    def key(self) -> str:
        """Display key in "Y-M" form without zero padding."""
        return f"{self.year}-{self.month}"

    def __str__(self) -> str:
        return self.key


@dataclass(frozen=True)
class MonthlySeries:
    """Dense month-by-month inflow/outflow series.

    months is ascending and contiguous; inflows and outflows are indexed
    positionally to it.
    """

    months: tuple[CalendarMonth, ...]
    inflows: tuple[float, ...]
    outflows: tuple[float, ...]
    skipped_dates: int = 0

    @property
    def month_keys(self) -> list[str]:
        return [m.key for m in self.months]

    def to_dict(self) -> dict[str, Any]:
        return {
            "months": self.month_keys,
            "inflows": list(self.inflows),
            "outflows": list(self.outflows),
        }


@dataclass(frozen=True)
class PeriodStats:
    """Aggregates over a window of a monthly series."""

    months: tuple[CalendarMonth, ...]
    inflows: tuple[float, ...]
    outflows: tuple[float, ...]
    savings_average: float
    average_in: float
    average_out: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "months": [m.key for m in self.months],
            "inflows": list(self.inflows),
            "outflows": list(self.outflows),
            "savings_average": self.savings_average,
            "average_in": self.average_in,
            "average_out": self.average_out,
        }


class DebtDirection(str, Enum):
    """Whether a counterparty owes the ledger owner (In) or is owed (Out)."""

    IN = "In"
    OUT = "Out"


@dataclass(frozen=True)
class DebtLedgerEntry:
    """Running debt balance for one counterparty."""

    id: str
    balance: float
    direction: DebtDirection
    related_rows: tuple[str, ...] = ()

    @property
    def paid(self) -> bool:
        if self.direction == DebtDirection.IN:
            return self.balance <= 0
        return self.balance >= 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "balance": self.balance,
            "direction": self.direction.value,
            "paid": self.paid,
            "related_rows": list(self.related_rows),
        }


@dataclass(frozen=True)
class SummaryResult:
    """Lifetime earned-vs-spent totals.

    lifetime_savings_ratio is NaN when nothing was earned.
    """

    total_earned: float
    total_spent: float
    net_income: float
    lifetime_savings_ratio: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class IngestionReport:
    """Outcome of one ingestion call."""

    transactions: tuple[Transaction, ...]
    skipped_rows: list[str] = field(default_factory=list)
    coerced_amounts: list[str] = field(default_factory=list)

    @property
    def imported(self) -> int:
        return len(self.transactions)

    @property
    def skipped(self) -> int:
        return len(self.skipped_rows)

    @property
    def coerced(self) -> int:
        return len(self.coerced_amounts)
