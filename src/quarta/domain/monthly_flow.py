"""Monthly inflow/outflow domain service."""

from collections import defaultdict
from datetime import UTC, date, datetime
from typing import Optional, Sequence

from quarta.database.base import Database
from quarta.domain.entities import (
    CalendarMonth,
    MonthlySeries,
    PeriodStats,
    Transaction,
)
from quarta.domain.errors import DateParseError
from quarta.utils.date_parser import month_range, normalize_date
from quarta.utils.logging_setup import get_logger

logger = get_logger(__name__)

# Range start when no record date can be parsed.
EPOCH_MONTH = CalendarMonth(1970, 1)


class MonthlyFlowService:
    """Service for month-by-month inflow and outflow series."""

    def __init__(self, db: Database):
        """Initialize monthly flow service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_inflows_vs_outflows(self, today: Optional[date] = None) -> MonthlySeries:
        """Build the lifetime inflow/outflow series over the stored records.

        Args:
            today: Date used as the range end when no record date parses;
                defaults to the current UTC date

        Returns:
            MonthlySeries covering every month between the earliest and latest
            transaction, inclusive, with 0.0 for months without activity
        """
        return self.build_monthly_series(self.db.list_transactions(), today=today)

    def build_monthly_series(
        self, transactions: Sequence[Transaction], today: Optional[date] = None
    ) -> MonthlySeries:
        """Group amounts by calendar month and fill the gaps between them."""
        inflows: dict[CalendarMonth, float] = defaultdict(float)
        outflows: dict[CalendarMonth, float] = defaultdict(float)
        skipped_dates = 0

        for txn in transactions:
            try:
                month = CalendarMonth.from_date(normalize_date(txn.date))
            except DateParseError as e:
                logger.debug("Excluding transaction from monthly flow: %s", e)
                skipped_dates += 1
                continue

            if txn.amount > 0:
                inflows[month] += txn.amount
            else:
                outflows[month] += txn.amount

        observed = set(inflows) | set(outflows)
        if observed:
            start, end = min(observed), max(observed)
        else:
            if today is None:
                today = datetime.now(UTC).date()
            start, end = EPOCH_MONTH, CalendarMonth.from_date(today)

        if skipped_dates:
            logger.warning(
                "%d transactions have unparseable dates and are left out of the monthly flow",
                skipped_dates,
            )

        months = tuple(month_range(start, end))
        return MonthlySeries(
            months=months,
            inflows=tuple(inflows.get(m, 0.0) for m in months),
            outflows=tuple(outflows.get(m, 0.0) for m in months),
            skipped_dates=skipped_dates,
        )

    def get_period_stats(
        self,
        series: MonthlySeries,
        min_month: Optional[str] = None,
        max_month: Optional[str] = None,
    ) -> PeriodStats:
        """Slice a monthly series to a window and compute its averages.

        min_month and max_month are "Y-M" keys; None or a key outside the
        series leaves that side of the window open. An inverted window gives
        empty stats.

        Returns:
            PeriodStats with the sliced series, the savings average
            ((in - |out|) / in, 0 when nothing came in) and per-month average
            inflow and absolute outflow

        Raises:
            ValidationError: If a bound is not a "Y-M" key
        """
        keys = series.month_keys
        # Accept zero-padded keys such as "2024-01".
        min_key = CalendarMonth.parse_key(min_month).key if min_month else None
        max_key = CalendarMonth.parse_key(max_month).key if max_month else None

        start_index = 0
        end_index = len(keys) - 1
        if min_key in keys:
            start_index = keys.index(min_key)
        if max_key in keys:
            end_index = keys.index(max_key)

        if not keys or start_index > end_index:
            return PeriodStats(
                months=(),
                inflows=(),
                outflows=(),
                savings_average=0.0,
                average_in=0.0,
                average_out=0.0,
            )

        window = slice(start_index, end_index + 1)
        months = series.months[window]
        inflows = series.inflows[window]
        outflows = series.outflows[window]

        total_in = sum(inflows)
        total_out = sum(abs(value) for value in outflows)
        savings_average = (total_in - total_out) / total_in if total_in > 0 else 0.0

        return PeriodStats(
            months=months,
            inflows=inflows,
            outflows=outflows,
            savings_average=savings_average,
            average_in=total_in / len(months),
            average_out=total_out / len(months),
        )
