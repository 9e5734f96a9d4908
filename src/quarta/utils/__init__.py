"""Utility functions for quarta."""

from quarta.utils.date_parser import normalize_date, month_range
from quarta.utils.amount_parser import parse_amount, format_amount

__all__ = ["normalize_date", "month_range", "parse_amount", "format_amount"]
