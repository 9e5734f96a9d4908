"""CLI helper for building an engine from a sheet."""

import click

from quarta.cli.error_handling import handle_domain_error
from quarta.domain.entities import IngestionReport
from quarta.domain.errors import DomainError
from quarta.engine import InsightsEngine


def load_engine(ctx: click.Context, csv_file: str) -> tuple[InsightsEngine, IngestionReport]:
    """Ingest csv_file into a fresh engine, exiting on structural failure."""
    engine = InsightsEngine(currency=ctx.obj.get("currency"))
    try:
        report = engine.load_csv(csv_file)
    except DomainError as e:
        handle_domain_error(ctx, e)
    return engine, report


def format_money(amount: float, currency: str) -> str:
    """Format an amount with thousands separators and the currency label."""
    return f"{amount:,.2f} {currency}"
