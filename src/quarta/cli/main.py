"""Main CLI entry point."""

import click

from quarta.config import CURRENCY_ENV, DEFAULT_CURRENCY, DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV
from quarta.utils.logging_setup import configure_logging

# Import and register all commands at module level
from quarta.cli.commands import (
    debts,
    flow,
    import_cmd,
    summary,
)


@click.group()
@click.option(
    "--log-level",
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    envvar=LOG_LEVEL_ENV,
    help=f"Logging level (overrides {LOG_LEVEL_ENV} environment variable)",
)
@click.option(
    "--currency",
    default=DEFAULT_CURRENCY,
    show_default=True,
    envvar=CURRENCY_ENV,
    help=f"Currency label for debt rows (overrides {CURRENCY_ENV} environment variable)",
)
@click.pass_context
def cli(ctx, log_level: str, currency: str):
    """Quarta - insights from personal finance sheets.

    Reads a CSV sheet with Date, Transaction, Amount, Tags, ID and Remarks
    columns and reports totals, monthly flows and outstanding debts.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)
    ctx.obj["currency"] = currency


# Register all commands
import_cmd.register_commands(cli)
summary.register_commands(cli)
flow.register_commands(cli)
debts.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
