"""Monthly inflow/outflow command."""

import json

import click

from quarta.cli.engine_loading import format_money, load_engine
from quarta.cli.error_handling import handle_domain_error
from quarta.domain.errors import ValidationError


@click.command("flow")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--min-month", help="First month of the window (YEAR-MONTH, e.g. 2024-1)")
@click.option("--max-month", help="Last month of the window (YEAR-MONTH, e.g. 2024-12)")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.pass_context
def flow(ctx, csv_file: str, min_month: str, max_month: str, as_json: bool):
    """Show inflows and outflows per month.

    Months without transactions are listed with zero totals. The averages
    at the end cover only the selected window.
    """
    engine, _ = load_engine(ctx, csv_file)
    try:
        stats = engine.get_period_stats(min_month=min_month, max_month=max_month)
    except ValidationError as e:
        handle_domain_error(ctx, e)

    if as_json:
        click.echo(json.dumps(stats.to_dict(), indent=2))
        return

    if not stats.months:
        click.echo("No months in the selected window.")
        return

    currency = ctx.obj["currency"]
    click.echo(f"{'Month':<10} {'Inflows':>20} {'Outflows':>20}")
    click.echo("-" * 52)
    for month, inflow, outflow in zip(stats.months, stats.inflows, stats.outflows):
        click.echo(
            f"{month.key:<10} {format_money(inflow, currency):>20} "
            f"{format_money(outflow, currency):>20}"
        )
    click.echo()
    click.echo(f"Savings average: {stats.savings_average * 100:.2f}%")
    click.echo(f"Average in: {format_money(stats.average_in, currency)}")
    click.echo(f"Average out: -{format_money(stats.average_out, currency)}")


def register_commands(cli):
    """Register flow command with main CLI."""
    cli.add_command(flow)
