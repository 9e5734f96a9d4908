"""Debt ledger command."""

import json

import click

from quarta.cli.engine_loading import format_money, load_engine


@click.command("debts")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("search", required=False, default="")
@click.option("--unpaid", is_flag=True, help="Only show outstanding debts")
@click.option("--verbose", "-v", is_flag=True, help="Show the rows behind each balance")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.pass_context
def debts(ctx, csv_file: str, search: str, unpaid: bool, verbose: bool, as_json: bool):
    """Show debt balances per counterparty.

    Only rows tagged Debt, Debt:In or Debt:Out count. SEARCH filters
    counterparty IDs by case-insensitive substring.
    """
    engine, _ = load_engine(ctx, csv_file)
    entries = engine.search_debtors(search)
    if unpaid:
        entries = [entry for entry in entries if not entry.paid]

    if as_json:
        click.echo(json.dumps([entry.to_dict() for entry in entries], indent=2))
        return

    if not entries:
        click.echo("No debts found.")
        return

    currency = ctx.obj["currency"]
    click.echo(f"{'ID':<20} {'Balance':>20} {'Direction':<10} {'Paid':<5}")
    click.echo("-" * 58)
    for entry in entries:
        paid_str = "yes" if entry.paid else "no"
        click.echo(
            f"{entry.id:<20} {format_money(entry.balance, currency):>20} "
            f"{entry.direction.value:<10} {paid_str:<5}"
        )
        if verbose:
            for row in entry.related_rows:
                click.echo(f"    {row}")


def register_commands(cli):
    """Register debts command with main CLI."""
    cli.add_command(debts)
