"""Summary command."""

import json
import math

import click

from quarta.cli.engine_loading import format_money, load_engine


@click.command("summary")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.pass_context
def summary(ctx, csv_file: str, as_json: bool):
    """Show lifetime totals earned and spent."""
    engine, _ = load_engine(ctx, csv_file)
    result = engine.get_total_earned_vs_spent()
    ratio = result.lifetime_savings_ratio

    if as_json:
        data = result.to_dict()
        # NaN is not valid JSON
        if math.isnan(ratio):
            data["lifetime_savings_ratio"] = None
        click.echo(json.dumps(data, indent=2))
        return

    currency = ctx.obj["currency"]
    click.echo(f"{'Total earned':<24} {format_money(result.total_earned, currency):>24}")
    click.echo(f"{'Total spent':<24} {format_money(result.total_spent, currency):>24}")
    click.echo(f"{'Net income':<24} {format_money(result.net_income, currency):>24}")
    ratio_str = "n/a" if math.isnan(ratio) else f"{ratio * 100:.2f}%"
    click.echo(f"{'Lifetime savings':<24} {ratio_str:>24}")


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
