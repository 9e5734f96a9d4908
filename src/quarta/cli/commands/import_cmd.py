"""CSV import command."""

import click

from quarta.cli.engine_loading import load_engine


@click.command("import")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--verbose", "-v", is_flag=True, help="List every ingested transaction")
@click.pass_context
def import_csv(ctx, csv_file: str, verbose: bool):
    """Check how a sheet ingests: counts of imported, skipped and defaulted rows."""
    _, report = load_engine(ctx, csv_file)

    click.echo("\nImport complete:")
    click.echo(f"  Imported: {report.imported} transactions")
    click.echo(f"  Skipped: {report.skipped} malformed rows")
    click.echo(f"  Defaulted amounts: {report.coerced}")
    for message in report.skipped_rows + report.coerced_amounts:
        click.echo(f"    {message}", err=True)

    if verbose and report.transactions:
        click.echo()
        click.echo(f"{'Date':<22} {'Transaction':<30} {'Amount':>14} {'Tags':<16} {'ID':<12}")
        click.echo("-" * 98)
        for txn in report.transactions:
            click.echo(
                f"{txn.date:<22} {txn.transaction[:30]:<30} {txn.amount:>14,.2f} "
                f"{(txn.tags or ''):<16} {(txn.id or ''):<12}"
            )


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_csv)
