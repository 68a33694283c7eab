"""CSV export command."""

import click

from spendtrack.cli.date_filters import build_expense_filter, filter_options
from spendtrack.domain.csv_export import CSVExportService


@click.command("export")
@click.argument("csv_file", type=click.Path(dir_okay=False, writable=True))
@click.option("--category", help="Only export this category")
@filter_options
@click.pass_context
def export_csv(ctx, csv_file: str, category: str | None, **filter_values):
    """Export expenses to a CSV file."""
    ledger = ctx.obj["ledger"]
    filters = build_expense_filter(ctx, category=category, **filter_values)
    try:
        count = CSVExportService(ledger).export_file(csv_file, ledger.list_expenses(filters))
    except OSError as e:
        click.echo(f"Error: Could not write {csv_file}: {e}", err=True)
        ctx.exit(1)
    click.echo(f"Exported {count} expenses to {csv_file}")


def register_commands(cli):
    """Register export command with main CLI."""
    cli.add_command(export_csv)
