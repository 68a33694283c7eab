"""CSV import command."""

import click

from spendtrack.cli.error_handling import handle_domain_error, warn_if_not_saved
from spendtrack.domain.csv_import import CSVImportService


@click.command("import")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def import_csv(ctx, csv_file: str):
    """Import expenses from a CSV file."""
    ledger = ctx.obj["ledger"]
    service = CSVImportService(ledger)

    try:
        result = service.import_file(csv_file)
    except (ValueError, FileNotFoundError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Imported {result.imported_count} expenses from {csv_file}")
    if result.skipped:
        click.echo(f"  Skipped: {len(result.skipped)} rows")
        for diagnostic in result.skipped:
            click.echo(f"    {diagnostic.message}", err=True)
    warn_if_not_saved(ledger)


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_csv)
