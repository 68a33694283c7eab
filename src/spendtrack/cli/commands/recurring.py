"""Recurring expense command."""

import click

from spendtrack.cli.error_handling import warn_if_not_saved
from spendtrack.domain.recurrence import RecurrenceService


@click.command("recurring")
@click.option("--dry-run", is_flag=True, help="List due recurring expenses without creating them")
@click.pass_context
def process_recurring(ctx, dry_run: bool):
    """Generate expenses for recurring bills that are due."""
    ledger = ctx.obj["ledger"]
    service = RecurrenceService(ledger)

    if dry_run:
        due = service.list_due()
        click.echo(f"{len(due)} recurring expenses due")
        for expense in due:
            click.echo(f"  {expense.description}: ${expense.amount:,.2f} (due {expense.recurring.next_due})")
        return

    created = service.process_due()
    click.echo(f"Processed {len(created)} recurring expenses")
    for expense in created:
        click.echo(f"  {expense.date:%Y-%m-%d} - {expense.description}: ${expense.amount:,.2f}")
    warn_if_not_saved(ledger)


def register_commands(cli):
    """Register recurring command with main CLI."""
    cli.add_command(process_recurring)
