"""Expense viewing commands."""

import click

from spendtrack.cli.date_filters import build_expense_filter, filter_options
from spendtrack.cli.error_handling import handle_domain_error
from spendtrack.domain.errors import expense_not_found


def _format_line(expense) -> str:
    tags = f" [{', '.join(expense.tags)}]" if expense.tags else ""
    return (
        f"  {expense.date:%Y-%m-%d} - {expense.description}: ${expense.amount:,.2f} "
        f"({expense.category}){tags}  {expense.id}"
    )


@click.command("list")
@click.argument("category", required=False)
@filter_options
@click.pass_context
def list_expenses(ctx, category: str | None, **filter_values):
    """List expenses, optionally limited to CATEGORY and filters.

    Examples:
        spendtrack list
        spendtrack list Food --period this-month
        spendtrack list --min-amount 20 --tag work --tag travel
    """
    ledger = ctx.obj["ledger"]
    filters = build_expense_filter(ctx, category=category, **filter_values)
    expenses = ledger.list_expenses(filters)

    heading = f"{category} Expenses" if category else "Expenses"
    click.echo(f"\n{heading} ({len(expenses)} items):")
    for expense in expenses:
        click.echo(_format_line(expense))


@click.command("show")
@click.argument("expense_id")
@click.pass_context
def show_expense(ctx, expense_id: str):
    """Show every field of one expense."""
    ledger = ctx.obj["ledger"]
    expense = ledger.get(expense_id)
    if expense is None:
        handle_domain_error(ctx, expense_not_found(expense_id))

    click.echo(f"Expense ID: {expense.id}")
    click.echo(f"  Description: {expense.description}")
    click.echo(f"  Amount: ${expense.amount:,.2f}")
    click.echo(f"  Category: {expense.category}")
    click.echo(f"  Date: {expense.date.isoformat(sep=' ', timespec='minutes')}")
    click.echo(f"  Payment Method: {expense.payment_method.value}")
    if expense.tags:
        click.echo(f"  Tags: {', '.join(expense.tags)}")
    if expense.recurring is not None:
        rec = expense.recurring
        until = f" until {rec.end_date}" if rec.end_date else ""
        click.echo(f"  Recurring: {rec.frequency.value}, next due {rec.next_due}{until}")


def register_commands(cli):
    """Register view commands with main CLI."""
    cli.add_command(list_expenses)
    cli.add_command(show_expense)
