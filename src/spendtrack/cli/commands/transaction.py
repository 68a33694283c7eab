"""Expense update and delete commands."""

import click

from spendtrack.cli.date_filters import PAYMENT_METHOD_CHOICE
from spendtrack.cli.error_handling import handle_domain_error, warn_if_not_saved
from spendtrack.domain.entities import PaymentMethod
from spendtrack.domain.errors import expense_not_found
from spendtrack.utils.amount_parser import parse_amount
from spendtrack.utils.date_parser import parse_date


@click.command("update")
@click.argument("expense_id")
@click.option("--description", help="Expense description")
@click.option("--amount", help="Expense amount (e.g., 12.50)")
@click.option("--category", help="Category name")
@click.option("--date", help="Expense date (YYYY-MM-DD or relative like 'yesterday')")
@click.option("--payment-method", type=PAYMENT_METHOD_CHOICE, help="Payment method")
@click.option("--tag", "tags", multiple=True, help="Replace tags (repeatable)")
@click.option("--clear-tags", is_flag=True, help="Remove all tags")
@click.pass_context
def update_expense(
    ctx,
    expense_id: str,
    description: str | None,
    amount: str | None,
    category: str | None,
    date: str | None,
    payment_method: str | None,
    tags: tuple[str, ...],
    clear_tags: bool,
) -> None:
    """Update an expense.

    Updates only the fields that are provided.

    Examples:
        spendtrack update 3f2a... --amount 75.00
        spendtrack update 3f2a... --category Groceries --tag weekly
    """
    ledger = ctx.obj["ledger"]
    changes = {}

    if description is not None:
        changes["description"] = description
    if category is not None:
        changes["category"] = category
    if payment_method is not None:
        changes["payment_method"] = PaymentMethod(payment_method)
    if tags and clear_tags:
        click.echo("Error: Cannot use --tag together with --clear-tags", err=True)
        ctx.exit(1)
    if tags or clear_tags:
        changes["tags"] = tags

    if amount is not None:
        try:
            changes["amount"] = parse_amount(amount)
        except ValueError as e:
            click.echo(f"Error: Invalid amount format: {e}", err=True)
            ctx.exit(1)

    if date is not None:
        try:
            changes["date"] = parse_date(date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    if not changes:
        click.echo("Nothing to update.")
        return

    updated = ledger.update(expense_id, **changes)
    if updated is None:
        handle_domain_error(ctx, expense_not_found(expense_id))
    click.echo(f"Updated expense {expense_id}")
    warn_if_not_saved(ledger)


@click.command("delete")
@click.argument("expense_id")
@click.pass_context
def delete_expense(ctx, expense_id: str) -> None:
    """Delete an expense."""
    ledger = ctx.obj["ledger"]
    if not ledger.delete(expense_id):
        handle_domain_error(ctx, expense_not_found(expense_id))
    click.echo("Expense deleted")
    warn_if_not_saved(ledger)


def register_commands(cli):
    """Register expense management commands with main CLI."""
    cli.add_command(update_expense)
    cli.add_command(delete_expense)
