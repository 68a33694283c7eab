"""Add expense command."""

import click
from datetime import datetime

from spendtrack.cli.date_filters import PAYMENT_METHOD_CHOICE
from spendtrack.cli.error_handling import warn_if_not_saved
from spendtrack.domain.entities import ExpenseDraft, Frequency, PaymentMethod, Recurrence
from spendtrack.domain.recurrence import advance_due_date
from spendtrack.utils.amount_parser import parse_amount
from spendtrack.utils.date_parser import parse_date


@click.command("add")
@click.argument("description")
@click.argument("amount")
@click.argument("category")
@click.option(
    "--payment-method",
    type=PAYMENT_METHOD_CHOICE,
    default=PaymentMethod.CASH.value,
    show_default=True,
    help="How the expense was paid",
)
@click.option("--date", help="Expense date (YYYY-MM-DD or relative like 'yesterday'); defaults to now")
@click.option("--tag", "tags", multiple=True, help="Tag to attach (repeatable)")
@click.option(
    "--recurring",
    type=click.Choice([f.value for f in Frequency]),
    help="Repeat this expense with the given frequency",
)
@click.option("--until", help="Last date a recurring expense is generated")
@click.pass_context
def add_expense(
    ctx,
    description: str,
    amount: str,
    category: str,
    payment_method: str,
    date: str | None,
    tags: tuple[str, ...],
    recurring: str | None,
    until: str | None,
):
    """Add an expense.

    Examples:
        spendtrack add "Lunch" 12.50 Food --payment-method credit_card --tag work
        spendtrack add "Netflix" 15.99 Entertainment --recurring monthly
    """
    ledger = ctx.obj["ledger"]

    try:
        expense_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    expense_date = datetime.now()
    if date is not None:
        try:
            expense_date = parse_date(date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    recurrence = None
    if until is not None and recurring is None:
        click.echo("Error: --until requires --recurring", err=True)
        ctx.exit(1)
    if recurring is not None:
        end_date = None
        if until is not None:
            try:
                end_date = parse_date(until)
            except ValueError as e:
                click.echo(f"Error: Invalid end date: {e}", err=True)
                ctx.exit(1)
        frequency = Frequency(recurring)
        first_date = expense_date.date() if isinstance(expense_date, datetime) else expense_date
        recurrence = Recurrence(
            frequency=frequency,
            next_due=advance_due_date(first_date, frequency),
            end_date=end_date,
        )

    expense = ledger.create(
        ExpenseDraft(
            description=description,
            amount=expense_amount,
            category=category,
            date=expense_date,
            payment_method=PaymentMethod(payment_method),
            tags=tags,
            recurring=recurrence,
        )
    )
    click.echo(f"Added expense: {expense.description} - ${expense.amount:,.2f}")
    click.echo(f"  ID: {expense.id}")
    click.echo(f"  Category: {expense.category}")
    if recurrence is not None:
        click.echo(f"  Repeats {recurrence.frequency.value}, next due {recurrence.next_due}")
    warn_if_not_saved(ledger)


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_expense)
