"""Summary command."""

import click

from spendtrack.cli.date_filters import build_expense_filter, filter_options
from spendtrack.domain.summary import SummaryService


def _echo_breakdown(title: str, breakdown: dict) -> None:
    click.echo(f"\n{title}:")
    for key, amount in breakdown.items():
        label = getattr(key, "value", key)
        click.echo(f"  {label}: ${amount:,.2f}")


@click.command("summary")
@click.option("--category", help="Only summarize this category")
@click.option("--month", "show_months", is_flag=True, help="Show the monthly trend")
@click.option("--by-payment", is_flag=True, help="Show the payment method breakdown")
@filter_options
@click.pass_context
def summary(ctx, category: str | None, show_months: bool, by_payment: bool, **filter_values):
    """Show totals and breakdowns for expenses.

    Examples:
        spendtrack summary
        spendtrack summary --month --period this-year
        spendtrack summary --category Food --by-payment
    """
    ledger = ctx.obj["ledger"]
    filters = build_expense_filter(ctx, category=category, **filter_values)
    result = SummaryService(ledger).get_summary(filters)

    if result.count == 0:
        click.echo("No expenses found.")
        return

    click.echo("\nExpense Summary:")
    click.echo(f"Total Expenses: ${result.total:,.2f}")
    click.echo(f"Number of Expenses: {result.count}")
    click.echo(f"Average Expense: ${result.average:,.2f}")

    _echo_breakdown("By Category", result.category_breakdown)
    if show_months:
        _echo_breakdown("Monthly Trend", dict(sorted(result.monthly_trend.items())))
    if by_payment:
        _echo_breakdown("By Payment Method", result.payment_method_breakdown)


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
