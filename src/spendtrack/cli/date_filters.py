"""CLI helpers for date ranges and expense filter options."""

from datetime import date

import click

from spendtrack.domain.entities import ExpenseFilter, PaymentMethod
from spendtrack.utils.amount_parser import parse_amount
from spendtrack.utils.date_parser import PERIODS, get_date_range, parse_date

PAYMENT_METHOD_CHOICE = click.Choice([method.value for method in PaymentMethod])


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    period: str | None = None,
) -> tuple[date | None, date | None]:
    """Resolve CLI date range from a period name or explicit dates."""
    if period is not None and (start_date or end_date):
        click.echo(
            "Error: --period cannot be combined with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    if period is not None:
        return get_date_range(period)

    start = None
    end = None
    if start_date:
        try:
            start = parse_date(start_date)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    if end_date:
        try:
            end = parse_date(end_date)
        except ValueError as e:
            click.echo(f"Error: Invalid end date: {e}", err=True)
            ctx.exit(1)

    return start, end


def filter_options(command):
    """Attach the shared expense filter options to a command."""
    options = [
        click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month')"),
        click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')"),
        click.option("--period", type=click.Choice(PERIODS), help="Named period instead of explicit dates"),
        click.option("--min-amount", help="Minimum amount (inclusive)"),
        click.option("--max-amount", help="Maximum amount (inclusive)"),
        click.option("--payment-method", type=PAYMENT_METHOD_CHOICE, help="Payment method"),
        click.option("--tag", "tags", multiple=True, help="Require tag (repeatable)"),
    ]

    for option in reversed(options):
        command = option(command)
    return command


def build_expense_filter(
    ctx,
    *,
    category: str | None = None,
    start_date: str | None = None,
    end_date: str | None = None,
    period: str | None = None,
    min_amount: str | None = None,
    max_amount: str | None = None,
    payment_method: str | None = None,
    tags: tuple[str, ...] = (),
) -> ExpenseFilter:
    """Turn CLI option values into an ExpenseFilter, exiting on bad input."""
    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, period=period
    )

    amounts = {}
    for name, value in (("min_amount", min_amount), ("max_amount", max_amount)):
        if value is None:
            continue
        try:
            amounts[name] = parse_amount(value)
        except ValueError as e:
            click.echo(f"Error: Invalid {name.replace('_', ' ')}: {e}", err=True)
            ctx.exit(1)

    return ExpenseFilter(
        date_from=start,
        date_to=end,
        category=category,
        min_amount=amounts.get("min_amount"),
        max_amount=amounts.get("max_amount"),
        payment_method=PaymentMethod(payment_method) if payment_method else None,
        tags=tuple(tags) if tags else None,
    )
