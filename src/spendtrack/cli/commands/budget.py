"""Budget commands."""

import click

from spendtrack.cli.error_handling import warn_if_not_saved
from spendtrack.utils.amount_parser import parse_amount


@click.command("budget")
@click.argument("category")
@click.argument("limit")
@click.argument("threshold", type=click.IntRange(0, 100), default=80, required=False)
@click.pass_context
def set_budget(ctx, category: str, limit: str, threshold: int):
    """Set the monthly LIMIT for CATEGORY.

    THRESHOLD is the percentage of the limit at which alerts are shown
    (default 80).

    Examples:
        spendtrack budget Food 400
        spendtrack budget Entertainment 100 90
    """
    ledger = ctx.obj["ledger"]
    try:
        monthly_limit = parse_amount(limit)
    except ValueError as e:
        click.echo(f"Error: Invalid limit: {e}", err=True)
        ctx.exit(1)
    if monthly_limit <= 0:
        click.echo("Error: Limit must be greater than zero", err=True)
        ctx.exit(1)

    budget = ledger.set_budget(category, monthly_limit, threshold)
    click.echo(f"Budget set: {budget.category} - ${budget.monthly_limit:,.2f}/month")
    click.echo(f"  Spent this month: ${budget.current_spent:,.2f}")
    warn_if_not_saved(ledger)


@click.command("budgets")
@click.pass_context
def list_budgets(ctx):
    """List budgets with this month's spending."""
    ledger = ctx.obj["ledger"]
    budgets = ledger.list_budgets()
    if not budgets:
        click.echo("No budgets set.")
        return

    click.echo(f"{'Category':<20} {'Spent':>12} {'Limit':>12} {'Used':>7}")
    for budget in budgets:
        if budget.monthly_limit > 0:
            used = budget.current_spent / budget.monthly_limit * 100
            marker = " !" if used >= budget.alert_threshold else ""
            used_text = f"{used:>6.1f}%{marker}"
        else:
            used_text = f"{'n/a':>7}"
        click.echo(
            f"{budget.category:<20} {budget.current_spent:>12,.2f} "
            f"{budget.monthly_limit:>12,.2f} {used_text}"
        )


def register_commands(cli):
    """Register budget commands with main CLI."""
    cli.add_command(set_budget)
    cli.add_command(list_budgets)
