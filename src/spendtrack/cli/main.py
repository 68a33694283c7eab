"""Main CLI entry point."""

import logging

import click

from spendtrack.domain.entities import BudgetAlert
from spendtrack.domain.ledger import LedgerService
from spendtrack.storage.factories import DATA_PATH_ENVVAR, create_json_storage

# Import and register all commands at module level
from spendtrack.cli.commands import (
    add,
    budget,
    category,
    export_cmd,
    import_cmd,
    recurring,
    summary,
    transaction,
    view,
)


def echo_budget_alert(alert: BudgetAlert) -> None:
    """Print a budget alert to stderr."""
    click.echo(f"\nBudget Alert: {alert.category}", err=True)
    click.echo(
        f"   Spent: ${alert.spent:,.2f} / ${alert.limit:,.2f} ({alert.percentage:.1f}%)",
        err=True,
    )
    click.echo(
        f"   You've reached {alert.percentage:.1f}% of your monthly budget!",
        err=True,
    )


@click.group()
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False),
    help=f"Path to the JSON data file (overrides {DATA_PATH_ENVVAR} environment variable)",
    envvar=DATA_PATH_ENVVAR,
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, data_file: str | None, verbose: bool):
    """Spendtrack - Personal expense tracking.

    Record expenses, set monthly budgets per category, summarize spending,
    exchange CSV files and expand recurring bills.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Load the ledger only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        ledger = LedgerService(create_json_storage(data_path=data_file))
        ledger.add_alert_listener(echo_budget_alert)
        ctx.obj["ledger"] = ledger


# Register all commands
add.register_commands(cli)
view.register_commands(cli)
transaction.register_commands(cli)
summary.register_commands(cli)
budget.register_commands(cli)
category.register_commands(cli)
import_cmd.register_commands(cli)
export_cmd.register_commands(cli)
recurring.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
