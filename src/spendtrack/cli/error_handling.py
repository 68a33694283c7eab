"""CLI error handling helpers."""

import click

from spendtrack.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError | str) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def warn_if_not_saved(ledger) -> None:
    """Report a failed save of the last mutation."""
    if ledger.last_persistence_error is not None:
        click.echo(
            f"Warning: changes were not saved: {ledger.last_persistence_error}", err=True
        )
