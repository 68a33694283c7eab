"""Category and tag listing commands."""

import click


@click.command("categories")
@click.pass_context
def list_categories(ctx):
    """List every category used by an expense."""
    categories = ctx.obj["ledger"].categories()
    if not categories:
        click.echo("No categories found.")
        return
    for name in categories:
        click.echo(name)


@click.command("tags")
@click.pass_context
def list_tags(ctx):
    """List every tag used by an expense."""
    tags = ctx.obj["ledger"].tags()
    if not tags:
        click.echo("No tags found.")
        return
    for tag in tags:
        click.echo(tag)


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(list_categories)
    cli.add_command(list_tags)
