"""Main CLI entry point."""

import logging

import click
from exptrack.database.factories import create_sqlite_storage, create_user_repository

# Import and register all commands at module level
from exptrack.cli.commands import (
    auth,
    expense,
    balance,
    analytics,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides EXPTRACK_DB_PATH environment variable)",
    envvar="EXPTRACK_DB_PATH",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Exptrack - Personal expense tracker.

    Log expenses by date and hour, keep a running balance and look at
    yearly, monthly and per-category totals.
    """
    ctx.ensure_object(dict)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Open storage only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        storage = create_sqlite_storage(database_path=db_path)
        storage.connect()
        storage.initialize_schema()
        ctx.call_on_close(storage.disconnect)
        ctx.obj["storage"] = storage
        ctx.obj["repository"] = create_user_repository(storage)


# Register all commands
auth.register_commands(cli)
expense.register_commands(cli)
balance.register_commands(cli)
analytics.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
