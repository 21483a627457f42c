"""Main CLI entry point."""

import logging

import click

from cyclebudget.config import AppConfig, DEFAULT_APP_ID, DEFAULT_USER_ID
from cyclebudget.database.factories import create_sqlite_store

# Import and register all commands at module level
from cyclebudget.cli.commands import (
    category,
    transaction,
    settings,
    summary,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides CYCLEBUDGET_DB_PATH environment variable)",
    envvar="CYCLEBUDGET_DB_PATH",
)
@click.option(
    "--app-id",
    default=DEFAULT_APP_ID,
    show_default=True,
    envvar="CYCLEBUDGET_APP_ID",
    help="Application/tenant identifier the data is stored under",
)
@click.option(
    "--user",
    "user_id",
    default=DEFAULT_USER_ID,
    show_default=True,
    envvar="CYCLEBUDGET_USER",
    help="User whose budget to work with",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, app_id: str, user_id: str, verbose: bool):
    """Cyclebudget - cycle-based budget tracking.

    Log income and expenses against categories with spending limits and see
    what is left over the current budget cycle.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = AppConfig(database_path=db_path, app_id=app_id, user_id=user_id)
    ctx.obj["config"] = config

    # Open the store only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is not None:
        store = create_sqlite_store(database_path=config.database_path)
        store.connect()
        store.initialize_schema()
        ctx.call_on_close(store.disconnect)
        ctx.obj["store"] = store
        ctx.obj["namespace"] = config.namespace


# Register all commands
category.register_commands(cli)
transaction.register_commands(cli)
settings.register_commands(cli)
summary.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
