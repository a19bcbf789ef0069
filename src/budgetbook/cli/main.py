"""Main CLI entry point."""

import logging

import click
from budgetbook.database.factories import create_sqlite_database
from budgetbook.domain.bootstrap import initialize_store
from budgetbook.domain.errors import StoreError
from budgetbook.cli.error_handling import handle_domain_error

# Import and register all commands at module level
from budgetbook.cli.commands import (
    dashboard,
    add,
    category,
    fixed,
    history,
    config,
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides BUDGETBOOK_DB_PATH environment variable)",
    envvar="BUDGETBOOK_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="BUDGETBOOK_LOG_LEVEL",
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Budgetbook - personal monthly budget tracker.

    Record income and expenses, mark recurring categories as fixed, generate
    this month's fixed expenses from templates and see how much of your
    variable budget is left.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.call_on_close(db.disconnect)
        try:
            account_id = initialize_store(db)
        except StoreError as e:
            handle_domain_error(ctx, e)
        ctx.obj["db"] = db
        ctx.obj["account_id"] = account_id


# Register all commands
dashboard.register_commands(cli)
add.register_commands(cli)
category.register_commands(cli)
fixed.register_commands(cli)
history.register_commands(cli)
config.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
