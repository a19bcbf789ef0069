"""Configuration commands."""

import click
from budgetbook.cli.error_handling import handle_domain_error
from budgetbook.cli.formatting import money
from budgetbook.domain.account import AccountService
from budgetbook.domain.errors import StoreError
from budgetbook.domain.settings import SettingsService


@click.group()
def config_group():
    """Show and change settings."""
    pass


@config_group.command("show")
@click.pass_context
def show_config(ctx):
    """Show current settings."""
    db = ctx.obj["db"]
    service = SettingsService(db)

    click.echo(f"Database: {db.database_url}")
    account = AccountService(db).get_account(ctx.obj["account_id"])
    if account is not None:
        click.echo(f"Default account: {account.name} ({account.institution or 'no institution'})")
    click.echo(f"Fixed monthly budget (Y): {money(service.get_fixed_monthly_budget())}")


@config_group.command("set-budget")
@click.argument("value")
@click.pass_context
def set_budget(ctx, value: str):
    """Set the fixed monthly budget (Y).

    The variable budget shown on the dashboard is income minus this value.

    Examples:
        budgetbook config set-budget 1200
        budgetbook config set-budget 1200,50
    """
    db = ctx.obj["db"]
    service = SettingsService(db)

    try:
        amount = service.set_fixed_monthly_budget(value)
    except (ValueError, StoreError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Fixed monthly budget set to {money(amount)}")


def register_commands(cli):
    """Register config commands with main CLI."""
    cli.add_command(config_group, name="config")
