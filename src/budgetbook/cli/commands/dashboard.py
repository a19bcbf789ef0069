"""Dashboard command."""

import click
from budgetbook.cli.error_handling import handle_domain_error
from budgetbook.cli.formatting import echo_row, money
from budgetbook.domain.budget import BudgetService
from budgetbook.domain.errors import StoreError
from budgetbook.utils.date_parser import parse_date


@click.command("dashboard")
@click.option("--month", "month_date", help="Any date in the month to show (defaults to today)")
@click.pass_context
def dashboard(ctx, month_date: str | None):
    """Show this month's budget overview.

    Examples:
        budgetbook dashboard
        budgetbook dashboard --month 2024-02-01
    """
    db = ctx.obj["db"]
    service = BudgetService(db)

    try:
        today = parse_date(month_date) if month_date else None
        summary = service.month_summary(today)
    except (ValueError, StoreError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"\nOverview {summary.start:%Y-%m} ({summary.start} to {summary.end})")
    click.echo("-" * 49)
    echo_row("Income (X)", money(summary.income))
    echo_row("Expenses", money(summary.expense))
    echo_row("Savings", money(summary.savings))
    echo_row("Fixed budget (Y)", money(summary.fixed_budget))
    click.echo()
    click.echo("Fixed vs variable")
    click.echo("-" * 49)
    echo_row("Fixed spent", money(summary.fixed_spent))
    echo_row("Variable spent", money(summary.variable_spent))
    echo_row("Variable budget (X-Y)", money(summary.variable_budget))
    echo_row("Variable remaining", money(summary.variable_remaining))
    if summary.variable_remaining < 0:
        click.echo("\nVariable budget overspent!")


def register_commands(cli):
    """Register dashboard command with main CLI."""
    cli.add_command(dashboard)
