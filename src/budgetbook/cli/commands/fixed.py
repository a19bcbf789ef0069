"""Fixed item commands."""

import click
from budgetbook.cli.error_handling import handle_domain_error
from budgetbook.cli.formatting import money
from budgetbook.domain.category import CategoryService
from budgetbook.domain.errors import StoreError
from budgetbook.domain.fixed_item import FixedItemService
from budgetbook.utils.date_parser import parse_date


@click.group()
def fixed_group():
    """Manage fixed monthly items."""
    pass


@fixed_group.command("list")
@click.pass_context
def list_fixed_items(ctx):
    """List fixed item templates by day of month."""
    db = ctx.obj["db"]
    service = FixedItemService(db, ctx.obj["account_id"])
    category_service = CategoryService(db)

    items = service.list_fixed_items()
    if not items:
        click.echo("No fixed items found.")
        return

    click.echo("\nFixed items:")
    click.echo("-" * 70)
    for item in items:
        category_name = "No category"
        if item.category_id is not None:
            category = category_service.get_category(item.category_id)
            if category is not None:
                category_name = category.name
        click.echo(
            f"ID: {item.id:3d} | day {item.day:2d} | {item.name:20s} | {money(item.amount):>12} | {category_name}"
        )


@fixed_group.command("add")
@click.argument("name")
@click.argument("amount")
@click.argument("day")
@click.option("--category", help="Expense category name (e.g., 'Rent/Condo')")
@click.pass_context
def add_fixed_item(ctx, name: str, amount: str, day: str, category: str | None):
    """Add a fixed item paid on DAY (1-31) of every month.

    Days past the end of a short month are booked on its last day.

    Examples:
        budgetbook fixed add "Rent" 1200 5 --category "Rent/Condo"
    """
    db = ctx.obj["db"]
    service = FixedItemService(db, ctx.obj["account_id"])

    try:
        item_id = service.create_fixed_item(name=name, amount=amount, day=day, category_name=category)
    except (ValueError, StoreError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created fixed item '{name.strip()}' (ID: {item_id})")


@fixed_group.command("delete")
@click.argument("item_id", type=int)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_fixed_item(ctx, item_id: int, yes: bool):
    """Delete a fixed item template.

    Transactions already generated from it are kept.
    """
    db = ctx.obj["db"]
    service = FixedItemService(db, ctx.obj["account_id"])

    if service.get_fixed_item(item_id) is None:
        click.echo(f"Error: Fixed item {item_id} not found", err=True)
        ctx.exit(1)

    if not yes and not click.confirm(f"Are you sure you want to delete fixed item {item_id}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_fixed_item(item_id)
    except (ValueError, StoreError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted fixed item {item_id}")


@fixed_group.command("generate")
@click.option("--month", "month_date", help="Any date in the target month (defaults to today)")
@click.pass_context
def generate_fixed(ctx, month_date: str | None):
    """Book this month's transaction for every fixed item.

    Running it twice in the same month books everything twice.
    """
    db = ctx.obj["db"]
    service = FixedItemService(db, ctx.obj["account_id"])

    try:
        today = parse_date(month_date) if month_date else None
        ids = service.generate_month(today)
    except (ValueError, StoreError) as e:
        handle_domain_error(ctx, e)

    if not ids:
        click.echo("No fixed items to generate.")
        return
    click.echo(f"Generated {len(ids)} fixed transaction(s) for the month.")


def register_commands(cli):
    """Register fixed item commands with main CLI."""
    cli.add_command(fixed_group, name="fixed")
