"""Category management commands."""

import click
from budgetbook.cli.error_handling import handle_domain_error
from budgetbook.domain.category import CategoryService
from budgetbook.domain.errors import StoreError

KIND_CHOICES = ["expense", "income", "transfer"]


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("list")
@click.option("--kind", type=click.Choice(KIND_CHOICES, case_sensitive=False), help="Only show this kind")
@click.pass_context
def list_categories(ctx, kind: str | None):
    """List all categories."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    categories = service.list_categories(kind=kind)
    if not categories:
        click.echo("No categories found.")
        return

    click.echo("\nCategories:")
    click.echo("-" * 60)
    for cat in categories:
        fixed = "yes" if cat.is_fixed else "no"
        click.echo(f"ID: {cat.id:3d} | {cat.name:24s} | {cat.kind.value:8s} | fixed: {fixed}")


@category_group.command("save")
@click.argument("name")
@click.option(
    "--kind",
    type=click.Choice(KIND_CHOICES, case_sensitive=False),
    default="expense",
    show_default=True,
    help="Category kind",
)
@click.option("--fixed/--variable", "is_fixed", default=False, help="Whether this is a recurring obligation")
@click.pass_context
def save_category(ctx, name: str, kind: str, is_fixed: bool):
    """Create a category, or update the one with the same name.

    Examples:
        budgetbook category save "Gym" --fixed
        budgetbook category save "Freelance" --kind income
    """
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        existed = service.get_category_by_name(name) is not None
        category_id = service.save_category(name=name, kind=kind, is_fixed=is_fixed)
    except (ValueError, StoreError) as e:
        handle_domain_error(ctx, e)

    action = "Updated" if existed else "Created"
    click.echo(f"{action} category '{name.strip()}' (ID: {category_id})")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
