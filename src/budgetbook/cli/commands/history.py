"""Transaction history commands (list, edit, delete)."""

import click
from budgetbook.cli.error_handling import handle_domain_error
from budgetbook.cli.formatting import money
from budgetbook.domain.category import CategoryService
from budgetbook.domain.errors import StoreError
from budgetbook.domain.transaction import TransactionService
from budgetbook.utils.date_parser import parse_date

KIND_CHOICES = ["expense", "income", "transfer"]


@click.group()
def history_group():
    """List, edit and delete this month's transactions."""
    pass


@history_group.command("list")
@click.option("--month", "month_date", help="Any date in the month to list (defaults to today)")
@click.pass_context
def list_history(ctx, month_date: str | None):
    """List the month's transactions, newest first."""
    db = ctx.obj["db"]
    service = TransactionService(db, ctx.obj["account_id"])

    try:
        today = parse_date(month_date) if month_date else None
        details = service.list_month(today)
    except (ValueError, StoreError) as e:
        handle_domain_error(ctx, e)

    if not details:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(details)} transaction(s):")
    click.echo("-" * 100)
    click.echo(f"{'ID':<6} {'Date':<12} {'Kind':<9} {'Amount':>12}  {'Category':<24} {'Description':<30}")
    click.echo("-" * 100)
    for detail in details:
        txn = detail.transaction
        category_name = detail.category_name or "No category"
        if detail.category_is_fixed:
            category_name += " (fixed)"
        description = (txn.description or "")[:30]
        click.echo(
            f"{txn.id:<6} {str(txn.date):<12} {txn.kind.value:<9} {money(txn.amount):>12}  "
            f"{category_name:<24} {description:<30}"
        )


@history_group.command("update")
@click.argument("transaction_id", type=int)
@click.option("--date", "txn_date", help="Transaction date (YYYY-MM-DD)")
@click.option("--description", help="Transaction description")
@click.option("--amount", help="Transaction amount (sign follows the kind)")
@click.option("--kind", type=click.Choice(KIND_CHOICES, case_sensitive=False), help="Transaction kind")
@click.option("--category", help="Category name, or empty string to clear")
@click.pass_context
def update_history(
    ctx,
    transaction_id: int,
    txn_date: str | None,
    description: str | None,
    amount: str | None,
    kind: str | None,
    category: str | None,
):
    """Edit a transaction.

    Fields that are not given keep their current value. The transaction is
    moved back to the default account, and an unknown category name clears
    the category.

    Examples:
        budgetbook history update 12 --amount 95,00
        budgetbook history update 12 --kind income --category Salary
        budgetbook history update 12 --category ""
    """
    db = ctx.obj["db"]
    service = TransactionService(db, ctx.obj["account_id"])
    category_service = CategoryService(db)

    txn = service.get_transaction(transaction_id)
    if txn is None:
        click.echo(f"Error: Transaction {transaction_id} not found", err=True)
        ctx.exit(1)

    if category is None and txn.category_id is not None:
        current = category_service.get_category(txn.category_id)
        category = current.name if current is not None else None

    try:
        service.update_transaction(
            transaction_id=transaction_id,
            date=txn_date if txn_date is not None else txn.date,
            description=description if description is not None else txn.description,
            amount=amount if amount is not None else txn.amount,
            kind=kind if kind is not None else txn.kind,
            category_name=category or None,
        )
    except (ValueError, StoreError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated transaction {transaction_id}")


@history_group.command("delete")
@click.argument("transaction_id", type=int)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_history(ctx, transaction_id: int, yes: bool):
    """Delete a transaction. This cannot be undone.

    Examples:
        budgetbook history delete 12
    """
    db = ctx.obj["db"]
    service = TransactionService(db, ctx.obj["account_id"])

    if service.get_transaction(transaction_id) is None:
        click.echo(f"Error: Transaction {transaction_id} not found", err=True)
        ctx.exit(1)

    if not yes and not click.confirm(f"Are you sure you want to delete transaction {transaction_id}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_transaction(transaction_id)
    except (ValueError, StoreError) as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli):
    """Register history commands with main CLI."""
    cli.add_command(history_group, name="history")
