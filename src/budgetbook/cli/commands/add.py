"""Add transaction command."""

import click
from budgetbook.cli.error_handling import handle_domain_error
from budgetbook.cli.formatting import money
from budgetbook.domain.errors import StoreError
from budgetbook.domain.transaction import TransactionService
from budgetbook.utils.date_parser import parse_date

KIND_CHOICES = ["expense", "income", "transfer"]


@click.command("add")
@click.argument("description")
@click.argument("amount")
@click.option(
    "--kind",
    type=click.Choice(KIND_CHOICES, case_sensitive=False),
    default="expense",
    show_default=True,
    help="Transaction kind",
)
@click.option("--category", help="Category name (e.g., 'Groceries')")
@click.option("--date", "txn_date", help="Transaction date (YYYY-MM-DD, 'today', 'yesterday'; defaults to today)")
@click.pass_context
def add_transaction(
    ctx,
    description: str,
    amount: str,
    kind: str,
    category: str | None,
    txn_date: str | None,
):
    """Add a transaction.

    AMOUNT is entered without sign; expenses are stored as negative and
    income as positive. Both "12.50" and "12,50" are accepted.

    Examples:
        budgetbook add "Supermarket" 84,90 --category Groceries
        budgetbook add "Salary" 5000 --kind income --category Salary
    """
    db = ctx.obj["db"]
    service = TransactionService(db, ctx.obj["account_id"])

    try:
        on = parse_date(txn_date) if txn_date else None
        transaction_id = service.quick_add(
            description=description,
            amount=amount,
            kind=kind,
            category_name=category,
            on=on,
        )
    except (ValueError, StoreError) as e:
        handle_domain_error(ctx, e)

    txn = service.get_transaction(transaction_id)
    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  Date: {txn.date}")
    click.echo(f"  Amount: {money(txn.amount)}")
    click.echo(f"  Kind: {txn.kind.value}")
    if txn.category_id is not None:
        click.echo(f"  Category: {category}")
    elif category:
        click.echo(f"  Category '{category}' not found, saved without category")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
