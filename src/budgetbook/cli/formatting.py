"""Output formatting helpers for CLI commands."""

from decimal import Decimal

import click


def money(value: Decimal | int | float | None) -> str:
    """Format an amount with two decimals and a currency prefix."""
    return f"${Decimal(str(value or 0)):,.2f}"


def echo_row(label: str, value: str, width: int = 32) -> None:
    """Print a label/value pair with the value right-aligned."""
    click.echo(f"{label:<{width}} {value:>16}")
