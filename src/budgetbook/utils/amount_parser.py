"""Amount parsing utilities."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
import re

from budgetbook.domain.errors import ValidationError

CENT = Decimal("0.01")


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "123,45" (comma as decimal separator)
    - "R$ 123.45", "$123.45"
    - "-123.45"
    - "1,234.56" and "1.234,56"
    - "(123.45)" (negative in parentheses)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValidationError: If amount string cannot be parsed
    """
    if amount_str is None or not str(amount_str).strip():
        raise ValidationError("Empty amount string")

    # Remove whitespace
    amount_str = str(amount_str).strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove currency symbols
    amount_str = re.sub(r"R\$|[$€£¥]", "", amount_str).strip()

    amount_str = _normalize_separators(amount_str)

    try:
        amount = Decimal(amount_str)
    except InvalidOperation:
        raise ValidationError(f"Could not parse amount '{amount_str}'")
    if not amount.is_finite():
        raise ValidationError(f"Amount must be a finite number, got '{amount_str}'")
    if is_negative:
        amount = -amount
    return amount


def _normalize_separators(amount_str: str) -> str:
    """Reduce grouping and decimal separators to a plain dotted number."""
    if "," in amount_str and "." in amount_str:
        # Whichever separator comes last is the decimal one
        if amount_str.rfind(",") > amount_str.rfind("."):
            return amount_str.replace(".", "").replace(",", ".")
        return amount_str.replace(",", "")
    if amount_str.count(",") == 1:
        return amount_str.replace(",", ".")
    return amount_str.replace(",", "")


def coerce_amount(value: "str | Decimal | int | float") -> Decimal:
    """Convert user input or a number to a Decimal amount rounded to cents.

    Raises:
        ValidationError: If the value is not a finite number
    """
    if isinstance(value, str):
        amount = parse_amount(value)
    elif isinstance(value, bool) or value is None:
        raise ValidationError(f"Amount must be a number, got '{value}'")
    else:
        try:
            amount = value if isinstance(value, Decimal) else Decimal(str(value))
        except InvalidOperation:
            raise ValidationError(f"Amount must be a number, got '{value}'")
        if not amount.is_finite():
            raise ValidationError(f"Amount must be a finite number, got '{value}'")
    try:
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValidationError(f"Amount is too large, got '{value}'")
