"""Bounds on the monetary amounts the ledger stores.

Amounts are kept as whole multiples of ``AMOUNT_UNIT``, so anything finer
than that, or with more digits than fit the store, is rejected up front
instead of being rounded on the way in.
"""

from decimal import Decimal, InvalidOperation

from ledgerbook.domain.errors import ValidationError

# Decimal places kept for every amount
AMOUNT_SCALE = 4
# Total significant digits, decimal places included
AMOUNT_PRECISION = 18

AMOUNT_UNIT = Decimal(1).scaleb(-AMOUNT_SCALE)
AMOUNT_LIMIT = Decimal(10) ** (AMOUNT_PRECISION - AMOUNT_SCALE)


def check_amount(value, label: str = "Amount") -> Decimal:
    """Convert a value to Decimal and make sure it can be stored exactly.

    Args:
        value: Decimal, int or numeric string
        label: Name used in error messages

    Returns:
        The value as a Decimal, unchanged

    Raises:
        ValidationError: If the value is not a finite number, has more than
            AMOUNT_SCALE decimal places, or is AMOUNT_LIMIT or more in size
    """
    try:
        amount = Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise ValidationError(f"{label} {value!r} is not a number") from exc

    if not amount.is_finite():
        raise ValidationError(f"{label} must be a finite number")
    if abs(amount) >= AMOUNT_LIMIT:
        raise ValidationError(
            f"{label} {amount} is too large, at most "
            f"{AMOUNT_PRECISION - AMOUNT_SCALE} digits before the decimal point are allowed"
        )
    if amount.quantize(AMOUNT_UNIT) != amount:
        raise ValidationError(f"{label} {amount} has more than {AMOUNT_SCALE} decimal places")
    return amount
