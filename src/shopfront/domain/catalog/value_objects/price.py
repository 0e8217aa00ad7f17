from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def quantize_price(value: Decimal) -> Decimal:
    """Round a monetary amount to whole cents."""
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
