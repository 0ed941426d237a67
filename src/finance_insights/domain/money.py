from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def to_cents(value: Decimal) -> Decimal:
    """Round to two places with ties going up, e.g. 90.125 -> 90.13."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)
