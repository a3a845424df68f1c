"""Helpers for Decimal normalization."""

from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL, forms or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_half_up(value: float | Decimal) -> int:
    """Round to the nearest whole currency unit, halves away from zero."""
    return int(coerce_decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


def floor_int(value: Decimal) -> int:
    """Return the floor of a Decimal as an int."""
    return int(value.to_integral_value(rounding=ROUND_FLOOR))


__all__ = ["coerce_decimal", "round_half_up", "floor_int"]
