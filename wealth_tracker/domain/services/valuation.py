"""Domain services for holding valuation and category aggregation."""

from collections.abc import Iterable
from decimal import Decimal

from wealth_tracker.domain.constants import ASSET_CATEGORIES, CATEGORY_LABELS
from wealth_tracker.domain.models import (
    CryptoHolding,
    DepositHolding,
    EmployeeEquityHolding,
    FundHolding,
    Holding,
    StockHolding,
)
from wealth_tracker.utils.decimal_utils import coerce_decimal


def valuate(holding: Holding) -> Decimal:
    """Return the current monetary value of a holding.

    Deposits are worth their balance. Every other category uses its current
    value override when one is set, otherwise quantity times average unit
    cost, where a missing unit cost counts as zero.

    Args:
        holding: Holding of any category.

    Returns:
        Decimal: Valuation in the base currency.

    Raises:
        TypeError: If the object is not a known holding variant.
    """
    if isinstance(holding, DepositHolding):
        return coerce_decimal(holding.balance)
    if isinstance(holding, StockHolding):
        return _override_or_cost(
            holding.current_value,
            holding.shares,
            holding.average_price,
        )
    if isinstance(holding, (FundHolding, CryptoHolding)):
        return _override_or_cost(
            holding.current_value,
            holding.quantity,
            holding.average_price,
        )
    if isinstance(holding, EmployeeEquityHolding):
        return _override_or_cost(
            holding.current_value,
            holding.units,
            holding.strike_price,
        )
    raise TypeError(f"Unsupported holding type: {type(holding).__name__}")


def category_totals(holdings: Iterable[Holding]) -> dict[str, Decimal]:
    """Aggregate valuations per category.

    Every known category is present in the result, zero when empty.
    """
    totals = {category: Decimal("0") for category in ASSET_CATEGORIES}
    for holding in holdings:
        totals[holding.category] += valuate(holding)
    return totals


def total_value(holdings: Iterable[Holding]) -> Decimal:
    """Return the sum of all holding valuations."""
    return sum((valuate(holding) for holding in holdings), Decimal("0"))


def display_name(holding: Holding) -> str:
    """Return a best-effort human label for a holding."""
    fallback = CATEGORY_LABELS.get(holding.category, "Asset")
    if isinstance(holding, DepositHolding):
        return (
            holding.account_name
            or holding.financial_institution
            or fallback
        )
    if isinstance(holding, StockHolding):
        return holding.stock_name or holding.ticker or fallback
    if isinstance(holding, FundHolding):
        return holding.fund_name or fallback
    if isinstance(holding, CryptoHolding):
        return holding.symbol or fallback
    if isinstance(holding, EmployeeEquityHolding):
        return holding.company_name or fallback
    raise TypeError(f"Unsupported holding type: {type(holding).__name__}")


def unrealized_gain(holding: Holding) -> Decimal | None:
    """Return current value minus cost basis when both are known.

    Deposits have no cost basis and always return None, as do holdings
    without a current value override.
    """
    if isinstance(holding, DepositHolding):
        return None
    if holding.current_value is None:
        return None
    if isinstance(holding, StockHolding):
        cost_basis = coerce_decimal(holding.shares) * coerce_decimal(
            holding.average_price
        )
    elif isinstance(holding, (FundHolding, CryptoHolding)):
        if not holding.average_price:
            return None
        cost_basis = coerce_decimal(holding.quantity) * coerce_decimal(
            holding.average_price
        )
    elif isinstance(holding, EmployeeEquityHolding):
        cost_basis = coerce_decimal(holding.units) * coerce_decimal(
            holding.strike_price
        )
    else:
        raise TypeError(f"Unsupported holding type: {type(holding).__name__}")
    return coerce_decimal(holding.current_value) - cost_basis


def _override_or_cost(
    current_value: Decimal | None,
    quantity: Decimal,
    unit_cost: Decimal | None,
) -> Decimal:
    if current_value is not None:
        return coerce_decimal(current_value)
    return coerce_decimal(quantity) * coerce_decimal(unit_cost)


__all__ = [
    "valuate",
    "category_totals",
    "total_value",
    "display_name",
    "unrealized_gain",
]
