"""Domain services for point-in-time ratios and direction classification."""

from collections.abc import Sequence
from decimal import Decimal

from wealth_tracker.domain.models import DirectionAnalysis, MonthlyState
from wealth_tracker.utils.decimal_utils import coerce_decimal, floor_int

GROWTH = "growth"
FLAT = "flat"
RISK = "risk"

GROWTH_RATE_THRESHOLD = Decimal("5")
GROWTH_SAVINGS_THRESHOLD = Decimal("10")
RISK_RUNWAY_MONTHS = 3

_HUNDRED = Decimal("100")


def savings_rate_raw(income, expenses) -> Decimal:
    """Return (income - expenses) / income * 100, unclamped.

    Negative values mean spending exceeded income. Returns 0 when income is
    not positive.
    """
    income = coerce_decimal(income)
    expenses = coerce_decimal(expenses)
    if income <= 0:
        return Decimal("0")
    return (income - expenses) / income * _HUNDRED


def savings_rate_display(income, expenses) -> Decimal:
    """Return the savings rate clamped to [0, 100] for display."""
    return min(max(savings_rate_raw(income, expenses), Decimal("0")), _HUNDRED)


def investment_rate(investment, income) -> Decimal:
    """Return investment / income * 100, floored at 0."""
    income = coerce_decimal(income)
    if income <= 0:
        return Decimal("0")
    return max(coerce_decimal(investment) / income * _HUNDRED, Decimal("0"))


def cash_runway(cash, monthly_expenses) -> int:
    """Return how many whole months of expenses the cash covers."""
    monthly_expenses = coerce_decimal(monthly_expenses)
    if monthly_expenses <= 0:
        return 0
    return floor_int(coerce_decimal(cash) / monthly_expenses)


def percentage_change(old_value, new_value) -> Decimal:
    """Return the change from old to new in percent.

    A zero baseline yields 100 when the new value is positive, else 0.
    """
    old_value = coerce_decimal(old_value)
    new_value = coerce_decimal(new_value)
    if old_value == 0:
        return _HUNDRED if new_value > 0 else Decimal("0")
    return (new_value - old_value) / old_value * _HUNDRED


def classify_direction(history: Sequence[MonthlyState]) -> DirectionAnalysis:
    """Classify recent monthly states as growth, flat or risk.

    Args:
        history: Monthly states ordered from oldest to newest.

    Returns:
        DirectionAnalysis: Status, label and description. Growth is tested
        before risk, and flat is the fallback.
    """
    if len(history) < 2:
        return DirectionAnalysis(
            status=FLAT,
            label="Getting Started",
            description="Add more data to see your direction.",
        )

    oldest = history[0]
    latest = history[-1]
    growth_rate = percentage_change(oldest.net_worth, latest.net_worth)
    savings = savings_rate_raw(
        latest.income_monthly,
        latest.living_cost_monthly,
    )
    runway = cash_runway(latest.cash, latest.living_cost_monthly)
    description = f"Based on the last {len(history)} months."

    if growth_rate > GROWTH_RATE_THRESHOLD and savings > GROWTH_SAVINGS_THRESHOLD:
        return DirectionAnalysis(
            status=GROWTH,
            label="Stable Growth",
            description=description,
        )
    if (
        growth_rate < -GROWTH_RATE_THRESHOLD
        or savings < 0
        or runway < RISK_RUNWAY_MONTHS
    ):
        return DirectionAnalysis(
            status=RISK,
            label="At Risk",
            description=description,
        )
    return DirectionAnalysis(status=FLAT, label="Flat", description=description)


__all__ = [
    "GROWTH",
    "FLAT",
    "RISK",
    "savings_rate_raw",
    "savings_rate_display",
    "investment_rate",
    "cash_runway",
    "percentage_change",
    "classify_direction",
]
