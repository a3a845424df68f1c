"""Domain services package."""

from .forecast import total_monthly_contribution, weighted_average_return
from .metrics import (
    cash_runway,
    classify_direction,
    investment_rate,
    percentage_change,
    savings_rate_display,
    savings_rate_raw,
)
from .projection import project, project_monthly, projection_at_year
from .valuation import (
    category_totals,
    display_name,
    total_value,
    unrealized_gain,
    valuate,
)

__all__ = [
    "total_monthly_contribution",
    "weighted_average_return",
    "cash_runway",
    "classify_direction",
    "investment_rate",
    "percentage_change",
    "savings_rate_display",
    "savings_rate_raw",
    "project",
    "project_monthly",
    "projection_at_year",
    "category_totals",
    "display_name",
    "total_value",
    "unrealized_gain",
    "valuate",
]
