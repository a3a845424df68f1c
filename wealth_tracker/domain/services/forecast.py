"""Domain services aggregating investment plans into forecast inputs."""

from collections.abc import Iterable
from decimal import Decimal

from wealth_tracker.domain.models import InvestmentPlan
from wealth_tracker.utils.decimal_utils import coerce_decimal


def total_monthly_contribution(plans: Iterable[InvestmentPlan]) -> Decimal:
    """Return the sum of monthly amounts across plans."""
    return sum(
        (coerce_decimal(plan.monthly_amount) for plan in plans),
        Decimal("0"),
    )


def weighted_average_return(plans: Iterable[InvestmentPlan]) -> Decimal:
    """Return the contribution-weighted mean of expected annual returns.

    Plans without an expected return count as 0%. Returns 0 when the total
    monthly amount is 0. The result is advisory; callers may override it
    before projecting.
    """
    plans = list(plans)
    total_amount = total_monthly_contribution(plans)
    if total_amount == 0:
        return Decimal("0")
    weighted_sum = sum(
        (
            coerce_decimal(plan.monthly_amount)
            * coerce_decimal(plan.expected_return)
            for plan in plans
        ),
        Decimal("0"),
    )
    return weighted_sum / total_amount


__all__ = ["total_monthly_contribution", "weighted_average_return"]
