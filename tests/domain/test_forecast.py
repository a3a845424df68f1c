"""Tests for investment plan aggregation."""

from decimal import Decimal

from wealth_tracker.domain.models import InvestmentPlan
from wealth_tracker.domain.services import forecast


def _plan(amount, expected_return=None, name="plan"):
    return InvestmentPlan(
        name=name,
        asset_category="fund",
        monthly_amount=Decimal(amount),
        expected_return=(
            Decimal(expected_return) if expected_return is not None else None
        ),
    )


def test_weighted_average_return_without_plans_is_zero():
    """No plans, or only zero amounts, yield a 0% return."""
    assert forecast.weighted_average_return([]) == 0
    assert forecast.weighted_average_return([_plan("0", "7")]) == 0


def test_weighted_average_return_weights_by_amount():
    """Returns are weighted by each plan's monthly amount."""
    plans = [_plan("100", "5"), _plan("300", "10")]

    assert forecast.weighted_average_return(plans) == Decimal("8.75")


def test_plans_without_expected_return_count_as_zero():
    """A missing expected return still dilutes the average."""
    plans = [_plan("100", "8"), _plan("100")]

    assert forecast.weighted_average_return(plans) == Decimal("4")


def test_weighted_average_return_accepts_generators():
    """Iterables are consumed once without losing plans."""
    plans = (plan for plan in [_plan("100", "5"), _plan("300", "10")])

    assert forecast.weighted_average_return(plans) == Decimal("8.75")


def test_total_monthly_contribution():
    """Monthly amounts are summed across plans."""
    plans = [_plan("30000"), _plan("20000.5")]

    assert forecast.total_monthly_contribution(plans) == Decimal("50000.5")
    assert forecast.total_monthly_contribution([]) == 0
