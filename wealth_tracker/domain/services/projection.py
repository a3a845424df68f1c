"""Compound-interest projections of net worth.

Both projections compound monthly at ``annual_return_percent / 12 / 100``.
They compute in Decimal, whose exponent range keeps very large rates and
long horizons finite, and round monetary fields to whole currency units
only when a point is emitted. Negative contributions, negative rates and
zero horizons are computed through rather than rejected.
"""

from collections.abc import Iterator
from decimal import Decimal

from wealth_tracker.domain.models import ForecastPoint, ProjectionPoint
from wealth_tracker.utils.decimal_utils import coerce_decimal, round_half_up

MONTHS_PER_YEAR = 12
FORECAST_RECORDED_MONTHS = (1, 6)


def monthly_rate(annual_return_percent) -> Decimal:
    """Convert an annual percentage into a monthly rate."""
    return coerce_decimal(annual_return_percent) / MONTHS_PER_YEAR / 100


def future_value(
    current_value,
    monthly_contribution,
    annual_return_percent,
    months: int,
) -> Decimal:
    """Return the value after months of compounding and contributions.

    The principal grows as ``PV * (1 + r) ** n`` and contributions as an
    ordinary annuity ``PMT * ((1 + r) ** n - 1) / r``. A zero rate falls
    back to linear accumulation.
    """
    principal = coerce_decimal(current_value)
    payment = coerce_decimal(monthly_contribution)
    rate = monthly_rate(annual_return_percent)
    if rate == 0:
        return principal + payment * months
    factor = (1 + rate) ** months
    return principal * factor + payment * ((factor - 1) / rate)


def project(
    current_value,
    monthly_contribution,
    annual_return_percent,
    horizon_years: int,
) -> Iterator[ProjectionPoint]:
    """Yield one projection point per year, starting with year 0.

    Args:
        current_value: Starting net worth.
        monthly_contribution: Amount added every month.
        annual_return_percent: Expected annual return, e.g. 7 for 7%.
        horizon_years: Number of years to project.

    Yields:
        ProjectionPoint: ``horizon_years + 1`` points for a non-negative
        horizon. Year 0 always carries the starting value with no
        contributions and no growth.
    """
    principal = coerce_decimal(current_value)
    payment = coerce_decimal(monthly_contribution)
    yield ProjectionPoint(
        period=0,
        total_value=round_half_up(principal),
        contributions=0,
        growth=0,
    )
    for year in range(1, horizon_years + 1):
        months = year * MONTHS_PER_YEAR
        contributions = payment * months
        value = future_value(principal, payment, annual_return_percent, months)
        total = round_half_up(value)
        contributed = round_half_up(contributions)
        # Growth is derived from the rounded figures so the parts add up.
        yield ProjectionPoint(
            period=year,
            total_value=total,
            contributions=contributed,
            growth=total - round_half_up(principal) - contributed,
        )


def projection_at_year(
    current_value,
    monthly_contribution,
    annual_return_percent,
    target_year: int,
) -> ProjectionPoint | None:
    """Return the projection point for a single year, or None if negative."""
    if target_year < 0:
        return None
    last = None
    for point in project(
        current_value,
        monthly_contribution,
        annual_return_percent,
        target_year,
    ):
        last = point
    return last


def project_monthly(
    current_value,
    monthly_contribution,
    annual_return_percent,
    horizon_years: int,
) -> Iterator[ForecastPoint]:
    """Yield a month-by-month compounded forecast.

    Contributions land at the start of each month and the return is applied
    at its end. Month 0 is always yielded; after that only month 1, month 6
    and every twelfth month are recorded, so a horizon of ``n >= 1`` years
    yields ``n + 3`` points.
    """
    rate = monthly_rate(annual_return_percent)
    payment = coerce_decimal(monthly_contribution)
    assets = coerce_decimal(current_value)
    yield ForecastPoint(
        month=0,
        year=0,
        total_value=round_half_up(assets),
        label="Now",
    )
    for month in range(1, horizon_years * MONTHS_PER_YEAR + 1):
        assets += payment
        assets *= 1 + rate
        if month % MONTHS_PER_YEAR == 0 or month in FORECAST_RECORDED_MONTHS:
            year = month // MONTHS_PER_YEAR
            yield ForecastPoint(
                month=month,
                year=year,
                total_value=round_half_up(assets),
                label=f"{year}y {month % MONTHS_PER_YEAR}m",
            )


__all__ = [
    "monthly_rate",
    "future_value",
    "project",
    "projection_at_year",
    "project_monthly",
]
