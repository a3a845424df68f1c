"""Tests for the trajectory, forecast and scenario use cases."""

from decimal import Decimal

from wealth_tracker.application.use_cases.compare_scenarios import (
    CompareScenariosUseCase,
)
from wealth_tracker.application.use_cases.get_forecast import (
    GetForecastUseCase,
)
from wealth_tracker.application.use_cases.get_trajectory import (
    GetTrajectoryUseCase,
)
from wealth_tracker.domain.models import (
    DepositHolding,
    InvestmentPlan,
    MonthlyState,
    Scenario,
)


def _scenario(name: str, years: int, monthly: str) -> Scenario:
    return Scenario(
        name=name,
        years=years,
        expected_return=Decimal("0"),
        monthly_investment=Decimal(monthly),
        monthly_spending=Decimal("200000"),
        income_growth=Decimal("2"),
        baseline_income=Decimal("400000"),
        current_net_worth=Decimal("1000000"),
    )


def test_trajectory_starts_from_latest_net_worth(store, logger) -> None:
    """The projection should be seeded from the newest monthly state."""
    for month, net_worth in [("2024-01", "100"), ("2024-02", "2000000")]:
        store.upsert_monthly_state(
            MonthlyState(
                month=month,
                net_worth=Decimal(net_worth),
                cash=Decimal("0"),
                invested=Decimal("0"),
                income_monthly=Decimal("0"),
                living_cost_monthly=Decimal("0"),
                invest_contribution_monthly=Decimal("0"),
            )
        )

    points = GetTrajectoryUseCase(store, logger=logger).execute(10000, 0, 2)

    assert [point.total_value for point in points] == [
        2_000_000,
        2_120_000,
        2_240_000,
    ]


def test_trajectory_without_states_starts_from_zero(store, logger) -> None:
    """Without monthly states the projection starts at zero."""
    points = GetTrajectoryUseCase(store, logger=logger).execute(1000, 0, 1)

    assert points[0].total_value == 0
    assert points[-1].total_value == 12_000


def test_forecast_uses_weighted_return_and_plan_total(store, logger) -> None:
    """Forecast inputs come from holdings and investment plans."""
    store.holdings = [DepositHolding(id="d", balance=Decimal("1000000"))]
    store.plans = [
        InvestmentPlan("A", "fund", Decimal("10000"), Decimal("4")),
        InvestmentPlan("B", "stock", Decimal("30000"), Decimal("8")),
    ]

    view = GetForecastUseCase(store, logger=logger).execute(5)

    assert view.current_assets == Decimal("1000000")
    assert view.monthly_contribution == Decimal("40000")
    assert view.weighted_return == Decimal("7")
    assert view.annual_return_percent == Decimal("7")
    assert [point.month for point in view.points][:3] == [0, 1, 6]
    assert view.points[-1].month == 60
    assert view.final_value == view.points[-1].total_value


def test_forecast_override_replaces_weighted_return(store, logger) -> None:
    """A manual return is used instead of the plans' weighted return."""
    store.holdings = [DepositHolding(id="d", balance=Decimal("500000"))]
    store.plans = [InvestmentPlan("A", "fund", Decimal("10000"), Decimal("5"))]

    view = GetForecastUseCase(store, logger=logger).execute(1, 0)

    assert view.weighted_return == Decimal("5")
    assert view.annual_return_percent == 0
    assert view.final_value == 620_000


def test_compare_scenarios_sorts_by_final_value(store, logger) -> None:
    """Outcomes are ordered from the highest final value."""
    store.scenarios = [
        _scenario("Careful", 10, "10000"),
        _scenario("Ambitious", 10, "50000"),
    ]

    outcomes = CompareScenariosUseCase(store, logger=logger).execute()

    assert [outcome.scenario.name for outcome in outcomes] == [
        "Ambitious",
        "Careful",
    ]
    assert outcomes[0].final_point.period == 10
    assert outcomes[0].final_point.total_value == 7_000_000


def test_compare_scenarios_skips_negative_horizon(store, logger) -> None:
    """Scenarios with a negative horizon are skipped with a warning."""
    store.scenarios = [_scenario("Broken", -1, "10000")]

    outcomes = CompareScenariosUseCase(store, logger=logger).execute()

    assert outcomes == []
    logger.warning.assert_called_once()
