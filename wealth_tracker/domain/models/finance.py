"""Domain models for ledgers, snapshots and derived finance aggregates."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class MonthlyState:
    """Aggregated financial state for one calendar month.

    Attributes:
        month: Month key in "YYYY-MM" form, unique per record.
        net_worth: Total net worth at month end.
        cash: Cash and deposits.
        invested: Invested total.
        income_monthly: Monthly income.
        living_cost_monthly: Monthly living cost.
        invest_contribution_monthly: Monthly investment contribution.
    """

    month: str
    net_worth: Decimal
    cash: Decimal
    invested: Decimal
    income_monthly: Decimal
    living_cost_monthly: Decimal
    invest_contribution_monthly: Decimal
    id: str | None = None


@dataclass(frozen=True)
class DailySnapshot:
    """Point-in-time valuation of all holdings, one per calendar date."""

    id: str
    snapshot_date: date
    total_assets: Decimal
    cash_ratio: Decimal
    asset_breakdown: dict[str, Decimal]
    daily_change: Decimal


@dataclass(frozen=True)
class LedgerEntry:
    """Dated income or expense entry.

    Attributes:
        kind: Either "income" or "expense".
        category: Income source or expense category.
        expense_type: "fixed" or "variable" for expenses, None for income.
    """

    kind: str
    amount: Decimal
    entry_date: date
    category: str | None = None
    expense_type: str | None = None
    memo: str | None = None
    id: str | None = None


@dataclass(frozen=True)
class CashflowEntry:
    """Planned monthly cashflow, keyed by month."""

    month: str
    baseline_income: Decimal
    baseline_spending: Decimal
    monthly_investment: Decimal
    bonus_amount: Decimal | None = None
    notes: str | None = None
    id: str | None = None


@dataclass(frozen=True)
class Scenario:
    """Saved what-if projection parameters."""

    name: str
    years: int
    expected_return: Decimal
    monthly_investment: Decimal
    monthly_spending: Decimal
    income_growth: Decimal
    baseline_income: Decimal
    current_net_worth: Decimal
    id: str | None = None


@dataclass(frozen=True)
class InvestmentPlan:
    """Recurring contribution into an asset category.

    Attributes:
        expected_return: Optional expected annual return in percent.
    """

    name: str
    asset_category: str
    monthly_amount: Decimal
    expected_return: Decimal | None = None
    id: str | None = None


@dataclass(frozen=True)
class KPIData:
    """Dashboard KPI bundle for one period."""

    net_worth_change: Decimal
    monthly_balance: Decimal
    savings_rate: Decimal
    liquidity_ratio: Decimal
    monthly_expenses: Decimal
    asset_allocation: dict[str, Decimal]


@dataclass(frozen=True)
class DirectionAnalysis:
    """Directional classification of recent monthly states."""

    status: str
    label: str
    description: str


@dataclass(frozen=True)
class ProjectionPoint:
    """Yearly projection point; monetary fields are whole currency units."""

    period: int
    total_value: int
    contributions: int
    growth: int


@dataclass(frozen=True)
class ForecastPoint:
    """Monthly-compounded forecast point."""

    month: int
    year: int
    total_value: int
    label: str


@dataclass(frozen=True)
class DashboardView:
    """Everything the dashboard renders after a load."""

    snapshot_id: str | None
    kpis: KPIData
    snapshots: list[DailySnapshot] = field(default_factory=list)


@dataclass(frozen=True)
class DirectionView:
    """Direction classification with the latest month's headline metrics."""

    analysis: DirectionAnalysis
    latest: MonthlyState | None
    cash_runway: int
    savings_rate: Decimal


@dataclass(frozen=True)
class ForecastView:
    """Forecast inputs and the resulting monthly-compounded series."""

    current_assets: Decimal
    monthly_contribution: Decimal
    annual_return_percent: Decimal
    weighted_return: Decimal
    points: list[ForecastPoint]

    @property
    def final_value(self) -> int:
        """Return the last forecast value, or 0 for an empty series."""
        return self.points[-1].total_value if self.points else 0


@dataclass(frozen=True)
class ScenarioOutcome:
    """Final projected point for a saved scenario."""

    scenario: Scenario
    final_point: ProjectionPoint


__all__ = [
    "MonthlyState",
    "DailySnapshot",
    "LedgerEntry",
    "CashflowEntry",
    "Scenario",
    "InvestmentPlan",
    "KPIData",
    "DirectionAnalysis",
    "ProjectionPoint",
    "ForecastPoint",
    "DashboardView",
    "DirectionView",
    "ForecastView",
    "ScenarioOutcome",
]
