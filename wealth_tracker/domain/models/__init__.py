"""Domain models package."""

from .finance import (
    CashflowEntry,
    DailySnapshot,
    DashboardView,
    DirectionAnalysis,
    DirectionView,
    ForecastPoint,
    ForecastView,
    InvestmentPlan,
    KPIData,
    LedgerEntry,
    MonthlyState,
    ProjectionPoint,
    Scenario,
    ScenarioOutcome,
)
from .holdings import (
    HOLDING_TYPES,
    CryptoHolding,
    DepositHolding,
    EmployeeEquityHolding,
    FundHolding,
    Holding,
    StockHolding,
)

__all__ = [
    "CashflowEntry",
    "DailySnapshot",
    "DashboardView",
    "DirectionAnalysis",
    "DirectionView",
    "ForecastPoint",
    "ForecastView",
    "InvestmentPlan",
    "KPIData",
    "LedgerEntry",
    "MonthlyState",
    "ProjectionPoint",
    "Scenario",
    "ScenarioOutcome",
    "HOLDING_TYPES",
    "CryptoHolding",
    "DepositHolding",
    "EmployeeEquityHolding",
    "FundHolding",
    "Holding",
    "StockHolding",
]
