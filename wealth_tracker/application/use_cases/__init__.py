"""Application use cases package."""

from .add_scenario import AddScenarioUseCase
from .compare_scenarios import CompareScenariosUseCase
from .compute_kpi_bundle import ComputeKpiBundleUseCase
from .ensure_today_snapshot import EnsureTodaySnapshotUseCase
from .get_direction import GetDirectionUseCase
from .get_forecast import GetForecastUseCase
from .get_trajectory import GetTrajectoryUseCase
from .load_dashboard import LoadDashboardUseCase
from .manage_cashflow import GetCashflowEntriesUseCase, RecordCashflowUseCase
from .manage_holdings import AddHoldingUseCase, GetHoldingsUseCase, build_holding
from .manage_plans import AddInvestmentPlanUseCase, GetInvestmentPlansUseCase
from .record_ledger_entry import AddLedgerEntryUseCase, ListLedgerEntriesUseCase
from .record_monthly_state import RecordMonthlyStateUseCase
from .seed_demo_data import SeedDemoDataUseCase

__all__ = [
    "AddHoldingUseCase",
    "AddInvestmentPlanUseCase",
    "AddLedgerEntryUseCase",
    "AddScenarioUseCase",
    "CompareScenariosUseCase",
    "ComputeKpiBundleUseCase",
    "EnsureTodaySnapshotUseCase",
    "GetCashflowEntriesUseCase",
    "GetDirectionUseCase",
    "GetForecastUseCase",
    "GetHoldingsUseCase",
    "GetInvestmentPlansUseCase",
    "GetTrajectoryUseCase",
    "ListLedgerEntriesUseCase",
    "LoadDashboardUseCase",
    "RecordCashflowUseCase",
    "RecordMonthlyStateUseCase",
    "SeedDemoDataUseCase",
    "build_holding",
]
