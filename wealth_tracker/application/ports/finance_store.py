"""Port for the record store holding holdings, ledgers and snapshots.

Keys are unique per logical record: holding id, month key ("YYYY-MM") for
monthly states and cashflow entries, and calendar date for snapshots.
Keyed writes are atomic at this boundary; callers never implement a
read-then-write sequence to emulate them.
"""

from datetime import date
from decimal import Decimal
from typing import Protocol

from wealth_tracker.domain.models import (
    CashflowEntry,
    DailySnapshot,
    Holding,
    InvestmentPlan,
    LedgerEntry,
    MonthlyState,
    Scenario,
)


class FinanceStoreError(RuntimeError):
    """Raised when the store cannot be read or written."""


class FinanceStorePort(Protocol):
    """Port exposing the persistence operations used by the use cases."""

    def get_all_holdings(self) -> list[Holding]:
        """Return every holding."""

    def get_holdings_by_category(self, category: str) -> list[Holding]:
        """Return the holdings of one category."""

    def add_holding(self, holding: Holding) -> str:
        """Store a holding and return its id."""

    def get_snapshot_by_date(self, day: date) -> DailySnapshot | None:
        """Return the snapshot stored for a date, if any."""

    def get_latest_snapshot(
        self,
        before: date | None = None,
    ) -> DailySnapshot | None:
        """Return the most recent snapshot, optionally strictly before a date."""

    def get_snapshots_in_range(
        self,
        start: date | None,
        end: date | None,
    ) -> list[DailySnapshot]:
        """Return snapshots within inclusive bounds, date ascending."""

    def create_snapshot(
        self,
        day: date,
        total_assets: Decimal,
        cash_ratio: Decimal,
        asset_breakdown: dict[str, Decimal],
        daily_change: Decimal,
    ) -> str:
        """Insert the snapshot for a date unless one exists.

        Returns:
            str: Id of the snapshot stored for that date, which is the
            existing one when another writer got there first.
        """

    def get_monthly_state_by_month(self, month: str) -> MonthlyState | None:
        """Return the monthly state for a month key, if any."""

    def get_latest_monthly_state(self, before: str) -> MonthlyState | None:
        """Return the newest monthly state strictly earlier than before."""

    def get_recent_monthly_states(self, count: int) -> list[MonthlyState]:
        """Return up to count monthly states, newest month first."""

    def upsert_monthly_state(self, state: MonthlyState) -> str:
        """Create or fully overwrite the state for its month; return its id."""

    def get_entries_in_date_range(
        self,
        kind: str,
        start: date,
        end: date,
    ) -> list[LedgerEntry]:
        """Return income or expense entries dated within inclusive bounds."""

    def add_entry(self, entry: LedgerEntry) -> str:
        """Store an income or expense entry and return its id."""

    def get_investment_plans(self) -> list[InvestmentPlan]:
        """Return every investment plan."""

    def add_investment_plan(self, plan: InvestmentPlan) -> str:
        """Store an investment plan and return its id."""

    def get_scenarios(self) -> list[Scenario]:
        """Return every saved scenario."""

    def add_scenario(self, scenario: Scenario) -> str:
        """Store a scenario and return its id."""

    def upsert_cashflow_entry(self, entry: CashflowEntry) -> str:
        """Create or fully overwrite the cashflow entry for its month."""

    def get_cashflow_entries(self) -> list[CashflowEntry]:
        """Return cashflow entries, month ascending."""


__all__ = ["FinanceStoreError", "FinanceStorePort"]
