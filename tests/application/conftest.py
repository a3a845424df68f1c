"""Shared fakes for use case tests."""

from dataclasses import replace
from unittest.mock import MagicMock

import pytest

from wealth_tracker.domain.models import DailySnapshot


class FakeFinanceStore:
    """In-memory store keyed the same way as the SQL store."""

    def __init__(self) -> None:
        self.holdings = []
        self.snapshots = {}
        self.monthly_states = {}
        self.entries = []
        self.plans = []
        self.scenarios = []
        self.cashflow = {}
        self.create_snapshot_calls = 0

    def get_all_holdings(self):
        return list(self.holdings)

    def get_holdings_by_category(self, category):
        return [h for h in self.holdings if h.category == category]

    def add_holding(self, holding):
        holding_id = holding.id or f"holding-{len(self.holdings) + 1}"
        self.holdings.append(replace(holding, id=holding_id))
        return holding_id

    def get_snapshot_by_date(self, day):
        return self.snapshots.get(day)

    def get_latest_snapshot(self, before=None):
        days = sorted(
            day for day in self.snapshots if before is None or day < before
        )
        return self.snapshots[days[-1]] if days else None

    def get_snapshots_in_range(self, start, end):
        return [
            self.snapshots[day]
            for day in sorted(self.snapshots)
            if (start is None or day >= start) and (end is None or day <= end)
        ]

    def create_snapshot(
        self,
        day,
        total_assets,
        cash_ratio,
        asset_breakdown,
        daily_change,
    ):
        self.create_snapshot_calls += 1
        if day not in self.snapshots:
            self.snapshots[day] = DailySnapshot(
                id=f"snap-{day.isoformat()}",
                snapshot_date=day,
                total_assets=total_assets,
                cash_ratio=cash_ratio,
                asset_breakdown=asset_breakdown,
                daily_change=daily_change,
            )
        return self.snapshots[day].id

    def get_monthly_state_by_month(self, month):
        return self.monthly_states.get(month)

    def get_latest_monthly_state(self, before):
        months = sorted(month for month in self.monthly_states if month < before)
        return self.monthly_states[months[-1]] if months else None

    def get_recent_monthly_states(self, count):
        months = sorted(self.monthly_states, reverse=True)[:count]
        return [self.monthly_states[month] for month in months]

    def upsert_monthly_state(self, state):
        existing = self.monthly_states.get(state.month)
        state_id = existing.id if existing else f"state-{state.month}"
        self.monthly_states[state.month] = replace(state, id=state_id)
        return state_id

    def get_entries_in_date_range(self, kind, start, end):
        return [
            entry
            for entry in self.entries
            if entry.kind == kind and start <= entry.entry_date <= end
        ]

    def get_investment_plans(self):
        return list(self.plans)

    def get_scenarios(self):
        return list(self.scenarios)

    def add_entry(self, entry):
        entry_id = f"entry-{len(self.entries) + 1}"
        self.entries.append(replace(entry, id=entry_id))
        return entry_id

    def add_investment_plan(self, plan):
        plan_id = f"plan-{len(self.plans) + 1}"
        self.plans.append(replace(plan, id=plan_id))
        return plan_id

    def add_scenario(self, scenario):
        scenario_id = f"scenario-{len(self.scenarios) + 1}"
        self.scenarios.append(replace(scenario, id=scenario_id))
        return scenario_id

    def upsert_cashflow_entry(self, entry):
        existing = self.cashflow.get(entry.month)
        entry_id = existing.id if existing else f"cashflow-{entry.month}"
        self.cashflow[entry.month] = replace(entry, id=entry_id)
        return entry_id

    def get_cashflow_entries(self):
        return [self.cashflow[month] for month in sorted(self.cashflow)]


@pytest.fixture
def store() -> FakeFinanceStore:
    return FakeFinanceStore()


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()
