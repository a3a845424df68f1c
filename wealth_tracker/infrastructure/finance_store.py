"""SQLAlchemy-backed finance store.

Monetary values are stored as TEXT to keep Decimal precision on SQLite,
dates as ISO strings, and holding payloads as JSON keyed by category.
Keyed writes use ``INSERT ... ON CONFLICT`` so they are atomic in both
SQLite and PostgreSQL.
"""

from contextlib import contextmanager
from dataclasses import asdict
from datetime import date
from decimal import Decimal
import json
from typing import Iterator
import uuid

from sqlalchemy import text
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from wealth_tracker.application.ports.database import DatabaseEnginePort
from wealth_tracker.application.ports.finance_store import (
    FinanceStoreError,
    FinanceStorePort,
)
from wealth_tracker.domain.models import (
    HOLDING_TYPES,
    CashflowEntry,
    DailySnapshot,
    Holding,
    InvestmentPlan,
    LedgerEntry,
    MonthlyState,
    Scenario,
)
from wealth_tracker.utils.decimal_utils import coerce_decimal

_DECIMAL_HOLDING_FIELDS = frozenset(
    {
        "balance",
        "shares",
        "quantity",
        "units",
        "average_price",
        "strike_price",
        "current_value",
    }
)

SCHEMA_SQL = (
    """
    CREATE TABLE IF NOT EXISTS holdings (
        id TEXT PRIMARY KEY,
        category TEXT NOT NULL,
        payload TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS daily_snapshots (
        id TEXT PRIMARY KEY,
        snapshot_date TEXT NOT NULL UNIQUE,
        total_assets TEXT NOT NULL,
        cash_ratio TEXT NOT NULL,
        asset_breakdown TEXT NOT NULL,
        daily_change TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS monthly_states (
        id TEXT PRIMARY KEY,
        month TEXT NOT NULL UNIQUE,
        net_worth TEXT NOT NULL,
        cash TEXT NOT NULL,
        invested TEXT NOT NULL,
        income_monthly TEXT NOT NULL,
        living_cost_monthly TEXT NOT NULL,
        invest_contribution_monthly TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS ledger_entries (
        id TEXT PRIMARY KEY,
        kind TEXT NOT NULL,
        amount TEXT NOT NULL,
        entry_date TEXT NOT NULL,
        category TEXT,
        expense_type TEXT,
        memo TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS investment_plans (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        asset_category TEXT NOT NULL,
        monthly_amount TEXT NOT NULL,
        expected_return TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS scenarios (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        years INTEGER NOT NULL,
        expected_return TEXT NOT NULL,
        monthly_investment TEXT NOT NULL,
        monthly_spending TEXT NOT NULL,
        income_growth TEXT NOT NULL,
        baseline_income TEXT NOT NULL,
        current_net_worth TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS cashflow_entries (
        id TEXT PRIMARY KEY,
        month TEXT NOT NULL UNIQUE,
        baseline_income TEXT NOT NULL,
        baseline_spending TEXT NOT NULL,
        monthly_investment TEXT NOT NULL,
        bonus_amount TEXT,
        notes TEXT
    )
    """,
)

INSERT_SNAPSHOT_SQL = text(
    """
    INSERT INTO daily_snapshots (
        id, snapshot_date, total_assets, cash_ratio,
        asset_breakdown, daily_change
    )
    VALUES (
        :id, :snapshot_date, :total_assets, :cash_ratio,
        :asset_breakdown, :daily_change
    )
    ON CONFLICT (snapshot_date) DO NOTHING
    """
)

UPSERT_MONTHLY_STATE_SQL = text(
    """
    INSERT INTO monthly_states (
        id, month, net_worth, cash, invested, income_monthly,
        living_cost_monthly, invest_contribution_monthly
    )
    VALUES (
        :id, :month, :net_worth, :cash, :invested, :income_monthly,
        :living_cost_monthly, :invest_contribution_monthly
    )
    ON CONFLICT (month) DO UPDATE SET
        net_worth = excluded.net_worth,
        cash = excluded.cash,
        invested = excluded.invested,
        income_monthly = excluded.income_monthly,
        living_cost_monthly = excluded.living_cost_monthly,
        invest_contribution_monthly = excluded.invest_contribution_monthly
    """
)

UPSERT_CASHFLOW_SQL = text(
    """
    INSERT INTO cashflow_entries (
        id, month, baseline_income, baseline_spending,
        monthly_investment, bonus_amount, notes
    )
    VALUES (
        :id, :month, :baseline_income, :baseline_spending,
        :monthly_investment, :bonus_amount, :notes
    )
    ON CONFLICT (month) DO UPDATE SET
        baseline_income = excluded.baseline_income,
        baseline_spending = excluded.baseline_spending,
        monthly_investment = excluded.monthly_investment,
        bonus_amount = excluded.bonus_amount,
        notes = excluded.notes
    """
)

_SNAPSHOT_COLUMNS = (
    "id, snapshot_date, total_assets, cash_ratio, asset_breakdown, "
    "daily_change"
)
_MONTHLY_STATE_COLUMNS = (
    "id, month, net_worth, cash, invested, income_monthly, "
    "living_cost_monthly, invest_contribution_monthly"
)


class SqlAlchemyFinanceStore(FinanceStorePort):
    """Finance store backed by SQLAlchemy ``text()`` queries."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port
        self._schema_ready = False

    def ensure_schema(self) -> None:
        """Create the store tables when they do not exist yet."""
        if self._schema_ready:
            return
        engine = self._db_port.get_finance_engine()
        try:
            with engine.begin() as conn:
                for statement in SCHEMA_SQL:
                    conn.exec_driver_sql(statement)
        except SQLAlchemyError as exc:
            raise FinanceStoreError(
                f"Failed to create finance store schema: {exc}"
            ) from exc
        self._schema_ready = True

    # Holdings

    def get_all_holdings(self) -> list[Holding]:
        with self._connect() as conn:
            rows = conn.execute(
                text("SELECT id, category, payload FROM holdings ORDER BY id")
            ).all()
        return [self._to_holding(row) for row in rows]

    def get_holdings_by_category(self, category: str) -> list[Holding]:
        with self._connect() as conn:
            rows = conn.execute(
                text(
                    """
                    SELECT id, category, payload
                    FROM holdings
                    WHERE category = :category
                    ORDER BY id
                    """
                ),
                {"category": category},
            ).all()
        return [self._to_holding(row) for row in rows]

    def add_holding(self, holding: Holding) -> str:
        holding_id = holding.id or _new_id()
        payload = {
            key: (str(value) if isinstance(value, Decimal) else value)
            for key, value in asdict(holding).items()
            if key != "id"
        }
        with self._connect(write=True) as conn:
            conn.execute(
                text(
                    """
                    INSERT INTO holdings (id, category, payload)
                    VALUES (:id, :category, :payload)
                    """
                ),
                {
                    "id": holding_id,
                    "category": holding.category,
                    "payload": json.dumps(payload),
                },
            )
        return holding_id

    # Snapshots

    def get_snapshot_by_date(self, day: date) -> DailySnapshot | None:
        with self._connect() as conn:
            row = conn.execute(
                text(
                    f"SELECT {_SNAPSHOT_COLUMNS} FROM daily_snapshots "
                    "WHERE snapshot_date = :day"
                ),
                {"day": day.isoformat()},
            ).first()
        return self._to_snapshot(row) if row else None

    def get_latest_snapshot(
        self,
        before: date | None = None,
    ) -> DailySnapshot | None:
        query = f"SELECT {_SNAPSHOT_COLUMNS} FROM daily_snapshots"
        params: dict[str, str] = {}
        if before:
            query += " WHERE snapshot_date < :before"
            params["before"] = before.isoformat()
        query += " ORDER BY snapshot_date DESC LIMIT 1"
        with self._connect() as conn:
            row = conn.execute(text(query), params).first()
        return self._to_snapshot(row) if row else None

    def get_snapshots_in_range(
        self,
        start: date | None,
        end: date | None,
    ) -> list[DailySnapshot]:
        query = f"SELECT {_SNAPSHOT_COLUMNS} FROM daily_snapshots WHERE 1=1"
        params: dict[str, str] = {}
        if start:
            query += " AND snapshot_date >= :start"
            params["start"] = start.isoformat()
        if end:
            query += " AND snapshot_date <= :end"
            params["end"] = end.isoformat()
        query += " ORDER BY snapshot_date ASC"
        with self._connect() as conn:
            rows = conn.execute(text(query), params).all()
        return [self._to_snapshot(row) for row in rows]

    def create_snapshot(
        self,
        day: date,
        total_assets: Decimal,
        cash_ratio: Decimal,
        asset_breakdown: dict[str, Decimal],
        daily_change: Decimal,
    ) -> str:
        with self._connect(write=True) as conn:
            conn.execute(
                INSERT_SNAPSHOT_SQL,
                {
                    "id": _new_id(),
                    "snapshot_date": day.isoformat(),
                    "total_assets": str(total_assets),
                    "cash_ratio": str(cash_ratio),
                    "asset_breakdown": json.dumps(
                        {key: str(value) for key, value in asset_breakdown.items()}
                    ),
                    "daily_change": str(daily_change),
                },
            )
            row = conn.execute(
                text(
                    "SELECT id FROM daily_snapshots WHERE snapshot_date = :day"
                ),
                {"day": day.isoformat()},
            ).first()
        return row.id

    # Monthly states

    def get_monthly_state_by_month(self, month: str) -> MonthlyState | None:
        with self._connect() as conn:
            row = conn.execute(
                text(
                    f"SELECT {_MONTHLY_STATE_COLUMNS} FROM monthly_states "
                    "WHERE month = :month"
                ),
                {"month": month},
            ).first()
        return self._to_monthly_state(row) if row else None

    def get_latest_monthly_state(self, before: str) -> MonthlyState | None:
        with self._connect() as conn:
            row = conn.execute(
                text(
                    f"SELECT {_MONTHLY_STATE_COLUMNS} FROM monthly_states "
                    "WHERE month < :before ORDER BY month DESC LIMIT 1"
                ),
                {"before": before},
            ).first()
        return self._to_monthly_state(row) if row else None

    def get_recent_monthly_states(self, count: int) -> list[MonthlyState]:
        with self._connect() as conn:
            rows = conn.execute(
                text(
                    f"SELECT {_MONTHLY_STATE_COLUMNS} FROM monthly_states "
                    "ORDER BY month DESC LIMIT :count"
                ),
                {"count": count},
            ).all()
        return [self._to_monthly_state(row) for row in rows]

    def upsert_monthly_state(self, state: MonthlyState) -> str:
        with self._connect(write=True) as conn:
            conn.execute(
                UPSERT_MONTHLY_STATE_SQL,
                {
                    "id": state.id or _new_id(),
                    "month": state.month,
                    "net_worth": str(state.net_worth),
                    "cash": str(state.cash),
                    "invested": str(state.invested),
                    "income_monthly": str(state.income_monthly),
                    "living_cost_monthly": str(state.living_cost_monthly),
                    "invest_contribution_monthly": str(
                        state.invest_contribution_monthly
                    ),
                },
            )
            row = conn.execute(
                text("SELECT id FROM monthly_states WHERE month = :month"),
                {"month": state.month},
            ).first()
        return row.id

    # Ledger entries

    def get_entries_in_date_range(
        self,
        kind: str,
        start: date,
        end: date,
    ) -> list[LedgerEntry]:
        with self._connect() as conn:
            rows = conn.execute(
                text(
                    """
                    SELECT id, kind, amount, entry_date, category,
                           expense_type, memo
                    FROM ledger_entries
                    WHERE kind = :kind
                      AND entry_date >= :start
                      AND entry_date <= :end
                    ORDER BY entry_date, id
                    """
                ),
                {
                    "kind": kind,
                    "start": start.isoformat(),
                    "end": end.isoformat(),
                },
            ).all()
        return [
            LedgerEntry(
                id=row.id,
                kind=row.kind,
                amount=coerce_decimal(row.amount),
                entry_date=date.fromisoformat(row.entry_date),
                category=row.category,
                expense_type=row.expense_type,
                memo=row.memo,
            )
            for row in rows
        ]

    def add_entry(self, entry: LedgerEntry) -> str:
        entry_id = entry.id or _new_id()
        with self._connect(write=True) as conn:
            conn.execute(
                text(
                    """
                    INSERT INTO ledger_entries (
                        id, kind, amount, entry_date, category,
                        expense_type, memo
                    )
                    VALUES (
                        :id, :kind, :amount, :entry_date, :category,
                        :expense_type, :memo
                    )
                    """
                ),
                {
                    "id": entry_id,
                    "kind": entry.kind,
                    "amount": str(entry.amount),
                    "entry_date": entry.entry_date.isoformat(),
                    "category": entry.category,
                    "expense_type": entry.expense_type,
                    "memo": entry.memo,
                },
            )
        return entry_id

    # Plans and scenarios

    def get_investment_plans(self) -> list[InvestmentPlan]:
        with self._connect() as conn:
            rows = conn.execute(
                text(
                    """
                    SELECT id, name, asset_category, monthly_amount,
                           expected_return
                    FROM investment_plans
                    ORDER BY name, id
                    """
                )
            ).all()
        return [
            InvestmentPlan(
                id=row.id,
                name=row.name,
                asset_category=row.asset_category,
                monthly_amount=coerce_decimal(row.monthly_amount),
                expected_return=(
                    coerce_decimal(row.expected_return)
                    if row.expected_return is not None
                    else None
                ),
            )
            for row in rows
        ]

    def add_investment_plan(self, plan: InvestmentPlan) -> str:
        plan_id = plan.id or _new_id()
        with self._connect(write=True) as conn:
            conn.execute(
                text(
                    """
                    INSERT INTO investment_plans (
                        id, name, asset_category, monthly_amount,
                        expected_return
                    )
                    VALUES (
                        :id, :name, :asset_category, :monthly_amount,
                        :expected_return
                    )
                    """
                ),
                {
                    "id": plan_id,
                    "name": plan.name,
                    "asset_category": plan.asset_category,
                    "monthly_amount": str(plan.monthly_amount),
                    "expected_return": (
                        str(plan.expected_return)
                        if plan.expected_return is not None
                        else None
                    ),
                },
            )
        return plan_id

    def get_scenarios(self) -> list[Scenario]:
        with self._connect() as conn:
            rows = conn.execute(
                text(
                    """
                    SELECT id, name, years, expected_return,
                           monthly_investment, monthly_spending,
                           income_growth, baseline_income, current_net_worth
                    FROM scenarios
                    ORDER BY name, id
                    """
                )
            ).all()
        return [
            Scenario(
                id=row.id,
                name=row.name,
                years=int(row.years),
                expected_return=coerce_decimal(row.expected_return),
                monthly_investment=coerce_decimal(row.monthly_investment),
                monthly_spending=coerce_decimal(row.monthly_spending),
                income_growth=coerce_decimal(row.income_growth),
                baseline_income=coerce_decimal(row.baseline_income),
                current_net_worth=coerce_decimal(row.current_net_worth),
            )
            for row in rows
        ]

    def add_scenario(self, scenario: Scenario) -> str:
        scenario_id = scenario.id or _new_id()
        with self._connect(write=True) as conn:
            conn.execute(
                text(
                    """
                    INSERT INTO scenarios (
                        id, name, years, expected_return, monthly_investment,
                        monthly_spending, income_growth, baseline_income,
                        current_net_worth
                    )
                    VALUES (
                        :id, :name, :years, :expected_return,
                        :monthly_investment, :monthly_spending,
                        :income_growth, :baseline_income, :current_net_worth
                    )
                    """
                ),
                {
                    "id": scenario_id,
                    "name": scenario.name,
                    "years": scenario.years,
                    "expected_return": str(scenario.expected_return),
                    "monthly_investment": str(scenario.monthly_investment),
                    "monthly_spending": str(scenario.monthly_spending),
                    "income_growth": str(scenario.income_growth),
                    "baseline_income": str(scenario.baseline_income),
                    "current_net_worth": str(scenario.current_net_worth),
                },
            )
        return scenario_id

    # Cashflow

    def upsert_cashflow_entry(self, entry: CashflowEntry) -> str:
        with self._connect(write=True) as conn:
            conn.execute(
                UPSERT_CASHFLOW_SQL,
                {
                    "id": entry.id or _new_id(),
                    "month": entry.month,
                    "baseline_income": str(entry.baseline_income),
                    "baseline_spending": str(entry.baseline_spending),
                    "monthly_investment": str(entry.monthly_investment),
                    "bonus_amount": (
                        str(entry.bonus_amount)
                        if entry.bonus_amount is not None
                        else None
                    ),
                    "notes": entry.notes,
                },
            )
            row = conn.execute(
                text("SELECT id FROM cashflow_entries WHERE month = :month"),
                {"month": entry.month},
            ).first()
        return row.id

    def get_cashflow_entries(self) -> list[CashflowEntry]:
        with self._connect() as conn:
            rows = conn.execute(
                text(
                    """
                    SELECT id, month, baseline_income, baseline_spending,
                           monthly_investment, bonus_amount, notes
                    FROM cashflow_entries
                    ORDER BY month ASC
                    """
                )
            ).all()
        return [
            CashflowEntry(
                id=row.id,
                month=row.month,
                baseline_income=coerce_decimal(row.baseline_income),
                baseline_spending=coerce_decimal(row.baseline_spending),
                monthly_investment=coerce_decimal(row.monthly_investment),
                bonus_amount=(
                    coerce_decimal(row.bonus_amount)
                    if row.bonus_amount is not None
                    else None
                ),
                notes=row.notes,
            )
            for row in rows
        ]

    @contextmanager
    def _connect(self, write: bool = False) -> Iterator[Connection]:
        """Yield a connection, translating driver errors.

        Args:
            write: Open a transaction that commits on success.

        Raises:
            FinanceStoreError: If SQLAlchemy reports any failure.
        """
        self.ensure_schema()
        engine = self._db_port.get_finance_engine()
        try:
            if write:
                with engine.begin() as conn:
                    yield conn
            else:
                with engine.connect() as conn:
                    yield conn
        except SQLAlchemyError as exc:
            raise FinanceStoreError(f"Finance store failure: {exc}") from exc

    @staticmethod
    def _to_holding(row) -> Holding:
        holding_type = HOLDING_TYPES.get(row.category)
        if holding_type is None:
            raise FinanceStoreError(
                f"Unknown holding category in store: {row.category}"
            )
        payload = json.loads(row.payload)
        fields = {
            key: (
                coerce_decimal(value)
                if key in _DECIMAL_HOLDING_FIELDS and value is not None
                else value
            )
            for key, value in payload.items()
        }
        return holding_type(id=row.id, **fields)

    @staticmethod
    def _to_snapshot(row) -> DailySnapshot:
        breakdown = json.loads(row.asset_breakdown)
        return DailySnapshot(
            id=row.id,
            snapshot_date=date.fromisoformat(row.snapshot_date),
            total_assets=coerce_decimal(row.total_assets),
            cash_ratio=coerce_decimal(row.cash_ratio),
            asset_breakdown={
                key: coerce_decimal(value) for key, value in breakdown.items()
            },
            daily_change=coerce_decimal(row.daily_change),
        )

    @staticmethod
    def _to_monthly_state(row) -> MonthlyState:
        return MonthlyState(
            id=row.id,
            month=row.month,
            net_worth=coerce_decimal(row.net_worth),
            cash=coerce_decimal(row.cash),
            invested=coerce_decimal(row.invested),
            income_monthly=coerce_decimal(row.income_monthly),
            living_cost_monthly=coerce_decimal(row.living_cost_monthly),
            invest_contribution_monthly=coerce_decimal(
                row.invest_contribution_monthly
            ),
        )


def _new_id() -> str:
    return str(uuid.uuid4())


__all__ = ["SqlAlchemyFinanceStore", "SCHEMA_SQL"]
