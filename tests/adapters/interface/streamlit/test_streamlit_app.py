"""Tests for the Streamlit app module."""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from wealth_tracker.adapters.interface.streamlit import app
from wealth_tracker.application.use_cases.manage_cashflow import (
    RecordCashflowUseCase,
)
from wealth_tracker.application.use_cases.manage_plans import (
    AddInvestmentPlanUseCase,
)
from wealth_tracker.domain.models import (
    DashboardView,
    DepositHolding,
    DirectionAnalysis,
    DirectionView,
    KPIData,
    ProjectionPoint,
    Scenario,
    ScenarioOutcome,
    StockHolding,
)
from wealth_tracker.infrastructure.settings import TrackerSettings


class _FakeColumn:
    def __init__(self, sink: list) -> None:
        self._sink = sink

    def metric(self, label, value, *args, **kwargs):
        self._sink.append((label, value))


class _FakeForm:
    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class _FakeStreamlit:
    def __init__(self, page: str, inputs=None, submit: bool = False) -> None:
        self.metrics: list[tuple[str, str]] = []
        self.captions: list[str] = []
        self.subheaders: list[str] = []
        self.warnings: list[str] = []
        self.infos: list[str] = []
        self.successes: list[str] = []
        self.errors: list[str] = []
        self.tables: list[list[dict]] = []
        self.forms: list[str] = []
        self.charts = []
        self.config_kwargs = None
        self.sidebar = SimpleNamespace(selectbox=lambda *_a, **_k: page)
        self._inputs = inputs or {}
        self._submit = submit

    def _value(self, label, default):
        return self._inputs.get(label, default)

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text

    def columns(self, count: int):
        return [_FakeColumn(self.metrics) for _ in range(count)]

    def metric(self, label, value, *args, **kwargs):
        self.metrics.append((label, value))

    def caption(self, text: str):
        self.captions.append(text)

    def subheader(self, text: str):
        self.subheaders.append(text)

    def warning(self, text: str):
        self.warnings.append(text)

    def info(self, text: str):
        self.infos.append(text)

    def success(self, text: str):
        self.successes.append(text)

    def error(self, text: str):
        self.errors.append(text)

    def altair_chart(self, chart, **kwargs):
        self.charts.append(chart)

    def dataframe(self, data, **kwargs):
        self.tables.append(data)

    def form(self, key: str):
        self.forms.append(key)
        return _FakeForm()

    def form_submit_button(self, label: str):
        return self._submit

    def selectbox(self, label, options, **kwargs):
        return self._value(label, options[0])

    def text_input(self, label, value="", **kwargs):
        return self._value(label, value)

    def number_input(self, label, value=None, min_value=None, **kwargs):
        default = value if value is not None else (min_value or 0)
        return self._value(label, default)

    def checkbox(self, label, value=False, **kwargs):
        return self._value(label, value)

    def date_input(self, label, value=None, **kwargs):
        return self._value(label, value)


def _kpis(allocation=None) -> KPIData:
    return KPIData(
        net_worth_change=Decimal("-12000"),
        monthly_balance=Decimal("150000"),
        savings_rate=Decimal("33.333"),
        liquidity_ratio=Decimal("25"),
        monthly_expenses=Decimal("300000"),
        asset_allocation=allocation
        or {"deposit": Decimal("250000"), "stock": Decimal("750000")},
    )


def _patch_main(monkeypatch, fake_st) -> None:
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(
        app,
        "build_settings",
        lambda: TrackerSettings(database_url="sqlite://", base_currency="JPY"),
    )
    monkeypatch.setattr(app, "get_usage_logger", MagicMock)


def test_fetch_dashboard_invokes_use_case(monkeypatch):
    """_fetch_dashboard should wire the store and history window."""
    captured = {}

    class _FakeUseCase:
        def __init__(self, store, history_days):
            captured["store"] = store
            captured["history_days"] = history_days

        def execute(self):
            return "view"

    monkeypatch.setattr(
        app,
        "build_settings",
        lambda: TrackerSettings(database_url="sqlite://", snapshot_history_days=14),
    )
    monkeypatch.setattr(app, "build_finance_store", lambda: "store")
    monkeypatch.setattr(app, "LoadDashboardUseCase", _FakeUseCase)

    assert app._fetch_dashboard() == "view"
    assert captured == {"store": "store", "history_days": 14}


def test_format_helpers():
    """Currency values are shown in whole units with a symbol."""
    assert app._format_currency(Decimal("1234567.6"), "JPY") == "¥1,234,568"
    assert app._format_currency(Decimal("-500"), "USD") == "-$500"
    assert app._format_currency(10, "CHF") == "CHF 10"
    assert app._format_compact(Decimal("2500000"), "JPY") == "¥2.5M"
    assert app._format_compact(45000, "JPY") == "¥45K"
    assert app._format_compact(-999, "JPY") == "-¥999"
    assert app._format_percent(Decimal("33.333")) == "33.3%"


def test_prepare_allocation_data_skips_empty_categories():
    """Rows are sorted by amount and carry display labels."""
    data = app._prepare_allocation_data(
        {
            "deposit": Decimal("250000"),
            "stock": Decimal("750000"),
            "crypto": Decimal("0"),
        },
        "JPY",
    )

    assert [row["category"] for row in data] == ["Stock", "Cash & Deposits"]
    assert data[0]["amount"] == 750000.0
    assert data[0]["amount_label"] == "¥750,000"
    assert data[0]["share_label"] == "75.0%"


def test_prepare_projection_data_splits_growth():
    """Each point yields a contributions row and a growth row."""
    data = app._prepare_projection_data(
        [ProjectionPoint(period=1, total_value=130, contributions=20, growth=10)]
    )

    assert data == [
        {"year": 1, "component": "Start + contributions", "value": 120},
        {"year": 1, "component": "Growth", "value": 10},
    ]


def test_main_renders_dashboard(monkeypatch):
    """The dashboard page shows KPI metrics and the allocation chart."""
    fake_st = _FakeStreamlit("Dashboard")
    _patch_main(monkeypatch, fake_st)
    monkeypatch.setattr(
        app,
        "_fetch_dashboard",
        lambda: DashboardView(snapshot_id="snap", kpis=_kpis()),
    )

    app.main()

    assert fake_st.config_kwargs["page_title"] == "Wealth Tracker"
    metrics = dict(fake_st.metrics)
    assert metrics["Net Worth Change"] == "-¥12,000"
    assert metrics["Savings Rate"] == "33.3%"
    assert fake_st.subheaders == ["Asset Allocation"]
    assert len(fake_st.charts) == 1
    assert fake_st.warnings == []


def test_main_warns_when_snapshot_failed(monkeypatch):
    """A missing snapshot id is surfaced as a warning."""
    fake_st = _FakeStreamlit("Dashboard")
    _patch_main(monkeypatch, fake_st)
    monkeypatch.setattr(
        app,
        "_fetch_dashboard",
        lambda: DashboardView(
            snapshot_id=None,
            kpis=_kpis({"deposit": Decimal("0")}),
        ),
    )

    app.main()

    assert len(fake_st.warnings) == 1
    assert fake_st.infos == ["No holdings recorded yet."]
    assert fake_st.charts == []


def test_main_renders_overview_without_states(monkeypatch):
    """The overview page asks for data when no month is recorded."""
    fake_st = _FakeStreamlit("Overview")
    _patch_main(monkeypatch, fake_st)
    windows = []

    def _fake_direction(window):
        windows.append(window)
        return DirectionView(
            analysis=DirectionAnalysis("flat", "Getting Started", "Add data."),
            latest=None,
            cash_runway=0,
            savings_rate=Decimal("0"),
        )

    monkeypatch.setattr(app, "_fetch_direction", _fake_direction)

    app.main()

    assert windows == [6]
    assert fake_st.subheaders == ["Getting Started"]
    assert fake_st.infos == ["Record a monthly state to see your metrics."]


def test_load_trajectory_is_refreshed_after_clear(monkeypatch):
    """Clearing cached reads makes the next trajectory call recompute."""
    calls = []

    def _fake_fetch(monthly_contribution, annual_return, horizon_years):
        calls.append(monthly_contribution)
        return [len(calls)]

    monkeypatch.setattr(app, "_fetch_trajectory", _fake_fetch)
    app._load_trajectory.clear()

    first = app._load_trajectory(12345, 6.5, 3)
    second = app._load_trajectory(12345, 6.5, 3)
    app._clear_cached_reads()
    third = app._load_trajectory(12345, 6.5, 3)

    assert first == second == [1]
    assert third == [2]
    assert calls == [12345, 12345]


def test_run_write_clears_cached_reads_on_success(monkeypatch):
    """A successful write refreshes cached reads and reports success."""
    fake_st = _FakeStreamlit("Dashboard")
    clear = MagicMock()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "get_usage_logger", MagicMock)
    monkeypatch.setattr(app, "_clear_cached_reads", clear)

    assert app._run_write(lambda: None, "Saved") is True
    assert fake_st.successes == ["Saved"]
    clear.assert_called_once_with()


def test_run_write_shows_invalid_input(monkeypatch):
    """Invalid input is shown as an error and nothing is refreshed."""
    fake_st = _FakeStreamlit("Dashboard")
    clear = MagicMock()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_clear_cached_reads", clear)

    def _fail():
        raise ValueError("Invalid month key: 'July'")

    assert app._run_write(_fail, "Saved") is False
    assert fake_st.errors == ["Invalid month key: 'July'"]
    assert fake_st.successes == []
    clear.assert_not_called()


@pytest.mark.parametrize(
    "inputs, expected_balances",
    [
        ({}, {}),
        (
            {
                "Keep balances from earlier months": False,
                "Net worth": 5_000_000,
                "Cash": 1_000_000,
                "Invested": 4_000_000,
                "Monthly investment": 50000,
            },
            {
                "net_worth": 5_000_000,
                "cash": 1_000_000,
                "invested": 4_000_000,
                "invest_contribution_monthly": 50000,
            },
        ),
    ],
)
def test_record_month_page_submits_state(
    monkeypatch, inputs, expected_balances
):
    """The record month form writes the state and refreshes reads."""
    fake_st = _FakeStreamlit(
        "Record Month",
        inputs={
            "Month (YYYY-MM)": "2024-05",
            "Monthly income": 400000,
            "Monthly living cost": 250000,
            **inputs,
        },
        submit=True,
    )
    _patch_main(monkeypatch, fake_st)
    submitted = []
    clear = MagicMock()
    monkeypatch.setattr(
        app,
        "_submit_monthly_state",
        lambda *args: submitted.append(args),
    )
    monkeypatch.setattr(app, "_clear_cached_reads", clear)

    app.main()

    assert fake_st.forms == ["record_month"]
    assert submitted == [("2024-05", 400000, 250000, expected_balances)]
    assert fake_st.successes == ["Monthly state saved for 2024-05"]
    clear.assert_called_once_with()


def test_record_month_page_waits_for_submit(monkeypatch):
    """Nothing is written until the form is submitted."""
    fake_st = _FakeStreamlit("Record Month")
    _patch_main(monkeypatch, fake_st)
    submit = MagicMock()
    monkeypatch.setattr(app, "_submit_monthly_state", submit)

    app.main()

    submit.assert_not_called()
    assert fake_st.successes == []


def test_holdings_page_lists_and_adds_holding(monkeypatch):
    """Holdings are listed by value and the form stores a new one."""
    fake_st = _FakeStreamlit(
        "Holdings",
        inputs={
            "Category": "stock",
            "Name": "ACME",
            "Quantity (balance for deposits)": 10.0,
            "Average price": 100.0,
        },
        submit=True,
    )
    _patch_main(monkeypatch, fake_st)
    monkeypatch.setattr(app, "_clear_cached_reads", MagicMock())
    monkeypatch.setattr(app, "build_finance_store", lambda: "store")
    filters = []
    added = []

    def _fake_fetch(category):
        filters.append(category)
        return [
            DepositHolding(id="a", balance=Decimal("1000"), account_name="Main"),
            StockHolding(
                id="b",
                shares=Decimal("2"),
                average_price=Decimal("5000"),
                stock_name="ACME",
            ),
        ]

    class _FakeAddHolding:
        def __init__(self, store):
            assert store == "store"

        def execute(self, holding):
            added.append(holding)
            return holding

    monkeypatch.setattr(app, "_fetch_holdings", _fake_fetch)
    monkeypatch.setattr(app, "AddHoldingUseCase", _FakeAddHolding)

    app.main()

    assert filters == [None]
    assert fake_st.tables == [
        [
            {"Category": "Stock", "Name": "ACME", "Value": "¥10,000"},
            {"Category": "Cash & Deposits", "Name": "Main", "Value": "¥1,000"},
        ]
    ]
    assert len(added) == 1
    assert isinstance(added[0], StockHolding)
    assert added[0].shares == Decimal("10")
    assert added[0].current_value is None
    assert fake_st.successes == ["Holding added to Stock"]


def test_ledger_page_drops_expense_type_for_income(monkeypatch):
    """Income entries are submitted without an expense type."""
    fake_st = _FakeStreamlit(
        "Ledger",
        inputs={
            "Kind": "income",
            "Amount": 5000,
            "Date": date(2024, 5, 1),
            "Expense type": "fixed",
        },
        submit=True,
    )
    _patch_main(monkeypatch, fake_st)
    monkeypatch.setattr(app, "_clear_cached_reads", MagicMock())
    monkeypatch.setattr(app, "_fetch_ledger", lambda start, end: [])
    submitted = []
    monkeypatch.setattr(
        app,
        "_submit_ledger_entry",
        lambda *args: submitted.append(args),
    )

    app.main()

    assert submitted == [("income", 5000, date(2024, 5, 1), "", None, "")]
    assert fake_st.captions == ["0 entries this month"]


def test_plans_page_stores_plan(monkeypatch):
    """The plan form goes through plan validation into the store."""
    fake_st = _FakeStreamlit(
        "Plans",
        inputs={
            "Plan name": "Index",
            "Asset category": "fund",
            "Monthly amount": 30000,
        },
        submit=True,
    )
    _patch_main(monkeypatch, fake_st)
    monkeypatch.setattr(app, "_clear_cached_reads", MagicMock())
    monkeypatch.setattr(app, "_fetch_plans", lambda: [])
    store = MagicMock()
    store.add_investment_plan.return_value = "plan-1"
    monkeypatch.setattr(app, "build_finance_store", lambda: store)
    monkeypatch.setattr(
        app,
        "AddInvestmentPlanUseCase",
        lambda s: AddInvestmentPlanUseCase(s, logger=MagicMock()),
    )

    app.main()

    plan = store.add_investment_plan.call_args.args[0]
    assert plan.name == "Index"
    assert plan.monthly_amount == Decimal("30000")
    assert plan.expected_return is None
    assert fake_st.successes == ["Investment plan 'Index' added"]


@pytest.mark.parametrize(
    "month, expected_errors",
    [("2024-07", []), ("July", ["Invalid month key: 'July'"])],
)
def test_cashflow_page_records_month(monkeypatch, month, expected_errors):
    """Cashflow is upserted for valid months and errors are shown."""
    fake_st = _FakeStreamlit(
        "Cashflow",
        inputs={
            "Month (YYYY-MM)": month,
            "Baseline income": 400000,
            "Baseline spending": 250000,
            "Monthly investment": 50000,
        },
        submit=True,
    )
    _patch_main(monkeypatch, fake_st)
    monkeypatch.setattr(app, "_clear_cached_reads", MagicMock())
    monkeypatch.setattr(app, "_fetch_cashflow", lambda: [])
    store = MagicMock()
    store.upsert_cashflow_entry.return_value = "cashflow-1"
    monkeypatch.setattr(app, "build_finance_store", lambda: store)
    monkeypatch.setattr(
        app,
        "RecordCashflowUseCase",
        lambda s: RecordCashflowUseCase(s, logger=MagicMock()),
    )

    app.main()

    assert fake_st.errors == expected_errors
    if expected_errors:
        store.upsert_cashflow_entry.assert_not_called()
    else:
        entry = store.upsert_cashflow_entry.call_args.args[0]
        assert entry.bonus_amount is None
        assert entry.notes is None
        assert fake_st.successes == ["Cashflow saved for 2024-07"]


def test_scenarios_page_shows_outcomes(monkeypatch):
    """Compared scenarios are listed with their final value."""
    fake_st = _FakeStreamlit("Scenarios")
    _patch_main(monkeypatch, fake_st)
    scenario = Scenario(
        name="Base",
        years=2,
        expected_return=Decimal("0"),
        monthly_investment=Decimal("10000"),
        monthly_spending=Decimal("0"),
        income_growth=Decimal("0"),
        baseline_income=Decimal("0"),
        current_net_worth=Decimal("1000000"),
    )
    monkeypatch.setattr(
        app,
        "_fetch_scenario_outcomes",
        lambda: [
            ScenarioOutcome(
                scenario=scenario,
                final_point=ProjectionPoint(
                    period=2,
                    total_value=1_240_000,
                    contributions=240_000,
                    growth=0,
                ),
            )
        ],
    )

    app.main()

    assert fake_st.infos == []
    assert fake_st.tables[0][0]["Scenario"] == "Base"
    assert fake_st.tables[0][0]["Final value"] == "¥1.2M"
    assert fake_st.forms == ["add_scenario"]


def test_scenarios_page_submits_scenario(monkeypatch):
    """The scenario form passes its amounts through to the use case."""
    fake_st = _FakeStreamlit(
        "Scenarios",
        inputs={"Scenario name": "Base", "Monthly investment": 10000},
        submit=True,
    )
    _patch_main(monkeypatch, fake_st)
    monkeypatch.setattr(app, "_clear_cached_reads", MagicMock())
    monkeypatch.setattr(app, "_fetch_scenario_outcomes", lambda: [])
    submitted = []
    monkeypatch.setattr(
        app,
        "_submit_scenario",
        lambda name, years, **amounts: submitted.append((name, years, amounts)),
    )

    app.main()

    assert fake_st.infos == ["Save a scenario to compare outcomes."]
    name, years, amounts = submitted[0]
    assert (name, years) == ("Base", 10)
    assert amounts["monthly_investment"] == 10000
    assert amounts["expected_return"] == 5.0
