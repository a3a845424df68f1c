"""Streamlit dashboard entry point."""

from collections.abc import Callable, Sequence
from datetime import date
from decimal import Decimal

import altair as alt
import streamlit as st

from wealth_tracker.application.use_cases.add_scenario import (
    AddScenarioUseCase,
)
from wealth_tracker.application.use_cases.compare_scenarios import (
    CompareScenariosUseCase,
)
from wealth_tracker.application.use_cases.get_direction import (
    GetDirectionUseCase,
)
from wealth_tracker.application.use_cases.get_forecast import (
    GetForecastUseCase,
)
from wealth_tracker.application.use_cases.get_trajectory import (
    GetTrajectoryUseCase,
)
from wealth_tracker.application.use_cases.load_dashboard import (
    LoadDashboardUseCase,
)
from wealth_tracker.application.use_cases.manage_cashflow import (
    GetCashflowEntriesUseCase,
    RecordCashflowUseCase,
)
from wealth_tracker.application.use_cases.manage_holdings import (
    AddHoldingUseCase,
    GetHoldingsUseCase,
    build_holding,
)
from wealth_tracker.application.use_cases.manage_plans import (
    AddInvestmentPlanUseCase,
    GetInvestmentPlansUseCase,
)
from wealth_tracker.application.use_cases.record_ledger_entry import (
    AddLedgerEntryUseCase,
    ListLedgerEntriesUseCase,
)
from wealth_tracker.application.use_cases.record_monthly_state import (
    RecordMonthlyStateUseCase,
)
from wealth_tracker.domain.constants import (
    ASSET_CATEGORIES,
    CATEGORY_LABELS,
    ENTRY_KINDS,
    EXPENSE,
    EXPENSE_TYPES,
)
from wealth_tracker.domain.models import (
    CashflowEntry,
    DashboardView,
    DirectionView,
    ForecastView,
    Holding,
    InvestmentPlan,
    LedgerEntry,
    MonthlyState,
    ProjectionPoint,
    Scenario,
    ScenarioOutcome,
)
from wealth_tracker.domain.services import display_name, valuate
from wealth_tracker.infrastructure.container import (
    build_finance_store,
    build_settings,
)
from wealth_tracker.infrastructure.logging.logger import get_usage_logger
from wealth_tracker.utils.months import format_month, month_bounds

_CURRENCY_SYMBOLS = {"JPY": "¥", "USD": "$", "EUR": "€"}

_CACHE_TTL_SECONDS = 60

_PAGES = [
    "Dashboard",
    "Overview",
    "Trajectory",
    "Forecast",
    "Record Month",
    "Holdings",
    "Ledger",
    "Plans",
    "Scenarios",
    "Cashflow",
]

_PALETTE = [
    "#1b9aaa",
    "#2e7d32",
    "#f4a261",
    "#e76f51",
    "#457b9d",
]


def _fetch_dashboard() -> DashboardView:
    """Load the dashboard, taking today's snapshot if needed."""
    settings = build_settings()
    use_case = LoadDashboardUseCase(
        build_finance_store(),
        history_days=settings.snapshot_history_days,
    )
    return use_case.execute()


def _fetch_direction(window: int) -> DirectionView:
    """Classify the direction of recent monthly states."""
    use_case = GetDirectionUseCase(build_finance_store())
    return use_case.execute(window=window)


def _fetch_trajectory(
    monthly_contribution: int,
    annual_return: float,
    horizon_years: int,
) -> list[ProjectionPoint]:
    """Project the latest net worth forward."""
    use_case = GetTrajectoryUseCase(build_finance_store())
    return use_case.execute(monthly_contribution, annual_return, horizon_years)


@st.cache_data(show_spinner=False, ttl=_CACHE_TTL_SECONDS)
def _load_trajectory(
    monthly_contribution: int,
    annual_return: float,
    horizon_years: int,
) -> list[ProjectionPoint]:
    """Cached wrapper around _fetch_trajectory."""
    return _fetch_trajectory(monthly_contribution, annual_return, horizon_years)


def _fetch_forecast(
    horizon_years: int,
    annual_return_override: float | None,
) -> ForecastView:
    """Forecast holdings with plan contributions."""
    use_case = GetForecastUseCase(build_finance_store())
    return use_case.execute(horizon_years, annual_return_override)


def _fetch_holdings(category: str | None) -> list[Holding]:
    """List holdings, optionally for one category."""
    return GetHoldingsUseCase(build_finance_store()).execute(category)


def _fetch_ledger(start: date, end: date) -> list[LedgerEntry]:
    """List income and expense entries in a date range."""
    return ListLedgerEntriesUseCase(build_finance_store()).execute(start, end)


def _fetch_plans() -> list[InvestmentPlan]:
    return GetInvestmentPlansUseCase(build_finance_store()).execute()


def _fetch_scenario_outcomes() -> list[ScenarioOutcome]:
    return CompareScenariosUseCase(build_finance_store()).execute()


def _fetch_cashflow() -> list[CashflowEntry]:
    return GetCashflowEntriesUseCase(build_finance_store()).execute()


def _submit_monthly_state(
    month: str,
    income_monthly,
    living_cost_monthly,
    balances: dict,
) -> MonthlyState:
    """Record a month; balances missing from the dict are carried."""
    use_case = RecordMonthlyStateUseCase(build_finance_store())
    return use_case.execute(
        month,
        income_monthly,
        living_cost_monthly,
        **balances,
    )


def _submit_holding(
    category: str,
    name: str,
    quantity,
    unit_cost,
    current_value,
) -> Holding:
    holding = build_holding(category, name, quantity, unit_cost, current_value)
    return AddHoldingUseCase(build_finance_store()).execute(holding)


def _submit_ledger_entry(
    kind: str,
    amount,
    entry_date: date,
    category: str,
    expense_type: str | None,
    memo: str,
) -> LedgerEntry:
    use_case = AddLedgerEntryUseCase(build_finance_store())
    return use_case.execute(
        kind,
        amount,
        entry_date,
        category=category,
        expense_type=expense_type,
        memo=memo,
    )


def _submit_plan(
    name: str,
    asset_category: str,
    monthly_amount,
    expected_return,
) -> InvestmentPlan:
    use_case = AddInvestmentPlanUseCase(build_finance_store())
    return use_case.execute(name, asset_category, monthly_amount, expected_return)


def _submit_scenario(name: str, years: int, **amounts) -> Scenario:
    use_case = AddScenarioUseCase(build_finance_store())
    return use_case.execute(name, years, **amounts)


def _submit_cashflow(
    month: str,
    baseline_income,
    baseline_spending,
    monthly_investment,
    bonus_amount,
    notes: str,
) -> CashflowEntry:
    use_case = RecordCashflowUseCase(build_finance_store())
    return use_case.execute(
        month,
        baseline_income,
        baseline_spending,
        monthly_investment,
        bonus_amount=bonus_amount,
        notes=notes,
    )


def _clear_cached_reads() -> None:
    """Drop cached reads so the next render sees the latest writes."""
    _load_trajectory.clear()


def _run_write(action: Callable[[], object], success_message: str) -> bool:
    """Run a write and report the outcome on the page.

    Invalid input is shown as an error; store failures propagate.

    Returns:
        bool: True when the write went through.
    """
    try:
        action()
    except ValueError as exc:
        st.error(str(exc))
        return False
    _clear_cached_reads()
    get_usage_logger().info(success_message)
    st.success(success_message)
    return True


def _format_currency(value, currency_code: str) -> str:
    """Format currency values as whole units for display."""
    symbol = _CURRENCY_SYMBOLS.get(currency_code, f"{currency_code} ")
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.0f}"


def _format_compact(value, currency_code: str) -> str:
    """Format large amounts with K/M/B suffixes."""
    symbol = _CURRENCY_SYMBOLS.get(currency_code, f"{currency_code} ")
    amount = abs(Decimal(str(value)))
    sign = "-" if value < 0 else ""
    for threshold, suffix, digits in (
        (Decimal("1000000000"), "B", 1),
        (Decimal("1000000"), "M", 1),
        (Decimal("1000"), "K", 0),
    ):
        if amount >= threshold:
            return f"{sign}{symbol}{amount / threshold:.{digits}f}{suffix}"
    return f"{sign}{symbol}{amount:.0f}"


def _format_percent(value, decimals: int = 1) -> str:
    """Format a percentage value."""
    return f"{value:.{decimals}f}%"


def _prepare_allocation_data(
    allocation: dict[str, Decimal],
    currency_code: str,
) -> list[dict[str, str | float]]:
    """Prepare Altair donut data, skipping empty categories.

    Args:
        allocation: Category totals keyed by category.
        currency_code: Currency used for labels.

    Returns:
        Altair-ready rows with amount, amount label and share label.
    """
    total = sum(allocation.values(), Decimal("0"))
    data: list[dict[str, str | float]] = []
    for category, amount in sorted(
        allocation.items(),
        key=lambda item: item[1],
        reverse=True,
    ):
        if amount == 0:
            continue
        share = amount / total * Decimal("100") if total else Decimal("0")
        data.append(
            {
                "category": CATEGORY_LABELS.get(category, category),
                "amount": float(amount),
                "amount_label": _format_currency(amount, currency_code),
                "share_label": f"{share:.1f}%",
            }
        )
    return data


def _prepare_projection_data(
    points: Sequence[ProjectionPoint],
) -> list[dict[str, int | str]]:
    """Flatten projection points into contributions/growth stacked rows."""
    data: list[dict[str, int | str]] = []
    for point in points:
        data.append(
            {
                "year": point.period,
                "component": "Start + contributions",
                "value": point.total_value - point.growth,
            }
        )
        data.append(
            {"year": point.period, "component": "Growth", "value": point.growth}
        )
    return data


def _prepare_holding_rows(
    holdings: Sequence[Holding],
    currency_code: str,
) -> list[dict[str, str]]:
    """Turn holdings into table rows, most valuable first."""
    valued = sorted(
        ((holding, valuate(holding)) for holding in holdings),
        key=lambda item: item[1],
        reverse=True,
    )
    return [
        {
            "Category": CATEGORY_LABELS.get(holding.category, holding.category),
            "Name": display_name(holding),
            "Value": _format_currency(value, currency_code),
        }
        for holding, value in valued
    ]


def _render_allocation_chart(
    allocation: dict[str, Decimal],
    currency_code: str,
    chart_size: int = 320,
) -> None:
    """Render a donut chart of holdings by category."""
    data = _prepare_allocation_data(allocation, currency_code)
    if not data:
        st.info("No holdings recorded yet.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(range=_PALETTE),
            legend=alt.Legend(orient="bottom", title=None, columns=2),
        ),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    ).properties(width=chart_size, height=chart_size)
    st.subheader("Asset Allocation")
    st.altair_chart(chart, width="stretch")


def _render_projection_chart(points: Sequence[ProjectionPoint]) -> None:
    """Render a stacked area chart of a projection."""
    chart = alt.Chart(
        alt.Data(values=_prepare_projection_data(points))
    ).mark_area(opacity=0.8).encode(
        x=alt.X("year:Q", title="Year"),
        y=alt.Y("value:Q", stack=True, title=None),
        color=alt.Color(
            "component:N",
            scale=alt.Scale(range=_PALETTE[:2]),
            legend=alt.Legend(orient="bottom", title=None),
        ),
    )
    st.altair_chart(chart, width="stretch")


def _render_dashboard(view: DashboardView, currency_code: str) -> None:
    """Render the KPI metrics and the allocation donut."""
    kpis = view.kpis
    if view.snapshot_id is None:
        st.warning("Today's snapshot could not be saved; see the logs.")
    first, second, third = st.columns(3)
    first.metric(
        "Net Worth Change",
        _format_currency(kpis.net_worth_change, currency_code),
    )
    second.metric(
        "Monthly Balance",
        _format_currency(kpis.monthly_balance, currency_code),
    )
    third.metric("Savings Rate", _format_percent(kpis.savings_rate))
    fourth, fifth = st.columns(2)
    fourth.metric("Liquidity Ratio", _format_percent(kpis.liquidity_ratio))
    fifth.metric(
        "Monthly Expenses",
        _format_currency(kpis.monthly_expenses, currency_code),
    )
    _render_allocation_chart(kpis.asset_allocation, currency_code)
    st.caption(f"{len(view.snapshots)} snapshots in the recent history")


def _render_overview(view: DirectionView, currency_code: str) -> None:
    """Render the direction card and the latest month's metrics."""
    st.subheader(view.analysis.label)
    st.caption(view.analysis.description)
    if view.latest is None:
        st.info("Record a monthly state to see your metrics.")
        return
    left, right = st.columns(2)
    left.metric(
        "Net Worth",
        _format_compact(view.latest.net_worth, currency_code),
    )
    right.metric(
        "Monthly Investment",
        _format_compact(view.latest.invest_contribution_monthly, currency_code),
    )
    left.metric("Cash Runway", f"{view.cash_runway} months")
    right.metric("Savings Rate", _format_percent(view.savings_rate, 0))


def _render_trajectory(currency_code: str) -> None:
    """Render trajectory controls and chart."""
    monthly = st.sidebar.number_input(
        "Monthly investment",
        min_value=0,
        value=50000,
        step=10000,
    )
    annual_return = st.sidebar.slider("Expected return (%)", 0.0, 15.0, 7.0, 0.5)
    horizon = st.sidebar.slider("Horizon (years)", 1, 40, 10)
    points = _load_trajectory(int(monthly), float(annual_return), int(horizon))
    final = points[-1]
    st.metric(
        f"In {horizon} {'year' if horizon == 1 else 'years'}",
        _format_compact(final.total_value, currency_code),
    )
    _render_projection_chart(points)
    st.caption(
        f"Contributions {_format_currency(final.contributions, currency_code)}"
        f" · Growth {_format_currency(final.growth, currency_code)}"
    )


def _render_forecast(currency_code: str) -> None:
    """Render the plan-based forecast."""
    horizon = st.sidebar.slider("Forecast horizon (years)", 1, 40, 10)
    use_override = st.sidebar.checkbox("Override expected return")
    override = (
        st.sidebar.number_input("Annual return (%)", value=5.0, step=0.5)
        if use_override
        else None
    )
    view = _fetch_forecast(int(horizon), override)
    first, second, third = st.columns(3)
    first.metric(
        "Current Assets",
        _format_compact(view.current_assets, currency_code),
    )
    second.metric(
        "Monthly Contribution",
        _format_compact(view.monthly_contribution, currency_code),
    )
    third.metric(
        f"In {horizon} years",
        _format_compact(view.final_value, currency_code),
    )
    st.caption(
        f"Return used {_format_percent(view.annual_return_percent, 2)} "
        f"(plans weighted {_format_percent(view.weighted_return, 2)})"
    )
    st.line_chart(
        {
            "month": [point.month for point in view.points],
            "total": [point.total_value for point in view.points],
        },
        x="month",
        y="total",
    )


def _render_record_month() -> None:
    """Render the monthly state form."""
    st.subheader("Record Month")
    with st.form("record_month"):
        month = st.text_input("Month (YYYY-MM)", value=format_month(date.today()))
        income = st.number_input("Monthly income", min_value=0, step=10000)
        living_cost = st.number_input(
            "Monthly living cost",
            min_value=0,
            step=10000,
        )
        carry = st.checkbox("Keep balances from earlier months", value=True)
        net_worth = st.number_input("Net worth", value=0, step=100000)
        cash = st.number_input("Cash", value=0, step=100000)
        invested = st.number_input("Invested", value=0, step=100000)
        contribution = st.number_input(
            "Monthly investment",
            min_value=0,
            step=10000,
        )
        submitted = st.form_submit_button("Save month")
    if not submitted:
        return
    balances = {} if carry else {
        "net_worth": net_worth,
        "cash": cash,
        "invested": invested,
        "invest_contribution_monthly": contribution,
    }
    _run_write(
        lambda: _submit_monthly_state(month, income, living_cost, balances),
        f"Monthly state saved for {month}",
    )


def _render_holdings(currency_code: str) -> None:
    """Render the holdings table and the add-holding form."""
    st.subheader("Holdings")
    selected = st.selectbox(
        "Filter by category",
        options=["All", *ASSET_CATEGORIES],
        format_func=lambda value: CATEGORY_LABELS.get(value, value),
    )
    holdings = _fetch_holdings(None if selected == "All" else selected)
    st.caption(f"{len(holdings)} holdings shown")
    st.dataframe(
        _prepare_holding_rows(holdings, currency_code),
        width="stretch",
        hide_index=True,
    )
    with st.form("add_holding"):
        category = st.selectbox(
            "Category",
            options=list(ASSET_CATEGORIES),
            format_func=lambda value: CATEGORY_LABELS.get(value, value),
        )
        name = st.text_input("Name")
        quantity = st.number_input(
            "Quantity (balance for deposits)",
            min_value=0.0,
            step=1.0,
        )
        unit_cost = st.number_input("Average price", min_value=0.0, step=1.0)
        current_value = st.number_input(
            "Current value (0 to use quantity x price)",
            min_value=0.0,
            step=1000.0,
        )
        submitted = st.form_submit_button("Add holding")
    if submitted:
        _run_write(
            lambda: _submit_holding(
                category,
                name,
                quantity,
                unit_cost,
                current_value or None,
            ),
            f"Holding added to {CATEGORY_LABELS.get(category, category)}",
        )


def _render_ledger(currency_code: str) -> None:
    """Render this month's entries and the add-entry form."""
    start, end = month_bounds(date.today())
    st.subheader("Ledger")
    entries = _fetch_ledger(start, end)
    st.caption(f"{len(entries)} entries this month")
    st.dataframe(
        [
            {
                "Date": entry.entry_date.isoformat(),
                "Kind": entry.kind,
                "Category": entry.category or "",
                "Amount": _format_currency(entry.amount, currency_code),
            }
            for entry in entries
        ],
        width="stretch",
        hide_index=True,
    )
    with st.form("add_entry"):
        kind = st.selectbox("Kind", options=list(ENTRY_KINDS))
        amount = st.number_input("Amount", min_value=0, step=1000)
        entry_date = st.date_input("Date", value=date.today())
        category = st.text_input("Category")
        expense_type = st.selectbox("Expense type", options=list(EXPENSE_TYPES))
        memo = st.text_input("Memo")
        submitted = st.form_submit_button("Add entry")
    if submitted:
        _run_write(
            lambda: _submit_ledger_entry(
                kind,
                amount,
                entry_date,
                category,
                expense_type if kind == EXPENSE else None,
                memo,
            ),
            f"Recorded {kind} on {entry_date}",
        )


def _render_plans(currency_code: str) -> None:
    """Render investment plans and the add-plan form."""
    st.subheader("Investment Plans")
    plans = _fetch_plans()
    st.dataframe(
        [
            {
                "Name": plan.name,
                "Category": CATEGORY_LABELS.get(
                    plan.asset_category,
                    plan.asset_category,
                ),
                "Monthly": _format_currency(plan.monthly_amount, currency_code),
                "Return": (
                    _format_percent(plan.expected_return, 2)
                    if plan.expected_return is not None
                    else "-"
                ),
            }
            for plan in plans
        ],
        width="stretch",
        hide_index=True,
    )
    with st.form("add_plan"):
        name = st.text_input("Plan name")
        category = st.selectbox(
            "Asset category",
            options=list(ASSET_CATEGORIES),
            format_func=lambda value: CATEGORY_LABELS.get(value, value),
        )
        monthly_amount = st.number_input("Monthly amount", min_value=0, step=5000)
        has_return = st.checkbox("Set an expected return")
        expected_return = st.number_input(
            "Expected return (%)",
            value=5.0,
            step=0.5,
        )
        submitted = st.form_submit_button("Add plan")
    if submitted:
        _run_write(
            lambda: _submit_plan(
                name,
                category,
                monthly_amount,
                expected_return if has_return else None,
            ),
            f"Investment plan {name!r} added",
        )


def _render_scenarios(currency_code: str) -> None:
    """Render scenario outcomes and the add-scenario form."""
    st.subheader("Scenarios")
    outcomes = _fetch_scenario_outcomes()
    if not outcomes:
        st.info("Save a scenario to compare outcomes.")
    st.dataframe(
        [
            {
                "Scenario": outcome.scenario.name,
                "Years": outcome.scenario.years,
                "Final value": _format_compact(
                    outcome.final_point.total_value,
                    currency_code,
                ),
                "Growth": _format_compact(
                    outcome.final_point.growth,
                    currency_code,
                ),
            }
            for outcome in outcomes
        ],
        width="stretch",
        hide_index=True,
    )
    with st.form("add_scenario"):
        name = st.text_input("Scenario name")
        years = st.number_input("Years", min_value=0, value=10, step=1)
        expected_return = st.number_input(
            "Expected return (%)",
            value=5.0,
            step=0.5,
        )
        monthly_investment = st.number_input(
            "Monthly investment",
            min_value=0,
            step=10000,
        )
        current_net_worth = st.number_input(
            "Starting net worth",
            value=0,
            step=100000,
        )
        monthly_spending = st.number_input(
            "Monthly spending",
            min_value=0,
            step=10000,
        )
        baseline_income = st.number_input(
            "Monthly income",
            min_value=0,
            step=10000,
        )
        income_growth = st.number_input("Income growth (%)", value=0.0, step=0.5)
        submitted = st.form_submit_button("Save scenario")
    if submitted:
        _run_write(
            lambda: _submit_scenario(
                name,
                int(years),
                expected_return=expected_return,
                monthly_investment=monthly_investment,
                current_net_worth=current_net_worth,
                monthly_spending=monthly_spending,
                income_growth=income_growth,
                baseline_income=baseline_income,
            ),
            f"Scenario {name!r} saved",
        )


def _render_cashflow(currency_code: str) -> None:
    """Render planned cashflow and the monthly cashflow form."""
    st.subheader("Cashflow Plan")
    entries = _fetch_cashflow()
    st.dataframe(
        [
            {
                "Month": entry.month,
                "Income": _format_currency(entry.baseline_income, currency_code),
                "Spending": _format_currency(
                    entry.baseline_spending,
                    currency_code,
                ),
                "Investment": _format_currency(
                    entry.monthly_investment,
                    currency_code,
                ),
                "Notes": entry.notes or "",
            }
            for entry in entries
        ],
        width="stretch",
        hide_index=True,
    )
    with st.form("record_cashflow"):
        month = st.text_input("Month (YYYY-MM)", value=format_month(date.today()))
        income = st.number_input("Baseline income", min_value=0, step=10000)
        spending = st.number_input("Baseline spending", min_value=0, step=10000)
        investment = st.number_input(
            "Monthly investment",
            min_value=0,
            step=10000,
        )
        bonus = st.number_input("Bonus (0 for none)", min_value=0, step=10000)
        notes = st.text_input("Notes")
        submitted = st.form_submit_button("Save cashflow")
    if submitted:
        _run_write(
            lambda: _submit_cashflow(
                month,
                income,
                spending,
                investment,
                bonus or None,
                notes,
            ),
            f"Cashflow saved for {month}",
        )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Wealth Tracker", layout="wide")
    st.title("Wealth Tracker")

    settings = build_settings()
    currency_code = settings.base_currency
    page = st.sidebar.selectbox("Page", _PAGES)
    get_usage_logger().info(f"Page viewed: {page}")

    if page == "Dashboard":
        _render_dashboard(_fetch_dashboard(), currency_code)
    elif page == "Overview":
        _render_overview(
            _fetch_direction(settings.direction_window_months),
            currency_code,
        )
    elif page == "Trajectory":
        _render_trajectory(currency_code)
    elif page == "Forecast":
        _render_forecast(currency_code)
    elif page == "Record Month":
        _render_record_month()
    elif page == "Holdings":
        _render_holdings(currency_code)
    elif page == "Ledger":
        _render_ledger(currency_code)
    elif page == "Plans":
        _render_plans(currency_code)
    elif page == "Scenarios":
        _render_scenarios(currency_code)
    else:
        _render_cashflow(currency_code)


if __name__ == "__main__":  # pragma: no cover
    main()
