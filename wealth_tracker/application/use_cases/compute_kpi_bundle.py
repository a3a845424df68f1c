"""Use case computing the dashboard KPI bundle for a calendar month."""

from datetime import date
from decimal import Decimal

from wealth_tracker.application.ports.finance_store import FinanceStorePort
from wealth_tracker.domain.constants import DEPOSIT, EXPENSE, INCOME
from wealth_tracker.domain.models import KPIData
from wealth_tracker.domain.services import category_totals, savings_rate_raw
from wealth_tracker.infrastructure.logging.logger import get_app_logger
from wealth_tracker.utils.decimal_utils import coerce_decimal
from wealth_tracker.utils.months import month_bounds


class ComputeKpiBundleUseCase:
    """Compute net worth change, cashflow and allocation KPIs."""

    def __init__(self, store: FinanceStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Port providing holdings, snapshots and ledger entries.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, as_of: date | None = None) -> KPIData:
        """Return the KPI bundle for the month containing as_of.

        Args:
            as_of: Reference date; defaults to today.

        Returns:
            KPIData: Snapshot-based net worth change plus the month's
            balance, savings rate, expenses, liquidity and allocation.
        """
        as_of = as_of or date.today()
        start, end = month_bounds(as_of)

        income_total = self._sum_entries(INCOME, start, end)
        expense_total = self._sum_entries(EXPENSE, start, end)
        allocation = category_totals(self._store.get_all_holdings())
        holdings_total = sum(allocation.values(), Decimal("0"))
        liquidity_ratio = (
            allocation[DEPOSIT] / holdings_total * Decimal("100")
            if holdings_total != 0
            else Decimal("0")
        )

        kpis = KPIData(
            net_worth_change=self._net_worth_change(),
            monthly_balance=income_total - expense_total,
            savings_rate=savings_rate_raw(income_total, expense_total),
            liquidity_ratio=liquidity_ratio,
            monthly_expenses=expense_total,
            asset_allocation=allocation,
        )
        self._logger.info(
            f"KPIs computed for {start:%Y-%m}: income={income_total}, "
            f"expenses={expense_total}, holdings={holdings_total}"
        )
        return kpis

    def _net_worth_change(self) -> Decimal:
        snapshots = sorted(
            self._store.get_snapshots_in_range(None, None),
            key=lambda snapshot: snapshot.snapshot_date,
        )
        if not snapshots:
            return Decimal("0")
        return snapshots[-1].total_assets - snapshots[0].total_assets

    def _sum_entries(self, kind: str, start: date, end: date) -> Decimal:
        entries = self._store.get_entries_in_date_range(kind, start, end)
        return sum(
            (coerce_decimal(entry.amount) for entry in entries),
            Decimal("0"),
        )


__all__ = ["ComputeKpiBundleUseCase"]
