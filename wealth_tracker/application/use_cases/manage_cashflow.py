"""Use cases recording and listing planned monthly cashflow."""

from dataclasses import replace

from wealth_tracker.application.ports.finance_store import FinanceStorePort
from wealth_tracker.domain.models import CashflowEntry
from wealth_tracker.infrastructure.logging.logger import get_app_logger
from wealth_tracker.utils.decimal_utils import coerce_decimal
from wealth_tracker.utils.months import parse_month


class RecordCashflowUseCase:
    """Create or overwrite the planned cashflow for a month."""

    def __init__(self, store: FinanceStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        month: str,
        baseline_income,
        baseline_spending,
        monthly_investment,
        bonus_amount=None,
        notes: str | None = None,
    ) -> CashflowEntry:
        """Upsert the month's cashflow and return it with its id.

        Raises:
            ValueError: If month is not a "YYYY-MM" key.
        """
        parse_month(month)
        entry = CashflowEntry(
            month=month,
            baseline_income=coerce_decimal(baseline_income),
            baseline_spending=coerce_decimal(baseline_spending),
            monthly_investment=coerce_decimal(monthly_investment),
            bonus_amount=(
                coerce_decimal(bonus_amount)
                if bonus_amount is not None
                else None
            ),
            notes=notes or None,
        )
        entry_id = self._store.upsert_cashflow_entry(entry)
        self._logger.info(f"Cashflow recorded for {month}")
        return replace(entry, id=entry_id)


class GetCashflowEntriesUseCase:
    """List planned cashflow, oldest month first."""

    def __init__(self, store: FinanceStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self) -> list[CashflowEntry]:
        return self._store.get_cashflow_entries()


__all__ = ["RecordCashflowUseCase", "GetCashflowEntriesUseCase"]
