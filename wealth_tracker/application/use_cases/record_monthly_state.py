"""Use case recording the monthly income and living cost levers."""

from dataclasses import replace
from decimal import Decimal

from wealth_tracker.application.ports.finance_store import FinanceStorePort
from wealth_tracker.domain.models import MonthlyState
from wealth_tracker.infrastructure.logging.logger import get_app_logger
from wealth_tracker.utils.decimal_utils import coerce_decimal
from wealth_tracker.utils.months import parse_month


class RecordMonthlyStateUseCase:
    """Upsert a month's state, carrying balances forward from earlier months."""

    def __init__(self, store: FinanceStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        month: str,
        income_monthly,
        living_cost_monthly,
        net_worth=None,
        cash=None,
        invested=None,
        invest_contribution_monthly=None,
    ) -> MonthlyState:
        """Create or overwrite the state for month.

        Balances left as None keep the values already stored for month, or
        else come from the closest earlier month (zero when there is none).
        Later months never leak into an earlier one.

        Raises:
            ValueError: If month is not a "YYYY-MM" key.
        """
        parse_month(month)
        base = self._store.get_monthly_state_by_month(
            month
        ) or self._store.get_latest_monthly_state(before=month)

        def _carry(value, attribute: str) -> Decimal:
            if value is not None:
                return coerce_decimal(value)
            if base is None:
                return Decimal("0")
            return getattr(base, attribute)

        state = MonthlyState(
            month=month,
            net_worth=_carry(net_worth, "net_worth"),
            cash=_carry(cash, "cash"),
            invested=_carry(invested, "invested"),
            income_monthly=coerce_decimal(income_monthly),
            living_cost_monthly=coerce_decimal(living_cost_monthly),
            invest_contribution_monthly=_carry(
                invest_contribution_monthly,
                "invest_contribution_monthly",
            ),
        )
        state_id = self._store.upsert_monthly_state(state)
        self._logger.info(f"Monthly state recorded for {month}")
        return replace(state, id=state_id)


__all__ = ["RecordMonthlyStateUseCase"]
