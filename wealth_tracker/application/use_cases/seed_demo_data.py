"""Use case writing six months of demo monthly states."""

from dataclasses import replace
from datetime import date
from decimal import Decimal

from wealth_tracker.application.ports.finance_store import FinanceStorePort
from wealth_tracker.domain.models import MonthlyState
from wealth_tracker.infrastructure.logging.logger import get_app_logger
from wealth_tracker.utils.decimal_utils import round_half_up
from wealth_tracker.utils.months import add_months, format_month

DEMO_MONTHS = 6
BASE_NET_WORTH = Decimal("5000000")
BASE_CASH = Decimal("1500000")
MONTHLY_INCOME = Decimal("450000")
MONTHLY_LIVING_COST = Decimal("280000")
MONTHLY_INVESTMENT = Decimal("100000")
MONTHLY_GROWTH = Decimal("0.015")
CASH_GROWTH_SHARE = Decimal("0.3")


class SeedDemoDataUseCase:
    """Upsert demo monthly states ending at the current month."""

    def __init__(self, store: FinanceStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, today: date | None = None) -> list[MonthlyState]:
        """Write the demo states and return them, oldest first."""
        current_month = format_month(today or date.today())
        states = []
        for offset in range(DEMO_MONTHS - 1, -1, -1):
            elapsed = DEMO_MONTHS - offset
            growth = MONTHLY_GROWTH * elapsed
            net_worth = Decimal(
                round_half_up(
                    BASE_NET_WORTH * (1 + growth)
                    + MONTHLY_INVESTMENT * elapsed * 12
                )
            )
            cash = Decimal(
                round_half_up(BASE_CASH * (1 + growth * CASH_GROWTH_SHARE))
            )
            states.append(
                MonthlyState(
                    month=add_months(current_month, -offset),
                    net_worth=net_worth,
                    cash=cash,
                    invested=net_worth - cash,
                    income_monthly=MONTHLY_INCOME,
                    living_cost_monthly=MONTHLY_LIVING_COST,
                    invest_contribution_monthly=MONTHLY_INVESTMENT,
                )
            )
        stored = [
            replace(state, id=self._store.upsert_monthly_state(state))
            for state in states
        ]
        self._logger.info(
            f"Seeded {len(states)} demo monthly states up to {current_month}"
        )
        return stored


__all__ = ["SeedDemoDataUseCase"]
