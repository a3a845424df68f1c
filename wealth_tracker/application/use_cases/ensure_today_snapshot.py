"""Use case creating at most one valuation snapshot per calendar day."""

from datetime import date
from decimal import Decimal
from typing import Callable

from wealth_tracker.application.ports.finance_store import FinanceStorePort
from wealth_tracker.domain.constants import DEPOSIT
from wealth_tracker.domain.services import category_totals
from wealth_tracker.infrastructure.logging.logger import get_app_logger


class EnsureTodaySnapshotUseCase:
    """Ensure a daily snapshot exists for today and return its id."""

    def __init__(
        self,
        store: FinanceStorePort,
        logger=None,
        today_provider: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Port providing holdings and snapshot persistence.
            logger: Optional logger compatible with logging.Logger-like API.
            today_provider: Callable returning the current calendar date.
        """
        self._store = store
        self._logger = logger or get_app_logger()
        self._today_provider = today_provider

    def execute(self) -> str:
        """Return today's snapshot id, creating the snapshot if absent.

        An existing snapshot is returned unchanged. A new one records the
        category breakdown, the cash ratio and the change versus the most
        recent earlier snapshot.

        Returns:
            str: Id of today's snapshot.
        """
        today = self._today_provider()
        existing = self._store.get_snapshot_by_date(today)
        if existing:
            self._logger.debug(f"Snapshot for {today} already exists")
            return existing.id

        holdings = self._store.get_all_holdings()
        breakdown = category_totals(holdings)
        total_assets = sum(breakdown.values(), Decimal("0"))
        cash_ratio = (
            breakdown[DEPOSIT] / total_assets * Decimal("100")
            if total_assets != 0
            else Decimal("0")
        )
        previous = self._store.get_latest_snapshot(before=today)
        daily_change = (
            total_assets - previous.total_assets
            if previous
            else Decimal("0")
        )

        snapshot_id = self._store.create_snapshot(
            day=today,
            total_assets=total_assets,
            cash_ratio=cash_ratio,
            asset_breakdown=breakdown,
            daily_change=daily_change,
        )
        self._logger.info(
            f"Snapshot stored for {today}: total={total_assets}, "
            f"cash_ratio={cash_ratio:.2f}, change={daily_change}"
        )
        return snapshot_id


__all__ = ["EnsureTodaySnapshotUseCase"]
