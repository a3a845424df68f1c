"""Use case assembling everything the dashboard shows on load."""

from datetime import date, timedelta
from typing import Callable

from wealth_tracker.application.ports.finance_store import (
    FinanceStoreError,
    FinanceStorePort,
)
from wealth_tracker.application.use_cases.compute_kpi_bundle import (
    ComputeKpiBundleUseCase,
)
from wealth_tracker.application.use_cases.ensure_today_snapshot import (
    EnsureTodaySnapshotUseCase,
)
from wealth_tracker.domain.models import DashboardView
from wealth_tracker.infrastructure.logging.logger import get_app_logger


class LoadDashboardUseCase:
    """Ensure today's snapshot, then compute KPIs and recent snapshots.

    A store failure while generating the snapshot is logged and does not
    stop the KPI computation. Failures in the later reads propagate.
    """

    def __init__(
        self,
        store: FinanceStorePort,
        logger=None,
        today_provider: Callable[[], date] = date.today,
        history_days: int = 30,
    ) -> None:
        self._store = store
        self._logger = logger or get_app_logger()
        self._today_provider = today_provider
        self._history_days = history_days

    def execute(self) -> DashboardView:
        """Return the dashboard view for today."""
        today = self._today_provider()
        snapshot_id = None
        try:
            snapshot_id = EnsureTodaySnapshotUseCase(
                self._store,
                logger=self._logger,
                today_provider=lambda: today,
            ).execute()
        except FinanceStoreError as exc:
            self._logger.error(f"Failed to generate snapshot for {today}: {exc}")

        kpis = ComputeKpiBundleUseCase(self._store, logger=self._logger).execute(
            today
        )
        snapshots = self._store.get_snapshots_in_range(
            today - timedelta(days=self._history_days),
            today,
        )
        return DashboardView(
            snapshot_id=snapshot_id,
            kpis=kpis,
            snapshots=snapshots,
        )


__all__ = ["LoadDashboardUseCase"]
