"""Use case projecting net worth from the latest monthly state."""

from decimal import Decimal

from wealth_tracker.application.ports.finance_store import FinanceStorePort
from wealth_tracker.domain.models import ProjectionPoint
from wealth_tracker.domain.services import project
from wealth_tracker.infrastructure.logging.logger import get_app_logger


class GetTrajectoryUseCase:
    """Project the latest recorded net worth forward."""

    def __init__(self, store: FinanceStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        monthly_contribution,
        annual_return_percent,
        horizon_years: int,
    ) -> list[ProjectionPoint]:
        """Return yearly projection points seeded from the latest state.

        Without any monthly state the projection starts from zero.
        """
        recent = self._store.get_recent_monthly_states(1)
        current = recent[0].net_worth if recent else Decimal("0")
        points = list(
            project(
                current,
                monthly_contribution,
                annual_return_percent,
                horizon_years,
            )
        )
        self._logger.info(
            f"Trajectory from {current} over {horizon_years} years: "
            f"final={points[-1].total_value}"
        )
        return points


__all__ = ["GetTrajectoryUseCase"]
