"""Use case classifying the direction of recent monthly states."""

from decimal import Decimal

from wealth_tracker.application.ports.finance_store import FinanceStorePort
from wealth_tracker.domain.models import DirectionView
from wealth_tracker.domain.services import (
    cash_runway,
    classify_direction,
    savings_rate_display,
)
from wealth_tracker.infrastructure.logging.logger import get_app_logger


class GetDirectionUseCase:
    """Read the latest monthly states and classify their direction."""

    def __init__(self, store: FinanceStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, window: int = 6) -> DirectionView:
        """Return the direction analysis over the last window months.

        Args:
            window: Number of most recent monthly states to consider.

        Returns:
            DirectionView: Classification plus cash runway and display
            savings rate of the latest month (zeros without data).
        """
        history = list(reversed(self._store.get_recent_monthly_states(window)))
        analysis = classify_direction(history)
        latest = history[-1] if history else None
        self._logger.info(
            f"Direction over {len(history)} months: {analysis.status}"
        )
        if latest is None:
            return DirectionView(
                analysis=analysis,
                latest=None,
                cash_runway=0,
                savings_rate=Decimal("0"),
            )
        return DirectionView(
            analysis=analysis,
            latest=latest,
            cash_runway=cash_runway(latest.cash, latest.living_cost_monthly),
            savings_rate=savings_rate_display(
                latest.income_monthly,
                latest.living_cost_monthly,
            ),
        )


__all__ = ["GetDirectionUseCase"]
