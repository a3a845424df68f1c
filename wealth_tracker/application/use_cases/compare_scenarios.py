"""Use case projecting every saved what-if scenario."""

from wealth_tracker.application.ports.finance_store import FinanceStorePort
from wealth_tracker.domain.models import ScenarioOutcome
from wealth_tracker.domain.services import projection_at_year
from wealth_tracker.infrastructure.logging.logger import get_app_logger


class CompareScenariosUseCase:
    """Return the final projected point of each stored scenario."""

    def __init__(self, store: FinanceStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self) -> list[ScenarioOutcome]:
        """Return scenario outcomes sorted by final value, highest first."""
        outcomes = []
        for scenario in self._store.get_scenarios():
            final_point = projection_at_year(
                scenario.current_net_worth,
                scenario.monthly_investment,
                scenario.expected_return,
                scenario.years,
            )
            if final_point is None:
                self._logger.warning(
                    f"Skipping scenario {scenario.name!r} with negative "
                    f"horizon {scenario.years}"
                )
                continue
            outcomes.append(
                ScenarioOutcome(scenario=scenario, final_point=final_point)
            )
        return sorted(
            outcomes,
            key=lambda outcome: outcome.final_point.total_value,
            reverse=True,
        )


__all__ = ["CompareScenariosUseCase"]
