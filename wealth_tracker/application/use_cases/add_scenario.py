"""Use case saving a what-if projection scenario."""

from dataclasses import replace

from wealth_tracker.application.ports.finance_store import FinanceStorePort
from wealth_tracker.domain.models import Scenario
from wealth_tracker.infrastructure.logging.logger import get_app_logger
from wealth_tracker.utils.decimal_utils import coerce_decimal


class AddScenarioUseCase:
    """Store scenario parameters for later comparison."""

    def __init__(self, store: FinanceStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        name: str,
        years: int,
        expected_return,
        monthly_investment,
        current_net_worth,
        monthly_spending=0,
        income_growth=0,
        baseline_income=0,
    ) -> Scenario:
        """Store the scenario and return it with its id.

        Raises:
            ValueError: If the name is blank or years is negative.
        """
        if not name or not name.strip():
            raise ValueError("A scenario name is required")
        if years < 0:
            raise ValueError(f"Scenario horizon must not be negative: {years}")
        scenario = Scenario(
            name=name.strip(),
            years=int(years),
            expected_return=coerce_decimal(expected_return),
            monthly_investment=coerce_decimal(monthly_investment),
            monthly_spending=coerce_decimal(monthly_spending),
            income_growth=coerce_decimal(income_growth),
            baseline_income=coerce_decimal(baseline_income),
            current_net_worth=coerce_decimal(current_net_worth),
        )
        scenario_id = self._store.add_scenario(scenario)
        self._logger.info(f"Scenario {scenario.name!r} saved")
        return replace(scenario, id=scenario_id)


__all__ = ["AddScenarioUseCase"]
