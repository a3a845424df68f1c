"""Use case forecasting holdings growth from investment plans."""

from wealth_tracker.application.ports.finance_store import FinanceStorePort
from wealth_tracker.domain.models import ForecastView
from wealth_tracker.domain.services import (
    project_monthly,
    total_monthly_contribution,
    total_value,
    weighted_average_return,
)
from wealth_tracker.infrastructure.logging.logger import get_app_logger
from wealth_tracker.utils.decimal_utils import coerce_decimal


class GetForecastUseCase:
    """Forecast total holdings with plan contributions and returns."""

    def __init__(self, store: FinanceStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        horizon_years: int,
        annual_return_override=None,
    ) -> ForecastView:
        """Return the monthly-compounded forecast.

        Args:
            horizon_years: Forecast horizon in years.
            annual_return_override: Optional manual annual return in
                percent, used instead of the plans' weighted return.

        Returns:
            ForecastView: Inputs used and the recorded forecast points.
        """
        plans = self._store.get_investment_plans()
        current_assets = total_value(self._store.get_all_holdings())
        contribution = total_monthly_contribution(plans)
        weighted = weighted_average_return(plans)
        rate = (
            coerce_decimal(annual_return_override)
            if annual_return_override is not None
            else weighted
        )
        points = list(
            project_monthly(current_assets, contribution, rate, horizon_years)
        )
        self._logger.info(
            f"Forecast over {horizon_years} years at {rate}% "
            f"(weighted {weighted:.2f}%): final={points[-1].total_value}"
        )
        return ForecastView(
            current_assets=current_assets,
            monthly_contribution=contribution,
            annual_return_percent=rate,
            weighted_return=weighted,
            points=points,
        )


__all__ = ["GetForecastUseCase"]
