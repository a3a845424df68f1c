"""Use cases adding and listing recurring investment plans."""

from dataclasses import replace

from wealth_tracker.application.ports.finance_store import FinanceStorePort
from wealth_tracker.domain.constants import ASSET_CATEGORIES
from wealth_tracker.domain.models import InvestmentPlan
from wealth_tracker.infrastructure.logging.logger import get_app_logger
from wealth_tracker.utils.decimal_utils import coerce_decimal


class AddInvestmentPlanUseCase:
    """Store a recurring contribution into an asset category."""

    def __init__(self, store: FinanceStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        name: str,
        asset_category: str,
        monthly_amount,
        expected_return=None,
    ) -> InvestmentPlan:
        """Store the plan and return it with its id.

        Raises:
            ValueError: If the name is blank or the category is unknown.
        """
        if not name or not name.strip():
            raise ValueError("A plan name is required")
        if asset_category not in ASSET_CATEGORIES:
            raise ValueError(f"Unknown asset category: {asset_category!r}")
        plan = InvestmentPlan(
            name=name.strip(),
            asset_category=asset_category,
            monthly_amount=coerce_decimal(monthly_amount),
            expected_return=(
                coerce_decimal(expected_return)
                if expected_return is not None
                else None
            ),
        )
        plan_id = self._store.add_investment_plan(plan)
        self._logger.info(f"Investment plan {plan.name!r} added")
        return replace(plan, id=plan_id)


class GetInvestmentPlansUseCase:
    """List every stored investment plan."""

    def __init__(self, store: FinanceStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self) -> list[InvestmentPlan]:
        return self._store.get_investment_plans()


__all__ = ["AddInvestmentPlanUseCase", "GetInvestmentPlansUseCase"]
