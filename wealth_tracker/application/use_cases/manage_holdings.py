"""Use cases adding and listing asset holdings."""

from dataclasses import replace
from decimal import Decimal

from wealth_tracker.application.ports.finance_store import FinanceStorePort
from wealth_tracker.domain.constants import (
    CRYPTO,
    DEPOSIT,
    EMPLOYEE_EQUITY,
    FUND,
    STOCK,
)
from wealth_tracker.domain.models import (
    CryptoHolding,
    DepositHolding,
    EmployeeEquityHolding,
    FundHolding,
    Holding,
    StockHolding,
)
from wealth_tracker.infrastructure.logging.logger import get_app_logger
from wealth_tracker.utils.decimal_utils import coerce_decimal


def build_holding(
    category: str,
    name: str,
    quantity,
    unit_cost=None,
    current_value=None,
) -> Holding:
    """Map generic form fields onto the holding variant for category.

    Args:
        category: One of the asset categories.
        name: Account, stock, fund, symbol or company name.
        quantity: Balance for deposits, otherwise shares or units held.
        unit_cost: Average price or strike price; ignored for deposits.
        current_value: Optional market value override for the position.

    Returns:
        Holding: A new holding with an empty id, ready to be stored.

    Raises:
        ValueError: If the category is unknown or a required name is blank.
    """
    name = (name or "").strip()
    amount = coerce_decimal(quantity)
    cost = coerce_decimal(unit_cost) if unit_cost is not None else None
    override = (
        coerce_decimal(current_value) if current_value is not None else None
    )
    if category == DEPOSIT:
        return DepositHolding(id="", balance=amount, account_name=name or None)
    if category == STOCK:
        return StockHolding(
            id="",
            shares=amount,
            average_price=cost or Decimal("0"),
            current_value=override,
            stock_name=name or None,
        )
    if category == CRYPTO:
        return CryptoHolding(
            id="",
            quantity=amount,
            symbol=name or None,
            average_price=cost,
            current_value=override,
        )
    if category in (FUND, EMPLOYEE_EQUITY) and not name:
        raise ValueError(f"A name is required for {category} holdings")
    if category == FUND:
        return FundHolding(
            id="",
            quantity=amount,
            fund_name=name,
            average_price=cost,
            current_value=override,
        )
    if category == EMPLOYEE_EQUITY:
        return EmployeeEquityHolding(
            id="",
            units=amount,
            strike_price=cost or Decimal("0"),
            company_name=name,
            current_value=override,
        )
    raise ValueError(f"Unknown asset category: {category!r}")


class AddHoldingUseCase:
    """Store a new holding and return it with its id."""

    def __init__(self, store: FinanceStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, holding: Holding) -> Holding:
        holding_id = self._store.add_holding(holding)
        self._logger.info(f"Holding {holding_id} added to {holding.category}")
        return replace(holding, id=holding_id)


class GetHoldingsUseCase:
    """List holdings, optionally for a single category."""

    def __init__(self, store: FinanceStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, category: str | None = None) -> list[Holding]:
        if category is None:
            return self._store.get_all_holdings()
        return self._store.get_holdings_by_category(category)


__all__ = ["build_holding", "AddHoldingUseCase", "GetHoldingsUseCase"]
