"""Domain models for asset holdings.

Each holding category is its own frozen dataclass carrying a ``category``
class constant, so valuation rules can be matched per variant.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar, Union

from wealth_tracker.domain.constants import (
    CRYPTO,
    DEPOSIT,
    EMPLOYEE_EQUITY,
    FUND,
    STOCK,
)


@dataclass(frozen=True)
class DepositHolding:
    """Cash or bank deposit; the balance is authoritative."""

    category: ClassVar[str] = DEPOSIT

    id: str
    balance: Decimal
    account_name: str | None = None
    financial_institution: str | None = None


@dataclass(frozen=True)
class StockHolding:
    """Listed stock position.

    Attributes:
        shares: Number of shares held.
        average_price: Average acquisition price per share.
        current_value: Optional market value override for the whole position.
        currency: Optional currency tag, informational only.
    """

    category: ClassVar[str] = STOCK

    id: str
    shares: Decimal
    average_price: Decimal
    current_value: Decimal | None = None
    currency: str | None = None
    stock_name: str | None = None
    ticker: str | None = None


@dataclass(frozen=True)
class FundHolding:
    """Mutual fund or ETF position."""

    category: ClassVar[str] = FUND

    id: str
    quantity: Decimal
    fund_name: str
    average_price: Decimal | None = None
    current_value: Decimal | None = None


@dataclass(frozen=True)
class CryptoHolding:
    """Crypto asset position."""

    category: ClassVar[str] = CRYPTO

    id: str
    quantity: Decimal
    symbol: str | None = None
    average_price: Decimal | None = None
    current_value: Decimal | None = None


@dataclass(frozen=True)
class EmployeeEquityHolding:
    """Employee stock ownership, RSUs or stock options.

    Attributes:
        units: Shares or rights held.
        strike_price: Average acquisition price or option strike price.
    """

    category: ClassVar[str] = EMPLOYEE_EQUITY

    id: str
    units: Decimal
    strike_price: Decimal
    company_name: str
    current_value: Decimal | None = None


Holding = Union[
    DepositHolding,
    StockHolding,
    FundHolding,
    CryptoHolding,
    EmployeeEquityHolding,
]

HOLDING_TYPES: dict[str, type] = {
    DEPOSIT: DepositHolding,
    STOCK: StockHolding,
    FUND: FundHolding,
    CRYPTO: CryptoHolding,
    EMPLOYEE_EQUITY: EmployeeEquityHolding,
}


__all__ = [
    "DepositHolding",
    "StockHolding",
    "FundHolding",
    "CryptoHolding",
    "EmployeeEquityHolding",
    "Holding",
    "HOLDING_TYPES",
]
