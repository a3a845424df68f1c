"""Domain constants for finance tracking."""

DEPOSIT = "deposit"
STOCK = "stock"
FUND = "fund"
CRYPTO = "crypto"
EMPLOYEE_EQUITY = "employee_equity"

ASSET_CATEGORIES = (
    DEPOSIT,
    STOCK,
    FUND,
    CRYPTO,
    EMPLOYEE_EQUITY,
)

INCOME = "income"
EXPENSE = "expense"

ENTRY_KINDS = (
    INCOME,
    EXPENSE,
)

EXPENSE_TYPES = (
    "fixed",
    "variable",
)

CATEGORY_LABELS = {
    DEPOSIT: "Cash & Deposits",
    STOCK: "Stock",
    FUND: "Fund",
    CRYPTO: "Crypto",
    EMPLOYEE_EQUITY: "Employee Equity",
}


__all__ = [
    "DEPOSIT",
    "STOCK",
    "FUND",
    "CRYPTO",
    "EMPLOYEE_EQUITY",
    "ASSET_CATEGORIES",
    "INCOME",
    "EXPENSE",
    "ENTRY_KINDS",
    "EXPENSE_TYPES",
    "CATEGORY_LABELS",
]
