"""Application ports package."""

from .database import DatabaseEnginePort
from .finance_store import FinanceStoreError, FinanceStorePort

__all__ = [
    "DatabaseEnginePort",
    "FinanceStoreError",
    "FinanceStorePort",
]
