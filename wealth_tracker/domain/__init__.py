"""Domain package for business rules and core models."""

from .constants import ASSET_CATEGORIES, ENTRY_KINDS
from .models import (
    DailySnapshot,
    Holding,
    InvestmentPlan,
    KPIData,
    MonthlyState,
    ProjectionPoint,
)
from .services import (
    category_totals,
    classify_direction,
    project,
    total_value,
    valuate,
    weighted_average_return,
)

__all__ = [
    "ASSET_CATEGORIES",
    "ENTRY_KINDS",
    "DailySnapshot",
    "Holding",
    "InvestmentPlan",
    "KPIData",
    "MonthlyState",
    "ProjectionPoint",
    "category_totals",
    "classify_direction",
    "project",
    "total_value",
    "valuate",
    "weighted_average_return",
]
