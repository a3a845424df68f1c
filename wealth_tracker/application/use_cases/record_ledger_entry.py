"""Use cases writing and listing dated income and expense entries."""

from dataclasses import replace
from datetime import date

from wealth_tracker.application.ports.finance_store import FinanceStorePort
from wealth_tracker.domain.constants import (
    ENTRY_KINDS,
    EXPENSE,
    EXPENSE_TYPES,
    INCOME,
)
from wealth_tracker.domain.models import LedgerEntry
from wealth_tracker.infrastructure.logging.logger import get_app_logger
from wealth_tracker.utils.decimal_utils import coerce_decimal


class AddLedgerEntryUseCase:
    """Validate and store one income or expense entry."""

    def __init__(self, store: FinanceStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        kind: str,
        amount,
        entry_date: date,
        category: str | None = None,
        expense_type: str | None = None,
        memo: str | None = None,
    ) -> LedgerEntry:
        """Store the entry and return it with its id.

        Income entries never carry an expense type.

        Raises:
            ValueError: If kind or expense_type is not a known value.
        """
        if kind not in ENTRY_KINDS:
            raise ValueError(f"Unknown entry kind: {kind!r}")
        if kind == INCOME:
            expense_type = None
        elif expense_type is not None and expense_type not in EXPENSE_TYPES:
            raise ValueError(f"Unknown expense type: {expense_type!r}")
        entry = LedgerEntry(
            kind=kind,
            amount=coerce_decimal(amount),
            entry_date=entry_date,
            category=category or None,
            expense_type=expense_type,
            memo=memo or None,
        )
        entry_id = self._store.add_entry(entry)
        self._logger.info(f"Recorded {kind} of {entry.amount} on {entry_date}")
        return replace(entry, id=entry_id)


class ListLedgerEntriesUseCase:
    """Return income and expense entries within a date range."""

    def __init__(self, store: FinanceStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, start: date, end: date) -> list[LedgerEntry]:
        """Return entries between start and end inclusive, oldest first."""
        entries = self._store.get_entries_in_date_range(
            INCOME, start, end
        ) + self._store.get_entries_in_date_range(EXPENSE, start, end)
        return sorted(entries, key=lambda entry: entry.entry_date)


__all__ = ["AddLedgerEntryUseCase", "ListLedgerEntriesUseCase"]
