"""Composition root for wiring infrastructure adapters."""

from wealth_tracker.application.ports.database import DatabaseEnginePort
from wealth_tracker.application.ports.finance_store import FinanceStorePort
from wealth_tracker.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from wealth_tracker.infrastructure.finance_store import SqlAlchemyFinanceStore
from wealth_tracker.infrastructure.settings import TrackerSettings


def build_settings() -> TrackerSettings:
    """Return settings sourced from the environment."""
    return TrackerSettings.from_env()


def build_database_adapter(
    settings: TrackerSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    resolved = settings or build_settings()
    return SqlAlchemyDatabaseEngineAdapter(resolved.database_url)


def build_finance_store(
    db_port: DatabaseEnginePort | None = None,
) -> FinanceStorePort:
    """Return the SQL finance store with its schema in place."""
    resolved_db = db_port or build_database_adapter()
    store = SqlAlchemyFinanceStore(resolved_db)
    store.ensure_schema()
    return store


__all__ = [
    "build_settings",
    "build_database_adapter",
    "build_finance_store",
]
