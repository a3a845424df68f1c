"""Database infrastructure for the finance tracker.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine backing the finance store. It belongs to the infrastructure layer
because it deals with an external system (SQLite by default, or any
SQLAlchemy URL set in ``FINANCE_DB_URL``).
"""

import os

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from wealth_tracker.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: A SQLAlchemy engine with connection health checks enabled.
    """
    return create_engine(
        db_url,
        pool_pre_ping=True,
        future=True,
    )


_finance_engines: dict[str, Engine] = {}


def get_finance_engine(db_url: str | None = None) -> Engine:
    """Get the shared SQLAlchemy engine for a finance store URL.

    Engines are cached per URL, so callers pointing at different databases
    never share one.

    Args:
        db_url: Optional database URL; defaults to the ``FINANCE_DB_URL``
            environment variable.

    Returns:
        Engine: Lazily initialized engine connected to the finance store.
    """
    url = db_url or _get_env_var("FINANCE_DB_URL")
    if url not in _finance_engines:
        _finance_engines[url] = _create_engine(url)
    return _finance_engines[url]


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details behind the port so the store
    depends only on the protocol.
    """

    def __init__(self, db_url: str | None = None) -> None:
        self._db_url = db_url

    def get_finance_engine(self) -> Engine:
        """Get the engine for the finance store.

        Returns:
            Engine: SQLAlchemy engine connected to the finance store.
        """
        return get_finance_engine(self._db_url)


__all__ = [
    "get_finance_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
