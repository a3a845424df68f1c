"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from wealth_tracker.infrastructure.logging.logger import get_app_logger
from wealth_tracker.utils.utils import get_project_root


@dataclass(frozen=True)
class TrackerSettings:
    """Runtime settings for the finance tracker.

    Attributes:
        database_url: SQLAlchemy URL of the finance store.
        base_currency: Currency code used for display formatting only.
        direction_window_months: Monthly states used for direction analysis.
        snapshot_history_days: Days of snapshots shown on the dashboard.
    """

    database_url: str
    base_currency: str = "JPY"
    direction_window_months: int = 6
    snapshot_history_days: int = 30

    @classmethod
    def from_env(cls) -> "TrackerSettings":
        """Build settings from environment variables (and a .env file).

        Returns:
            TrackerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        database_url = os.getenv("FINANCE_DB_URL") or cls._default_database_url()
        base_currency = (
            os.getenv("BASE_CURRENCY", "JPY").strip().upper() or "JPY"
        )
        return cls(
            database_url=database_url,
            base_currency=base_currency,
            direction_window_months=cls._positive_int(
                "DIRECTION_WINDOW_MONTHS",
                6,
                logger,
            ),
            snapshot_history_days=cls._positive_int(
                "SNAPSHOT_HISTORY_DAYS",
                30,
                logger,
            ),
        )

    @staticmethod
    def _default_database_url() -> str:
        """Return a SQLite URL under the project data/ directory."""
        data_dir = get_project_root() / "data"
        data_dir.mkdir(parents=True, exist_ok=True)
        return f"sqlite:///{data_dir / 'wealth_tracker.db'}"

    @staticmethod
    def _positive_int(name: str, default: int, logger) -> int:
        """Read a positive integer variable, falling back on bad input.

        Args:
            name: Environment variable name.
            default: Value used when the variable is unset or invalid.
            logger: Logger used for warnings.

        Returns:
            int: Parsed value or the default.
        """
        raw = os.getenv(name)
        if not raw:
            return default
        try:
            value = int(raw)
        except ValueError:
            logger.warning(f"Ignoring non-integer {name}={raw!r}")
            return default
        if value <= 0:
            logger.warning(f"Ignoring non-positive {name}={value}")
            return default
        return value


__all__ = ["TrackerSettings"]
